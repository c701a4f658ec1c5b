"""Tests for the rank-and-select loop."""

import curses
import random
import signal

import pytest

from tests.conftest import RecordingRender, ScriptedInput
from wordpick.session import RunningFlag, Session, SessionState, install_signal_handler

ESC = "\x1b"
ENTER = "\n"
BACKSPACE = "\x7f"
UP = curses.KEY_UP
DOWN = curses.KEY_DOWN


class TestRunningFlag:
    """Tests for RunningFlag."""

    def test_starts_running(self):
        assert RunningFlag().is_running()

    def test_stop(self):
        flag = RunningFlag()
        flag.stop()
        assert not flag.is_running()

    def test_stop_twice(self):
        flag = RunningFlag()
        flag.stop()
        flag.stop()
        assert not flag.is_running()

    def test_sigint_stops_flag(self):
        flag = RunningFlag()
        previous = install_signal_handler(flag)
        try:
            signal.raise_signal(signal.SIGINT)
            assert not flag.is_running()
        finally:
            signal.signal(signal.SIGINT, previous)


class TestSessionRun:
    """Tests for Session.run()."""

    def test_initial_frame(self, session, render):
        session.run(ScriptedInput([ESC]), render)
        assert render.frames[0] == ("", ["cat", "car", "bar", "cot"], 0)

    def test_enter_picks_first_row(self, session, render):
        result = session.run(ScriptedInput([ENTER]), render)
        assert result == "cat"
        assert session.state is SessionState.CONFIRMED

    def test_typing_reranks(self, session, render):
        result = session.run(ScriptedInput(["c", "a", "r", ENTER]), render)
        assert render.last == ("car", ["car", "cat", "bar", "cot"], 0)
        assert result == "car"

    def test_escape_cancels(self, session, render):
        result = session.run(ScriptedInput(["c", ESC]), render)
        assert result is None
        assert session.state is SessionState.CANCELLED

    @pytest.mark.parametrize("key", ["\x03", "\x04", "\x1a", 27])
    def test_control_keys_cancel(self, session, render, key):
        assert session.run(ScriptedInput([key]), render) is None
        assert session.state is SessionState.CANCELLED
        assert not session.running.is_running()

    def test_quit_does_not_repaint(self, session, render):
        session.run(ScriptedInput([ESC]), render)
        assert len(render.frames) == 1

    def test_navigate_then_confirm(self, session, render):
        result = session.run(ScriptedInput([DOWN, DOWN, UP, ENTER]), render)
        assert result == "car"

    def test_ctrl_n_ctrl_p(self, session, render):
        result = session.run(ScriptedInput(["\x0e", "\x0e", "\x0e", "\x10", ENTER]), render)
        assert result == "bar"

    def test_edit_keeps_selected_index(self, session, render):
        session.run(ScriptedInput([DOWN, DOWN, "c", ESC]), render)
        assert render.last[2] == 2
        assert session.selection.index == 2

    def test_move_down_at_last_row(self, session, render):
        result = session.run(ScriptedInput([DOWN] * 6 + [ENTER]), render)
        assert session.selection.index == 3
        assert result == "cot"

    def test_backspace(self, session, render):
        session.run(ScriptedInput(["c", "o", BACKSPACE, ESC]), render)
        assert render.last[0] == "c"

    def test_backspace_on_empty_query(self, session, render):
        session.run(ScriptedInput([BACKSPACE, ESC]), render)
        assert render.last == ("", ["cat", "car", "bar", "cot"], 0)

    def test_timeouts_and_resize_are_ignored(self, session, render):
        result = session.run(ScriptedInput([None, curses.KEY_RESIZE, None, ENTER]), render)
        assert result == "cat"
        assert len(render.frames) == 4

    def test_confirm_on_empty_list_keeps_running(self, render):
        session = Session([], RunningFlag())
        script = ScriptedInput([ENTER, ENTER, ESC])
        result = session.run(script, render)
        assert result is None
        assert script.calls == 3
        assert session.state is SessionState.CANCELLED

    def test_external_stop_ends_loop(self, session, render):
        def poll():
            # Simulates SIGINT arriving while waiting for a key
            session.running.stop()
            return None

        assert session.run(poll, render) is None
        assert session.state is SessionState.CANCELLED

    def test_already_stopped(self, words, render):
        flag = RunningFlag()
        flag.stop()
        session = Session(words, flag)
        assert session.run(ScriptedInput([]), render) is None
        assert session.state is SessionState.CANCELLED
        assert len(render.frames) == 1

    def test_records_rank_time(self, session, render):
        session.run(ScriptedInput(["x", ESC]), render)
        assert session.last_rank_ms >= 0.0

    def test_selection_stays_in_range(self, words):
        rng = random.Random(1234)
        keys = [rng.choice([UP, DOWN, "\x10", "\x0e", "a", "c", "t", BACKSPACE, None]) for _ in range(300)]
        render = RecordingRender()
        Session(words, RunningFlag()).run(ScriptedInput(keys + [ESC]), render)
        for _, ranked, index in render.frames:
            assert 0 <= index <= max(0, len(ranked) - 1)


class TestSessionApply:
    """Tests for Session.refresh() and Session.apply() used directly."""

    def test_refresh_clamps_after_candidates_shrink(self, session):
        session.refresh()
        session.selection.index = 3
        session.candidates = ["cat", "car"]
        session.refresh()
        assert session.selection.index == 1

    def test_refresh_on_empty_candidates(self):
        session = Session([])
        session.selection.index = 4
        session.refresh()
        assert session.ranked == []
        assert session.selection.index == 0
