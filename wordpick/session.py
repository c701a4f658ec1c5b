"""
The incremental rank-and-select loop.

A Session owns the query, the highlighted row and the current ranked list.
Each cycle it polls one input event, applies the resulting action, re-ranks
the full word list and hands the result to a render callback. The loop ends
when a word is confirmed or when the running flag is cleared, either by a
quit key or by SIGINT arriving from outside.
"""

import signal
import threading
import time
from enum import Enum
from typing import Callable, List, Optional, Sequence

from wordpick.keys import Confirm, Direction, Edit, Key, Navigate, Quit, apply_edit, interpret
from wordpick.logger import get_logger
from wordpick.ranking import rank
from wordpick.selection import Selection

logger = get_logger(__name__)

Poll = Callable[[], Key]
Render = Callable[[str, List[str], int], None]


class SessionState(Enum):
    RUNNING = "running"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class RunningFlag:
    """
    Process-wide "keep going" flag.

    Starts out set. stop() may be called from a signal handler; once stopped
    the flag is never set again.
    """

    def __init__(self):
        self._event = threading.Event()
        self._event.set()

    def is_running(self) -> bool:
        return self._event.is_set()

    def stop(self):
        self._event.clear()


def install_signal_handler(flag: RunningFlag):
    """Make SIGINT stop ``flag``. Returns the handler it replaced."""

    def _on_sigint(signum, frame):
        flag.stop()

    return signal.signal(signal.SIGINT, _on_sigint)


class Session:
    """Query, selection and ranking state for one picker run."""

    def __init__(self, candidates: Sequence[str], running: Optional[RunningFlag] = None):
        self.candidates = candidates
        self.running = running if running is not None else RunningFlag()
        self.query = ""
        self.selection = Selection()
        self.ranked: List[str] = []
        self.state = SessionState.RUNNING
        self.result: Optional[str] = None
        self.last_rank_ms = 0.0

    def refresh(self):
        """Re-rank the full word list for the current query and clamp the selection."""
        start = time.perf_counter()
        self.ranked = rank(self.query, self.candidates)
        self.last_rank_ms = (time.perf_counter() - start) * 1000
        self.selection.clamp(len(self.ranked))
        logger.debug(f"Ranked {len(self.ranked)} words for {self.query!r} in {self.last_rank_ms:.1f}ms")

    def apply(self, action):
        """Apply one action to the query/selection."""
        if isinstance(action, Quit):
            self.running.stop()
        elif isinstance(action, Edit):
            self.query = apply_edit(self.query, action)
        elif isinstance(action, Navigate):
            if action.direction is Direction.UP:
                self.selection.move_up()
            else:
                self.selection.move_down(len(self.ranked))
        elif isinstance(action, Confirm):
            # Nothing to pick from an empty list; keep running.
            word = self.selection.current(self.ranked)
            if word is not None:
                self.result = word
                self.state = SessionState.CONFIRMED

    def run(self, poll: Poll, render: Render) -> Optional[str]:
        """
        Drive the loop until a word is confirmed or the session is cancelled.

        Args:
            poll: Returns one input event, or None if nothing arrived within
                the poll interval.
            render: Called with (query, ranked list, selected index) after
                every cycle.

        Returns:
            The confirmed word, or None if the session was cancelled.
        """
        logger.info(f"Session started with {len(self.candidates)} words")
        self.refresh()
        render(self.query, self.ranked, self.selection.index)

        while self.running.is_running():
            self.apply(interpret(poll()))
            if self.state is SessionState.CONFIRMED or not self.running.is_running():
                break
            self.refresh()
            render(self.query, self.ranked, self.selection.index)

        if self.state is SessionState.RUNNING:
            self.state = SessionState.CANCELLED

        logger.info(f"Session ended: {self.state.value}")
        if self.result is not None:
            logger.info(f"Selected {self.result!r} for query {self.query!r}")
        return self.result
