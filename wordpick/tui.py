#!/usr/bin/env python3
"""
Interactive fuzzy word picker

Ranks a word list by edit distance to what you type, updating on every
keystroke, and prints the word you pick to stdout.

Usage:
    wordpick                      # uses /usr/share/dict/words
    wordpick -w words.txt
    word=$(wordpick) && echo "picked $word"

Controls:
    ↑/↓, Ctrl+P/Ctrl+N  - Move the highlight
    Enter               - Print the highlighted word and exit
    Backspace           - Delete the last query character
    ESC, Ctrl+C/D/Z     - Quit without output
"""

import curses
import curses.textpad
import locale
import os
import signal
import sys
from contextlib import contextmanager
from typing import List, Optional, Sequence

import psutil

from wordpick.config import Settings, parse_args
from wordpick.logger import get_logger, setup_logger
from wordpick.session import RunningFlag, Session, install_signal_handler
from wordpick.wordlist import WordListError, load_words

logger = get_logger(__name__)


class WordPickTUI:
    """Curses front end: polls keys for the session and paints its state."""

    MIN_HEIGHT = 7  # query box (3) + list box with one row (3) + status line
    MIN_WIDTH = 24

    def __init__(self, stdscr, session: Session, poll_ms: int = 100):
        self.stdscr = stdscr
        self.session = session
        self.top = 0  # first ranked row shown in the list box
        self.process = psutil.Process(os.getpid())

        # Raw mode so Ctrl+C/Ctrl+Z reach us as keys instead of signals
        curses.raw()
        curses.curs_set(1)
        if curses.has_colors():
            curses.use_default_colors()
            curses.init_pair(1, curses.COLOR_CYAN, -1)     # Labels/borders
            curses.init_pair(2, curses.COLOR_GREEN, -1)    # Highlighted row
            curses.init_pair(3, curses.COLOR_BLUE, -1)     # Status line

        self.stdscr.keypad(True)
        self.stdscr.timeout(poll_ms)

    def run(self) -> Optional[str]:
        """Main event loop."""
        try:
            return self.session.run(self.poll, self.render)
        finally:
            curses.noraw()

    def poll(self):
        """Wait up to the poll interval for one key. None on timeout."""
        try:
            return self.stdscr.get_wch()
        except curses.error:
            # get_wch() raises on timeout ("no input")
            return None

    def _get_memory_mb(self) -> float:
        return self.process.memory_info().rss / (1024 * 1024)

    def _scroll_into_view(self, index: int, visible: int, total: int):
        if index < self.top:
            self.top = index
        elif index >= self.top + visible:
            self.top = index - visible + 1
        self.top = max(0, min(self.top, total - visible))

    def render(self, query: str, ranked: List[str], index: int):
        """Render the query box, the ranked list and the status line."""
        self.stdscr.erase()
        h, w = self.stdscr.getmaxyx()

        if h < self.MIN_HEIGHT or w < self.MIN_WIDTH:
            lines = ["Terminal too small!", f"Need {self.MIN_WIDTH}x{self.MIN_HEIGHT}, got {w}x{h}"]
            for row, line in enumerate(lines[:h]):
                self.stdscr.addnstr(row, 0, line, w - 1)
            self.stdscr.refresh()
            return

        # ─────────────────────────────────────────────────────────────
        # Query box
        # ─────────────────────────────────────────────────────────────
        curses.textpad.rectangle(self.stdscr, 0, 0, 2, w - 1)
        label = "Query: "
        self.stdscr.addstr(1, 2, label, curses.color_pair(1))
        query_col = 2 + len(label)
        self.stdscr.addnstr(1, query_col, query, max(0, w - query_col - 2), curses.A_BOLD)

        # ─────────────────────────────────────────────────────────────
        # Matches box
        # ─────────────────────────────────────────────────────────────
        list_top, list_bottom = 3, h - 2
        curses.textpad.rectangle(self.stdscr, list_top, 0, list_bottom, w - 1)
        self.stdscr.addstr(list_top, 2, " Matches ", curses.color_pair(1) | curses.A_BOLD)

        visible = list_bottom - list_top - 1
        self._scroll_into_view(index, visible, len(ranked))
        text_width = w - 4

        for row, i in enumerate(range(self.top, min(self.top + visible, len(ranked)))):
            y = list_top + 1 + row
            if i == index:
                self.stdscr.addnstr(y, 2, f"> {ranked[i]}", text_width, curses.color_pair(2) | curses.A_BOLD)
            else:
                # Pad to line up with the "> " marker
                self.stdscr.addnstr(y, 2, f"  {ranked[i]}", text_width)

        # ─────────────────────────────────────────────────────────────
        # Status line
        # ─────────────────────────────────────────────────────────────
        status = (
            f" {len(ranked):,} words | rank {self.session.last_rank_ms:.1f}ms | "
            f"RAM {self._get_memory_mb():.1f}MB | Up/Down=select | Enter=pick | ESC=quit"
        )
        self.stdscr.addnstr(h - 1, 0, status, w - 1, curses.color_pair(3))

        # Cursor sits at the end of the query
        self.stdscr.move(1, min(query_col + len(query), w - 2))
        self.stdscr.refresh()


def _picker_main(stdscr, session: Session, poll_ms: int) -> Optional[str]:
    """Entry point for curses application."""
    app = WordPickTUI(stdscr, session, poll_ms=poll_ms)
    return app.run()


@contextmanager
def _screen_on_terminal():
    """
    Point fd 1 at the controlling terminal while curses owns the screen.

    curses paints to fd 1. When stdout is a pipe (e.g. $(wordpick)) the
    screen goes to /dev/tty instead, and the pipe is put back afterwards so
    it only ever receives the picked word.
    """
    if os.isatty(1):
        yield
        return

    tty_fd = os.open("/dev/tty", os.O_RDWR)
    saved_fd = os.dup(1)
    sys.stdout.flush()
    try:
        os.dup2(tty_fd, 1)
        yield
    finally:
        os.dup2(saved_fd, 1)
        os.close(saved_fd)
        os.close(tty_fd)


def run_picker(words: Sequence[str], settings: Settings) -> Optional[str]:
    """
    Run one interactive picker session.

    SIGINT only stops the session; the previous handler is put back on the
    way out. curses.wrapper restores the terminal on every exit path, and
    stdout points back at its original target, so the caller can print the
    result as soon as this returns.
    """
    running = RunningFlag()
    previous = install_signal_handler(running)
    try:
        with _screen_on_terminal():
            return curses.wrapper(_picker_main, Session(words, running), settings.poll_ms)
    finally:
        if previous is not None:
            signal.signal(signal.SIGINT, previous)


def _is_interactive() -> bool:
    return sys.stdin.isatty()


def main(argv=None) -> int:
    settings = parse_args(argv)
    setup_logger(settings.log_file, settings.log_level)

    try:
        words = load_words(settings.wordlist)
    except WordListError as e:
        logger.error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not _is_interactive():
        print("Error: wordpick requires an interactive terminal.", file=sys.stderr)
        return 1

    locale.setlocale(locale.LC_ALL, "")
    # Let a lone ESC through quickly instead of waiting for an escape sequence
    os.environ.setdefault("ESCDELAY", "25")

    try:
        word = run_picker(words, settings)
    except KeyboardInterrupt:
        word = None
    except (curses.error, OSError) as e:
        logger.exception("Terminal failure")
        print(f"Error: terminal failure: {e}", file=sys.stderr)
        return 1

    if word is not None:
        print(word, flush=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())
