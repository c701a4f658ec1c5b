"""
Key handling for the word picker.

Turns one raw input event into one action. An event is what a curses poll
hands back: None when the poll timed out, a one-character str from
get_wch(), or an int key code. Codes below 256 (what getch() returns for
ordinary keys) are read as characters; curses.KEY_* codes are special keys.
"""

import curses
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

Key = Union[str, int, None]


class Direction(Enum):
    UP = -1
    DOWN = 1


@dataclass(frozen=True)
class Edit:
    """Append ``char`` to the query, or drop its last character when None."""

    char: Optional[str] = None


@dataclass(frozen=True)
class Navigate:
    direction: Direction


@dataclass(frozen=True)
class Confirm:
    pass


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class NoOp:
    pass


Action = Union[Edit, Navigate, Confirm, Quit, NoOp]

ESC = "\x1b"
CTRL_C = "\x03"
CTRL_D = "\x04"
CTRL_Z = "\x1a"
CTRL_P = "\x10"
CTRL_N = "\x0e"
DEL = "\x7f"
BS = "\b"

QUIT_KEYS = {ESC, CTRL_C, CTRL_D, CTRL_Z}
UP_KEYS = {curses.KEY_UP, CTRL_P}
DOWN_KEYS = {curses.KEY_DOWN, CTRL_N}
ENTER_KEYS = {"\n", "\r", curses.KEY_ENTER}
BACKSPACE_KEYS = {curses.KEY_BACKSPACE, DEL, BS}


def normalize(key: Key) -> Key:
    """Map plain getch() codes onto the characters get_wch() would return."""
    if isinstance(key, int) and 0 <= key < 256:
        return chr(key)
    return key


def interpret(key: Key) -> Action:
    """Map one input event to the action the session should take."""
    key = normalize(key)
    if key is None or key == curses.KEY_RESIZE:
        return NoOp()
    if key in QUIT_KEYS:
        return Quit()
    if key in UP_KEYS:
        return Navigate(Direction.UP)
    if key in DOWN_KEYS:
        return Navigate(Direction.DOWN)
    if key in ENTER_KEYS:
        return Confirm()
    if key in BACKSPACE_KEYS:
        return Edit(None)
    if isinstance(key, str) and len(key) == 1 and key.isprintable():
        return Edit(key)
    return NoOp()


def apply_edit(query: str, edit: Edit) -> str:
    """Return the query after ``edit``. Backspace on an empty query is a no-op."""
    if edit.char is None:
        return query[:-1]
    return query + edit.char
