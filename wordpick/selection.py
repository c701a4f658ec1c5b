"""Highlighted-row state for the ranked list."""

from typing import Optional, Sequence


class Selection:
    """Index of the highlighted row, kept inside the ranked list."""

    def __init__(self, index: int = 0):
        self.index = index

    def move_up(self):
        self.index = max(0, self.index - 1)

    def move_down(self, length: int):
        if self.index < length - 1:
            self.index += 1

    def clamp(self, length: int):
        """Pull the index back inside a list of ``length`` rows."""
        self.index = min(self.index, max(0, length - 1))

    def current(self, ranked: Sequence[str]) -> Optional[str]:
        """The highlighted candidate, or None when the list is empty."""
        if not ranked:
            return None
        return ranked[self.index]

    def __repr__(self):
        return f"Selection(index={self.index})"
