from __future__ import annotations

import enum
from typing import NamedTuple

# Board diagram characters
_SYMBOLS = {1: "X", 2: "O"}


class Player(enum.Enum):
    """Stone colour. Values match the 0/1/2 matrix encoding of a board."""

    BLACK = 1
    WHITE = 2

    @property
    def other(self) -> Player:
        return Player.WHITE if self is Player.BLACK else Player.BLACK

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self.value]

    def __str__(self) -> str:
        return self.name.capitalize()


class Point(NamedTuple):
    """Board intersection. Row 0 is the top row, column 0 the left column."""

    row: int
    col: int

    def shift(self, dr: int, dc: int, steps: int = 1) -> Point:
        """The point `steps` cells away along direction (dr, dc)."""
        return Point(self.row + dr * steps, self.col + dc * steps)

    def distance(self, other: Point) -> int:
        """Chebyshev (king-move) distance."""
        return max(abs(self.row - other.row), abs(self.col - other.col))
