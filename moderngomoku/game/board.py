from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from .types import Player, Point

BOARD_SIZE = 15
WIN_LENGTH = 5
CENTER = Point(BOARD_SIZE // 2, BOARD_SIZE // 2)

# One letter per column, left to right
COL_LABELS = "ABCDEFGHIJKLMNO"


def _symbol(player: Optional[Player]) -> str:
    return "." if player is None else player.symbol


class InvalidMove(ValueError):
    """Placement off the grid or onto an occupied cell."""


def parse_coordinate(text: str) -> Optional[Point]:
    """Parse a coordinate string like 'E5' or 'H12' into a Point.

    Column is a letter A-O, row is a number 1-15 counted from the top.
    Returns None if the string is invalid.
    """
    text = text.strip().upper()
    if len(text) < 2 or len(text) > 3:
        return None
    col_char = text[0]
    row_str = text[1:]
    if col_char not in COL_LABELS:
        return None
    try:
        row = int(row_str)
    except ValueError:
        return None
    if not (1 <= row <= BOARD_SIZE):
        return None
    return Point(row - 1, COL_LABELS.index(col_char))


def format_point(point: Point) -> str:
    """Format a Point as a coordinate string like 'E5'."""
    return f"{COL_LABELS[point.col]}{point.row + 1}"


@dataclass
class Move:
    point: Point
    player: Player
    elapsed: Optional[float] = None  # seconds spent choosing the move

    def __str__(self) -> str:
        return f"{self.player}: {format_point(self.point)}"


class Board:
    """15x15 Gomoku board. Tracks stone placement."""

    def __init__(self) -> None:
        self._grid: dict[Point, Player] = {}

    @classmethod
    def from_matrix(cls, matrix: list[list[int]]) -> Board:
        """Build a board from rows of 0 (empty), 1 (black) and 2 (white)."""
        board = cls()
        for r, row in enumerate(matrix):
            for c, value in enumerate(row):
                if value:
                    board.place(Point(r, c), Player(value))
        return board

    def to_matrix(self) -> list[list[int]]:
        return [
            [
                self._grid[Point(r, c)].value if Point(r, c) in self._grid else 0
                for c in range(BOARD_SIZE)
            ]
            for r in range(BOARD_SIZE)
        ]

    def place(self, point: Point, player: Player) -> None:
        if not self.is_on_grid(point):
            raise InvalidMove(f"{tuple(point)} is off the grid")
        if point in self._grid:
            raise InvalidMove(f"{format_point(point)} is occupied")
        self._grid[point] = player

    def clear(self, point: Point) -> None:
        del self._grid[point]

    def reset(self) -> None:
        self._grid.clear()

    def get(self, point: Point) -> Optional[Player]:
        return self._grid.get(point)

    def is_empty(self, point: Point) -> bool:
        return point not in self._grid

    def is_on_grid(self, point: Point) -> bool:
        return 0 <= point.row < BOARD_SIZE and 0 <= point.col < BOARD_SIZE

    def is_full(self) -> bool:
        return len(self._grid) == BOARD_SIZE * BOARD_SIZE

    @property
    def stone_count(self) -> int:
        return len(self._grid)

    def stones(self, row_major: bool = False) -> list[tuple[Point, Player]]:
        """Occupied cells with their owners, in placement order unless `row_major`."""
        items = list(self._grid.items())
        if row_major:
            items.sort()
        return items

    def empty_points(self) -> Iterator[Point]:
        for r in range(BOARD_SIZE):
            for c in range(BOARD_SIZE):
                p = Point(r, c)
                if p not in self._grid:
                    yield p

    def copy(self) -> Board:
        clone = Board()
        clone._grid = dict(self._grid)
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __str__(self) -> str:
        header = "   " + " ".join(COL_LABELS)
        rows = [
            f"{r + 1:>2} "
            + " ".join(_symbol(self._grid.get(Point(r, c))) for c in range(BOARD_SIZE))
            for r in range(BOARD_SIZE)
        ]
        return "\n".join([header] + rows)
