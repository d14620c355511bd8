"""Line scanning and five-in-a-row detection."""

from __future__ import annotations

from .board import WIN_LENGTH, Board
from .types import Player, Point

# Four direction axes; callers walk each one in both senses
DIRECTIONS = [(0, 1), (1, 0), (1, 1), (1, -1)]


def count_consecutive(board: Board, point: Point, direction: tuple[int, int], player: Player) -> int:
    """Length of the run of `player` stones starting at `point` and walking along `direction`.

    `point` must already hold a `player` stone; it is included in the count.
    """
    dr, dc = direction
    count = 1
    r, c = point.row + dr, point.col + dc
    while True:
        p = Point(r, c)
        if not board.is_on_grid(p) or board.get(p) is not player:
            break
        count += 1
        r += dr
        c += dc
    return count


def is_open(board: Board, point: Point) -> bool:
    return board.is_on_grid(point) and board.is_empty(point)


def check_win(board: Board, point: Point, player: Player) -> bool:
    """Check if the stone just placed at `point` makes 5-in-a-row for `player`."""
    for dr, dc in DIRECTIONS:
        forward = count_consecutive(board, point, (dr, dc), player)
        backward = count_consecutive(board, point, (-dr, -dc), player)
        if forward + backward - 1 >= WIN_LENGTH:
            return True
    return False


def has_five(board: Board, player: Player) -> bool:
    """Full-board scan: does `player` own a run of 5 or more anywhere?"""
    for pt, owner in board.stones():
        if owner is not player:
            continue
        for direction in DIRECTIONS:
            if count_consecutive(board, pt, direction, player) >= WIN_LENGTH:
                return True
    return False
