"""Static evaluation: pattern strength plus center control, from the computer's side."""

from __future__ import annotations

from moderngomoku.game.board import CENTER, Board
from moderngomoku.game.lines import DIRECTIONS, count_consecutive, has_five, is_open
from moderngomoku.game.types import Player, Point

WIN_SCORE = 100_000

# Run length -> base score; longer runs use the length-4 value
RUN_SCORES: dict[int, int] = {
    1: 1,
    2: 10,
    3: 100,
    4: 1_000,
}

# Stones within this Chebyshev distance of the center earn CENTER_BONUS
CENTER_RADIUS = 2
CENTER_BONUS = 5

# Both senses of every axis
SENSES = DIRECTIONS + [(-dr, -dc) for dr, dc in DIRECTIONS]


def _run_score(count: int) -> int:
    return RUN_SCORES[min(count, 4)]


def _direction_score(board: Board, point: Point, direction: tuple[int, int], player: Player) -> int:
    dr, dc = direction
    count = count_consecutive(board, point, direction, player)
    score = _run_score(count)
    before = point.shift(-dr, -dc)
    after = point.shift(dr, dc, count)
    if is_open(board, before) and is_open(board, after):
        score *= 2
    return score


def positional_score(board: Board, computer: Player) -> int:
    """Pattern and center score without the five-in-a-row check."""
    score = 0
    for pt, player in board.stones():
        sign = 1 if player is computer else -1
        for direction in SENSES:
            score += sign * _direction_score(board, pt, direction, player)
        if pt.distance(CENTER) <= CENTER_RADIUS:
            score += sign * CENTER_BONUS
    return score


def evaluate(board: Board, computer: Player) -> int:
    """Static evaluation of the board position.

    Returns +WIN_SCORE if `computer` already has five in a row, -WIN_SCORE if
    its opponent does, otherwise the positional score (positive = computer
    ahead). Does not modify the board.
    """
    if has_five(board, computer):
        return WIN_SCORE
    if has_five(board, computer.other):
        return -WIN_SCORE
    return positional_score(board, computer)
