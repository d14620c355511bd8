"""Opening policy for the first few plies, played without search."""

from __future__ import annotations

import logging
import random
from typing import Optional

from moderngomoku.game.board import BOARD_SIZE, CENTER, Board
from moderngomoku.game.types import Player, Point

logger = logging.getLogger(__name__)

# Neighbour scan order around an opponent stone: N, S, W, E, then diagonals
NEIGHBOURS = [(-1, 0), (1, 0), (0, -1), (0, 1), (-1, -1), (-1, 1), (1, -1), (1, 1)]

# Random offset applied to the center on each axis
JITTER = 1
# Half-width of the square searched around the jittered cell
SEARCH_RADIUS = 2


def _clamp(value: int) -> int:
    return max(0, min(BOARD_SIZE - 1, value))


def opening_move(board: Board, computer: Player, rng: random.Random) -> Optional[Point]:
    """Pick a move for a near-empty board.

    Plays next to the first opponent stone (row-major) that has an empty
    neighbour; otherwise near the center with a small random jitter.
    Returns None only if the board is full.
    """
    opponent = computer.other
    for pt, player in board.stones(row_major=True):
        if player is not opponent:
            continue
        for dr, dc in NEIGHBOURS:
            np = pt.shift(dr, dc)
            if board.is_on_grid(np) and board.is_empty(np):
                logger.debug("Opening: answering %s at %s", pt, np)
                return np

    target = Point(
        _clamp(CENTER.row + rng.randint(-JITTER, JITTER)),
        _clamp(CENTER.col + rng.randint(-JITTER, JITTER)),
    )
    if board.is_empty(target):
        logger.debug("Opening: near center at %s", target)
        return target

    for dr in range(-SEARCH_RADIUS, SEARCH_RADIUS + 1):
        for dc in range(-SEARCH_RADIUS, SEARCH_RADIUS + 1):
            np = target.shift(dr, dc)
            if board.is_on_grid(np) and board.is_empty(np):
                return np

    return next(board.empty_points(), None)
