"""Candidate generation and move ordering for the search."""

from __future__ import annotations

from moderngomoku.game.board import WIN_LENGTH, Board
from moderngomoku.game.lines import DIRECTIONS, check_win
from moderngomoku.game.types import Player, Point

# Candidates lie within this Chebyshev distance of an existing stone
CANDIDATE_RADIUS = 2

# ---------------------------------------------------------------------------
# Ordering table: (consecutive_count, open_ends) -> score
# ---------------------------------------------------------------------------

THREAT_SCORES: dict[tuple[int, int], int] = {
    (4, 2): 50_000,   # open four
    (4, 1): 8_000,    # half-open four
    (3, 2): 5_000,    # open three
    (3, 1): 1_000,
    (2, 2): 500,
    (2, 1): 100,
    (1, 2): 10,
}


def _threat_score(count: int, open_ends: int) -> int:
    if count >= WIN_LENGTH:
        return 100_000
    return THREAT_SCORES.get((count, open_ends), 0)


def generate_candidates(board: Board) -> list[Point]:
    """Return empty cells near existing stones (Chebyshev distance <= 2).

    An empty board yields no candidates; callers handle the opening move.
    If stones exist but none of their neighbourhoods has room, every empty
    cell is returned.
    """
    candidates: dict[Point, None] = {}

    for pt, _ in board.stones():
        for dr in range(-CANDIDATE_RADIUS, CANDIDATE_RADIUS + 1):
            for dc in range(-CANDIDATE_RADIUS, CANDIDATE_RADIUS + 1):
                np = pt.shift(dr, dc)
                if board.is_on_grid(np) and board.is_empty(np):
                    candidates[np] = None

    if not candidates and board.stone_count:
        return list(board.empty_points())
    return list(candidates)


def winning_points(board: Board, player: Player, candidates: list[Point]) -> list[Point]:
    """Candidates where `player` would complete five in a row right now."""
    wins = []
    for move in candidates:
        board.place(move, player)
        try:
            if check_win(board, move, player):
                wins.append(move)
        finally:
            board.clear(move)
    return wins


def _move_heuristic(board: Board, move: Point, player: Player) -> int:
    """Fast heuristic for a candidate move: offensive pattern + 0.5 * defensive."""
    score = 0

    for dr, dc in DIRECTIONS:
        for side, weight in ((player, 1), (player.other, 0.5)):
            count = 1  # the move itself
            open_ends = 0

            # Forward
            cr, cc = move.row + dr, move.col + dc
            while True:
                p = Point(cr, cc)
                if not board.is_on_grid(p) or board.get(p) is not side:
                    break
                count += 1
                cr += dr
                cc += dc
            end_fwd = Point(cr, cc)
            if board.is_on_grid(end_fwd) and board.is_empty(end_fwd):
                open_ends += 1

            # Backward
            cr, cc = move.row - dr, move.col - dc
            while True:
                p = Point(cr, cc)
                if not board.is_on_grid(p) or board.get(p) is not side:
                    break
                count += 1
                cr -= dr
                cc -= dc
            end_bwd = Point(cr, cc)
            if board.is_on_grid(end_bwd) and board.is_empty(end_bwd):
                open_ends += 1

            score += int(weight * _threat_score(count, open_ends))

    return score


def order_moves(board: Board, candidates: list[Point], player: Player) -> list[Point]:
    """Sort candidates for `player` by heuristic score (descending) for better pruning."""
    return sorted(candidates, key=lambda m: _move_heuristic(board, m, player), reverse=True)
