"""Minimax agent: depth-limited minimax with alpha-beta pruning and pattern-based evaluation."""

from __future__ import annotations

import logging
import math
import random
import time
from dataclasses import dataclass
from typing import Optional

from moderngomoku.agent.base import Agent
from moderngomoku.agent.candidates import generate_candidates, order_moves, winning_points
from moderngomoku.agent.evaluation import WIN_SCORE, evaluate, positional_score
from moderngomoku.agent.opening import opening_move
from moderngomoku.game.board import CENTER, Board, format_point
from moderngomoku.game.lines import check_win, has_five
from moderngomoku.game.state import GomokuGameState
from moderngomoku.game.types import Player, Point

logger = logging.getLogger(__name__)

INF = math.inf

# Plies searched below each root candidate
MAX_DEPTH = 3

# Chance of switching to a move that ties the current best
TIE_BREAK_PROBABILITY = 0.3

# Stone count up to which the opening policy replaces search
OPENING_STONES = 2

# Side that plays the computer when none is given (the human opens as Black)
COMPUTER = Player.WHITE


@dataclass
class SearchStats:
    nodes: int = 0


def _node_score(
    board: Board,
    computer: Player,
    last: Optional[Point],
    incremental: bool,
) -> int:
    """Score a node exactly as `evaluate` would.

    In incremental mode the root held no five, so a five can only run
    through `last`, the stone placed most recently.
    """
    if not incremental or last is None:
        return evaluate(board, computer)
    mover = board.get(last)
    if check_win(board, last, mover):
        return WIN_SCORE if mover is computer else -WIN_SCORE
    return positional_score(board, computer)


# ---------------------------------------------------------------------------
# Minimax with alpha-beta
# ---------------------------------------------------------------------------

def minimax(
    board: Board,
    depth: int,
    maximizing: bool,
    alpha: float,
    beta: float,
    computer: Player,
    max_depth: int = MAX_DEPTH,
    last: Optional[Point] = None,
    incremental: bool = False,
    stats: Optional[SearchStats] = None,
) -> float:
    """Minimax search with alpha-beta pruning.

    `maximizing` is True when the computer is to move. Scores are from the
    computer's point of view. Every stone placed here is removed again before
    returning, so the board comes back exactly as it was passed in.
    """
    if stats is not None:
        stats.nodes += 1

    score = _node_score(board, computer, last, incremental)
    if abs(score) >= WIN_SCORE or depth == max_depth or board.is_full():
        return score

    mover = computer if maximizing else computer.other
    candidates = order_moves(board, generate_candidates(board), mover)

    best = -INF if maximizing else INF
    for move in candidates:
        board.place(move, mover)
        try:
            value = minimax(
                board, depth + 1, not maximizing, alpha, beta, computer,
                max_depth=max_depth, last=move, incremental=incremental, stats=stats,
            )
        finally:
            board.clear(move)

        if maximizing:
            best = max(best, value)
            alpha = max(alpha, value)
        else:
            best = min(best, value)
            beta = min(beta, value)
        if beta <= alpha:
            break

    return best


# ---------------------------------------------------------------------------
# MinimaxAgent
# ---------------------------------------------------------------------------

class MinimaxAgent(Agent):
    """Minimax + alpha-beta agent with pattern-based evaluation.

    `rng` drives the opening jitter and the tie-break between equally scored
    moves; pass a seeded `random.Random` (or `tie_break_probability=0`) for
    reproducible play. `time_limit` caps, in seconds, how long new root
    candidates keep being examined; at least one is always scored.
    """

    def __init__(
        self,
        computer: Player = COMPUTER,
        depth: int = MAX_DEPTH,
        tie_break_probability: float = TIE_BREAK_PROBABILITY,
        rng: Optional[random.Random] = None,
        time_limit: Optional[float] = None,
    ) -> None:
        self.computer = computer
        self.depth = depth
        self.tie_break_probability = tie_break_probability
        self.rng = rng if rng is not None else random.Random()
        self.time_limit = time_limit

    @property
    def name(self) -> str:
        return f"MinimaxAgent(d={self.depth})"

    def select_move(self, game_state: GomokuGameState) -> Optional[Point]:
        assert game_state.current_player is self.computer, "Not the computer's turn"
        return self.next_move(game_state.board)

    def next_move(self, board: Board) -> Optional[Point]:
        """Choose the computer's move on `board`; None if the board is full."""
        if board.is_full():
            return None
        if board.stone_count == 0:
            return CENTER
        if board.stone_count <= OPENING_STONES:
            return opening_move(board, self.computer, self.rng)

        candidates = generate_candidates(board)

        wins = winning_points(board, self.computer, candidates)
        if wins:
            logger.debug("Completing five at %s", format_point(wins[0]))
            return wins[0]

        threats = winning_points(board, self.computer.other, candidates)
        if threats:
            logger.debug("Forced response, opponent threatens %s",
                         ", ".join(format_point(p) for p in threats))
            candidates = threats
            if len(candidates) == 1:
                return candidates[0]

        return self._search_root(board, candidates)

    def _search_root(self, board: Board, candidates: list[Point]) -> Point:
        start = time.monotonic()
        stats = SearchStats()
        incremental = not (has_five(board, self.computer) or has_five(board, self.computer.other))
        candidates = order_moves(board, candidates, self.computer)

        best_score: Optional[float] = None
        best_move: Optional[Point] = None
        searched = 0

        for move in candidates:
            if (
                self.time_limit is not None
                and best_move is not None
                and time.monotonic() - start > self.time_limit
            ):
                logger.debug("Time limit hit after %d of %d candidates", searched, len(candidates))
                break

            # Scores are integers: a window just below the best still scores
            # ties and improvements exactly.
            alpha = -INF if best_score is None else best_score - 1
            board.place(move, self.computer)
            try:
                score = minimax(
                    board, 0, False, alpha, INF, self.computer,
                    max_depth=self.depth, last=move, incremental=incremental, stats=stats,
                )
            finally:
                board.clear(move)
            searched += 1

            if best_score is None or score > best_score:
                best_score = score
                best_move = move
            elif score == best_score and self.rng.random() < self.tie_break_probability:
                best_move = move

        assert best_move is not None, "No candidates found"
        logger.debug(
            "%s plays %s (score=%s, candidates=%d, nodes=%d, %.2fs)",
            self.name, format_point(best_move), best_score, len(candidates),
            stats.nodes, time.monotonic() - start,
        )
        return best_move


def next_move(
    board: Board,
    computer: Player = COMPUTER,
    rng: Optional[random.Random] = None,
) -> Optional[Point]:
    """Choose the computer's move on `board`, or None if the board is full."""
    return MinimaxAgent(computer=computer, rng=rng).next_move(board)


def is_winning_move(board: Board, point: Point, player: Player) -> bool:
    """Whether the `player` stone already placed at `point` completes five in a row."""
    assert board.get(point) is player, f"{format_point(point)} does not hold a {player} stone"
    return check_win(board, point, player)
