"""Tests for the static evaluation."""

import random

from moderngomoku.agent.evaluation import (
    CENTER_BONUS,
    WIN_SCORE,
    _run_score,
    evaluate,
    positional_score,
)
from moderngomoku.game.board import BOARD_SIZE, CENTER, Board
from moderngomoku.game.lines import has_five
from moderngomoku.game.types import Player, Point

AI = Player.WHITE
HUMAN = Player.BLACK


def _swapped(board: Board) -> Board:
    swapped = Board()
    for p, player in board.stones():
        swapped.place(p, player.other)
    return swapped


def _random_board(rng: random.Random, stones: int) -> Board:
    cells = [Point(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE)]
    b = Board()
    for p in rng.sample(cells, stones):
        b.place(p, rng.choice([Player.BLACK, Player.WHITE]))
    return b


# ---------------------------------------------------------------------------
# Run scoring
# ---------------------------------------------------------------------------

class TestRunScore:
    def test_table(self):
        assert _run_score(1) == 1
        assert _run_score(2) == 10
        assert _run_score(3) == 100
        assert _run_score(4) == 1_000

    def test_longer_runs_use_four(self):
        assert _run_score(5) == 1_000
        assert _run_score(7) == 1_000


# ---------------------------------------------------------------------------
# Evaluation
# ---------------------------------------------------------------------------

class TestEvaluation:
    def test_empty_board_is_zero(self):
        assert evaluate(Board(), AI) == 0

    def test_single_center_stone(self):
        b = Board()
        b.place(CENTER, AI)
        # 8 senses, run of 1 open at both ends -> 2 each, plus center bonus
        assert evaluate(b, AI) == 8 * 2 + CENTER_BONUS

    def test_single_corner_stone_for_opponent(self):
        b = Board()
        b.place(Point(0, 0), HUMAN)
        # Every sense has one end off the grid -> 1 each, no center bonus
        assert evaluate(b, AI) == -8

    def test_open_two_in_center(self):
        b = Board()
        b.place(Point(7, 7), AI)
        b.place(Point(7, 8), AI)
        # Each stone: open run of 2 (20), blocked run of 1 (1), six open singles (12)
        assert evaluate(b, AI) == 2 * (20 + 1 + 12) + 2 * CENTER_BONUS

    def test_blocked_end_is_not_doubled(self):
        b = Board()
        for c in range(0, 3):
            b.place(Point(0, c), AI)
        open_b = Board()
        for c in range(5, 8):
            open_b.place(Point(3, c), AI)
        assert evaluate(open_b, AI) > evaluate(b, AI)

    def test_computer_five_is_win(self):
        b = Board()
        for c in range(5):
            b.place(Point(2, c), AI)
        b.place(Point(3, 0), HUMAN)
        assert evaluate(b, AI) == WIN_SCORE

    def test_opponent_five_is_loss(self):
        b = Board()
        for r in range(5):
            b.place(Point(r, 10), HUMAN)
        b.place(Point(7, 7), AI)
        assert evaluate(b, AI) == -WIN_SCORE

    def test_computer_five_checked_first(self):
        b = Board()
        for c in range(5):
            b.place(Point(0, c), AI)
            b.place(Point(14, c), HUMAN)
        assert evaluate(b, AI) == WIN_SCORE
        assert evaluate(b, HUMAN) == WIN_SCORE

    def test_perspective_flips_sign(self):
        b = Board()
        b.place(Point(7, 7), AI)
        b.place(Point(7, 8), AI)
        b.place(Point(3, 3), HUMAN)
        assert evaluate(b, HUMAN) == -evaluate(b, AI)

    def test_antisymmetric_under_side_swap(self):
        rng = random.Random(7)
        checked = 0
        while checked < 25:
            b = _random_board(rng, 40)
            if has_five(b, Player.BLACK) or has_five(b, Player.WHITE):
                continue
            assert evaluate(_swapped(b), AI) == -evaluate(b, AI)
            checked += 1

    def test_does_not_mutate_board(self):
        b = _random_board(random.Random(3), 60)
        before = b.copy()
        evaluate(b, AI)
        positional_score(b, AI)
        assert b == before

    def test_positional_matches_evaluate_without_five(self):
        b = Board()
        b.place(Point(6, 6), AI)
        b.place(Point(6, 7), HUMAN)
        b.place(Point(8, 9), AI)
        assert positional_score(b, AI) == evaluate(b, AI)

    def test_center_bonus_radius(self):
        inside = Board()
        inside.place(Point(CENTER.row + 2, CENTER.col - 2), AI)
        outside = Board()
        outside.place(Point(CENTER.row + 3, CENTER.col), AI)
        assert evaluate(inside, AI) - evaluate(outside, AI) == CENTER_BONUS
