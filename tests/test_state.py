import pytest

from moderngomoku.game.board import BOARD_SIZE, InvalidMove
from moderngomoku.game.state import GomokuGameState
from moderngomoku.game.types import Player, Point


def _black_wins_on_row_zero(g: GomokuGameState) -> None:
    # Black: row 0, cols 0-4. White: row 1, cols 0-3.
    for i in range(4):
        g.apply_move(Point(0, i))  # Black
        g.apply_move(Point(1, i))  # White
    g.apply_move(Point(0, 4))  # Black wins


class TestGomokuGameState:
    def test_initial_state(self):
        g = GomokuGameState()
        assert g.current_player is Player.BLACK
        assert not g.is_over
        assert g.winner is None
        assert g.last_move is None
        assert len(g.legal_moves()) == BOARD_SIZE * BOARD_SIZE

    def test_alternating_turns(self):
        g = GomokuGameState()
        g.apply_move(Point(5, 5))
        assert g.current_player is Player.WHITE
        g.apply_move(Point(5, 6))
        assert g.current_player is Player.BLACK
        assert g.last_move.point == Point(5, 6)
        assert g.last_move.player is Player.WHITE

    def test_horizontal_win(self):
        g = GomokuGameState()
        _black_wins_on_row_zero(g)
        assert g.is_over
        assert g.winner is Player.BLACK
        assert not g.is_draw

    def test_vertical_win(self):
        g = GomokuGameState()
        for i in range(4):
            g.apply_move(Point(i, 0))  # Black
            g.apply_move(Point(i, 1))  # White
        g.apply_move(Point(4, 0))  # Black wins
        assert g.is_over
        assert g.winner is Player.BLACK

    def test_diagonal_win_for_white(self):
        g = GomokuGameState()
        moves_white = [Point(i, i) for i in range(5)]
        moves_black = [Point(i, 9) for i in range(5)]
        g.apply_move(Point(14, 14))  # Black tempo move
        for i in range(4):
            g.apply_move(moves_white[i])
            g.apply_move(moves_black[i])
        g.apply_move(moves_white[4])
        assert g.is_over
        assert g.winner is Player.WHITE

    def test_anti_diagonal_win(self):
        g = GomokuGameState()
        # Black: (0,4),(1,3),(2,2),(3,1),(4,0). White: col 9.
        moves_black = [Point(i, 4 - i) for i in range(5)]
        moves_white = [Point(i, 9) for i in range(4)]
        for i in range(4):
            g.apply_move(moves_black[i])
            g.apply_move(moves_white[i])
        g.apply_move(moves_black[4])
        assert g.is_over
        assert g.winner is Player.BLACK

    def test_win_completed_in_the_middle(self):
        g = GomokuGameState()
        for col, filler in zip((0, 1, 3, 4), range(4)):
            g.apply_move(Point(7, col))  # Black
            g.apply_move(Point(10, filler))  # White
        g.apply_move(Point(7, 2))  # Black fills the gap
        assert g.winner is Player.BLACK

    def test_no_premature_win(self):
        """4 in a row should NOT trigger a win."""
        g = GomokuGameState()
        for i in range(4):
            g.apply_move(Point(0, i))  # Black
            g.apply_move(Point(1, i))  # White
        assert not g.is_over

    def test_undo_move(self):
        g = GomokuGameState()
        g.apply_move(Point(5, 5))
        g.apply_move(Point(5, 6))
        move = g.undo_move()
        assert move is not None
        assert move.point == Point(5, 6)
        assert g.current_player is Player.WHITE
        assert g.board.is_empty(Point(5, 6))

    def test_undo_reverses_win(self):
        g = GomokuGameState()
        _black_wins_on_row_zero(g)
        assert g.is_over

        g.undo_move()
        assert not g.is_over
        assert g.winner is None

    def test_undo_empty_returns_none(self):
        g = GomokuGameState()
        assert g.undo_move() is None

    def test_cannot_play_on_occupied(self):
        g = GomokuGameState()
        g.apply_move(Point(5, 5))
        with pytest.raises(InvalidMove):
            g.apply_move(Point(5, 5))
        # The rejected move changes nothing
        assert g.current_player is Player.WHITE
        assert len(g.moves) == 1

    def test_cannot_play_off_grid(self):
        g = GomokuGameState()
        with pytest.raises(InvalidMove):
            g.apply_move(Point(15, 0))

    def test_cannot_play_after_game_over(self):
        g = GomokuGameState()
        _black_wins_on_row_zero(g)
        with pytest.raises(AssertionError):
            g.apply_move(Point(3, 0))

    def test_legal_moves_empty_after_game_over(self):
        g = GomokuGameState()
        _black_wins_on_row_zero(g)
        assert g.legal_moves() == []

    def test_elapsed_is_recorded(self):
        g = GomokuGameState()
        g.apply_move(Point(7, 7), elapsed=1.5)
        assert g.moves[0].elapsed == 1.5
