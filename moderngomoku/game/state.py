from __future__ import annotations

from typing import Optional

from .board import Board, Move
from .lines import check_win
from .types import Player, Point


class GomokuGameState:
    """Full game state for Gomoku (15x15, 5-in-a-row)."""

    def __init__(self) -> None:
        self.board = Board()
        self.current_player = Player.BLACK
        self.moves: list[Move] = []
        self._winner: Optional[Player] = None
        self._is_over = False

    @property
    def is_over(self) -> bool:
        return self._is_over

    @property
    def winner(self) -> Optional[Player]:
        return self._winner

    @property
    def is_draw(self) -> bool:
        return self._is_over and self._winner is None

    @property
    def last_move(self) -> Optional[Move]:
        return self.moves[-1] if self.moves else None

    def legal_moves(self) -> list[Point]:
        if self._is_over:
            return []
        return list(self.board.empty_points())

    def apply_move(self, point: Point, elapsed: Optional[float] = None) -> None:
        """Place a stone for the current player and advance the turn.

        Raises InvalidMove if the point is off the grid or occupied.
        """
        assert not self._is_over, "Game is already over"

        player = self.current_player
        self.board.place(point, player)
        self.moves.append(Move(point=point, player=player, elapsed=elapsed))

        if check_win(self.board, point, player):
            self._winner = player
            self._is_over = True
        elif self.board.is_full():
            self._is_over = True

        self.current_player = self.current_player.other

    def undo_move(self) -> Optional[Move]:
        """Undo the last move. Returns the undone Move, or None if no moves."""
        if not self.moves:
            return None
        move = self.moves.pop()
        self.board.clear(move.point)
        self.current_player = move.player
        self._winner = None
        self._is_over = False
        return move
