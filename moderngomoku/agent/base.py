from __future__ import annotations

import abc
from typing import Optional

from moderngomoku.game.state import GomokuGameState
from moderngomoku.game.types import Point


class Agent(abc.ABC):
    @abc.abstractmethod
    def select_move(self, game_state: GomokuGameState) -> Optional[Point]:
        """Return the point where this agent wants to play, or None if the board is full."""

    @property
    def name(self) -> str:
        return self.__class__.__name__
