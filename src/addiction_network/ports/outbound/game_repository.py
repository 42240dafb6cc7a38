"""Game session repository port interface"""
from abc import ABC, abstractmethod
from typing import Optional

from ...domain.game_state import GameState


class IGameSessionRepository(ABC):
    """Holds the single live game of this process"""

    @abstractmethod
    def load(self) -> Optional[GameState]:
        """Current game state, or None when no game was started"""
        pass

    @abstractmethod
    def save(self, state: GameState) -> None:
        """Replace the current game state"""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Discard the current game"""
        pass
