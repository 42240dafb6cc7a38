"""In-memory game session repository"""
import logging
from typing import Optional

from ....domain.game_state import GameState
from ....ports.outbound.game_repository import IGameSessionRepository

logger = logging.getLogger(__name__)


class InMemoryGameSessionRepository(IGameSessionRepository):
    """
    Keeps the live game in process memory.

    Sessions are never persisted: a restart or a new process starts over.
    """

    def __init__(self):
        self._state: Optional[GameState] = None

    def load(self) -> Optional[GameState]:
        return self._state

    def save(self, state: GameState) -> None:
        self._state = state
        logger.debug(f"Saved game state: day {state.day}, {state.location}, ${state.cash}")

    def clear(self) -> None:
        self._state = None
