"""Shared session lookup for game handlers"""
from ....domain.exceptions import GameNotStartedError
from ....domain.game_state import GameState
from ....ports.outbound.game_repository import IGameSessionRepository


def load_current_game(game_repository: IGameSessionRepository) -> GameState:
    """
    Load the live game.

    Raises:
        GameNotStartedError: If no game is in progress
    """
    state = game_repository.load()
    if state is None:
        raise GameNotStartedError("No game in progress, start one first")
    return state
