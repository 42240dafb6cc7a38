"""Get game state query"""
from dataclasses import dataclass

from ....domain.game_state import GameState
from ....mediator import Request, RequestHandler
from ....ports.outbound.game_repository import IGameSessionRepository
from ..commands._session import load_current_game


@dataclass(frozen=True)
class GetGameStateQuery(Request[GameState]):
    """Query for the live game"""
    pass


class GetGameStateHandler(RequestHandler[GetGameStateQuery, GameState]):
    """Handler for GetGameStateQuery"""

    def __init__(self, game_repository: IGameSessionRepository):
        self._game_repo = game_repository

    async def handle(self, request: GetGameStateQuery) -> GameState:
        return load_current_game(self._game_repo)
