"""Sell commodity command"""
from dataclasses import dataclass

from ....domain.engine import sell
from ....domain.game_state import GameState
from ....mediator import Request, RequestHandler
from ....ports.outbound.game_repository import IGameSessionRepository
from ._session import load_current_game


@dataclass(frozen=True)
class SellCommodityCommand(Request[GameState]):
    """Command to sell units of a commodity at the current market"""
    commodity: str
    quantity: int


class SellCommodityHandler(RequestHandler[SellCommodityCommand, GameState]):
    """Handler for SellCommodityCommand"""

    def __init__(self, game_repository: IGameSessionRepository):
        self._game_repo = game_repository

    async def handle(self, request: SellCommodityCommand) -> GameState:
        state = load_current_game(self._game_repo)
        state = sell(state, request.commodity, request.quantity)
        self._game_repo.save(state)
        return state
