"""Buy commodity command"""
from dataclasses import dataclass

from ....domain.engine import buy
from ....domain.game_state import GameState
from ....mediator import Request, RequestHandler
from ....ports.outbound.game_repository import IGameSessionRepository
from ._session import load_current_game


@dataclass(frozen=True)
class BuyCommodityCommand(Request[GameState]):
    """Command to buy units of a commodity at the current market"""
    commodity: str
    quantity: int


class BuyCommodityHandler(RequestHandler[BuyCommodityCommand, GameState]):
    """Handler for BuyCommodityCommand"""

    def __init__(self, game_repository: IGameSessionRepository):
        self._game_repo = game_repository

    async def handle(self, request: BuyCommodityCommand) -> GameState:
        """
        Execute the purchase.

        Returns:
            Updated game state

        Raises:
            InventoryLimitError: If capacity would be exceeded
            InsufficientCashError: If the player can't pay
            InvalidQuantityError: If quantity < 1
        """
        state = load_current_game(self._game_repo)
        state = buy(state, request.commodity, request.quantity)
        self._game_repo.save(state)
        return state
