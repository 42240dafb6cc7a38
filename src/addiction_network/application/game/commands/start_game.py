"""Start game command"""
import logging
import random
from dataclasses import dataclass
from typing import Optional

from ....domain.engine import new_game
from ....domain.game_state import GameState
from ....domain.pricing import DEFAULT_PRICE_MODEL, PriceModel
from ....mediator import Request, RequestHandler
from ....ports.outbound.game_repository import IGameSessionRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StartGameCommand(Request[GameState]):
    """
    Command to start (or restart) a game.

    Any game in progress is discarded.
    """
    price_model: Optional[str] = None

    def validate(self) -> None:
        if self.price_model is not None:
            PriceModel.from_name(self.price_model)


class StartGameHandler(RequestHandler[StartGameCommand, GameState]):
    """Handler for StartGameCommand"""

    def __init__(
        self,
        game_repository: IGameSessionRepository,
        rng: random.Random,
        default_price_model: PriceModel = DEFAULT_PRICE_MODEL
    ):
        self._game_repo = game_repository
        self._rng = rng
        self._default_price_model = default_price_model

    async def handle(self, request: StartGameCommand) -> GameState:
        model = (
            PriceModel.from_name(request.price_model)
            if request.price_model is not None
            else self._default_price_model
        )
        self._game_repo.clear()
        state = new_game(self._rng, model)
        self._game_repo.save(state)
        return state
