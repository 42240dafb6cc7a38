"""Respond to inventory upgrade offer command"""
from dataclasses import dataclass

from ....domain.engine import accept_upgrade, decline_upgrade
from ....domain.game_state import GameState
from ....mediator import Request, RequestHandler
from ....ports.outbound.game_repository import IGameSessionRepository
from ._session import load_current_game


@dataclass(frozen=True)
class RespondToUpgradeOfferCommand(Request[GameState]):
    """Command to accept or decline the pending inventory upgrade"""
    accept: bool


class RespondToUpgradeOfferHandler(RequestHandler[RespondToUpgradeOfferCommand, GameState]):
    """Handler for RespondToUpgradeOfferCommand"""

    def __init__(self, game_repository: IGameSessionRepository):
        self._game_repo = game_repository

    async def handle(self, request: RespondToUpgradeOfferCommand) -> GameState:
        """
        Resolve the offer.

        Raises:
            NoPendingOfferError: If there is no offer
            InsufficientCashError: If accepting an unaffordable offer
        """
        state = load_current_game(self._game_repo)
        state = accept_upgrade(state) if request.accept else decline_upgrade(state)
        self._game_repo.save(state)
        return state
