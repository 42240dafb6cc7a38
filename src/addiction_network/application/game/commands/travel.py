"""Travel command"""
import random
from dataclasses import dataclass

from ....domain.engine import TravelOutcome, apply_travel
from ....mediator import Request, RequestHandler
from ....ports.outbound.game_repository import IGameSessionRepository
from ._session import load_current_game


@dataclass(frozen=True)
class TravelCommand(Request[TravelOutcome]):
    """
    Command to travel to another city, advancing one day.

    Travelling re-quotes every price, consumes a matching price tip and
    may fire a random event.
    """
    destination: str


class TravelHandler(RequestHandler[TravelCommand, TravelOutcome]):
    """Handler for TravelCommand"""

    def __init__(self, game_repository: IGameSessionRepository, rng: random.Random):
        self._game_repo = game_repository
        self._rng = rng

    async def handle(self, request: TravelCommand) -> TravelOutcome:
        """
        Advance the game one turn.

        Raises:
            GameNotStartedError: If no game is in progress
            InvalidDestinationError: If destination is unknown or current
            GameOverError: If the game already ended
            PendingOfferError: If an upgrade offer awaits an answer
        """
        state = load_current_game(self._game_repo)
        outcome = apply_travel(state, request.destination, self._rng)
        self._game_repo.save(outcome.state)
        return outcome
