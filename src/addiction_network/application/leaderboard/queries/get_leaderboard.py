"""Get leaderboard query"""
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from ....domain.exceptions import LeaderboardUnavailableError
from ....domain.leaderboard import ScoreEntry
from ....mediator import Request, RequestHandler
from ....ports.outbound.leaderboard import ILeaderboardClient

logger = logging.getLogger(__name__)

LEADERBOARD_UNAVAILABLE_MESSAGE = "Failed to load leaderboard. Please try again later."


@dataclass(frozen=True)
class LeaderboardResult:
    """
    Leaderboard snapshot for display.

    When the store is unreachable, entries is empty and error holds a
    message for the player.
    """
    entries: Tuple[ScoreEntry, ...] = ()
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class GetLeaderboardQuery(Request[LeaderboardResult]):
    """Query for the top scores"""
    limit: int = 10

    def validate(self) -> None:
        if self.limit < 1:
            raise ValueError("limit must be at least 1")


class GetLeaderboardHandler(RequestHandler[GetLeaderboardQuery, LeaderboardResult]):
    """Handler for GetLeaderboardQuery - never raises on store failures"""

    def __init__(self, leaderboard_client: ILeaderboardClient):
        self._leaderboard = leaderboard_client

    async def handle(self, request: GetLeaderboardQuery) -> LeaderboardResult:
        try:
            entries = self._leaderboard.fetch_top_scores(limit=request.limit)
        except LeaderboardUnavailableError as e:
            logger.warning(f"Leaderboard unavailable: {e}")
            return LeaderboardResult(error=LEADERBOARD_UNAVAILABLE_MESSAGE)
        return LeaderboardResult(entries=tuple(entries))
