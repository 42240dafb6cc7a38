"""Submit score command"""
import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

from ....domain.exceptions import LeaderboardSubmissionError, LeaderboardUnavailableError
from ....domain.leaderboard import ScoreEntry
from ....mediator import Request, RequestHandler
from ....ports.outbound.leaderboard import ILeaderboardClient
from ..queries.get_leaderboard import LEADERBOARD_UNAVAILABLE_MESSAGE, LeaderboardResult

logger = logging.getLogger(__name__)

SUBMISSION_FAILED_MESSAGE = "Failed to submit score. Please try again."
REFRESH_ATTEMPTS = 3
REFRESH_BACKOFF_SECONDS = 0.5


@dataclass(frozen=True)
class SubmitScoreResponse:
    """
    Outcome of a score submission.

    submitted is False when the store rejected the score; error then holds
    a retry prompt. leaderboard is the refreshed top list (possibly empty
    with its own error when the refresh failed).
    """
    submitted: bool
    entry: Optional[ScoreEntry] = None
    error: Optional[str] = None
    leaderboard: LeaderboardResult = LeaderboardResult()


@dataclass(frozen=True)
class SubmitScoreCommand(Request[SubmitScoreResponse]):
    """Command to publish a final score"""
    name: str
    score: int
    limit: int = 10

    def validate(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("name cannot be empty")
        if self.score < 0:
            raise ValueError("score cannot be negative")


class SubmitScoreHandler(RequestHandler[SubmitScoreCommand, SubmitScoreResponse]):
    """
    Handler for SubmitScoreCommand.

    The submission is attempted once. The leaderboard refresh that
    follows a successful submission is retried with a fixed backoff.
    """

    def __init__(
        self,
        leaderboard_client: ILeaderboardClient,
        refresh_attempts: int = REFRESH_ATTEMPTS,
        refresh_backoff: float = REFRESH_BACKOFF_SECONDS
    ):
        self._leaderboard = leaderboard_client
        self._refresh_attempts = refresh_attempts
        self._refresh_backoff = refresh_backoff

    async def handle(self, request: SubmitScoreCommand) -> SubmitScoreResponse:
        name = request.name.strip()
        try:
            entry = self._leaderboard.submit_score(name, request.score)
        except LeaderboardSubmissionError as e:
            logger.error(f"Score submission for {name} failed: {e}")
            return SubmitScoreResponse(submitted=False, error=SUBMISSION_FAILED_MESSAGE)

        logger.info(f"Submitted score {request.score} for {name}")
        leaderboard = await self._refresh(request.limit)
        return SubmitScoreResponse(submitted=True, entry=entry, leaderboard=leaderboard)

    async def _refresh(self, limit: int) -> LeaderboardResult:
        for attempt in range(1, self._refresh_attempts + 1):
            try:
                entries = self._leaderboard.fetch_top_scores(limit=limit)
                return LeaderboardResult(entries=tuple(entries))
            except LeaderboardUnavailableError as e:
                logger.warning(
                    f"Leaderboard refresh attempt {attempt}/{self._refresh_attempts} failed: {e}"
                )
                if attempt < self._refresh_attempts:
                    await asyncio.sleep(self._refresh_backoff)

        return LeaderboardResult(error=LEADERBOARD_UNAVAILABLE_MESSAGE)
