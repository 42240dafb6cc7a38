"""Leaderboard port interface"""
from abc import ABC, abstractmethod
from typing import List

from ...domain.leaderboard import ScoreEntry


class ILeaderboardClient(ABC):
    """Port for the score store shared by all players"""

    @abstractmethod
    def fetch_top_scores(self, limit: int = 10) -> List[ScoreEntry]:
        """
        Get the best scores.

        Args:
            limit: Maximum number of entries

        Returns:
            Entries ordered by score, highest first

        Raises:
            LeaderboardUnavailableError: If the store can't be reached
        """
        pass

    @abstractmethod
    def submit_score(self, name: str, score: int) -> ScoreEntry:
        """
        Append a final score.

        Args:
            name: Player name
            score: Final cash

        Returns:
            The stored entry

        Raises:
            LeaderboardSubmissionError: If the store rejects or can't be reached
        """
        pass
