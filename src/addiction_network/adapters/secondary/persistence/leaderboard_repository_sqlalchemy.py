"""SQLAlchemy-based local leaderboard.

Implements the leaderboard port against a local database so the game
keeps a score table when no remote store is configured.
"""

import logging
from datetime import datetime, timezone
from typing import List

from sqlalchemy import insert, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from ....domain.exceptions import LeaderboardSubmissionError, LeaderboardUnavailableError
from ....domain.leaderboard import ScoreEntry
from ....ports.outbound.leaderboard import ILeaderboardClient
from .models import leaderboard

logger = logging.getLogger(__name__)


class LeaderboardRepositorySQLAlchemy(ILeaderboardClient):
    """SQLAlchemy implementation of the leaderboard port"""

    def __init__(self, engine: Engine):
        self._engine = engine

    def fetch_top_scores(self, limit: int = 10) -> List[ScoreEntry]:
        """Best scores first; ties keep submission order"""
        stmt = (
            select(leaderboard)
            .order_by(leaderboard.c.score.desc(), leaderboard.c.id)
            .limit(limit)
        )
        try:
            with self._engine.connect() as conn:
                rows = conn.execute(stmt).fetchall()
        except SQLAlchemyError as e:
            logger.error(f"Failed to read leaderboard: {e}")
            raise LeaderboardUnavailableError(str(e)) from e

        return [
            ScoreEntry(
                name=row._mapping['name'],
                score=row._mapping['score'],
                created_at=row._mapping['created_at']
            )
            for row in rows
        ]

    def submit_score(self, name: str, score: int) -> ScoreEntry:
        entry = ScoreEntry(name=name, score=score, created_at=datetime.now(timezone.utc))
        try:
            with self._engine.begin() as conn:
                conn.execute(
                    insert(leaderboard).values(
                        name=entry.name,
                        score=entry.score,
                        created_at=entry.created_at
                    )
                )
        except SQLAlchemyError as e:
            logger.error(f"Failed to store score for {name}: {e}")
            raise LeaderboardSubmissionError(str(e)) from e

        logger.debug(f"Stored score {score} for {name}")
        return entry
