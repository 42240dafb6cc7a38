"""SQLAlchemy table definitions for the local leaderboard.

Tables are defined with SQLAlchemy Core (NOT ORM).
"""

from datetime import datetime, timezone

from sqlalchemy import (
    Column,
    DateTime,
    Index,
    Integer,
    MetaData,
    String,
    Table,
)

metadata = MetaData()

leaderboard = Table(
    'leaderboard',
    metadata,
    Column('id', Integer, primary_key=True, autoincrement=True),
    Column('name', String, nullable=False),
    Column('score', Integer, nullable=False),
    Column('created_at', DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc)),
)

# Top-N reads sort by score
Index('idx_leaderboard_score', leaderboard.c.score)
