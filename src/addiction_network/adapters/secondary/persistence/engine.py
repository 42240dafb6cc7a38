"""SQLAlchemy engine factory for the local leaderboard database.

Backend selection:
- DATABASE_URL set (postgresql://...) -> PostgreSQL
- db_path=":memory:" -> SQLite in-memory (tests)
- otherwise -> SQLite file (ADDICTION_NETWORK_DB_PATH or var/addiction_network.db)
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

from sqlalchemy import Engine, create_engine
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = Path("var/addiction_network.db")


def create_engine_from_config(db_path: Optional[Union[str, Path]] = None) -> Engine:
    """
    Create SQLAlchemy engine from configuration.

    Args:
        db_path: Optional explicit database path; ":memory:" for tests.
                 None falls back to the environment, then the default path.

    Returns:
        Configured SQLAlchemy Engine instance
    """
    database_url = os.environ.get("DATABASE_URL")

    if database_url and database_url.startswith("postgresql://"):
        # Hide credentials
        logger.info(f"Creating PostgreSQL engine: {database_url.split('@')[-1]}")
        return create_engine(database_url, pool_pre_ping=True)

    if str(db_path) == ":memory:":
        # StaticPool keeps one connection, otherwise each connection gets an empty database
        logger.info("Creating SQLite in-memory engine (testing mode)")
        return create_engine(
            "sqlite:///:memory:",
            connect_args={'check_same_thread': False},
            poolclass=StaticPool,
        )

    if db_path is not None:
        sqlite_path = Path(db_path)
    else:
        env_path = os.environ.get("ADDICTION_NETWORK_DB_PATH")
        sqlite_path = Path(env_path) if env_path and env_path != ":memory:" else DEFAULT_DB_PATH

    sqlite_path.parent.mkdir(parents=True, exist_ok=True)
    logger.info(f"Creating SQLite file engine: {sqlite_path}")
    return create_engine(
        f"sqlite:///{sqlite_path}",
        connect_args={'check_same_thread': False},
    )
