"""Persistence adapters"""
from .engine import create_engine_from_config
from .game_session_repository import InMemoryGameSessionRepository
from .leaderboard_repository_sqlalchemy import LeaderboardRepositorySQLAlchemy

__all__ = [
    'create_engine_from_config',
    'InMemoryGameSessionRepository',
    'LeaderboardRepositorySQLAlchemy',
]
