"""Port interfaces for dependency inversion"""
from .outbound.game_repository import IGameSessionRepository
from .outbound.leaderboard import ILeaderboardClient

__all__ = ['IGameSessionRepository', 'ILeaderboardClient']
