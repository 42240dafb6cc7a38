"""Leaderboard query handlers"""
from .get_leaderboard import GetLeaderboardQuery, GetLeaderboardHandler, LeaderboardResult

__all__ = ['GetLeaderboardQuery', 'GetLeaderboardHandler', 'LeaderboardResult']
