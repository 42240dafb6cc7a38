"""Leaderboard command handlers"""
from .submit_score import SubmitScoreCommand, SubmitScoreHandler, SubmitScoreResponse

__all__ = ['SubmitScoreCommand', 'SubmitScoreHandler', 'SubmitScoreResponse']
