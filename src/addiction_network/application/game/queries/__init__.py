"""Game query handlers"""
from .get_game_state import GetGameStateQuery, GetGameStateHandler
from .get_price_ranges import GetPriceRangesQuery, GetPriceRangesHandler

__all__ = [
    'GetGameStateQuery',
    'GetGameStateHandler',
    'GetPriceRangesQuery',
    'GetPriceRangesHandler',
]
