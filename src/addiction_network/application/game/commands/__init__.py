"""Game command handlers for CQRS pattern"""
from .start_game import StartGameCommand, StartGameHandler
from .travel import TravelCommand, TravelHandler
from .buy_commodity import BuyCommodityCommand, BuyCommodityHandler
from .sell_commodity import SellCommodityCommand, SellCommodityHandler
from .respond_to_upgrade import RespondToUpgradeOfferCommand, RespondToUpgradeOfferHandler

__all__ = [
    'StartGameCommand',
    'StartGameHandler',
    'TravelCommand',
    'TravelHandler',
    'BuyCommodityCommand',
    'BuyCommodityHandler',
    'SellCommodityCommand',
    'SellCommodityHandler',
    'RespondToUpgradeOfferCommand',
    'RespondToUpgradeOfferHandler',
]
