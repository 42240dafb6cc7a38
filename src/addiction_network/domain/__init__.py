"""Market engine domain - prices, events, trades and turn advance"""

from .commodity import (
    COMMODITY_NAMES,
    COMMODITY_RANGES,
    LOCATIONS,
    Commodity,
    CommodityRange,
    get_range,
    price_ranges_by_min_desc,
)
from .engine import (
    TravelOutcome,
    accept_upgrade,
    apply_travel,
    buy,
    decline_upgrade,
    new_game,
    sell,
)
from .events import EventKind, MarketEvent, apply_event, select_event
from .game_state import GameState
from .overrides import HighPriceTip, LowPriceTip, UpgradeOffer
from .pricing import PriceModel, generate_all_prices, generate_price

__all__ = [
    'COMMODITY_NAMES',
    'COMMODITY_RANGES',
    'LOCATIONS',
    'Commodity',
    'CommodityRange',
    'get_range',
    'price_ranges_by_min_desc',
    'TravelOutcome',
    'accept_upgrade',
    'apply_travel',
    'buy',
    'decline_upgrade',
    'new_game',
    'sell',
    'EventKind',
    'MarketEvent',
    'apply_event',
    'select_event',
    'GameState',
    'HighPriceTip',
    'LowPriceTip',
    'UpgradeOffer',
    'PriceModel',
    'generate_all_prices',
    'generate_price',
]
