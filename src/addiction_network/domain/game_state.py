"""Game state value object and game rules"""
from dataclasses import dataclass, field, replace
from typing import Dict, Optional, Tuple

from .commodity import COMMODITY_NAMES, LOCATIONS, Commodity, get_range
from .exceptions import UnknownCommodityError
from .overrides import HighPriceTip, LowPriceTip, UpgradeOffer
from .pricing import DEFAULT_PRICE_MODEL, PriceModel

STARTING_CASH = 2500
STARTING_LOCATION = LOCATIONS[0]
MAX_DAYS = 30
BASE_CAPACITY = 100
UPGRADE_CAPACITY = 50
MAX_UPGRADES = 3


def empty_inventory() -> Dict[str, int]:
    return {name: 0 for name in COMMODITY_NAMES}


@dataclass(frozen=True)
class GameState:
    """
    Complete state of one game session.

    Immutable: every transition returns a new GameState. The inventory
    dict is never mutated in place; transitions copy it.

    Invariants:
    - total units held never exceed inventory_capacity after a purchase
    - cash is clamped at 0 by penalties (purchases are checked up front)
    - once game_over is set, no transition changes cash or day
    """
    cash: int
    day: int
    location: str
    prices: Tuple[Commodity, ...]
    inventory: Dict[str, int] = field(default_factory=empty_inventory)
    inventory_capacity: int = BASE_CAPACITY
    upgrade_count: int = 0
    high_tip: Optional[HighPriceTip] = None
    low_tip: Optional[LowPriceTip] = None
    pending_offer: Optional[UpgradeOffer] = None
    game_over: bool = False
    price_model: PriceModel = DEFAULT_PRICE_MODEL

    def __post_init__(self):
        if self.location not in LOCATIONS:
            raise ValueError(f"Unknown location: {self.location}")
        if not 1 <= self.day <= MAX_DAYS:
            raise ValueError(f"day {self.day} outside 1..{MAX_DAYS}")
        if any(units < 0 for units in self.inventory.values()):
            raise ValueError("inventory units cannot be negative")

    @property
    def score(self) -> int:
        """Final score is whatever cash the player ends with"""
        return self.cash

    @property
    def total_units(self) -> int:
        return sum(self.inventory.values())

    @property
    def free_capacity(self) -> int:
        return self.inventory_capacity - self.total_units

    @property
    def days_left(self) -> int:
        return MAX_DAYS - self.day

    @property
    def can_be_offered_upgrade(self) -> bool:
        return self.upgrade_count < MAX_UPGRADES

    def units_of(self, commodity: str) -> int:
        get_range(commodity)
        return self.inventory.get(commodity, 0)

    def price_of(self, commodity: str) -> int:
        for quote in self.prices:
            if quote.name == commodity:
                return quote.price
        raise UnknownCommodityError(f"Unknown commodity: {commodity}")

    def with_price(self, commodity: str, price: int) -> "GameState":
        """Copy of the state with one commodity re-quoted"""
        self.price_of(commodity)
        prices = tuple(
            Commodity(q.name, price) if q.name == commodity else q
            for q in self.prices
        )
        return replace(self, prices=prices)

    def with_units(self, commodity: str, units: int) -> "GameState":
        """Copy of the state holding `units` of one commodity"""
        get_range(commodity)
        inventory = dict(self.inventory)
        inventory[commodity] = units
        return replace(self, inventory=inventory)
