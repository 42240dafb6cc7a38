"""Commodity catalogue: fixed price ranges and travel destinations"""
from dataclasses import dataclass
from typing import Dict, Tuple

from .exceptions import UnknownCommodityError


@dataclass(frozen=True)
class CommodityRange:
    """
    Static price bounds for one commodity.

    Both bounds are inclusive. The table is fixed for the whole game.
    """
    name: str
    min: int
    max: int

    def __post_init__(self):
        if self.min < 0:
            raise ValueError("min price cannot be negative")
        if self.max < self.min:
            raise ValueError(f"max price {self.max} is below min price {self.min}")

    @property
    def high_price(self) -> int:
        """Price forced by a high-demand tip (150% of max)"""
        return self.max * 3 // 2

    @property
    def low_price(self) -> int:
        """Price forced by a cheap-stash tip or a crash (half of min, floored)"""
        return self.min // 2


@dataclass(frozen=True)
class Commodity:
    """A commodity quoted at a market for the current day"""
    name: str
    price: int

    def __post_init__(self):
        if self.price < 0:
            raise ValueError("price cannot be negative")


COMMODITY_RANGES: Tuple[CommodityRange, ...] = (
    CommodityRange("Lust Forge", 300, 800),
    CommodityRange("Euphoria Hit", 150, 650),
    CommodityRange("Rage X", 10, 150),
    CommodityRange("Trauma Flush", 400, 1500),
    CommodityRange("Scent Heaven", 600, 2000),
    CommodityRange("Life Loop", 1500, 6000),
)

COMMODITY_NAMES: Tuple[str, ...] = tuple(r.name for r in COMMODITY_RANGES)

LOCATIONS: Tuple[str, ...] = (
    "Bangalore",
    "New York",
    "Bangkok",
    "Singapore",
    "San Francisco",
)

_RANGES_BY_NAME: Dict[str, CommodityRange] = {r.name: r for r in COMMODITY_RANGES}


def get_range(name: str) -> CommodityRange:
    """
    Look up the price range of a commodity.

    Raises:
        UnknownCommodityError: If the name is not in the catalogue
    """
    try:
        return _RANGES_BY_NAME[name]
    except KeyError:
        raise UnknownCommodityError(f"Unknown commodity: {name}") from None


def price_ranges_by_min_desc() -> Tuple[CommodityRange, ...]:
    """Range table ordered by minimum price, most expensive first"""
    return tuple(sorted(COMMODITY_RANGES, key=lambda r: r.min, reverse=True))
