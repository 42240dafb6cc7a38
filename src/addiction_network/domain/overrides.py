"""Pending tips and offers registered by market events"""
from dataclasses import dataclass
from typing import Union

from .commodity import CommodityRange, get_range


@dataclass(frozen=True)
class HighPriceTip:
    """Next arrival at `location` quotes `commodity` at 150% of its max"""
    commodity: str
    location: str

    def forced_price(self) -> int:
        return get_range(self.commodity).high_price

    def applies_to(self, location: str) -> bool:
        return self.location == location


@dataclass(frozen=True)
class LowPriceTip:
    """Next arrival at `location` quotes `commodity` at half its min"""
    commodity: str
    location: str

    def forced_price(self) -> int:
        return get_range(self.commodity).low_price

    def applies_to(self, location: str) -> bool:
        return self.location == location


PriceTip = Union[HighPriceTip, LowPriceTip]


@dataclass(frozen=True)
class UpgradeOffer:
    """One-shot proposal to buy extra inventory capacity"""
    price: int
    extra_capacity: int

    def __post_init__(self):
        if self.price < 0:
            raise ValueError("offer price cannot be negative")
        if self.extra_capacity <= 0:
            raise ValueError("extra capacity must be positive")
