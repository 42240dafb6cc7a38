"""
Price generation.

Two price models exist and they are NOT interchangeable:

- UNIFORM: every integer in [min, max] is equally likely.
- BIASED: the uniform draw is bent through an S-curve so that prices
  cluster near both ends of the range. This is the default model.
"""
import random
from enum import Enum
from typing import Tuple

from .commodity import COMMODITY_RANGES, Commodity, CommodityRange


class PriceModel(Enum):
    """Distribution used to quote commodity prices"""
    UNIFORM = "uniform"
    BIASED = "biased"

    def shape(self, r: float) -> float:
        """
        Map a uniform draw r in [0, 1) onto [0, 1).

        The biased curve squares the distance to the nearest edge, which
        pushes mass towards 0 and 1.
        """
        if self is PriceModel.UNIFORM:
            return r
        if r < 0.5:
            return r ** 2
        return 1 - (1 - r) ** 2

    @classmethod
    def from_name(cls, name: str) -> "PriceModel":
        try:
            return cls(name.lower())
        except ValueError:
            valid = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown price model '{name}' (expected one of: {valid})") from None


DEFAULT_PRICE_MODEL = PriceModel.BIASED


def generate_price(
    min_price: int,
    max_price: int,
    rng: random.Random,
    model: PriceModel = DEFAULT_PRICE_MODEL
) -> int:
    """
    Quote a price in [min_price, max_price], both inclusive.

    Args:
        min_price: Lower bound
        max_price: Upper bound
        rng: Random source
        model: Price distribution

    Returns:
        Integer price
    """
    span = max_price - min_price + 1
    price = int(model.shape(rng.random()) * span) + min_price
    # float rounding at r -> 1 must never leak past the upper bound
    return min(price, max_price)


def generate_commodity_price(
    price_range: CommodityRange,
    rng: random.Random,
    model: PriceModel = DEFAULT_PRICE_MODEL
) -> Commodity:
    return Commodity(
        name=price_range.name,
        price=generate_price(price_range.min, price_range.max, rng, model)
    )


def generate_all_prices(
    rng: random.Random,
    model: PriceModel = DEFAULT_PRICE_MODEL
) -> Tuple[Commodity, ...]:
    """Fresh price set with one independent draw per commodity"""
    return tuple(generate_commodity_price(r, rng, model) for r in COMMODITY_RANGES)
