"""Get price ranges query"""
from dataclasses import dataclass
from typing import Tuple

from ....domain.commodity import CommodityRange, price_ranges_by_min_desc
from ....mediator import Request, RequestHandler


@dataclass(frozen=True)
class GetPriceRangesQuery(Request[Tuple[CommodityRange, ...]]):
    """Query for the commodity price table, most expensive first"""
    pass


class GetPriceRangesHandler(RequestHandler[GetPriceRangesQuery, Tuple[CommodityRange, ...]]):
    """Handler for GetPriceRangesQuery"""

    async def handle(self, request: GetPriceRangesQuery) -> Tuple[CommodityRange, ...]:
        return price_ranges_by_min_desc()
