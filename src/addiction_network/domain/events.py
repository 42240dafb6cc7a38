"""
Random market events.

Selecting an event and applying it are separate steps. select_event()
resolves every random draw into a MarketEvent value; apply_event() is a
deterministic transition, so any event can be replayed against any state.
"""
import logging
import random
from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Optional

from .commodity import COMMODITY_NAMES, LOCATIONS, get_range
from .game_state import MAX_DAYS, UPGRADE_CAPACITY, GameState
from .overrides import HighPriceTip, LowPriceTip, UpgradeOffer

logger = logging.getLogger(__name__)

EVENT_PROBABILITY = 0.3
CRACKDOWN_MAX_UNITS = 5
CASH_PENALTY_MAX = 300
UPGRADE_PRICE_MIN = 250
UPGRADE_PRICE_MAX = 800


class EventKind(Enum):
    """Kinds of random events, with their message templates"""
    GOVERNMENT_CRACKDOWN = "Government Crackdown! You lost some stash."
    ADDICT_OVERDOSE = "Addict Overdose! You lost some cash."
    TECH_GLITCH = "Tech Glitch! You lost some cash."
    CRAZY_LOW_RATES = "{commodity} is selling at crazy low rates!"
    HIGH_DEMAND_TIP = "Addicts in {location} will pay anything for {commodity}!"
    CHEAP_STASH_TIP = "Go to {location} for cheap {commodity}. Limited stash!"
    INVENTORY_UPGRADE = "Inventory upgrade available! Pay ${amount} to carry {extra} more units."


@dataclass(frozen=True)
class MarketEvent:
    """
    A fully resolved random event.

    Which fields are set depends on the kind:
    - GOVERNMENT_CRACKDOWN: commodity, amount (units lost)
    - ADDICT_OVERDOSE / TECH_GLITCH: amount (cash lost)
    - CRAZY_LOW_RATES: commodity
    - HIGH_DEMAND_TIP / CHEAP_STASH_TIP: commodity, location
    - INVENTORY_UPGRADE: amount (offer price)
    """
    kind: EventKind
    commodity: Optional[str] = None
    location: Optional[str] = None
    amount: Optional[int] = None

    @property
    def message(self) -> str:
        return self.kind.value.format(
            commodity=self.commodity,
            location=self.location,
            amount=self.amount,
            extra=UPGRADE_CAPACITY,
        )


def eligible_events(state: GameState) -> List[EventKind]:
    """
    Event pool for the state the player just arrived in.

    The upgrade offer is only made while upgrades remain and the game
    continues past this turn.
    """
    pool = [kind for kind in EventKind if kind is not EventKind.INVENTORY_UPGRADE]
    if state.can_be_offered_upgrade and state.day < MAX_DAYS:
        pool.append(EventKind.INVENTORY_UPGRADE)
    return pool


def select_event(state: GameState, rng: random.Random) -> MarketEvent:
    """Pick one event uniformly from the eligible pool and resolve its draws"""
    kind = rng.choice(eligible_events(state))

    if kind is EventKind.GOVERNMENT_CRACKDOWN:
        return MarketEvent(
            kind=kind,
            commodity=rng.choice(COMMODITY_NAMES),
            amount=rng.randint(1, CRACKDOWN_MAX_UNITS)
        )
    if kind in (EventKind.ADDICT_OVERDOSE, EventKind.TECH_GLITCH):
        return MarketEvent(kind=kind, amount=rng.randint(1, CASH_PENALTY_MAX))
    if kind is EventKind.CRAZY_LOW_RATES:
        return MarketEvent(kind=kind, commodity=rng.choice(COMMODITY_NAMES))
    if kind in (EventKind.HIGH_DEMAND_TIP, EventKind.CHEAP_STASH_TIP):
        others = [loc for loc in LOCATIONS if loc != state.location]
        return MarketEvent(
            kind=kind,
            commodity=rng.choice(COMMODITY_NAMES),
            location=rng.choice(others)
        )
    return MarketEvent(
        kind=kind,
        amount=rng.randint(UPGRADE_PRICE_MIN, UPGRADE_PRICE_MAX)
    )


def roll_event(state: GameState, rng: random.Random) -> Optional[MarketEvent]:
    """Fire an event with EVENT_PROBABILITY, otherwise return None"""
    if rng.random() >= EVENT_PROBABILITY:
        return None
    return select_event(state, rng)


def apply_event(state: GameState, event: MarketEvent) -> GameState:
    """
    Apply an event's side effect.

    Args:
        state: State to transform
        event: Resolved event

    Returns:
        New state with the effect applied
    """
    kind = event.kind
    logger.debug(f"Applying {kind.name} on day {state.day}: {event}")

    if kind is EventKind.GOVERNMENT_CRACKDOWN:
        remaining = max(0, state.units_of(event.commodity) - event.amount)
        return state.with_units(event.commodity, remaining)

    if kind in (EventKind.ADDICT_OVERDOSE, EventKind.TECH_GLITCH):
        return replace(state, cash=max(0, state.cash - event.amount))

    if kind is EventKind.CRAZY_LOW_RATES:
        return state.with_price(event.commodity, get_range(event.commodity).low_price)

    if kind is EventKind.HIGH_DEMAND_TIP:
        return replace(state, high_tip=HighPriceTip(event.commodity, event.location))

    if kind is EventKind.CHEAP_STASH_TIP:
        return replace(state, low_tip=LowPriceTip(event.commodity, event.location))

    offer = UpgradeOffer(price=event.amount, extra_capacity=UPGRADE_CAPACITY)
    return replace(state, pending_offer=offer)
