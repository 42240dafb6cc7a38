"""
Market engine: the turn-advance state machine and trade execution.

All functions are transitions of the form f(state, ...) -> state'. They
validate before building the new state, so a failed call never leaves a
partially applied change behind.
"""
import logging
import random
from dataclasses import dataclass, replace
from typing import Optional

from .commodity import LOCATIONS, get_range
from .events import MarketEvent, apply_event, roll_event
from .exceptions import (
    GameOverError,
    InsufficientCashError,
    InsufficientStashError,
    InvalidDestinationError,
    InvalidQuantityError,
    InventoryLimitError,
    NoPendingOfferError,
    PendingOfferError,
)
from .game_state import MAX_DAYS, STARTING_CASH, STARTING_LOCATION, GameState, empty_inventory
from .pricing import DEFAULT_PRICE_MODEL, PriceModel, generate_all_prices

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TravelOutcome:
    """Result of one travel turn"""
    state: GameState
    event: Optional[MarketEvent] = None

    @property
    def message(self) -> Optional[str]:
        return self.event.message if self.event else None


def new_game(rng: random.Random, price_model: PriceModel = DEFAULT_PRICE_MODEL) -> GameState:
    """Start a fresh game on day 1 in the starting city"""
    state = GameState(
        cash=STARTING_CASH,
        day=1,
        location=STARTING_LOCATION,
        prices=generate_all_prices(rng, price_model),
        inventory=empty_inventory(),
        price_model=price_model,
    )
    logger.info(f"New game in {state.location} with ${state.cash} ({price_model.value} prices)")
    return state


def _ensure_playable(state: GameState) -> None:
    if state.game_over:
        raise GameOverError(f"Game is over after day {state.day}")
    if state.pending_offer is not None:
        raise PendingOfferError("Accept or decline the inventory upgrade offer first")


def _validate_quantity(quantity: int) -> None:
    if quantity < 1:
        raise InvalidQuantityError(f"Quantity must be at least 1, got {quantity}")


def resolve_prices(state: GameState, rng: random.Random) -> GameState:
    """
    Quote prices for the market the player just reached.

    A full fresh price set is always drawn. A high-demand tip for this
    location takes precedence over a cheap-stash tip; the matching tip
    forces its commodity's price and is consumed.
    """
    state = replace(state, prices=generate_all_prices(rng, state.price_model))

    if state.high_tip and state.high_tip.applies_to(state.location):
        tip = state.high_tip
        logger.debug(f"High-demand tip hit: {tip.commodity} in {tip.location}")
        return replace(state.with_price(tip.commodity, tip.forced_price()), high_tip=None)

    if state.low_tip and state.low_tip.applies_to(state.location):
        tip = state.low_tip
        logger.debug(f"Cheap-stash tip hit: {tip.commodity} in {tip.location}")
        return replace(state.with_price(tip.commodity, tip.forced_price()), low_tip=None)

    return state


def apply_travel(state: GameState, destination: str, rng: random.Random) -> TravelOutcome:
    """
    Advance one turn by travelling to another city.

    Process:
    1. Move and advance the day
    2. Resolve prices (fresh set plus any pending tip for this city)
    3. Maybe fire one random event
    4. End the game once the last day is reached

    Args:
        state: Current state
        destination: City to travel to
        rng: Random source for prices and events

    Returns:
        TravelOutcome with the new state and the event that fired, if any

    Raises:
        GameOverError: If the game already ended
        PendingOfferError: If an upgrade offer awaits an answer
        InvalidDestinationError: If destination is unknown or the current city
    """
    _ensure_playable(state)
    if destination not in LOCATIONS:
        raise InvalidDestinationError(f"Unknown location: {destination}")
    if destination == state.location:
        raise InvalidDestinationError(f"Already in {destination}")

    moved = replace(state, location=destination, day=min(state.day + 1, MAX_DAYS))
    moved = resolve_prices(moved, rng)

    event = roll_event(moved, rng)
    if event is not None:
        moved = apply_event(moved, event)

    if moved.day >= MAX_DAYS:
        moved = replace(moved, game_over=True)
        logger.info(f"Game over on day {moved.day} with score {moved.score}")

    logger.debug(f"Travelled {state.location} -> {destination}, day {moved.day}")
    return TravelOutcome(state=moved, event=event)


def buy(state: GameState, commodity: str, quantity: int) -> GameState:
    """
    Buy units at the current market price.

    Raises:
        UnknownCommodityError: If commodity is not in the catalogue
        InvalidQuantityError: If quantity < 1
        InventoryLimitError: If the purchase would exceed capacity
        InsufficientCashError: If the player can't afford it
    """
    _ensure_playable(state)
    get_range(commodity)
    _validate_quantity(quantity)

    if state.total_units + quantity > state.inventory_capacity:
        raise InventoryLimitError(
            f"Inventory limit reached: {state.total_units}/{state.inventory_capacity} "
            f"units held, can't add {quantity}"
        )

    cost = state.price_of(commodity) * quantity
    if state.cash < cost:
        raise InsufficientCashError(f"Not enough cash: need ${cost}, have ${state.cash}")

    bought = state.with_units(commodity, state.units_of(commodity) + quantity)
    return replace(bought, cash=state.cash - cost)


def sell(state: GameState, commodity: str, quantity: int) -> GameState:
    """
    Sell units at the current market price.

    Raises:
        UnknownCommodityError: If commodity is not in the catalogue
        InvalidQuantityError: If quantity < 1
        InsufficientStashError: If the player holds fewer units
    """
    _ensure_playable(state)
    get_range(commodity)
    _validate_quantity(quantity)

    held = state.units_of(commodity)
    if held < quantity:
        raise InsufficientStashError(f"Not enough stash: have {held} {commodity}, tried to sell {quantity}")

    sold = state.with_units(commodity, held - quantity)
    return replace(sold, cash=state.cash + state.price_of(commodity) * quantity)


def accept_upgrade(state: GameState) -> GameState:
    """
    Pay for the pending upgrade offer and grow inventory capacity.

    Raises:
        NoPendingOfferError: If no offer is pending
        InsufficientCashError: If the offer is unaffordable (offer stays open)
    """
    offer = state.pending_offer
    if offer is None:
        raise NoPendingOfferError("There is no upgrade offer to accept")
    if state.cash < offer.price:
        raise InsufficientCashError(f"Not enough cash: upgrade costs ${offer.price}, have ${state.cash}")

    logger.info(f"Upgrade accepted: +{offer.extra_capacity} capacity for ${offer.price}")
    return replace(
        state,
        cash=state.cash - offer.price,
        inventory_capacity=state.inventory_capacity + offer.extra_capacity,
        upgrade_count=state.upgrade_count + 1,
        pending_offer=None,
    )


def decline_upgrade(state: GameState) -> GameState:
    """Drop the pending upgrade offer without changing anything else"""
    if state.pending_offer is None:
        raise NoPendingOfferError("There is no upgrade offer to decline")
    return replace(state, pending_offer=None)
