"""
Fixtures and shared steps for market engine BDD tests.

Games start from a known state: every commodity quoted at its minimum
price, 2500 cash, day 1 in Bangalore.
"""
from dataclasses import replace

import pytest
from pytest_bdd import given, then, parsers

from addiction_network.domain import exceptions
from addiction_network.domain.commodity import COMMODITY_RANGES, Commodity
from addiction_network.domain.game_state import GameState, empty_inventory
from addiction_network.domain.overrides import HighPriceTip, LowPriceTip, UpgradeOffer


def known_state(**overrides) -> GameState:
    values = dict(
        cash=2500,
        day=1,
        location="Bangalore",
        prices=tuple(Commodity(r.name, r.min) for r in COMMODITY_RANGES),
        inventory=empty_inventory(),
    )
    values.update(overrides)
    return GameState(**values)


@pytest.fixture
def make_state():
    return known_state


@given('a new game')
def new_known_game(context):
    context['state'] = known_state()


@given(parsers.parse('a game on day {day:d} in "{location}"'))
def game_on_day(context, day, location):
    context['state'] = known_state(day=day, location=location)


@given(parsers.parse('the player has {cash:d} cash'))
def player_cash(context, cash):
    context['state'] = replace(context['state'], cash=cash)


@given(parsers.parse('"{commodity}" is priced at {price:d}'))
def commodity_price(context, commodity, price):
    context['state'] = context['state'].with_price(commodity, price)


@given(parsers.parse('the player holds {units:d} "{commodity}"'))
def player_holds(context, units, commodity):
    context['state'] = context['state'].with_units(commodity, units)


@given(parsers.parse('the inventory capacity is {capacity:d}'))
def inventory_capacity(context, capacity):
    context['state'] = replace(context['state'], inventory_capacity=capacity)


@given(parsers.parse('a high-demand tip for "{commodity}" in "{location}"'))
def high_tip(context, commodity, location):
    context['state'] = replace(context['state'], high_tip=HighPriceTip(commodity, location))


@given(parsers.parse('a cheap-stash tip for "{commodity}" in "{location}"'))
def low_tip(context, commodity, location):
    context['state'] = replace(context['state'], low_tip=LowPriceTip(commodity, location))


@given(parsers.parse('a pending upgrade offer priced at {price:d}'))
def pending_offer(context, price):
    context['state'] = replace(
        context['state'],
        pending_offer=UpgradeOffer(price=price, extra_capacity=50)
    )


@given(parsers.parse('the player has bought {count:d} upgrades'))
def upgrades_bought(context, count):
    state = context['state']
    context['state'] = replace(
        state,
        upgrade_count=count,
        inventory_capacity=state.inventory_capacity + 50 * count
    )


@given('the game is over')
def game_is_over(context):
    context['state'] = replace(context['state'], day=30, game_over=True)


@then(parsers.parse('the player has {cash:d} cash left'))
def cash_left(context, cash):
    assert context['state'].cash == cash


@then(parsers.parse('the player holds {units:d} "{commodity}" now'))
def holds_now(context, units, commodity):
    assert context['state'].units_of(commodity) == units


@then(parsers.parse('the inventory capacity is now {capacity:d}'))
def capacity_now(context, capacity):
    assert context['state'].inventory_capacity == capacity


@then(parsers.parse('"{commodity}" is now priced at {price:d}'))
def priced_now(context, commodity, price):
    assert context['state'].price_of(commodity) == price


@then(parsers.parse('the action fails with {error_name}'))
def action_fails(context, error_name):
    error = context.get('error')
    assert error is not None, "expected the action to fail"
    assert type(error) is getattr(exceptions, error_name)


@then('the game state is unchanged')
def state_unchanged(context):
    assert context['state'] == context['before']


@then(parsers.parse('the error message mentions "{text}"'))
def error_mentions(context, text):
    assert text.lower() in str(context['error']).lower()
