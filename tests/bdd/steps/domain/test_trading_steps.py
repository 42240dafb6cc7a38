"""Step definitions for trade execution"""
import random

from pytest_bdd import scenarios, when, parsers

from addiction_network.domain.commodity import COMMODITY_NAMES
from addiction_network.domain.engine import buy, sell
from addiction_network.domain.exceptions import DomainException, InsufficientCashError, InventoryLimitError

scenarios('../../features/domain/trading.feature')


def _trade(context, operation, quantity, commodity):
    context['before'] = context['state']
    try:
        context['state'] = operation(context['state'], commodity, quantity)
    except DomainException as e:
        context['error'] = e


@when(parsers.parse('I buy {quantity:d} "{commodity}"'))
def buy_units(context, quantity, commodity):
    _trade(context, buy, quantity, commodity)


@when(parsers.parse('I sell {quantity:d} "{commodity}"'))
def sell_units(context, quantity, commodity):
    _trade(context, sell, quantity, commodity)


def test_capacity_holds_after_any_sequence_of_buys(make_state):
    """Random buys never push the stash past capacity"""
    rng = random.Random(2024)
    state = make_state(cash=10_000_000)
    for _ in range(500):
        commodity = rng.choice(COMMODITY_NAMES)
        try:
            state = buy(state, commodity, rng.randint(1, 40))
        except (InventoryLimitError, InsufficientCashError):
            pass
        assert state.total_units <= state.inventory_capacity
    assert state.total_units > 60
