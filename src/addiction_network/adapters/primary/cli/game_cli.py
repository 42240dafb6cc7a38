"""
Game CLI commands.

`play` runs the interactive turn loop; `ranges` prints the price table.
"""
import argparse
from typing import List, Optional, Sequence, Tuple

from ....application.game.commands import (
    BuyCommodityCommand,
    RespondToUpgradeOfferCommand,
    SellCommodityCommand,
    StartGameCommand,
    TravelCommand,
)
from ....application.game.queries import GetPriceRangesQuery
from ....application.leaderboard.commands.submit_score import SubmitScoreCommand
from ....configuration.config import get_config
from ....configuration.container import get_mediator, seed_random
from ....domain.commodity import LOCATIONS, price_ranges_by_min_desc
from ....domain.exceptions import DomainException
from ....domain.game_state import MAX_DAYS, GameState
from ....domain.pricing import PriceModel
from ....mediator import Mediator
from .leaderboard_cli import print_submission

HELP_TEXT = """Commands:
  buy <commodity> <qty>    Buy units (commodity by name or table number)
  sell <commodity> <qty>   Sell units
  travel <city>            Travel to another city (name or number), one day passes
  accept | decline         Answer an inventory upgrade offer
  market                   Show the market again
  help                     Show this help
  quit                     Leave the game"""


class QuitGame(Exception):
    """Raised inside the loop when the player quits"""
    pass


def market_order() -> List[str]:
    """Commodity names in the order the market table lists them"""
    return [r.name for r in price_ranges_by_min_desc()]


def travel_options(state: GameState) -> List[str]:
    return [loc for loc in LOCATIONS if loc != state.location]


def resolve_choice(text: str, numbered: Sequence[str], names: Sequence[str]) -> Optional[str]:
    """
    Resolve player input to one of `names`.

    Accepts a 1-based index into `numbered`, an exact name (any case) or a
    unique name prefix. Returns None when nothing or several names match.
    """
    text = text.strip()
    if not text:
        return None
    if text.isdigit():
        index = int(text) - 1
        return numbered[index] if 0 <= index < len(numbered) else None

    lowered = text.lower()
    for name in names:
        if name.lower() == lowered:
            return name
    matches = [name for name in names if name.lower().startswith(lowered)]
    return matches[0] if len(matches) == 1 else None


def parse_quantity(text: str) -> int:
    """Quantities that aren't whole numbers count as 0"""
    text = text.strip()
    return int(text) if text.isdigit() else 0


def split_trade_args(words: List[str]) -> Tuple[str, int]:
    """Split '<commodity words...> <qty>' into name text and quantity"""
    if len(words) >= 2:
        return " ".join(words[:-1]), parse_quantity(words[-1])
    return " ".join(words), 0


def print_price_ranges(ranges) -> None:
    print(f"{'Commodity':<14} {'Price Range':>16}")
    for r in ranges:
        print(f"{r.name:<14} {f'${r.min:,} - ${r.max:,}':>16}")


def render_state(state: GameState) -> None:
    print()
    print(f"💰 Cash: ${state.cash:,}    📅 Day: {state.day}/{MAX_DAYS}    📍 {state.location}")
    print(f"🎒 Inventory: {state.total_units}/{state.inventory_capacity}")
    print(f"  #  {'Commodity':<14} {'Price':>8} {'Stash':>6}")
    for index, name in enumerate(market_order(), start=1):
        print(f"  {index}. {name:<14} {f'${state.price_of(name):,}':>8} {state.units_of(name):>6}")
    if not state.game_over:
        options = ", ".join(f"{i}. {loc}" for i, loc in enumerate(travel_options(state), start=1))
        print(f"Travel to: {options}")
    if state.pending_offer is not None:
        offer = state.pending_offer
        print(f"⚡ Upgrade offer: +{offer.extra_capacity} capacity for ${offer.price:,} (accept/decline)")


def play_turn(mediator: Mediator, state: GameState, line: str) -> GameState:
    """
    Execute one line of player input.

    Returns:
        The game state after the action

    Raises:
        DomainException: If the action breaks a game rule
        QuitGame: If the player quits
    """
    words = line.split()
    if not words:
        return state
    action, rest = words[0].lower(), words[1:]

    if action in ("quit", "exit", "q"):
        raise QuitGame()

    if action in ("help", "h", "?"):
        print(HELP_TEXT)
        return state

    if action == "market":
        render_state(state)
        return state

    if action in ("buy", "sell"):
        name_text, quantity = split_trade_args(rest)
        order = market_order()
        commodity = resolve_choice(name_text, order, order)
        if commodity is None:
            print(f"❌ Unknown commodity: {name_text or '(none)'}")
            return state
        if action == "buy":
            state = mediator.send(BuyCommodityCommand(commodity=commodity, quantity=quantity))
            print(f"✅ Bought {quantity} {commodity}")
        else:
            state = mediator.send(SellCommodityCommand(commodity=commodity, quantity=quantity))
            print(f"✅ Sold {quantity} {commodity}")
        render_state(state)
        return state

    if action == "travel":
        text = " ".join(rest)
        destination = resolve_choice(text, travel_options(state), LOCATIONS)
        if destination is None:
            print(f"❌ Unknown city: {text or '(none)'}")
            return state
        outcome = mediator.send(TravelCommand(destination=destination))
        print(f"✈️  Travelled to {destination}")
        if outcome.message:
            print(f"📢 {outcome.message}")
        state = outcome.state
        render_state(state)
        return state

    if action in ("accept", "decline"):
        state = mediator.send(RespondToUpgradeOfferCommand(accept=action == "accept"))
        if action == "accept":
            print(f"✅ Inventory capacity is now {state.inventory_capacity}")
        else:
            print("✅ Offer declined")
        return state

    print(f"❌ Unknown command: {action} (type 'help')")
    return state


def _ask(prompt: str) -> str:
    """input() that reads a closed stdin as a blank answer"""
    try:
        return input(prompt)
    except EOFError:
        return ""


def submit_final_score(mediator: Mediator, state: GameState, name: Optional[str]) -> None:
    """Offer the final score to the leaderboard, letting the player retry on failure"""
    if not name:
        name = _ask("Enter your name for the leaderboard (blank to skip): ").strip()
    if not name:
        print("Score not submitted")
        return

    while True:
        response = mediator.send(SubmitScoreCommand(name=name, score=state.score))
        print_submission(response)
        if response.submitted:
            return
        if _ask("Retry submission? [y/N] ").strip().lower() not in ("y", "yes"):
            return


def play_command(args: argparse.Namespace) -> int:
    """
    Handle play command: run games until the player stops.

    Returns:
        0 on normal exit, 1 on startup error
    """
    if args.seed is not None:
        seed_random(args.seed)
    mediator = get_mediator()
    name = args.name or get_config().player_name

    print("Welcome to AI Addiction Network!")
    print("💊 Buy low in one city, sell high in another, and dodge the crackdowns.")
    print(f"Can you dominate the black market in {MAX_DAYS} days?")
    print_price_ranges(price_ranges_by_min_desc())
    print(HELP_TEXT)

    while True:
        try:
            state = mediator.send(StartGameCommand(price_model=args.price_model))
        except ValueError as e:
            print(f"❌ Error: {e}")
            return 1
        render_state(state)

        try:
            while not state.game_over:
                try:
                    line = input("> ")
                except EOFError:
                    raise QuitGame()
                try:
                    state = play_turn(mediator, state, line)
                except DomainException as e:
                    print(f"❌ {e}")
        except QuitGame:
            print("👋 Bye")
            return 0

        print()
        print(f"🏁 Game Over! You earned ${state.score:,}, AI Drug Tycoon!")
        if not args.no_submit:
            submit_final_score(mediator, state, name)

        if _ask("Play again? [y/N] ").strip().lower() not in ("y", "yes"):
            print("👋 Bye")
            return 0


def ranges_command(args: argparse.Namespace) -> int:
    """Handle ranges command"""
    print_price_ranges(get_mediator().send(GetPriceRangesQuery()))
    return 0


def setup_game_commands(subparsers):
    """
    Setup game CLI command structure

    - addiction-network play [--seed 42] [--price-model uniform] [--name NEO] [--no-submit]
    - addiction-network ranges
    """
    play_parser = subparsers.add_parser("play", help="Play a 30 day game")
    play_parser.add_argument("--seed", type=int, help="Random seed for a reproducible game")
    play_parser.add_argument(
        "--price-model",
        choices=[m.value for m in PriceModel],
        help="Price distribution (default: from config, else biased)"
    )
    play_parser.add_argument("--name", help="Leaderboard name (default: from config)")
    play_parser.add_argument("--no-submit", action="store_true", help="Don't submit the final score")
    play_parser.set_defaults(func=play_command)

    ranges_parser = subparsers.add_parser("ranges", help="Show commodity price ranges")
    ranges_parser.set_defaults(func=ranges_command)
