"""
Configuration CLI commands.

Manages the player name used for leaderboard submissions and the
preferred price model.
"""
import argparse

from ....configuration.config import get_config
from ....domain.pricing import PriceModel


def show_config_command(args: argparse.Namespace) -> int:
    config = get_config()
    print(f"Config file: {config.config_path}")
    print(f"  Player name: {config.player_name or '(not set)'}")
    print(f"  Price model: {config.price_model.value}")
    return 0


def set_name_command(args: argparse.Namespace) -> int:
    """Set the default player name"""
    try:
        get_config().player_name = args.name
    except (ValueError, OSError) as e:
        print(f"❌ Error: {e}")
        return 1

    print(f"✅ Scores will be submitted as {args.name.strip()}")
    return 0


def set_price_model_command(args: argparse.Namespace) -> int:
    try:
        model = PriceModel.from_name(args.model)
        get_config().price_model = model
    except (ValueError, OSError) as e:
        print(f"❌ Error: {e}")
        return 1

    print(f"✅ New games will use {model.value} prices")
    return 0


def clear_config_command(args: argparse.Namespace) -> int:
    try:
        get_config().clear()
    except OSError as e:
        print(f"❌ Error: {e}")
        return 1

    print("✅ Configuration cleared")
    return 0


def setup_config_commands(subparsers):
    """
    Setup config CLI command structure

    - addiction-network config show
    - addiction-network config set-name NEO
    - addiction-network config set-price-model uniform
    - addiction-network config clear
    """
    config_parser = subparsers.add_parser("config", help="Manage user configuration")
    config_subparsers = config_parser.add_subparsers(dest="config_command")

    show_parser = config_subparsers.add_parser("show", help="Show current configuration")
    show_parser.set_defaults(func=show_config_command)

    name_parser = config_subparsers.add_parser("set-name", help="Set leaderboard player name")
    name_parser.add_argument("name", help="Player name")
    name_parser.set_defaults(func=set_name_command)

    model_parser = config_subparsers.add_parser("set-price-model", help="Set price distribution")
    model_parser.add_argument("model", choices=[m.value for m in PriceModel], help="Price model")
    model_parser.set_defaults(func=set_price_model_command)

    clear_parser = config_subparsers.add_parser("clear", help="Remove all stored preferences")
    clear_parser.set_defaults(func=clear_config_command)
