#!/usr/bin/env python3
import argparse
import logging
import sys
from pathlib import Path
from dotenv import load_dotenv

# Load .env file from project root (Supabase credentials live there)
project_root = Path(__file__).parent.parent.parent.parent.parent.parent
dotenv_path = project_root / '.env'
if dotenv_path.exists():
    load_dotenv(dotenv_path)

from .game_cli import setup_game_commands
from .leaderboard_cli import setup_leaderboard_commands
from .config_cli import setup_config_commands

def main():
    parser = argparse.ArgumentParser(description="AI Addiction Network - a 30 day trading game")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    # Setup subcommands
    setup_game_commands(subparsers)
    setup_leaderboard_commands(subparsers)
    setup_config_commands(subparsers)

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    # Use func attribute set by set_defaults
    if hasattr(args, "func"):
        sys.exit(args.func(args))
    else:
        parser.print_help()
        sys.exit(1)

if __name__ == "__main__":
    main()
