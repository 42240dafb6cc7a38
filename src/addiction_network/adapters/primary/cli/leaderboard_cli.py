"""Leaderboard CLI commands"""
import argparse

from ....application.leaderboard.commands.submit_score import SubmitScoreCommand, SubmitScoreResponse
from ....application.leaderboard.queries.get_leaderboard import GetLeaderboardQuery, LeaderboardResult
from ....configuration.container import get_mediator


def print_leaderboard(result: LeaderboardResult) -> None:
    """Render a leaderboard snapshot, or its error"""
    if result.error:
        print(f"❌ {result.error}")
        return
    if not result.entries:
        print("No scores yet")
        return

    print("🏆 Leaderboard")
    for rank, entry in enumerate(result.entries, start=1):
        print(f"  {rank:>2}. {entry.name:<20} ${entry.score:,}")


def print_submission(response: SubmitScoreResponse) -> None:
    if not response.submitted:
        print(f"❌ {response.error}")
        return
    print(f"✅ Score ${response.entry.score:,} submitted for {response.entry.name}")
    print_leaderboard(response.leaderboard)


def leaderboard_command(args: argparse.Namespace) -> int:
    """Handle leaderboard command"""
    try:
        result = get_mediator().send(GetLeaderboardQuery(limit=args.limit))
    except ValueError as e:
        print(f"❌ Error: {e}")
        return 1

    print_leaderboard(result)
    return 0 if result.ok else 1


def submit_command(args: argparse.Namespace) -> int:
    """Handle manual score submission"""
    try:
        response = get_mediator().send(SubmitScoreCommand(name=args.name, score=args.score))
    except ValueError as e:
        print(f"❌ Error: {e}")
        return 1

    print_submission(response)
    return 0 if response.submitted else 1


def setup_leaderboard_commands(subparsers):
    """
    Setup leaderboard CLI command structure

    - addiction-network leaderboard [--limit 10]
    - addiction-network submit --name NEO --score 12000
    """
    leaderboard_parser = subparsers.add_parser("leaderboard", help="Show the top scores")
    leaderboard_parser.add_argument("--limit", type=int, default=10, help="Number of entries (default: 10)")
    leaderboard_parser.set_defaults(func=leaderboard_command)

    submit_parser = subparsers.add_parser("submit", help="Submit a score to the leaderboard")
    submit_parser.add_argument("--name", required=True, help="Player name")
    submit_parser.add_argument("--score", type=int, required=True, help="Final cash")
    submit_parser.set_defaults(func=submit_command)
