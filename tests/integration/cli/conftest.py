"""
Shared fixtures for CLI integration tests.

CLI commands run against the real container (in-memory leaderboard and
temporary config from the root conftest.py). Only keyboard input is
scripted.
"""
import pytest

from addiction_network.configuration.container import get_leaderboard_client


@pytest.fixture
def leaderboard_client():
    """Real local leaderboard from the container"""
    return get_leaderboard_client()


class ScriptedPlayer:
    """
    Stand-in for input() during a game.

    Name and retry prompts get fixed answers and "Play again?" takes the
    next of `again` (then "n"). Every other prompt gets the next command,
    cycling through `commands`.
    """

    def __init__(self, commands, name="", retry="n", again=()):
        self.commands = list(commands)
        self.name = name
        self.retry = retry
        self.again = list(again)
        self.turns = 0

    def __call__(self, prompt=""):
        if prompt.startswith("Enter your name"):
            return self.name
        if prompt.startswith("Retry"):
            return self.retry
        if prompt.startswith("Play again"):
            return self.again.pop(0) if self.again else "n"
        command = self.commands[self.turns % len(self.commands)]
        self.turns += 1
        return command


@pytest.fixture
def scripted_player():
    return ScriptedPlayer
