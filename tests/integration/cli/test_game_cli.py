"""
Integration tests for the game CLI.

The play loop runs on the real container; input() is scripted and the
output is checked through capsys.
"""
import argparse
import pytest
from dataclasses import replace
from unittest.mock import AsyncMock, Mock, patch

from addiction_network.adapters.secondary.api.client import SupabaseLeaderboardClient
from addiction_network.adapters.primary.cli.game_cli import (
    QuitGame,
    play_command,
    play_turn,
    ranges_command,
    render_state,
    resolve_choice,
    split_trade_args,
    submit_final_score,
)
from addiction_network.application.game.commands import StartGameCommand
from addiction_network.domain.exceptions import (
    InvalidDestinationError,
    InvalidQuantityError,
    LeaderboardSubmissionError,
)
from addiction_network.domain.overrides import UpgradeOffer
from addiction_network.ports.outbound.leaderboard import ILeaderboardClient


def play_args(**overrides):
    values = dict(seed=7, price_model=None, name=None, no_submit=True)
    values.update(overrides)
    return argparse.Namespace(**values)


class TestInputParsing:

    @pytest.mark.parametrize("text,expected", [
        ("1", "Life Loop"),
        ("6", "Rage X"),
        ("rage x", "Rage X"),
        ("RAGE", "Rage X"),
        ("scent", "Scent Heaven"),
        ("l", None),
        ("7", None),
        ("", None),
    ])
    def test_resolve_commodity(self, text, expected):
        order = ["Life Loop", "Scent Heaven", "Trauma Flush", "Lust Forge", "Euphoria Hit", "Rage X"]

        assert resolve_choice(text, order, order) == expected

    def test_trade_args_take_the_last_word_as_quantity(self):
        assert split_trade_args(["life", "loop", "3"]) == ("life loop", 3)
        assert split_trade_args(["rage", "lots"]) == ("rage", 0)
        assert split_trade_args(["rage"]) == ("rage", 0)


class TestPlayTurn:

    @pytest.fixture
    def state(self, mediator):
        return mediator.send(StartGameCommand())

    def test_buy_by_name_prefix(self, mediator, state, capsys):
        new_state = play_turn(mediator, state, "buy rage 5")

        assert new_state.units_of("Rage X") == 5
        assert "✅ Bought 5 Rage X" in capsys.readouterr().out

    def test_buy_then_sell_by_table_number(self, mediator, state, capsys):
        state = play_turn(mediator, state, "buy 6 4")
        state = play_turn(mediator, state, "sell 6 4")

        assert state.units_of("Rage X") == 0
        assert state.cash == 2500
        assert "✅ Sold 4 Rage X" in capsys.readouterr().out

    def test_ambiguous_commodity(self, mediator, state, capsys):
        assert play_turn(mediator, state, "buy l 1") == state
        assert "❌ Unknown commodity: l" in capsys.readouterr().out

    def test_non_numeric_quantity_is_rejected(self, mediator, state):
        with pytest.raises(InvalidQuantityError):
            play_turn(mediator, state, "buy rage lots")

    def test_travel_by_name(self, mediator, state, capsys):
        new_state = play_turn(mediator, state, "travel new york")

        assert new_state.location == "New York"
        assert new_state.day == 2
        assert "✈️  Travelled to New York" in capsys.readouterr().out

    def test_travel_by_number_skips_current_city(self, mediator, state):
        assert play_turn(mediator, state, "travel 1").location == "New York"

    def test_travel_to_current_city(self, mediator, state):
        with pytest.raises(InvalidDestinationError):
            play_turn(mediator, state, "travel bangalore")

    def test_unknown_city(self, mediator, state, capsys):
        assert play_turn(mediator, state, "travel 9") == state
        assert "❌ Unknown city: 9" in capsys.readouterr().out

    def test_unknown_command(self, mediator, state, capsys):
        play_turn(mediator, state, "dance")

        assert "❌ Unknown command: dance" in capsys.readouterr().out

    def test_quit(self, mediator, state):
        with pytest.raises(QuitGame):
            play_turn(mediator, state, "quit")

    def test_pending_offer_is_shown(self, state, capsys):
        render_state(replace(state, pending_offer=UpgradeOffer(price=400, extra_capacity=50)))

        assert "⚡ Upgrade offer: +50 capacity for $400" in capsys.readouterr().out


class TestPlayCommand:

    def test_quit_right_away(self, scripted_player, capsys):
        with patch('builtins.input', scripted_player(["quit"])):
            result = play_command(play_args())

        assert result == 0
        output = capsys.readouterr().out
        assert "Welcome to AI Addiction Network!" in output
        assert "👋 Bye" in output

    def test_end_of_input_quits(self, capsys):
        with patch('builtins.input', side_effect=EOFError):
            result = play_command(play_args())

        assert result == 0
        assert "👋 Bye" in capsys.readouterr().out

    def test_rule_violations_do_not_end_the_game(self, scripted_player, capsys):
        player = scripted_player(["sell rage 1", "quit"])
        with patch('builtins.input', player):
            result = play_command(play_args())

        assert result == 0
        assert "❌ Not enough stash" in capsys.readouterr().out

    def test_full_game_submits_the_final_score(self, scripted_player, leaderboard_client, capsys):
        with patch('builtins.input', scripted_player(["decline", "travel 1"])):
            result = play_command(play_args(name="NEO", no_submit=False))

        assert result == 0
        output = capsys.readouterr().out
        assert "🏁 Game Over! You earned $" in output
        assert "submitted for NEO" in output
        assert [e.name for e in leaderboard_client.fetch_top_scores()] == ["NEO"]

    def test_no_submit_skips_the_leaderboard(self, scripted_player, leaderboard_client, capsys):
        with patch('builtins.input', scripted_player(["decline", "travel 1"])):
            result = play_command(play_args(name="NEO"))

        assert result == 0
        assert "🏁 Game Over!" in capsys.readouterr().out
        assert leaderboard_client.fetch_top_scores() == []

    def test_play_again_starts_a_new_game(self, scripted_player, capsys):
        with patch('builtins.input', scripted_player(["decline", "travel 1"], again=["y"])):
            result = play_command(play_args())

        assert result == 0
        assert capsys.readouterr().out.count("🏁 Game Over!") == 2


class TestSubmitFinalScore:

    @pytest.fixture
    def finished(self, mediator):
        state = mediator.send(StartGameCommand())
        return replace(state, cash=7777, day=30, game_over=True)

    def test_blank_name_skips_submission(self, mediator, finished, leaderboard_client, capsys):
        with patch('builtins.input', return_value="  "):
            submit_final_score(mediator, finished, None)

        assert "Score not submitted" in capsys.readouterr().out
        assert leaderboard_client.fetch_top_scores() == []

    def test_prompted_name_is_used(self, mediator, finished, leaderboard_client, capsys):
        with patch('builtins.input', return_value="TRINITY"):
            submit_final_score(mediator, finished, None)

        assert "✅ Score $7,777 submitted for TRINITY" in capsys.readouterr().out

    @patch('addiction_network.configuration.container.get_leaderboard_client')
    def test_failed_submission_can_be_retried(self, mock_get_client, mediator, finished, capsys):
        client = Mock(spec=ILeaderboardClient)
        client.submit_score.side_effect = LeaderboardSubmissionError("HTTP 503")
        mock_get_client.return_value = client

        with patch('builtins.input', side_effect=["y", "n"]):
            submit_final_score(mediator, finished, "NEO")

        assert client.submit_score.call_count == 2
        assert capsys.readouterr().out.count("❌ Failed to submit score. Please try again.") == 2

    def test_closed_input_skips_submission(self, mediator, finished, leaderboard_client, capsys):
        with patch('builtins.input', side_effect=EOFError):
            submit_final_score(mediator, finished, None)

        assert "Score not submitted" in capsys.readouterr().out
        assert leaderboard_client.fetch_top_scores() == []

    @patch('addiction_network.configuration.container.get_leaderboard_client')
    def test_closed_input_at_retry_stops(self, mock_get_client, mediator, finished, capsys):
        client = Mock(spec=ILeaderboardClient)
        client.submit_score.side_effect = LeaderboardSubmissionError("HTTP 503")
        mock_get_client.return_value = client

        with patch('builtins.input', side_effect=EOFError):
            submit_final_score(mediator, finished, "NEO")

        assert client.submit_score.call_count == 1

    @patch('addiction_network.application.leaderboard.commands.submit_score.asyncio.sleep', new_callable=AsyncMock)
    @patch('addiction_network.configuration.container.get_leaderboard_client')
    def test_malformed_leaderboard_rows_do_not_end_the_session(self, mock_get_client, mock_sleep, mediator, finished, capsys):
        client = SupabaseLeaderboardClient("https://demo.supabase.co", "anon-key")
        stored = Mock(ok=True, status_code=201)
        stored.json.return_value = [{"name": "NEO", "score": 7777}]
        listing = Mock(ok=True, status_code=200)
        listing.json.return_value = [{"name": "NEO", "score": 9000}, {"name": "", "score": 10}]
        client._session.request = Mock(side_effect=[stored, listing, listing, listing])
        mock_get_client.return_value = client

        submit_final_score(mediator, finished, "NEO")

        output = capsys.readouterr().out
        assert "✅ Score $7,777 submitted for NEO" in output
        assert "❌ Failed to load leaderboard. Please try again later." in output


def test_ranges_command(capsys):
    assert ranges_command(argparse.Namespace()) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[1].startswith("Life Loop")
    assert lines[-1].startswith("Rage X")
