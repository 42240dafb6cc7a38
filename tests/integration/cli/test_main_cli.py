"""
Integration tests for main CLI entry point
"""
import pytest
from unittest.mock import patch

from addiction_network.adapters.primary.cli.main import main


class TestMainCLI:
    """Tests for main CLI entry point"""

    @patch('sys.argv', ['addiction-network'])
    def test_main_no_arguments_shows_help(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 1
        assert "usage" in capsys.readouterr().out.lower()

    @patch('sys.argv', ['addiction-network', 'ranges'])
    def test_main_routes_to_ranges(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 0
        output = capsys.readouterr().out
        assert "Life Loop" in output
        assert "$1,500 - $6,000" in output

    @patch('sys.argv', ['addiction-network', 'config'])
    def test_config_without_subcommand_shows_help(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 1

    @patch('sys.argv', ['addiction-network', 'play', '--price-model', 'gaussian'])
    def test_invalid_price_model_is_rejected_by_argparse(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 2
        assert "invalid choice" in capsys.readouterr().err

    @patch('builtins.input', side_effect=EOFError)
    @patch('sys.argv', ['addiction-network', '--verbose', 'play', '--seed', '7', '--no-submit'])
    def test_verbose_play_exits_cleanly_on_eof(self, mock_input, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 0
        assert "👋 Bye" in capsys.readouterr().out
