"""Tests for the terminal driver using scripted player input."""

import pytest

from connect4.debug import debug, DebugLevel
from connect4.interfaces.cli import SimpleCLI, main, RED
from connect4.utils import GameStatus, Player


def scripted(*lines):
    """Build an input function that replays lines, then signals end of input."""
    remaining = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError

    return fake_input


def make_cli(args, *lines):
    output = []
    cli = SimpleCLI(input_func=scripted(*lines), output=output.append)
    cli.parse_args(["--style", "ascii", "--no-color"] + args)
    return cli, output


class TestPlay:
    def test_vertical_win_and_quit(self):
        cli, output = make_cli(["play"], "1", "7", "1", "7", "1", "7", "1", "q")
        assert cli.run() == 0
        assert cli.game.status == GameStatus.PLAYER_ONE_WIN
        assert "Player 1 (X) has won!" in output
        assert "CONNECT 4 (Move 7)" in output
        assert output[-1] == "Quitting..."

    def test_invalid_input_reprompts_same_player(self):
        cli, output = make_cli(["play"], "abc", "9", "0", " 4 ")
        cli.run()
        assert "Error: 'abc' is not a column number" in output
        assert output.count("Error: Column must be between 1 and 7") == 2
        assert cli.game.move_count == 1
        assert cli.game.current_player == Player.TWO

    def test_full_column_reported(self):
        cli, output = make_cli(["play"], *(["2"] * 7))
        cli.run()
        assert "Error: Column is full" in output
        assert cli.game.move_count == 6

    def test_end_of_input_quits(self):
        cli, output = make_cli(["play"])
        assert cli.run() == 0
        assert output[-1] == "Quitting..."

    def test_restart_after_game_over(self):
        moves = ["1", "7", "1", "7", "1", "7", "1"]
        cli, output = make_cli(["play"], *moves, "x", "r", "3")
        cli.run()
        assert "Error: Invalid input" in output
        assert cli.game.status == GameStatus.IN_PROGRESS
        assert cli.game.move_count == 1

    def test_draw_announced(self, draw_moves):
        cli, output = make_cli(["play"], *[str(c + 1) for c in draw_moves], "q")
        cli.run()
        assert cli.game.status == GameStatus.DRAW
        assert "It's a draw!" in output


class TestOutput:
    def test_colour_by_default(self):
        output = []
        cli = SimpleCLI(input_func=scripted(), output=output.append)
        cli.parse_args(["play"])
        cli.run()
        assert any("\033[32m" in line for line in output)

    def test_no_colour(self):
        cli, output = make_cli(["play"], "9")
        cli.run()
        assert not any("\033[" in line for line in output)

    def test_emoji_board(self):
        output = []
        cli = SimpleCLI(input_func=scripted("4"), output=output.append)
        cli.parse_args(["--no-color", "play"])
        cli.run()
        assert any("🔴" in line for line in output)
        assert "🔵 Player 2" in cli.player_name(Player.TWO)

    def test_error_is_red(self):
        output = []
        cli = SimpleCLI(input_func=scripted("8"), output=output.append)
        cli.parse_args(["play"])
        cli.run()
        assert any(line.startswith(RED + "Error:") for line in output)


class TestReplay:
    def test_replay_to_win(self):
        cli, output = make_cli(["replay", "--moves", "1,7,1,7,1,7,1"])
        assert cli.run() == 0
        assert cli.game.status == GameStatus.PLAYER_ONE_WIN
        assert "Move 7: Player 1 (X) plays column 1" in "\n".join(output)

    def test_replay_skips_rejected_moves(self):
        cli, output = make_cli(["replay", "--moves", "8,1"])
        assert cli.run() == 0
        assert cli.game.move_count == 1
        assert "Error: Column must be between 1 and 7 (move skipped)" in output
        assert output[-1] == "Game in progress."

    def test_replay_bad_moves(self):
        cli, output = make_cli(["replay", "--moves", "1,x"])
        assert cli.run() == 1
        assert output[-1].startswith("Error parsing moves")


class TestMain:
    def test_no_command(self, capsys):
        assert main(["--no-color"]) == 1
        assert "Please specify a command" in capsys.readouterr().out

    def test_replay_via_main(self, capsys):
        assert main(["--style", "ascii", "--no-color", "replay", "--moves", "4"]) == 0
        assert "CONNECT 4 (Move 1)" in capsys.readouterr().out


class TestDebugOptions:
    @pytest.fixture(autouse=True)
    def restore_level(self):
        yield
        debug.configure(level=DebugLevel.ERROR)

    def test_default_level(self):
        make_cli(["play"])
        assert debug.level == DebugLevel.ERROR

    def test_debug_level_flag(self):
        make_cli(["--debug_level", "info", "play"])
        assert debug.level == DebugLevel.INFO

    def test_debug_flag_wins(self):
        make_cli(["--debug", "--debug_level", "warning", "play"])
        assert debug.level == DebugLevel.DEBUG
