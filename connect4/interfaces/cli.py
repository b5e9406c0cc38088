"""
cli.py - Command-line interface for playing Connect Four

This module provides the terminal driver for the game engine: a two-player
hot-seat game loop and a replay command that feeds a list of moves through
a fresh engine. Columns are shown to players as 1-7 and converted to the
engine's 0-based indices here.
"""

import argparse
import sys
import time
from typing import Callable, List, Optional

from connect4.debug import debug
from connect4.utils import COLS, GameStatus, MoveError, Player, EMOJI
from connect4.game.engine import GameEngine

# ANSI color codes for terminal output
RESET = "\033[0m"
RED = "\033[31m"
GREEN = "\033[32m"

RULE = "-" * 20


class SimpleCLI:
    """Simple command-line interface for Connect Four."""

    def __init__(self, input_func: Callable[[str], str] = input,
                 output: Callable[[str], None] = print):
        """
        Initialize the CLI.

        Args:
            input_func: Reads one line of player input given a prompt
            output: Writes one line of text to the terminal
        """
        self.game = GameEngine()
        self.args = None
        self.input = input_func
        self.output = output

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(description='Connect Four for two players in the terminal')
        parser.add_argument('--style', choices=['emoji', 'ascii'], default='emoji',
                            help='Board style: emoji (coloured discs) or ascii')
        parser.add_argument('--no-color', dest='color', action='store_false',
                            help='Disable ANSI colours')
        parser.add_argument('--debug', action='store_true',
                            help='Enable debug mode (equivalent to --debug_level debug)')
        parser.add_argument('--debug_level',
                            choices=['none', 'error', 'warning', 'info', 'debug', 'trace'],
                            default='error',
                            help='Set debug level: none (silent) to trace (most verbose)')
        parser.add_argument('--log_file', type=str, default=None,
                            help='Also write debug output to this file')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        subparsers.add_parser('play', help='Play a two-player game interactively')

        replay_parser = subparsers.add_parser('replay', help='Replay a sequence of moves')
        replay_parser.add_argument('--moves', type=str, required=True,
                                   help=f'Comma-separated columns (1-{COLS}), e.g. "4,4,5,3"')
        replay_parser.add_argument('--delay', type=float, default=0.0,
                                   help='Delay between moves in seconds')

        return parser

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments and configure debugging."""
        self.args = self.build_parser().parse_args(argv)

        debug.set_from_string('debug' if self.args.debug else self.args.debug_level)
        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

    def run(self) -> int:
        """Run the CLI based on the parsed arguments. Returns an exit code."""
        if not self.args:
            self.parse_args()

        if self.args.command == 'play':
            self.play_game()
        elif self.args.command == 'replay':
            return self.replay_moves()
        else:
            self.output("Please specify a command. Use --help for options.")
            return 1
        return 0

    # --- Output helpers ---

    def colorize(self, text: str, color: str) -> str:
        if not self.args or self.args.color:
            return f"{color}{text}{RESET}"
        return text

    def style(self) -> str:
        return self.args.style if self.args else 'emoji'

    def player_name(self, player: Player) -> str:
        if self.style() == 'emoji':
            return f"{EMOJI[player.cell]} {player.label}"
        return f"{player.label} ({player})"

    def outcome_message(self, status: GameStatus) -> str:
        if status == GameStatus.DRAW:
            return "It's a draw!"
        elif status.winner is not None:
            return f"{self.player_name(status.winner)} has won!"
        return "Game in progress."

    def display_board(self) -> None:
        """Print the board with a move counter header and any outcome."""
        snapshot = self.game.render_state()

        self.output("")
        self.output(self.colorize(RULE, GREEN))
        self.output(self.colorize(f"CONNECT 4 (Move {snapshot.move_count})", GREEN))
        self.output(self.colorize(RULE, GREEN))
        self.output(snapshot.render(self.style()))
        self.output(self.colorize(RULE, GREEN))

        if snapshot.is_game_over():
            self.output(self.colorize(self.outcome_message(snapshot.status), GREEN))
            self.output(self.colorize(RULE, GREEN))

    def display_error(self, message: str) -> None:
        """Reprint the board followed by an error line."""
        self.display_board()
        self.output(self.colorize(f"Error: {message}", RED))

    # --- Interactive play ---

    def play_game(self) -> None:
        """Play Connect Four games until a player quits."""
        debug.info("Starting interactive game", "cli")
        self.game = GameEngine()
        self.display_board()

        while True:
            while not self.game.is_game_over():
                move = self.get_human_move()
                if move is None:
                    self.output("Quitting...")
                    return

                result = self.game.drop_disc(move)
                if isinstance(result, MoveError):
                    self.display_error(result.message)
                else:
                    self.display_board()

            if not self.prompt_restart():
                return
            self.game = GameEngine()
            self.display_board()

    def get_human_move(self) -> Optional[int]:
        """
        Get a move from the current player.

        Returns:
            0-based column index (not range checked), or None to quit
        """
        while True:
            self.output("")
            self.output(self.game.current_player.label)
            try:
                user_input = self.input(f"Enter a column between 1 and {COLS}: ")
            except EOFError:
                return None

            user_input = user_input.strip().lower()
            if user_input in ('q', 'quit'):
                return None

            try:
                return int(user_input) - 1
            except ValueError:
                debug.debug(f"Unparsable input {user_input!r}", "cli")
                self.display_error(f"'{user_input}' is not a column number")

    def prompt_restart(self) -> bool:
        """Ask whether to play again. Returns True to restart."""
        while True:
            try:
                user_input = self.input("Press 'R' to restart or 'Q' to quit the game. ")
            except EOFError:
                return False

            user_input = user_input.strip().lower()
            if user_input == 'r':
                return True
            elif user_input == 'q':
                self.output("Quitting...")
                return False
            self.display_error("Invalid input")

    # --- Replay ---

    def replay_moves(self) -> int:
        """Feed the --moves list through a fresh engine, printing each step."""
        try:
            moves = [int(part) for part in self.args.moves.split(',') if part.strip()]
        except ValueError:
            self.output(f"Error parsing moves '{self.args.moves}': expected comma-separated numbers")
            return 1

        self.game = GameEngine()
        self.display_board()

        for i, move in enumerate(moves):
            player = self.game.current_player
            self.output(f"\nMove {i + 1}: {self.player_name(player)} plays column {move}")
            result = self.game.drop_disc(move - 1)
            if isinstance(result, MoveError):
                self.output(self.colorize(f"Error: {result.message} (move skipped)", RED))
                continue
            self.display_board()
            if self.args.delay > 0:
                time.sleep(self.args.delay)

        if not self.game.is_game_over():
            self.output(self.outcome_message(self.game.status))
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    cli.parse_args(argv)
    return cli.run()


if __name__ == "__main__":
    sys.exit(main())
