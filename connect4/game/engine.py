"""
engine.py - Game state management for Connect Four

This module provides the GameEngine, the sole owner of a game's board,
current player and status, and the GridSnapshot it hands out to drivers.
Rejected moves come back as MoveError values rather than exceptions.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple, Union

import numpy as np

from connect4.debug import debug
from connect4.utils import (COLS, Cell, GameStatus, MoveError, Player,
                            grid_to_cells, is_valid_position, render_board)
from connect4.game.board import Board


@dataclass(frozen=True, eq=False)
class GridSnapshot:
    """
    Immutable projection of a game at one point in time.

    The grid is a read-only copy indexed [row, column] with row 0 at the
    bottom; use snapshot[column, row] to read a single Cell.
    """

    grid: np.ndarray
    current_player: Player
    status: GameStatus
    move_count: int
    last_move: Optional[Tuple[int, int]] = None

    def __getitem__(self, position: Tuple[int, int]) -> Cell:
        column, row = position
        if not is_valid_position(column, row):
            raise IndexError(f"Position {position} is outside the board")
        return Cell(int(self.grid[row, column]))

    def cells(self) -> Dict[Tuple[int, int], Cell]:
        """Map every (column, row) to its Cell."""
        return grid_to_cells(self.grid)

    def is_game_over(self) -> bool:
        return self.status.is_game_over()

    def render(self, style: str = 'ascii') -> str:
        return render_board(self.grid, style)


class GameEngine:
    """
    Enforces the Connect Four rules for a single game.

    drop_disc is the only operation that changes state; everything else is
    a read. Player ONE always moves first.
    """

    def __init__(self):
        """Start a new game on an empty board."""
        debug.debug("Initializing GameEngine", "engine")
        self.board = Board()
        self.current_player = Player.ONE
        self.status = GameStatus.IN_PROGRESS
        self.move_count = 0
        self.last_move: Optional[Tuple[int, int]] = None

    def validate_move(self, column) -> Optional[MoveError]:
        """
        Check a move without applying it.

        Args:
            column: Column to drop into (0-indexed)

        Returns:
            The MoveError drop_disc would report, or None if the move is legal
        """
        if self.status.is_game_over():
            return MoveError.GAME_OVER
        if not self.board.is_valid_column(column):
            return MoveError.INVALID_COLUMN
        if self.board.is_column_full(column):
            return MoveError.COLUMN_FULL
        return None

    def drop_disc(self, column) -> Union[GameStatus, MoveError]:
        """
        Drop the current player's disc into a column.

        Args:
            column: Column to drop into (0-indexed)

        Returns:
            The resulting GameStatus, or the MoveError that rejected the move.
            A rejected move leaves the board and the turn untouched.
        """
        error = self.validate_move(column)
        if error is not None:
            debug.debug(f"Rejected move {column!r} by {self.current_player.label}: "
                        f"{error.name}", "engine")
            return error

        player = self.current_player
        row = self.board.drop(column, player.cell)
        self.last_move = (column, row)
        self.move_count += 1
        debug.debug(f"{player.label} dropped into column {column}, row {row}", "engine")

        # Only the disc just placed can have completed a line
        debug.start_timer("win_check")
        won = self.board.check_win_at(column, row)
        debug.end_timer("win_check", "engine")

        if won:
            self.status = GameStatus.won_by(player)
            debug.info(f"{player.label} wins after move at {self.last_move}", "engine")
        elif self.board.is_full():
            self.status = GameStatus.DRAW
            debug.info("Game ends in a draw", "engine")
        else:
            self.current_player = player.other()
            debug.trace(f"Switching to {self.current_player.label}", "engine")

        return self.status

    def valid_moves(self) -> List[int]:
        """
        Get the columns that currently accept a disc.

        Returns:
            List of valid column indices, empty once the game is over
        """
        return [col for col in range(COLS) if self.validate_move(col) is None]

    def winning_line(self) -> List[Tuple[int, int]]:
        """The (column, row) cells of the completed line, or [] if nobody has won."""
        if self.status.winner is None or self.last_move is None:
            return []
        return self.board.get_winning_line(*self.last_move)

    def is_game_over(self) -> bool:
        return self.status.is_game_over()

    def render_state(self) -> GridSnapshot:
        """
        Take an immutable snapshot of the game.

        Returns:
            GridSnapshot with a read-only copy of the grid, the current
            player, status, move count and last move
        """
        return GridSnapshot(
            grid=self.board.get_state(),
            current_player=self.current_player,
            status=self.status,
            move_count=self.move_count,
            last_move=self.last_move,
        )
