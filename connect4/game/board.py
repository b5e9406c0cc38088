"""
board.py - Grid representation and disc placement for Connect Four

This module implements the Board class which holds the Connect Four grid,
applies the gravity rule when a disc is dropped, and scans for completed
lines around a placed disc. It does not know whose turn it is; that is the
engine's job.
"""

from typing import List, Optional, Tuple

import numpy as np

from connect4.debug import debug
from connect4.utils import (ROWS, COLS, CONNECT_N, Cell, DIRECTION_VECTORS,
                            new_grid, get_column_height, get_line_through,
                            check_win_at_position)


class Board:
    """
    Represents a Connect Four grid.

    Discs only ever fill a column from the bottom up and are never removed,
    so the height of each column is enough to find the next landing row.
    """

    def __init__(self):
        """Initialize an empty Connect Four board."""
        debug.debug("Initializing new Board", "board")
        self.grid = new_grid()
        self.disc_count = 0

    def cell_at(self, column: int, row: int) -> Cell:
        return Cell(int(self.grid[row, column]))

    def is_valid_column(self, column) -> bool:
        """Check that a column index is an integer inside the board."""
        if isinstance(column, bool) or not isinstance(column, (int, np.integer)):
            return False
        return 0 <= column < COLS

    def is_column_full(self, column: int) -> bool:
        return self.grid[ROWS - 1, column] != Cell.EMPTY.value

    def is_full(self) -> bool:
        """Check whether every cell is occupied."""
        return self.disc_count == ROWS * COLS

    def landing_row(self, column: int) -> Optional[int]:
        """
        Find the row a disc dropped into the column would settle in.

        Args:
            column: The column to check (0-indexed)

        Returns:
            Row index of the lowest empty cell, or None if the column is full
        """
        height = get_column_height(self.grid, column)
        if height >= ROWS:
            return None
        return height

    def drop(self, column: int, cell: Cell) -> int:
        """
        Place a disc in the lowest empty cell of a column.

        Args:
            column: The column to drop into (0-indexed)
            cell: The occupied cell value to write

        Returns:
            The row the disc settled in

        Raises:
            ValueError: If the column is full or the cell is empty; callers
                are expected to validate first
        """
        if cell == Cell.EMPTY:
            raise ValueError("Cannot drop an empty cell")

        row = self.landing_row(column)
        if row is None:
            raise ValueError(f"Column {column} is full")

        debug.trace(f"Placing {cell.name} at ({column}, {row})", "board")
        self.grid[row, column] = cell.value
        self.disc_count += 1
        return row

    def check_win_at(self, column: int, row: int) -> bool:
        """Check whether the disc at (column, row) completes a line."""
        return check_win_at_position(self.grid, column, row)

    def get_winning_line(self, column: int, row: int) -> List[Tuple[int, int]]:
        """
        Get the positions of a completed line through (column, row).

        Returns:
            List of (column, row) positions forming the line, or empty list
        """
        for direction in DIRECTION_VECTORS:
            positions = get_line_through(self.grid, column, row, direction)
            if len(positions) >= CONNECT_N:
                return sorted(positions)
        return []

    def get_state(self) -> np.ndarray:
        """
        Get a read-only copy of the grid.

        Returns:
            2D numpy array indexed [row, column], row 0 at the bottom
        """
        state = self.grid.copy()
        state.setflags(write=False)
        return state
