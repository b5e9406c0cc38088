"""
utils.py - Utility functions and constants for Connect Four implementation

This module provides the board constants, the enumerations shared by the
engine and the command-line driver, and helper functions for scanning and
rendering a board grid.

Grids are numpy arrays of shape (ROWS, COLS) holding Cell values. They are
indexed as grid[row, column] with row 0 at the bottom of the board, while
every public helper takes (column, row) to match how moves are described.
"""

from enum import Enum, auto
from typing import Dict, List, Optional, Tuple

import numpy as np

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of discs in a row to win


class Player(Enum):
    """Enumeration of the two players."""
    ONE = 1    # Moves first
    TWO = 2

    def other(self) -> 'Player':
        """Get the other player."""
        if self == Player.ONE:
            return Player.TWO
        return Player.ONE

    @property
    def cell(self) -> 'Cell':
        """The cell value for a disc owned by this player."""
        return Cell(self.value)

    @property
    def label(self) -> str:
        return f"Player {self.value}"

    def __str__(self):
        return "X" if self == Player.ONE else "O"


class Cell(Enum):
    """Enumeration of the states a grid cell can be in."""
    EMPTY = 0
    ONE = 1
    TWO = 2

    @property
    def owner(self) -> Optional[Player]:
        """The player occupying the cell, or None when empty."""
        if self == Cell.EMPTY:
            return None
        return Player(self.value)

    def __str__(self):
        if self == Cell.EMPTY:
            return " "
        return str(self.owner)


class GameStatus(Enum):
    """Enumeration representing the game outcome."""
    IN_PROGRESS = auto()
    PLAYER_ONE_WIN = auto()
    PLAYER_TWO_WIN = auto()
    DRAW = auto()

    @classmethod
    def won_by(cls, player: Player) -> 'GameStatus':
        if player == Player.ONE:
            return cls.PLAYER_ONE_WIN
        return cls.PLAYER_TWO_WIN

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self != GameStatus.IN_PROGRESS

    @property
    def winner(self) -> Optional[Player]:
        """The winning player, or None for a draw or unfinished game."""
        if self == GameStatus.PLAYER_ONE_WIN:
            return Player.ONE
        elif self == GameStatus.PLAYER_TWO_WIN:
            return Player.TWO
        return None


class MoveError(Enum):
    """Reasons a move can be rejected. All of them are recoverable."""
    GAME_OVER = auto()
    INVALID_COLUMN = auto()
    COLUMN_FULL = auto()

    @property
    def message(self) -> str:
        if self == MoveError.GAME_OVER:
            return "Game is already finished"
        elif self == MoveError.INVALID_COLUMN:
            return f"Column must be between 1 and {COLS}"
        return "Column is full"

    def __str__(self):
        return self.message


class Direction(Enum):
    """Enumeration representing directions for win checking."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_UP_RIGHT = auto()  # Bottom-left to top-right
    DIAGONAL_UP_LEFT = auto()   # Bottom-right to top-left


# Direction vectors (column, row) for each direction, in scan order
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (1, 0),
    Direction.VERTICAL: (0, 1),
    Direction.DIAGONAL_UP_RIGHT: (1, 1),
    Direction.DIAGONAL_UP_LEFT: (-1, 1),
}


def new_grid() -> np.ndarray:
    """Create an empty grid."""
    return np.full((ROWS, COLS), Cell.EMPTY.value, dtype=np.int8)


def is_valid_position(column: int, row: int) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        column: Column index
        row: Row index (0 is the bottom row)

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= column < COLS and 0 <= row < ROWS


def get_column_height(grid: np.ndarray, column: int) -> int:
    """
    Get the current height of a column (number of discs).

    Args:
        grid: The game grid
        column: The column to check

    Returns:
        The number of discs in the column
    """
    return int(np.count_nonzero(grid[:, column] != Cell.EMPTY.value))


def get_line_through(grid: np.ndarray, column: int, row: int,
                     direction: Direction) -> List[Tuple[int, int]]:
    """
    Collect the same-player cells contiguous with (column, row) along an axis.

    Both senses of the direction are walked, so the returned line always
    contains the starting cell.

    Args:
        grid: The game grid
        column: Column of the starting cell
        row: Row of the starting cell
        direction: Axis to scan

    Returns:
        List of (column, row) positions, empty if the starting cell is empty
    """
    value = grid[row, column]
    if value == Cell.EMPTY.value:
        return []

    dc, dr = DIRECTION_VECTORS[direction]
    positions = [(column, row)]

    # Positive sense
    c, r = column + dc, row + dr
    while is_valid_position(c, r) and grid[r, c] == value:
        positions.append((c, r))
        c += dc
        r += dr

    # Negative sense
    c, r = column - dc, row - dr
    while is_valid_position(c, r) and grid[r, c] == value:
        positions.append((c, r))
        c -= dc
        r -= dr

    return positions


def check_win_at_position(grid: np.ndarray, column: int, row: int) -> bool:
    """
    Check if the disc at the given position completes a line.

    Args:
        grid: The game grid
        column: Column index of the disc
        row: Row index of the disc

    Returns:
        True if the disc is part of CONNECT_N or more in a row
    """
    for direction in DIRECTION_VECTORS:
        if len(get_line_through(grid, column, row, direction)) >= CONNECT_N:
            return True
    return False


# Disc glyphs for the emoji board
EMOJI = {
    Cell.EMPTY: "⚫",
    Cell.ONE: "🔴",
    Cell.TWO: "🔵",
}


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render the grid as ASCII art, top row first.

    Args:
        grid: The game grid

    Returns:
        ASCII representation of the board with 1-based column numbers
    """
    border = "|" + "-" * (COLS * 2 - 1) + "|"
    result = [border]

    for row in range(ROWS - 1, -1, -1):
        line = " ".join(str(Cell(int(grid[row, col]))) for col in range(COLS))
        result.append(f"|{line}|")

    result.append(border)
    result.append("|" + " ".join(str(col + 1) for col in range(COLS)) + "|")

    return "\n".join(result)


def render_board_emoji(grid: np.ndarray) -> str:
    """Render the grid with coloured disc glyphs, top row first."""
    lines = []
    for row in range(ROWS - 1, -1, -1):
        lines.append(" ".join(EMOJI[Cell(int(grid[row, col]))] for col in range(COLS)))
    return "\n".join(lines)


RENDERERS = {
    'ascii': render_board_ascii,
    'emoji': render_board_emoji,
}


def render_board(grid: np.ndarray, style: str = 'ascii') -> str:
    """Render the grid with the named style ('ascii' or 'emoji')."""
    try:
        renderer = RENDERERS[style]
    except KeyError:
        raise ValueError(f"Unknown board style: {style}") from None
    return renderer(grid)


def grid_to_cells(grid: np.ndarray) -> Dict[Tuple[int, int], Cell]:
    """Map every (column, row) of the grid to its Cell."""
    return {
        (col, row): Cell(int(grid[row, col]))
        for col in range(COLS)
        for row in range(ROWS)
    }
