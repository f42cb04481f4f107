"""
utils.py - Constants and shared helpers for the Connect Four engine

This module provides the board dimensions, the empty-cell marker, the
scan directions used by win detection, the session status enumeration and
the ASCII board renderer.
"""

from enum import Enum, auto
from typing import Dict, Tuple

import numpy as np

# Game constants (standard rules: https://en.wikipedia.org/wiki/Connect_Four)
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of pieces in a row to win

# Marker for an unoccupied cell; never a valid player token
EMPTY = " "

# With alternating turns the first player needs CONNECT_N moves, and the
# opponent has made CONNECT_N - 1 by then
MIN_MOVES_FOR_WIN = 2 * CONNECT_N - 1


class GameStatus(Enum):
    """Lifecycle states of a game session."""
    SETUP = auto()        # Players not yet assigned
    IN_PROGRESS = auto()
    WON = auto()
    TIED = auto()

    def is_game_over(self) -> bool:
        return self in (GameStatus.WON, GameStatus.TIED)


class Direction(Enum):
    """Directions scanned for a run of CONNECT_N tokens."""
    VERTICAL = auto()
    HORIZONTAL = auto()
    DIAGONAL_DOWN_RIGHT = auto()
    DIAGONAL_DOWN_LEFT = auto()


# Direction vectors (row, col); row 0 is the top of the board.
# Dict order is the scan order.
DIRECTION_VECTORS: Dict[Direction, Tuple[int, int]] = {
    Direction.VERTICAL: (1, 0),
    Direction.HORIZONTAL: (0, 1),
    Direction.DIAGONAL_DOWN_RIGHT: (1, 1),
    Direction.DIAGONAL_DOWN_LEFT: (1, -1),
}


def is_valid_position(row: int, col: int) -> bool:
    """
    Check if a 0-indexed position is within the board boundaries.

    Args:
        row: Row index
        col: Column index

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= row < ROWS and 0 <= col < COLS


def start_range(delta: int, size: int) -> range:
    """
    Indices along one axis from which a run of CONNECT_N stepping by delta
    stays inside an axis of the given size.
    """
    if delta > 0:
        return range(0, size - CONNECT_N + 1)
    if delta < 0:
        return range(CONNECT_N - 1, size)
    return range(size)


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render the board the way the console shows it.

    Args:
        grid: The board grid (ROWS x COLS of token strings)

    Returns:
        One line per row, "|X|O| |...|", followed by the column numbers
    """
    lines = ["|" + "|".join(str(cell) for cell in row) + "|" for row in grid]
    lines.append(" " + " ".join(str(col) for col in range(1, grid.shape[1] + 1)))
    return "\n".join(lines)
