"""
board.py - Board representation and core game mechanics for Connect Four

This module implements the Board class which owns the grid and the count of
remaining moves, and provides placement, win detection and tie detection.

Columns and rows are 1-indexed at the public surface (the way players number
them) and translated to 0-indexed numpy storage.
"""

from typing import Iterator, List, Optional, Tuple

import numpy as np

from c4engine.debug import debug
from c4engine.utils import (ROWS, COLS, CONNECT_N, EMPTY, MIN_MOVES_FOR_WIN,
                            DIRECTION_VECTORS, is_valid_position, start_range,
                            render_board_ascii)


class Board:
    """
    Represents a Connect Four game board.

    This class validates and executes column drops and answers whether the
    board holds a four-in-a-row or is full. It does not know whose turn it
    is; that belongs to the game session.
    """

    def __init__(self):
        """Initialize an empty Connect Four board."""
        debug.debug("Initializing new Board", "board")
        self.reset()

    def reset(self):
        """Reset the board to an empty state."""
        self.grid = np.full((ROWS, COLS), EMPTY, dtype='<U1')
        self.moves_remaining = ROWS * COLS
        self.last_move: Optional[Tuple[int, int]] = None

    @property
    def board_rows(self) -> int:
        return ROWS

    @property
    def board_columns(self) -> int:
        return COLS

    @property
    def moves_played(self) -> int:
        return ROWS * COLS - self.moves_remaining

    def is_valid_move(self, column: int) -> bool:
        """
        Check if a token can be dropped into a column.

        Args:
            column: The column to place a token (1-indexed)

        Returns:
            True if the move is valid, False otherwise
        """
        if isinstance(column, bool) or not isinstance(column, (int, np.integer)):
            debug.debug(f"Invalid move: column {column!r} is not an integer", "board")
            return False

        if not (1 <= column <= COLS):
            debug.debug(f"Invalid move: column {column} out of bounds", "board")
            return False

        if self.grid[0, column - 1] != EMPTY:
            debug.debug(f"Invalid move: column {column} is full", "board")
            return False

        return True

    def get_valid_columns(self) -> List[int]:
        """
        Get the columns where a token can still be placed.

        Returns:
            List of valid 1-indexed columns
        """
        return [col + 1 for col in range(COLS) if self.grid[0, col] == EMPTY]

    def place(self, column: int, player) -> bool:
        """
        Drop a player's token into a column.

        Args:
            column: The column to place a token (1-indexed)
            player: The player whose token is dropped

        Returns:
            True if the token was placed, False if the move was rejected
        """
        debug.debug(f"Attempting move in column {column} for {player}", "board")

        if not self.is_valid_move(column):
            return False

        col = int(column) - 1
        # Lowest empty row; the column is known to have one
        row = ROWS - 1
        while self.grid[row, col] != EMPTY:
            row -= 1

        debug.trace(f"Placing {player.token} at position ({row}, {col})", "board")
        self.grid[row, col] = player.token
        self.moves_remaining -= 1
        self.last_move = (row, col)
        return True

    def token_at(self, row: int, column: int) -> str:
        """
        Identify the token at a location on the board.

        Args:
            row: Row index (1-indexed, 1 is the top row)
            column: Column index (1-indexed)

        Returns:
            The token at that location, or EMPTY if unoccupied

        Raises:
            IndexError: If the location is outside the board
        """
        if not is_valid_position(row - 1, column - 1):
            raise IndexError(f"Position ({row}, {column}) is outside the {ROWS}x{COLS} board")
        return str(self.grid[row - 1, column - 1])

    def is_tied(self) -> bool:
        """Check whether every cell has been filled."""
        return self.moves_remaining == 0

    def is_won(self) -> bool:
        """
        Check whether the board holds a run of CONNECT_N identical tokens.

        This does not say who won; only the token just placed can have
        completed a run, so the caller knows the winner from the turn order.

        Returns:
            True if a four-in-a-row exists, False otherwise
        """
        if self.moves_played < MIN_MOVES_FOR_WIN:
            return False

        debug.start_timer("win_check")
        try:
            for direction, (dr, dc) in DIRECTION_VECTORS.items():
                for row, col in self._run_starts(dr, dc):
                    if self._run_length(row, col, dr, dc) == CONNECT_N:
                        debug.debug(f"{direction.name} win starting at ({row}, {col})", "board")
                        return True
            return False
        finally:
            debug.end_timer("win_check", "board")

    def _run_starts(self, dr: int, dc: int) -> Iterator[Tuple[int, int]]:
        """Cells from which a run of CONNECT_N in direction (dr, dc) fits on the board."""
        for row in start_range(dr, ROWS):
            for col in start_range(dc, COLS):
                yield row, col

    def _run_length(self, row: int, col: int, dr: int, dc: int) -> int:
        """
        Count identical tokens from (row, col) along (dr, dc), stopping at
        CONNECT_N, a mismatch, or the board edge.
        """
        token = self.grid[row, col]
        if token == EMPTY:
            return 0

        connected = 1
        r, c = row + dr, col + dc
        while connected < CONNECT_N and is_valid_position(r, c) and self.grid[r, c] == token:
            connected += 1
            r += dr
            c += dc
        return connected

    def get_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            Copy of the 2D grid of tokens
        """
        return self.grid.copy()

    def render(self) -> str:
        """
        Render the board as a string.

        Returns:
            String representation of the board
        """
        return render_board_ascii(self.grid)

    def __str__(self) -> str:
        """String representation of the board."""
        return self.render()
