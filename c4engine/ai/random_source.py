"""
random_source.py - Random automated move source for Connect Four

The computer opponent picks a column uniformly at random without checking
whether the column is full. Legality is left to Board.place: the driver
resamples until a placement is accepted (see take_automated_turn).
"""

import random
from typing import Optional

from c4engine.debug import debug
from c4engine.exceptions import BoardStateNotAttachedError, GameSetupError


class RandomMoveSource:
    """Picks uniformly random 1-indexed columns from an attached board."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.board = None
        self.rng = rng if rng is not None else random.Random()

    def attach_board(self, board) -> None:
        """Give the source a read-only view of the board it is choosing for."""
        self.board = board

    def seed(self, seed: Optional[int]) -> None:
        self.rng.seed(seed)

    def select_column(self) -> int:
        """
        Choose a column for the next move.

        Returns:
            A column in [1, board columns], not filtered for legality

        Raises:
            BoardStateNotAttachedError: If no board has been attached
        """
        if self.board is None:
            raise BoardStateNotAttachedError()

        column = self.rng.randint(1, self.board.board_columns)
        debug.trace(f"Random source picked column {column}", "ai")
        return column


def take_automated_turn(session, max_attempts: Optional[int] = None) -> int:
    """
    Play the current player's turn from its move source.

    Resamples until the session accepts the placement.

    Args:
        session: The game session whose current player is automated
        max_attempts: Optional cap on the number of samples

    Returns:
        The accepted 1-indexed column

    Raises:
        GameSetupError: If the current player has no move source or the
            game is already over
        RuntimeError: If max_attempts samples were all rejected
    """
    player = session.current_player
    if player is None or player.move_source is None:
        raise GameSetupError(f"Current player {player} has no move source")
    if session.status.is_game_over():
        raise GameSetupError("Game is over; restart the session first")

    source = player.move_source
    source.attach_board(session.board)

    attempts = 0
    while True:
        column = source.select_column()
        attempts += 1
        if session.take_turn(column):
            debug.debug(f"{player.name} played column {column} after {attempts} sample(s)", "ai")
            return column
        if max_attempts is not None and attempts >= max_attempts:
            raise RuntimeError(f"No legal column found after {attempts} samples")
