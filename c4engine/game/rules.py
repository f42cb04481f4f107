"""
rules.py - Game session management and Gymnasium environment for Connect Four

This module provides:
1. GameSession, which pairs a Board with two players, rotates turns and
   records the winner
2. A gymnasium-compatible environment that lets an agent play a session
   against the random move source
"""

from typing import Dict, List, Optional, Tuple, Union

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from c4engine.ai.random_source import RandomMoveSource, take_automated_turn
from c4engine.debug import debug
from c4engine.exceptions import GameSetupError
from c4engine.game.board import Board
from c4engine.game.players import MoveSource, Player, computer_player, human_player
from c4engine.utils import ROWS, COLS, GameStatus

MAX_PLAYERS = 2


class GameSession:
    """
    A single Connect Four game between two players.

    Drivers call take_turn and then check_won / check_tied after every
    accepted move; check_won credits the player who just moved.
    """

    game_name = "Connect4"

    def __init__(self):
        """Initialize a session with an empty board and no players."""
        debug.debug("Initializing GameSession", "session")
        self.board = Board()
        self.players: List[Optional[Player]] = [None] * MAX_PLAYERS
        self.current_index = 0
        self.winner: Optional[Player] = None
        self.automated_source: Optional[MoveSource] = None

    @property
    def is_configured(self) -> bool:
        return all(player is not None for player in self.players)

    @property
    def is_single_player_mode(self) -> bool:
        return self.automated_source is not None

    @property
    def current_player(self) -> Optional[Player]:
        return self.players[self.current_index]

    @property
    def status(self) -> GameStatus:
        if not self.is_configured:
            return GameStatus.SETUP
        if self.winner is not None:
            return GameStatus.WON
        if self.board.is_tied():
            return GameStatus.TIED
        return GameStatus.IN_PROGRESS

    def configure_players(self, first: Player, second: Player) -> None:
        """
        Assign both player slots.

        Args:
            first: Player who moves first
            second: Player who moves second

        Raises:
            ValueError: If both players use the same token
        """
        if first.token == second.token:
            raise ValueError(f"Players must use different tokens, both use {first.token!r}")

        self.players = [first, second]
        automated = [player.move_source for player in self.players if player.is_automated]
        self.automated_source = automated[0] if automated else None
        debug.info(f"Players configured: {first} vs {second}", "session")

    def configure_human_vs_human(self) -> None:
        """Set up the two default human players."""
        self.configure_players(human_player("Player 1", "X", "Red"),
                               human_player("Player 2", "O", "Yellow"))

    def configure_human_vs_automated(self, move_source: Optional[MoveSource] = None) -> None:
        """
        Set up a human player against the computer.

        Args:
            move_source: Source of the computer's columns (a new
                RandomMoveSource when omitted)
        """
        if move_source is None:
            move_source = RandomMoveSource()
        self.configure_players(human_player("Player 1", "X", "Red"),
                               computer_player(move_source, "O", "Yellow"))

    def take_turn(self, column: int) -> bool:
        """
        Drop the current player's token and pass the turn on success.

        Args:
            column: Column selected by the current player (1-indexed)

        Returns:
            True if the move was accepted, False otherwise

        Raises:
            GameSetupError: If players have not been assigned
        """
        if not self.is_configured:
            raise GameSetupError("Players must be configured before taking a turn")

        if self.status.is_game_over():
            debug.debug(f"Rejecting column {column}: game is over", "session")
            return False

        player = self.current_player
        placed = self.board.place(column, player)
        if placed:
            self.current_index = (self.current_index + 1) % MAX_PLAYERS
            debug.debug(f"{player.name} played column {column}; {self.current_player.name} to move",
                        "session")
        return placed

    def check_won(self) -> bool:
        """
        Check for a win and record the winner.

        Returns:
            True if the board holds a four-in-a-row
        """
        won = self.board.is_won()
        if won and self.winner is None:
            # take_turn has already passed the turn on
            self.winner = self.players[(self.current_index + 1) % MAX_PLAYERS]
            debug.info(f"{self.winner.name} wins after {self.board.moves_played} moves", "session")
        return won

    def check_tied(self) -> bool:
        """Check whether the board is full."""
        tied = self.board.is_tied()
        if tied:
            debug.info("Game ends in a tie", "session")
        return tied

    def restart(self) -> None:
        """Start a fresh board with the same players, first player to move."""
        debug.debug("Restarting session", "session")
        self.board = Board()
        self.current_index = 0
        self.winner = None

    def render(self) -> str:
        return self.board.render()


class ConnectFourEnv(gym.Env):
    """
    Connect Four environment following the Gymnasium interface.

    The agent plays first against the random move source. Actions are
    0-indexed columns; observations mark empty cells 0, the agent's tokens 1
    and the opponent's tokens 2.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    def __init__(self, render_mode: Optional[str] = None):
        """
        Initialize the Connect Four environment.

        Args:
            render_mode: Mode for rendering the environment
        """
        debug.debug("Initializing ConnectFourEnv", "env")

        self.action_space = spaces.Discrete(COLS)
        self.observation_space = spaces.Box(
            low=0, high=2, shape=(ROWS, COLS), dtype=np.int8
        )

        self.session = GameSession()
        self.session.configure_human_vs_automated()
        self.render_mode = render_mode
        self.opponent_move: Optional[int] = None

        self.reward_win = 1.0
        self.reward_lose = -1.0
        self.reward_draw = 0.1
        self.reward_invalid_move = -0.5
        self.reward_step = -0.01

    def reset(self, seed: Optional[int] = None, options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        """
        Reset the environment to its initial state.

        Args:
            seed: Random seed for reproducibility
            options: Unused

        Returns:
            Initial observation and info dictionary
        """
        debug.debug("Resetting environment", "env")
        super().reset(seed=seed)

        self.session.restart()
        self.opponent_move = None
        if seed is not None:
            self.session.automated_source.seed(seed)

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Play the agent's column, then the opponent's reply.

        Args:
            action: Column to place a token (0-indexed)

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        debug.debug(f"Environment step with action {action}", "env")
        self.opponent_move = None

        if not self.session.take_turn(int(action) + 1):
            debug.warning(f"Invalid action: {action}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            return self._get_observation(), self.reward_invalid_move, False, True, info

        reward = self.reward_step
        terminated = False

        if self.session.check_won():
            reward = self.reward_win
            terminated = True
        elif self.session.check_tied():
            reward = self.reward_draw
            terminated = True
        else:
            self.opponent_move = take_automated_turn(self.session) - 1
            if self.session.check_won():
                reward = self.reward_lose
                terminated = True
            elif self.session.check_tied():
                reward = self.reward_draw
                terminated = True

        if terminated:
            debug.info(f"Game over: {self.session.status.name}", "env")

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[str]:
        """
        Render the current state of the environment.

        Returns:
            The board text in 'ascii' mode, otherwise None
        """
        if self.render_mode == "ascii":
            return self.session.render()
        if self.render_mode == "human":
            print(self.session.render())
        return None

    def _get_observation(self) -> np.ndarray:
        grid = self.session.board.get_state()
        agent, opponent = self.session.players
        observation = np.zeros((ROWS, COLS), dtype=np.int8)
        observation[grid == agent.token] = 1
        observation[grid == opponent.token] = 2
        return observation

    def _get_info(self) -> Dict[str, Union[int, str, list, None]]:
        board = self.session.board
        valid_moves = [column - 1 for column in board.get_valid_columns()]
        return {
            'valid_moves': valid_moves,
            'num_valid_moves': len(valid_moves),
            'moves_made': board.moves_played,
            'status': self.session.status.name,
            'winner': self.session.winner.name if self.session.winner else None,
            'last_move': board.last_move,
            'opponent_move': self.opponent_move,
        }
