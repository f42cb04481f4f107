"""
cli.py - Console interface for playing Connect Four

This module provides the text console loop that drives a GameSession, and a
benchmark of the board engine. Input and output go through injectable
callables so the loop can be scripted.
"""

import random
from typing import Callable, Optional

from c4engine.ai.random_source import RandomMoveSource, take_automated_turn
from c4engine.debug import debug
from c4engine.game.board import Board
from c4engine.game.players import MoveSource
from c4engine.game.rules import GameSession
from c4engine.utils import COLS

SEPARATOR = "-------------------------------------"

OPPONENT_PROMPT = ("Enter 'P' if you want to play against another player; "
                   "enter 'C' if you want to play against the computer.")


class ConsoleUI:
    """Console front end for one GameSession."""

    def __init__(self, session: GameSession,
                 input_fn: Callable[[], str] = input,
                 output_fn: Callable[[str], None] = print,
                 mode: str = "ask",
                 move_source: Optional[MoveSource] = None):
        """
        Initialize the console.

        Args:
            session: The session to drive
            input_fn: Returns the next line typed by the user
            output_fn: Writes one line to the user
            mode: 'ask' to prompt for the opponent, 'pvp' or 'pvc' to skip the prompt
            move_source: Move source for the computer opponent (random when omitted)
        """
        if mode not in ("ask", "pvp", "pvc"):
            raise ValueError(f"Unknown mode: {mode}")
        self.session = session
        self.input = input_fn
        self.output = output_fn
        self.mode = mode
        self.move_source = move_source

    def start(self) -> None:
        """Play games until the user declines to play again."""
        play = True
        while play:
            self.display_board()
            self.output("Beginning Game!")
            self.choose_opponent()

            self.play_game()

            if self.session.winner is not None:
                self.output(f"Congratulations! {self.session.winner.name} has won the game.")
            else:
                self.output("Game over. The game has resulted in a tie.")

            play = self.prompt_for_play_again()

        self.output(f"Thank you for playing {self.session.game_name}")

    def play_game(self) -> None:
        """Alternate turns until the session is won or tied."""
        while not self.session.check_won() and not self.session.check_tied():
            player = self.session.current_player
            if player.is_human:
                selection = self.prompt_for_turn()
                while not self.session.take_turn(selection):
                    self.output("Invalid Column Selection. Please Try Again.")
                    selection = self.prompt_for_turn()
            else:
                selection = take_automated_turn(self.session)
                self.output(SEPARATOR)
                self.output(f"{player.name} selected column {selection}")

            self.display_board()

    def choose_opponent(self) -> None:
        """Configure the session for two humans or a human against the computer."""
        mode = self.mode
        if mode == "ask":
            response = self.get_input(OPPONENT_PROMPT).upper()
            while response not in ("P", "C"):
                self.output("Invalid player choice. Please Try Again.")
                response = self.get_input(OPPONENT_PROMPT).upper()
            mode = "pvp" if response == "P" else "pvc"

        if mode == "pvp":
            self.session.configure_human_vs_human()
        else:
            source = self.move_source if self.move_source is not None else RandomMoveSource()
            self.session.configure_human_vs_automated(source)
        debug.debug(f"Opponent mode: {mode}", "cli")

    def prompt_for_turn(self) -> int:
        player = self.session.current_player
        return self.get_integer_input(
            f"{player.name} - your turn. Choose a column number from 1 - "
            f"{self.session.board.board_columns}. Your token is {player.token}."
        )

    def prompt_for_play_again(self) -> bool:
        answer = self.get_integer_input(
            "Would you like to play again? Enter 1 for yes, or any other integer for no.")
        if answer == 1:
            self.session.restart()
            return True
        return False

    def display_board(self) -> None:
        board = self.session.board
        for row in range(1, board.board_rows + 1):
            cells = [board.token_at(row, column) for column in range(1, board.board_columns + 1)]
            self.output("|" + "|".join(cells) + "|")

    def get_input(self, prompt: str) -> str:
        self.output(prompt)
        return self.input().strip()

    def get_integer_input(self, prompt: str) -> int:
        """Prompt until the user enters an integer."""
        while True:
            response = self.get_input(prompt)
            try:
                return int(response)
            except ValueError:
                self.output("That's not an integer.")


def run_benchmark(iterations: int = 1000,
                  output_fn: Callable[[str], None] = print,
                  rng: Optional[random.Random] = None) -> dict:
    """
    Benchmark the board engine.

    Args:
        iterations: Number of iterations for each measurement
        output_fn: Writes one line of results
        rng: Random generator for column choices

    Returns:
        Dictionary of elapsed seconds per measurement
    """
    rng = rng or random.Random()
    results = {}
    output_fn(f"Running benchmark with {iterations} iterations...")

    debug.start_timer("board_init")
    for _ in range(iterations):
        Board()
    results['board_init'] = debug.end_timer("board_init", "cli")
    output_fn(f"Board initialization: {results['board_init']:.6f} seconds total")

    session = GameSession()
    session.configure_human_vs_human()
    moves_made = 0
    debug.start_timer("moves")
    for _ in range(iterations):
        if session.take_turn(rng.randint(1, COLS)):
            moves_made += 1
            if session.check_won() or session.check_tied():
                session.restart()
    results['moves'] = debug.end_timer("moves", "cli")
    output_fn(f"Making {moves_made} moves: {results['moves']:.6f} seconds total")

    boards = []
    for _ in range(iterations):
        session = GameSession()
        session.configure_human_vs_human()
        for _ in range(rng.randint(7, 20)):
            session.take_turn(rng.randint(1, COLS))
        boards.append(session.board)

    debug.start_timer("win_scans")
    for board in boards:
        board.is_won()
    results['win_scans'] = debug.end_timer("win_scans", "cli")
    output_fn(f"Performing {len(boards)} win scans: {results['win_scans']:.6f} seconds total")

    games = max(1, iterations // 10)
    total_moves = 0
    debug.start_timer("game_simulation")
    for _ in range(games):
        session = GameSession()
        session.configure_human_vs_automated(RandomMoveSource(rng))
        while not session.check_won() and not session.check_tied():
            if session.current_player.is_human:
                session.take_turn(rng.choice(session.board.get_valid_columns()))
            else:
                take_automated_turn(session)
            total_moves += 1
    results['game_simulation'] = debug.end_timer("game_simulation", "cli")
    output_fn(f"Played {games} games with {total_moves} total moves: "
              f"{results['game_simulation']:.6f} seconds total")

    return results
