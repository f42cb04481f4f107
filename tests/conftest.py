"""Shared fixtures for the Connect Four engine tests."""

import pytest

from c4engine.game.board import Board
from c4engine.game.players import Player
from c4engine.game.rules import GameSession
from c4engine.utils import ROWS, COLS


@pytest.fixture
def x_player():
    return Player("Player 1", "X", "Red")


@pytest.fixture
def o_player():
    return Player("Player 2", "O", "Yellow")


@pytest.fixture
def board():
    return Board()


@pytest.fixture
def pvp_session():
    session = GameSession()
    session.configure_human_vs_human()
    return session


@pytest.fixture
def drop(x_player, o_player):
    """Drop tokens column by column: drop(board, {1: "XO", 2: "O"}) stacks bottom-up."""
    players = {"X": x_player, "O": o_player}

    def _drop(board, columns):
        for column, tokens in columns.items():
            for token in tokens:
                assert board.place(column, players[token])
        return board

    return _drop


def draw_token(row: int, col: int) -> str:
    """Token for a full board with no four-in-a-row (row 0 is the top)."""
    return "X" if ((row // 2) + col) % 2 == 0 else "O"


@pytest.fixture
def fill_without_win(x_player, o_player):
    players = {"X": x_player, "O": o_player}

    def _fill(board):
        for col in range(COLS):
            for row in range(ROWS - 1, -1, -1):
                assert board.place(col + 1, players[draw_token(row, col)])
        return board

    return _fill


class ScriptedRandom:
    """Stands in for random.Random, returning columns from a fixed script."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def randint(self, a, b):
        value = self.values[self.calls]
        self.calls += 1
        return value

    def seed(self, seed=None):
        pass


@pytest.fixture
def scripted_rng():
    return ScriptedRandom
