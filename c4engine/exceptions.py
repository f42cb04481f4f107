"""
exceptions.py - Error types raised by the Connect Four engine

Illegal moves are never exceptions; they are reported as a False result from
Board.place and GameSession.take_turn. The errors here signal wiring bugs in
whatever code drives a session.
"""


class Connect4Error(Exception):
    """Base class for engine errors."""


class BoardStateNotAttachedError(Connect4Error):
    """An automated move source was asked for a move before it was given a board."""

    def __init__(self, message: str = "Board state not set for computer player"):
        super().__init__(message)


class GameSetupError(Connect4Error):
    """The session is not configured for the requested operation."""
