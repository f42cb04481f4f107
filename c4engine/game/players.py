"""
players.py - Player identities for a Connect Four session

A player is a plain value: a display name, a token symbol, a display color
and a human/automated flag. Automated players carry a reference to the move
source that picks their columns instead of subclassing the player type.
"""

from dataclasses import dataclass
from typing import Optional, Protocol

from c4engine.utils import EMPTY


class MoveSource(Protocol):
    """Anything that can pick a 1-indexed column for an automated player."""

    def attach_board(self, board) -> None: ...

    def select_column(self) -> int: ...


@dataclass(frozen=True)
class Player:
    name: str
    token: str
    color: str = ""  # Presentation only
    is_human: bool = True
    move_source: Optional[MoveSource] = None

    def __post_init__(self):
        if not isinstance(self.token, str) or len(self.token) != 1:
            raise ValueError(f"Token must be a single character, got {self.token!r}")
        if self.token == EMPTY or self.token.isspace():
            raise ValueError("Token must not be blank")
        if self.is_human and self.move_source is not None:
            raise ValueError("A human player cannot have a move source")

    @property
    def is_automated(self) -> bool:
        return self.move_source is not None

    def __str__(self):
        return f"{self.name} ({self.token})"


def human_player(name: str, token: str, color: str = "") -> Player:
    return Player(name=name, token=token, color=color)


def computer_player(move_source: MoveSource, token: str = "O", color: str = "Yellow") -> Player:
    """Create the automated opponent; its name is always 'Computer'."""
    return Player(name="Computer", token=token, color=color,
                  is_human=False, move_source=move_source)
