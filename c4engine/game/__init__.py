"""
c4engine.game - Core game mechanics for Connect Four

This package contains the board engine, player identities and the game
session that rotates turns between two players.
"""

from c4engine.game.board import Board
from c4engine.game.players import Player
from c4engine.game.rules import GameSession, ConnectFourEnv

__all__ = ['Board', 'Player', 'GameSession', 'ConnectFourEnv']
