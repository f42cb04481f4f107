"""
c4engine.ai - Automated move sources for Connect Four

The only move source is a uniformly random column picker that relies on
the board to reject illegal columns.
"""

from c4engine.ai.random_source import RandomMoveSource, take_automated_turn

__all__ = ['RandomMoveSource', 'take_automated_turn']
