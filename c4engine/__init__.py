"""
c4engine - Board engine and game session for Connect Four

This package provides the Connect Four board engine (gravity drops, win and
tie detection), a two-player game session with turn rotation, a random
automated move source, a console front end and a Gymnasium environment.
"""

# Version number
__version__ = '0.2.0'
