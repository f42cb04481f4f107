"""
c4engine.interfaces - User interfaces for Connect Four

This package contains the text console that drives a game session.
"""

# Don't import anything here to avoid circular imports
__all__ = []
