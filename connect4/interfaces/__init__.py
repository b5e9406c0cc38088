"""
connect4.interfaces - User interfaces for Connect Four

This package contains the terminal driver that reads player input and
renders the board around the game engine.
"""

# Don't import anything here to avoid circular imports
__all__ = []
