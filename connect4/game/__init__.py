"""
connect4.game - Core game mechanics for Connect Four

This package contains the board representation and the game engine that
enforces the rules and reports outcomes.
"""

from connect4.game.board import Board
from connect4.game.engine import GameEngine, GridSnapshot

__all__ = ['Board', 'GameEngine', 'GridSnapshot']
