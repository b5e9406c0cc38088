"""
connect4 - Two-player Connect Four for the terminal

This package provides the Connect Four game engine (grid, move validation,
win and draw detection, turn order) and a command-line driver for playing
it in the terminal.
"""

# Version number
__version__ = '0.1.0'
