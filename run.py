#!/usr/bin/env python3
"""
run.py - Main entry point for Connect Four

Examples:

    # Play a two-player game in the terminal
    python run.py play

    # Play with a plain ASCII board and no colours
    python run.py --style ascii --no-color play

    # Replay a sequence of moves (1-based columns)
    python run.py replay --moves 4,4,5,5,6,6,7 --delay 0.5

    # Show engine debug output on stderr
    python run.py --debug_level debug play
"""

import sys
import os

# Add the project root to Python path to ensure imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from connect4.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
