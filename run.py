#!/usr/bin/env python3
"""
run.py - Main entry point for the tic-tac-toe engine

    # Play a two-player game at the terminal
    python run.py play

    # Apply a move sequence and show the outcome
    python run.py show --moves tl,m,t,br,tr

    # Benchmark the engine with 5000 random games
    python run.py benchmark --iterations 5000

    # Any command with detailed logging
    python run.py --debug play
"""

import sys

from tictactoe.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
