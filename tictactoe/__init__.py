"""
tictactoe - Two-player tic-tac-toe engine

This package provides the game-state and rules engine for a 3x3 board,
a move-notation parser, a command-line front end and a Gymnasium
environment wrapper.
"""

# Version number
__version__ = '0.1.0'
