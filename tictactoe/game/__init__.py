"""
tictactoe.game - Core game mechanics for tic-tac-toe

This package contains the board representation, cell coordinates and the
game engine that enforces turn order and detects the outcome.
"""

from tictactoe.game.board import Board
from tictactoe.game.coordinate import Coordinate, Hor, Vert
from tictactoe.game.rules import GameEngine, TicTacToeEnv

__all__ = ['Board', 'Coordinate', 'Hor', 'Vert', 'GameEngine', 'TicTacToeEnv']
