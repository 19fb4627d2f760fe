"""
tictactoe.interfaces - User interfaces for tic-tac-toe

This package contains the move-notation parser and the command-line
interface that drive the engine.
"""

# Don't import anything here to avoid circular imports
__all__ = []
