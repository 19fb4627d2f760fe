"""
board.py - Board representation for tic-tac-toe

This module implements the Board class which holds the 3x3 grid of cells and
provides placement and query helpers. Turn order and legality are enforced by
the engine in rules.py; the board only guards against overwriting a cell.
"""

from typing import List, Optional

import numpy as np

from tictactoe.debug import debug
from tictactoe.game.coordinate import Coordinate
from tictactoe.utils import BOARD_SIZE, EMPTY, Side, render_board_ascii


class Board:
    """
    Represents a tic-tac-toe board.

    Cells are stored in a numpy grid: EMPTY for an unoccupied cell, otherwise
    the value of the occupying Side.
    """

    def __init__(self):
        """Initialize an empty board."""
        self.reset()

    def reset(self):
        """Reset the board to an empty state."""
        debug.trace("Resetting board", "board")
        self.grid = np.full((BOARD_SIZE, BOARD_SIZE), EMPTY, dtype=np.int8)
        self.last_move: Optional[Coordinate] = None

    def is_empty(self, coord: Coordinate) -> bool:
        """True if the coordinate is on the board and unoccupied."""
        return coord.is_on_board() and bool(self.grid[coord.row, coord.col] == EMPTY)

    def cell_at(self, coord: Coordinate) -> Optional[Side]:
        """
        Get the content of a cell.

        Args:
            coord: Cell to read

        Returns:
            The occupying side, or None if the cell is empty or off the board
        """
        if not coord.is_on_board():
            return None

        value = int(self.grid[coord.row, coord.col])
        return None if value == EMPTY else Side(value)

    def place(self, coord: Coordinate, side: Side):
        """
        Mark a cell for a side.

        Args:
            coord: Cell to mark
            side: Side placing the mark

        Raises:
            ValueError: If the cell is off the board or already occupied
        """
        if not self.is_empty(coord):
            raise ValueError(f"Cannot place {side} at {coord}: cell is not free")

        debug.trace(f"Placing {side} at ({coord.row}, {coord.col})", "board")
        self.grid[coord.row, coord.col] = side.value
        self.last_move = coord

    def count(self, side: Side) -> int:
        """Number of cells occupied by a side."""
        return int(np.count_nonzero(self.grid == side.value))

    def occupied_count(self) -> int:
        return int(np.count_nonzero(self.grid != EMPTY))

    def empty_cells(self) -> List[Coordinate]:
        """
        Get all empty cells, row by row.

        Returns:
            List of coordinates of unoccupied cells
        """
        rows, cols = np.nonzero(self.grid == EMPTY)
        return [Coordinate(int(r), int(c)) for r, c in zip(rows, cols)]

    def get_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            Copy of the 3x3 grid
        """
        return self.grid.copy()

    def render(self) -> str:
        return render_board_ascii(self.grid)

    def __str__(self) -> str:
        return self.render()
