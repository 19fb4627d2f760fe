"""
utils.py - Constants, enumerations and helper functions for tic-tac-toe

This module provides the board constants, the Side and Outcome types, the
fixed set of win-lines and the outcome evaluation shared by the board, the
engine and the Gymnasium environment.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple

import numpy as np

# Game constants
BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE
EMPTY = 0       # Grid value of an unoccupied cell


class Side(Enum):
    """The two players; the value is what the board grid stores."""
    FIRST = 1
    SECOND = 2

    def other(self) -> "Side":
        """Get the other side."""
        return Side.SECOND if self == Side.FIRST else Side.FIRST

    @property
    def symbol(self) -> str:
        return "X" if self == Side.FIRST else "O"

    def __str__(self):
        return self.symbol


FIRST_SIDE = Side.FIRST


class OutcomeKind(Enum):
    """Enumeration of the game status."""
    IN_PROGRESS = auto()
    WON = auto()
    DRAW = auto()


@dataclass(frozen=True)
class Outcome:
    """
    Current status of a game.

    An in-progress outcome carries the side to move, a won outcome carries the
    winner and a draw carries no side. Any other combination is rejected.
    """
    kind: OutcomeKind
    side: Optional[Side] = None

    def __post_init__(self):
        if self.kind == OutcomeKind.DRAW and self.side is not None:
            raise ValueError("A drawn game has no side")
        if self.kind != OutcomeKind.DRAW and not isinstance(self.side, Side):
            raise ValueError(f"{self.kind.name} outcome requires a side, got {self.side!r}")

    @classmethod
    def in_progress(cls, side: Side) -> "Outcome":
        return cls(OutcomeKind.IN_PROGRESS, side)

    @classmethod
    def won(cls, side: Side) -> "Outcome":
        return cls(OutcomeKind.WON, side)

    @classmethod
    def draw(cls) -> "Outcome":
        return cls(OutcomeKind.DRAW)

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self.kind != OutcomeKind.IN_PROGRESS

    @property
    def winner(self) -> Optional[Side]:
        return self.side if self.kind == OutcomeKind.WON else None

    def __str__(self):
        if self.kind == OutcomeKind.WON:
            return f"Won({self.side})"
        if self.kind == OutcomeKind.DRAW:
            return "Draw"
        return f"InProgress({self.side})"


# The 8 win-lines as (row, col) triples: rows, columns, diagonals
WIN_LINES: Tuple[Tuple[Tuple[int, int], ...], ...] = (
    *(tuple((r, c) for c in range(BOARD_SIZE)) for r in range(BOARD_SIZE)),
    *(tuple((r, c) for r in range(BOARD_SIZE)) for c in range(BOARD_SIZE)),
    tuple((i, i) for i in range(BOARD_SIZE)),
    tuple((i, BOARD_SIZE - 1 - i) for i in range(BOARD_SIZE)),
)

# Same lines as flat grid indices, shape (8, 3)
WIN_LINE_INDICES = np.array(
    [[r * BOARD_SIZE + c for r, c in line] for line in WIN_LINES], dtype=np.intp
)


def is_valid_position(row: int, col: int) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        row: Row index
        col: Column index

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def get_line_values(grid: np.ndarray) -> np.ndarray:
    """Return the cell values of every win-line as an (8, 3) array."""
    return np.asarray(grid).reshape(-1)[WIN_LINE_INDICES]


def find_winning_line(grid: np.ndarray) -> Optional[int]:
    """
    Find the first win-line uniformly occupied by one side.

    Args:
        grid: The 3x3 board grid

    Returns:
        Index into WIN_LINES, or None if no side has three in a row
    """
    lines = get_line_values(grid)
    complete = (lines[:, 0] != EMPTY) & np.all(lines == lines[:, :1], axis=1)
    hits = np.flatnonzero(complete)
    return int(hits[0]) if hits.size else None


def count_open_lines(grid: np.ndarray) -> int:
    """
    Count win-lines that do not hold marks from both sides.

    A line that is empty, or holds one side's marks with empties, can still be
    completed by that side.
    """
    lines = get_line_values(grid)
    blocked = np.any(lines == Side.FIRST.value, axis=1) & np.any(lines == Side.SECOND.value, axis=1)
    return int(np.count_nonzero(~blocked))


def evaluate_outcome(grid: np.ndarray, side_to_move: Side) -> Outcome:
    """
    Derive the outcome from the board contents.

    Args:
        grid: The 3x3 board grid
        side_to_move: Side that moves next if the game continues

    Returns:
        Won if a line is complete, InProgress while any line is still open,
        Draw once every line holds both sides
    """
    line_index = find_winning_line(grid)
    if line_index is not None:
        row, col = WIN_LINES[line_index][0]
        return Outcome.won(Side(int(np.asarray(grid)[row, col])))

    if count_open_lines(grid) > 0:
        return Outcome.in_progress(side_to_move)

    return Outcome.draw()


def cell_symbol(value: int) -> str:
    """Text symbol for a grid value."""
    if value == EMPTY:
        return "_"
    return Side(int(value)).symbol


ROW_LABELS = ("t", "m", "b")
COL_LABELS = ("l", "m", "r")


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render the board as ASCII art.

    Args:
        grid: The 3x3 board grid

    Returns:
        Board with column labels l/m/r on top and row labels t/m/b on the left
    """
    width = 3
    result = [(" " * width + "".join(label.center(width) for label in COL_LABELS)).rstrip()]

    for row in range(BOARD_SIZE):
        line = ROW_LABELS[row].center(width)
        for col in range(BOARD_SIZE):
            line += cell_symbol(grid[row, col]).center(width)
        result.append(line.rstrip())

    return "\n".join(result)

