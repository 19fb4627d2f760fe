"""
coordinate.py - Cell coordinates for the tic-tac-toe board

A Coordinate is a (row, col) pair. The same nine cells can be named by a
vertical position (top/mid/bottom) and a horizontal position (left/mid/right);
both forms convert into each other.
"""

from dataclasses import dataclass
from enum import Enum
from numbers import Integral
from typing import Any, Optional

from tictactoe.utils import BOARD_SIZE, CELL_COUNT, is_valid_position


class Vert(Enum):
    """Vertical position of a cell; the value is the row index."""
    TOP = 0
    MID = 1
    BOTTOM = 2


class Hor(Enum):
    """Horizontal position of a cell; the value is the column index."""
    LEFT = 0
    MID = 1
    RIGHT = 2


@dataclass(frozen=True)
class Coordinate:
    """
    Identifies a board cell by row and column.

    Any pair of integers can be held, so an out-of-range coordinate can reach
    the engine and be rejected there.
    """
    row: int
    col: int

    @classmethod
    def named(cls, vert: Vert, hor: Hor) -> "Coordinate":
        """Build a coordinate from its named position."""
        return cls(vert.value, hor.value)

    @classmethod
    def from_name(cls, vert: str, hor: str) -> "Coordinate":
        """
        Build a coordinate from position names such as ("top", "left").

        Raises:
            ValueError: If either name is unknown
        """
        try:
            return cls.named(Vert[vert.strip().upper()], Hor[hor.strip().upper()])
        except KeyError:
            raise ValueError(f"Unknown position name: {vert!r}, {hor!r}") from None

    @classmethod
    def from_index(cls, index: int) -> "Coordinate":
        """
        Build a coordinate from a flat index (row * 3 + col).

        Raises:
            ValueError: If the index is not in 0-8
        """
        if not isinstance(index, Integral) or isinstance(index, bool) or not 0 <= index < CELL_COUNT:
            raise ValueError(f"Cell index must be in 0-{CELL_COUNT - 1}, got {index!r}")
        row, col = divmod(int(index), BOARD_SIZE)
        return cls(row, col)

    def is_on_board(self) -> bool:
        """True if both components are integers inside the 3x3 grid."""
        for value in (self.row, self.col):
            if not isinstance(value, Integral) or isinstance(value, bool):
                return False
        return is_valid_position(self.row, self.col)

    @property
    def index(self) -> int:
        return self.row * BOARD_SIZE + self.col

    @property
    def vert(self) -> Vert:
        return Vert(self.row)

    @property
    def hor(self) -> Hor:
        return Hor(self.col)

    @property
    def label(self) -> str:
        """Readable name, e.g. "Top, Left"."""
        if not self.is_on_board():
            return f"({self.row}, {self.col})"
        return f"{self.vert.name.title()}, {self.hor.name.title()}"

    def __str__(self):
        return self.label


def as_coordinate(value: Any) -> Optional[Coordinate]:
    """
    Normalize a coordinate given at the engine boundary.

    Accepts a Coordinate, a (row, col) pair of integers or a (Vert, Hor) pair.
    Returns None for anything else; range is not checked here.
    """
    if isinstance(value, Coordinate):
        return value

    if not isinstance(value, (tuple, list)) or len(value) != 2:
        return None

    first, second = value
    if isinstance(first, Vert) and isinstance(second, Hor):
        return Coordinate.named(first, second)

    for part in (first, second):
        if not isinstance(part, Integral) or isinstance(part, bool):
            return None
    return Coordinate(int(first), int(second))
