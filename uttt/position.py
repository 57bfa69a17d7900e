"""
Cell identifiers shared by both board levels.

A Position names one of the 9 cells of a 3x3 grid. The same type names a
cell inside a small board and a small board inside the large board.
"""
import numbers
from enum import IntEnum
from typing import Optional


class Player(IntEnum):
    """Encoded as 1/2 so array exports match (empty: 0, X: 1, O: 2)."""
    X = 1
    O = 2

    def opponent(self) -> 'Player':
        return Player.O if self is Player.X else Player.X

    def __str__(self):
        return self.name


class Position(IntEnum):
    # Row-major: index = row * 3 + col
    TOP_LEFT = 0
    TOP_MIDDLE = 1
    TOP_RIGHT = 2
    MIDDLE_LEFT = 3
    CENTER = 4
    MIDDLE_RIGHT = 5
    BOTTOM_LEFT = 6
    BOTTOM_MIDDLE = 7
    BOTTOM_RIGHT = 8

    def to_index(self) -> int:
        return int(self)

    @property
    def row(self) -> int:
        return int(self) // 3

    @property
    def col(self) -> int:
        return int(self) % 3

    @classmethod
    def from_index(cls, index: int) -> 'Position':
        if not (0 <= index < 9):
            raise ValueError(f"Position index out of range: {index}")
        return cls(index)

    @classmethod
    def from_row_col(cls, row: int, col: int) -> 'Position':
        if not (0 <= row < 3 and 0 <= col < 3):
            raise ValueError(f"Position out of range: ({row}, {col})")
        return cls(row * 3 + col)

    @classmethod
    def coerce(cls, value) -> Optional['Position']:
        """Position or int index -> Position, or None if it is not a valid cell."""
        if isinstance(value, cls):
            return value
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            return None
        if not (0 <= value < 9):
            return None
        return cls(int(value))


WINNING_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # cols
    (0, 4, 8), (2, 4, 6)              # diagonals
)
