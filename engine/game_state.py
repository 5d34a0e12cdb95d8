"""
Board model for the tic-tac-toe engine.
Holds the marks on an N x N grid; no game rules live here.
"""

from enum import Enum
from typing import List, Tuple

import numpy as np

from .errors import OutOfBoundsError, CellOccupiedError


class Mark(Enum):
    """What a cell can hold."""
    EMPTY = 0
    X = 1
    O = 2

    def opposite(self) -> "Mark":
        """Get the other player's mark."""
        if self == Mark.X:
            return Mark.O
        if self == Mark.O:
            return Mark.X
        raise ValueError("EMPTY is not a player mark")

    @property
    def is_player(self) -> bool:
        return self != Mark.EMPTY

    @property
    def symbol(self) -> str:
        return "-" if self == Mark.EMPTY else self.name

    @classmethod
    def from_symbol(cls, symbol: str) -> "Mark":
        """
        Parse a player symbol ("X" or "O", any case).

        Raises:
            ValueError: if the symbol is not a player mark.
        """
        key = symbol.strip().upper()
        if key not in ("X", "O"):
            raise ValueError(f"Unknown player symbol: {symbol!r}")
        return cls[key]

    def __str__(self) -> str:
        return self.symbol


class Board:
    """
    A size x size grid of marks, indexed [row][col] from zero.

    The size is fixed at construction. Callers are expected to have
    checked size >= 3 already. Cells only ever go from EMPTY to a player
    mark; there is no way to clear one.
    """

    def __init__(self, size: int):
        self.size = size
        # Mark codes (Mark.value), row-major
        self._cells = np.zeros((size, size), dtype=np.int8)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def _check_bounds(self, row: int, col: int):
        if not self.in_bounds(row, col):
            raise OutOfBoundsError(row, col, self.size)

    def get(self, row: int, col: int) -> Mark:
        """
        Get the mark at a cell.

        Raises:
            OutOfBoundsError: if either index is outside the board.
        """
        self._check_bounds(row, col)
        return Mark(int(self._cells[row, col]))

    def set(self, row: int, col: int, mark: Mark):
        """
        Place a player mark on an empty cell.

        Args:
            row: Row index.
            col: Column index.
            mark: Mark.X or Mark.O.

        Raises:
            OutOfBoundsError: if either index is outside the board.
            CellOccupiedError: if the cell already holds a mark.
            ValueError: if mark is EMPTY (cells cannot be cleared).
        """
        if not mark.is_player:
            raise ValueError("Cannot set a cell back to EMPTY")
        self._check_bounds(row, col)

        occupant = Mark(int(self._cells[row, col]))
        if occupant != Mark.EMPTY:
            raise CellOccupiedError(row, col, occupant)

        self._cells[row, col] = mark.value

    def empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples, row-major.
        """
        rows, cols = np.nonzero(self._cells == Mark.EMPTY.value)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def filled_count(self) -> int:
        return int(np.count_nonzero(self._cells))

    def snapshot(self) -> Tuple[Tuple[Mark, ...], ...]:
        """Immutable copy of the grid for renderers."""
        return tuple(
            tuple(Mark(int(v)) for v in row) for row in self._cells
        )

    def __repr__(self) -> str:
        return f"Board(size={self.size}, filled={self.filled_count()})"
