"""
Errors raised by the engine when a move is rejected.
All of them are caller mistakes: the board is left untouched.
"""


class MoveError(Exception):
    """Base class for a rejected move."""


class OutOfBoundsError(MoveError):
    """Coordinate outside the board."""

    def __init__(self, row: int, col: int, size: int):
        self.row = row
        self.col = col
        self.size = size
        super().__init__(
            f"Position ({row}, {col}) is out of bounds. Must be 0-{size - 1}."
        )


class CellOccupiedError(MoveError):
    """Target cell already holds a mark."""

    def __init__(self, row: int, col: int, occupant):
        self.row = row
        self.col = col
        self.occupant = occupant
        super().__init__(f"Cell ({row}, {col}) is already occupied by {occupant}")


class GameAlreadyOverError(MoveError):
    """A move was submitted after a win or draw."""

    def __init__(self, outcome):
        self.outcome = outcome
        super().__init__(f"Game is already over! ({outcome})")
