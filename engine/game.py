"""
Game engine for tic-tac-toe.
Owns the board, takes moves, alternates turns and tracks the outcome.
"""

from typing import List, Tuple
from dataclasses import dataclass

from .game_state import Board, Mark
from .move_validator import MoveValidator
from .win_checker import WinChecker, Outcome


@dataclass(frozen=True)
class MoveOutcome:
    """
    An accepted move and what it led to.
    """
    row: int            # Row the mark was placed on
    col: int            # Column the mark was placed on
    mark: Mark          # Who moved
    outcome: Outcome    # Game result after this move


class Game:
    """
    One game of tic-tac-toe on a size x size board.

    Game flow:
    1. The driver calls submit_move() with the current mover's (row, col)
    2. The engine validates it and places the mark
    3. The lines through that cell are checked for a win, then for a draw
    4. If the game goes on, the turn passes to the other mark
    5. Repeat until outcome() is a win or a draw

    Rejected moves raise a MoveError and leave the game unchanged.
    """

    def __init__(self, size: int, first_mover: Mark = Mark.X):
        """
        Start a new game.

        Args:
            size: Board dimension, already checked to be >= 3 by the caller.
            first_mover: Mark.X or Mark.O.
        """
        if not first_mover.is_player:
            raise ValueError("The first mover must be X or O")

        self._board = Board(size)
        self._next_to_move = first_mover
        self._move_count = 0
        self._outcome = Outcome.in_progress()

        self.validator = MoveValidator()
        self.win_checker = WinChecker()

    @property
    def size(self) -> int:
        return self._board.size

    @property
    def move_count(self) -> int:
        return self._move_count

    @property
    def is_over(self) -> bool:
        return self._outcome.is_over

    @property
    def board(self) -> Tuple[Tuple[Mark, ...], ...]:
        """Snapshot of the board; changing it does not affect the game."""
        return self._board.snapshot()

    def submit_move(self, row: int, col: int) -> MoveOutcome:
        """
        Place the current mover's mark at (row, col).

        Args:
            row: Row index, 0-based.
            col: Column index, 0-based.

        Returns:
            MoveOutcome with the placed coordinates, the mark and the outcome.

        Raises:
            GameAlreadyOverError: if the game has already been won or drawn.
            OutOfBoundsError: if row or col is outside the board.
            CellOccupiedError: if the cell already holds a mark.
        """
        result = self.validator.validate_move(self._board, self._outcome, row, col)
        if not result.is_valid:
            raise result.error

        mark = self._next_to_move
        self._board.set(row, col, mark)
        self._move_count += 1

        self._outcome = self.win_checker.evaluate(
            self._board, mark, row, col, self._move_count
        )

        if not self._outcome.is_over:
            self._next_to_move = mark.opposite()

        return MoveOutcome(row=row, col=col, mark=mark, outcome=self._outcome)

    def current_mover(self) -> Mark:
        """The mark that plays next (the winner, once the game is won)."""
        return self._next_to_move

    def round_number(self) -> int:
        """1-based round of the next move; both moves of a round share it."""
        return (self._move_count + 2) // 2

    def outcome(self) -> Outcome:
        """Result of the last termination check."""
        return self._outcome

    def valid_moves(self) -> List[Tuple[int, int]]:
        return self.validator.get_valid_moves(self._board, self._outcome)

    def __repr__(self) -> str:
        return (
            f"Game(size={self.size}, next={self._next_to_move}, "
            f"moves={self._move_count}, outcome={self._outcome})"
        )
