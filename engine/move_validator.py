"""
Move validator for the tic-tac-toe engine.
Checks a move against the rules before the engine applies it.
"""

from typing import Optional, Tuple, List
from dataclasses import dataclass

from .errors import MoveError, OutOfBoundsError, CellOccupiedError, GameAlreadyOverError
from .game_state import Board, Mark
from .win_checker import Outcome


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error: Optional[MoveError] = None

    @property
    def error_message(self) -> Optional[str]:
        return str(self.error) if self.error is not None else None


class MoveValidator:
    """
    Validates tic-tac-toe moves.

    Rules:
    1. Game must not be over
    2. Position must be on the board
    3. Can only place on empty cells
    """

    def validate_move(
        self,
        board: Board,
        outcome: Outcome,
        row: int,
        col: int
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            outcome: Result of the last termination check.
            row: Row to place the mark.
            col: Column to place the mark.

        Returns:
            ValidationResult; on failure `error` holds the MoveError to raise.
        """
        if outcome.is_over:
            return ValidationResult(
                is_valid=False,
                error=GameAlreadyOverError(outcome)
            )

        if not board.in_bounds(row, col):
            return ValidationResult(
                is_valid=False,
                error=OutOfBoundsError(row, col, board.size)
            )

        occupant = board.get(row, col)
        if occupant != Mark.EMPTY:
            return ValidationResult(
                is_valid=False,
                error=CellOccupiedError(row, col, occupant)
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, board: Board, outcome: Outcome) -> List[Tuple[int, int]]:
        """
        Get all valid moves for the player to move.

        Returns:
            List of (row, col) positions; empty once the game is over.
        """
        if outcome.is_over:
            return []

        return board.empty_cells()
