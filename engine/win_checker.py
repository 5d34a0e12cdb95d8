"""
Win checker for the tic-tac-toe engine.
Decides after each move whether the game was won, drawn, or goes on.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass

from .game_state import Board, Mark


class GameStatus(Enum):
    """Where the game stands."""
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    Result of a termination check.
    """
    status: GameStatus
    winner: Optional[Mark] = None                     # Set only for WIN
    line: Optional[Tuple[Tuple[int, int], ...]] = None  # Winning cells, (row, col)

    @classmethod
    def in_progress(cls) -> "Outcome":
        return cls(GameStatus.IN_PROGRESS)

    @classmethod
    def win(cls, mark: Mark, line=None) -> "Outcome":
        if not mark.is_player:
            raise ValueError("A win needs a player mark")
        return cls(GameStatus.WIN, mark, tuple(line) if line else None)

    @classmethod
    def draw(cls) -> "Outcome":
        return cls(GameStatus.DRAW)

    @property
    def is_over(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS

    @property
    def is_win(self) -> bool:
        return self.status == GameStatus.WIN

    @property
    def is_draw(self) -> bool:
        return self.status == GameStatus.DRAW

    def __str__(self) -> str:
        if self.is_win:
            return f"Win({self.winner})"
        if self.is_draw:
            return "Draw"
        return "InProgress"


class WinChecker:
    """
    Checks for win conditions on an N x N board.

    Only the lines through the cell that was just played can have become
    complete, so those are the only ones checked:
    - its column
    - its row
    - the main diagonal, if the cell is on it
    - the anti-diagonal, if the cell is on it
    """

    def evaluate(
        self,
        board: Board,
        mark: Mark,
        row: int,
        col: int,
        move_count: int
    ) -> Outcome:
        """
        Evaluate the board right after `mark` was placed at (row, col).

        Args:
            board: The board, with the move already on it.
            mark: The mark that was just placed.
            row: Row of the move.
            col: Column of the move.
            move_count: Marks placed so far, this move included.

        Returns:
            Outcome.win(mark), Outcome.draw() or Outcome.in_progress().
        """
        for line in self.lines_through(board.size, row, col):
            if self._check_line(board, line, mark):
                return Outcome.win(mark, line)

        if move_count == board.size * board.size:
            return Outcome.draw()

        return Outcome.in_progress()

    def lines_through(self, size: int, row: int, col: int) -> List[List[Tuple[int, int]]]:
        """
        Get the lines that pass through a cell.

        Returns:
            List of lines, each a list of (row, col) positions.
        """
        lines = [
            [(i, col) for i in range(size)],  # Column
            [(row, i) for i in range(size)],  # Row
        ]

        if row == col:
            lines.append([(i, i) for i in range(size)])

        if row + col == size - 1:
            lines.append([(i, size - 1 - i) for i in range(size)])

        return lines

    def _check_line(
        self,
        board: Board,
        line: List[Tuple[int, int]],
        mark: Mark
    ) -> bool:
        """True if every cell on the line holds `mark`."""
        for row, col in line:
            if board.get(row, col) != mark:
                return False  # First mismatch, no win on this line
        return True


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")

    checker = WinChecker()

    board = Board(3)
    for col in range(3):
        board.set(0, col, Mark.X)
    board.set(1, 0, Mark.O)
    board.set(1, 1, Mark.O)

    outcome = checker.evaluate(board, Mark.X, 0, 2, move_count=5)
    print(f"Top row: {outcome}")
    assert outcome.winner == Mark.X

    print(f"Lines through (0, 1): {len(checker.lines_through(3, 0, 1))}")

    print("\nWinChecker test done!")
