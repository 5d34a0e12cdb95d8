"""
Board renderer for tic-tac-toe.
Turns engine state into text. Never changes the game.
"""

from typing import Optional, Sequence

from engine import (
    Mark,
    Outcome,
    MoveError,
    OutOfBoundsError,
    CellOccupiedError,
    GameAlreadyOverError,
)

from .config import ConsoleConfig


class BoardRenderer:
    """
    Builds the text the console game prints.

    Every method returns a string; printing is left to the caller.
    """

    def __init__(self, config: Optional[ConsoleConfig] = None):
        self.config = config or ConsoleConfig()

    def render_banner(self) -> str:
        """Welcome banner shown once at startup."""
        line = "=" * self.config.BANNER_WIDTH
        title = self.config.TITLE.center(self.config.BANNER_WIDTH).rstrip()
        return f"{line}\n{title}\n{line}"

    def render_board(self, board: Sequence[Sequence[Mark]]) -> str:
        """
        Draw the board, one text row per board row with a blank line between.

        Args:
            board: Board snapshot, indexed [row][col].

        Example (3x3, coordinates on):
               0  1  2

            0  X  -  O

            1  -  X  -

            2  O  -  -
        """
        gap = self.config.CELL_GAP
        show_coords = self.config.SHOW_COORDINATES
        width = len(str(len(board) - 1))

        lines = []
        if show_coords:
            header = gap.join(str(i).ljust(width) for i in range(len(board)))
            lines.append(" " * (width + len(gap)) + header)
            lines.append("")

        for row_index, row in enumerate(board):
            cells = gap.join(str(mark).ljust(width) for mark in row)
            if show_coords:
                cells = str(row_index).rjust(width) + gap + cells
            lines.append(cells.rstrip())
            lines.append("")

        return "\n".join(lines)

    def render_round(self, round_number: int, mark: Mark) -> str:
        """Turn banner, e.g. "Round 2 - O's"."""
        title = f"Round {round_number} - {mark}'s"
        return f"      {title}\n  {'-' * (len(title) + 10)}"

    def render_outcome(self, outcome: Outcome) -> str:
        """Announce the final result."""
        if outcome.is_win:
            result = f"{outcome.winner}'s win!"
        elif outcome.is_draw:
            result = "It's a draw!"
        else:
            result = "Game in progress."

        return f"Game over!\n{result}" if outcome.is_over else result

    def render_error(self, error: MoveError, size: int) -> str:
        """User-facing message for a rejected move."""
        if isinstance(error, OutOfBoundsError):
            options = ", ".join(str(i) for i in range(size))
            return self.config.OUT_OF_BOUNDS.format(options=options)
        if isinstance(error, CellOccupiedError):
            return self.config.CELL_OCCUPIED
        if isinstance(error, GameAlreadyOverError):
            return self.config.GAME_ALREADY_OVER
        return str(error)
