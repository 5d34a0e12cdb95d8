"""
Console prompts for tic-tac-toe.
Reads the board size, the first mover and each move from line input,
asking again until the line makes sense.
"""

from typing import Callable, Optional, Tuple

from engine import GameConfig, Mark

from .config import ConsoleConfig


class ConsolePrompter:
    """
    Asks the player for input on the console.

    Every ask_* method loops until it gets a usable answer, so a typo
    never ends the game. EOFError from the input function is not caught;
    the caller decides what closing stdin means.
    """

    def __init__(
        self,
        config: Optional[ConsoleConfig] = None,
        input_func: Optional[Callable[[str], str]] = None,
        print_func: Callable[..., None] = print
    ):
        """
        Args:
            config: Console settings (default: ConsoleConfig()).
            input_func: Reads one line given a prompt (default: input).
            print_func: Shows a message to the player.
        """
        self.config = config or ConsoleConfig()
        self.input = input_func or input
        self.print = print_func

    def ask_board_size(self) -> int:
        """
        Ask for the board dimension.

        Returns:
            An integer >= GameConfig.MIN_BOARD_SIZE.
        """
        while True:
            line = self.input(self.config.SIZE_PROMPT).strip()
            if not line:
                return GameConfig.DEFAULT_BOARD_SIZE

            size = self._parse_int(line)
            if size is not None and size >= GameConfig.MIN_BOARD_SIZE:
                return size

            self.print(self.config.BAD_SIZE.format(min_size=GameConfig.MIN_BOARD_SIZE))

    def ask_first_mover(self) -> Mark:
        """Ask which mark moves first."""
        while True:
            line = self.input(self.config.FIRST_MOVER_PROMPT).strip()
            if not line:
                return Mark.from_symbol(GameConfig.DEFAULT_FIRST_MOVER)

            try:
                return Mark.from_symbol(line)
            except ValueError:
                self.print(self.config.BAD_FIRST_MOVER)

    def ask_move(self) -> Tuple[int, int]:
        """
        Ask for the next move.

        Only the format is checked here; whether the cell is on the board
        and free is up to the engine.

        Returns:
            (row, col), 0-based.
        """
        while True:
            line = self.input(self.config.MOVE_PROMPT)
            move = self.parse_move(line)
            if move is not None:
                return move

            self.print("\n" + self.config.BAD_MOVE_FORMAT)

    def parse_move(self, line: str) -> Optional[Tuple[int, int]]:
        """
        Parse a "row,col" line.

        Returns:
            (row, col), or None if the line is not two comma-separated integers.
        """
        tokens = line.split(self.config.COORD_SEPARATOR)
        if len(tokens) != 2:
            return None

        row = self._parse_int(tokens[0])
        col = self._parse_int(tokens[1])
        if row is None or col is None:
            return None

        return row, col

    @staticmethod
    def _parse_int(text: str) -> Optional[int]:
        try:
            return int(text.strip())
        except ValueError:
            return None
