"""
Console tic-tac-toe.

This script ties together:
- Console prompts (board size, first mover, moves)
- The game engine (board, rules, win/draw detection)
- The board renderer

Run this script to play two-player tic-tac-toe on an N x N board.
"""

import sys
from typing import Optional

from engine import Game, GameConfig, Mark, MoveError, MoveOutcome
from console import ConsoleConfig, ConsolePrompter, BoardRenderer


class TicTacToeConsole:
    """
    Main controller for a console game.

    Game flow:
    1. Print the banner, ask for board size and first mover
    2. Announce the round and ask the current player for a move
    3. Hand the move to the engine; on a rejected move explain and ask again
    4. Repeat until the engine reports a win or draw
    5. Print the final board and the result
    """

    def __init__(
        self,
        prompter: Optional[ConsolePrompter] = None,
        renderer: Optional[BoardRenderer] = None,
        print_func=print
    ):
        config = ConsoleConfig()
        self.prompter = prompter or ConsolePrompter(config, print_func=print_func)
        self.renderer = renderer or BoardRenderer(config)
        self.print = print_func

        self.game: Optional[Game] = None

    def setup(self, size: Optional[int] = None, first_mover: Optional[Mark] = None) -> Game:
        """
        Create the game, prompting for anything not given.

        Args:
            size: Board size, or None to ask.
            first_mover: Starting mark, or None to ask.
        """
        self.print(self.renderer.render_banner())

        if size is None:
            size = self.prompter.ask_board_size()
        if first_mover is None:
            first_mover = self.prompter.ask_first_mover()

        self.game = Game(size, first_mover)
        return self.game

    def run(self) -> int:
        """
        Play until the game ends.

        Returns:
            Exit code (always 0).
        """
        if self.game is None:
            self.setup()

        while not self.game.is_over:
            self._play_turn()

        self._show_game_result()
        return 0

    def _play_turn(self) -> MoveOutcome:
        """Announce the round, then ask for moves until one is accepted."""
        self.print("\n")
        self.print(self.renderer.render_round(
            self.game.round_number(), self.game.current_mover()
        ))

        while True:
            self.print("")
            self.print(self.renderer.render_board(self.game.board))

            row, col = self.prompter.ask_move()
            try:
                return self.game.submit_move(row, col)
            except MoveError as e:
                self.print("\n" + self.renderer.render_error(e, self.game.size))

    def _show_game_result(self):
        """Show the final board and result."""
        self.print("")
        self.print(self.renderer.render_board(self.game.board))
        self.print(self.renderer.render_outcome(self.game.outcome()))


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Two-player tic-tac-toe on an N x N board")
    parser.add_argument(
        "--size",
        type=int,
        help=f"Board size (at least {GameConfig.MIN_BOARD_SIZE}); asked for if omitted"
    )
    parser.add_argument(
        "--first",
        choices=GameConfig.PLAYER_SYMBOLS,
        type=str.upper,
        help="Mark that moves first; asked for if omitted"
    )

    args = parser.parse_args(argv)

    if args.size is not None and args.size < GameConfig.MIN_BOARD_SIZE:
        parser.error(f"--size must be at least {GameConfig.MIN_BOARD_SIZE}")

    return args


def main(argv=None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    first_mover = Mark.from_symbol(args.first) if args.first else None

    game = TicTacToeConsole()

    try:
        game.setup(size=args.size, first_mover=first_mover)
        return game.run()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
        return 0
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    sys.exit(main())
