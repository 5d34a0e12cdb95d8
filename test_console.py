"""
Tests for the console side of tic-tac-toe: prompts, rendering
and a full scripted game through main.py.

Usage:
    pytest test_console.py
"""

import sys
from pathlib import Path

import pytest

# Add project directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from engine import Game, Mark, Outcome, OutOfBoundsError, CellOccupiedError, GameAlreadyOverError
from console import ConsoleConfig, ConsolePrompter, BoardRenderer
import main as console_main


def scripted(lines):
    """An input function that replays `lines`, then raises EOFError."""
    remaining = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError

    return fake_input


def make_prompter(lines):
    messages = []
    prompter = ConsolePrompter(input_func=scripted(lines), print_func=messages.append)
    return prompter, messages


# ==================== PROMPTS ====================

def test_board_size_reprompts_until_valid():
    prompter, messages = make_prompter(["abc", "2", "-4", " 5 "])
    assert prompter.ask_board_size() == 5
    assert len(messages) == 3
    assert "at least 3" in messages[0]


def test_board_size_defaults_on_empty_line():
    prompter, _ = make_prompter([""])
    assert prompter.ask_board_size() == 3


def test_first_mover():
    prompter, messages = make_prompter(["z", "o"])
    assert prompter.ask_first_mover() == Mark.O
    assert messages == [ConsoleConfig.BAD_FIRST_MOVER]

    prompter, _ = make_prompter(["   "])
    assert prompter.ask_first_mover() == Mark.X


@pytest.mark.parametrize("line, expected", [
    ("1,2", (1, 2)),
    (" 0 , 2 ", (0, 2)),
    ("9,9", (9, 9)),
    ("-1,0", (-1, 0)),
    ("1", None),
    ("1,2,3", None),
    ("a,b", None),
    ("", None),
    ("1.5,2", None),
])
def test_parse_move(line, expected):
    prompter, _ = make_prompter([])
    assert prompter.parse_move(line) == expected


def test_ask_move_reprompts_on_bad_format():
    prompter, messages = make_prompter(["x", "1 2", "2,1"])
    assert prompter.ask_move() == (2, 1)
    assert len(messages) == 2
    assert all(ConsoleConfig.BAD_MOVE_FORMAT in m for m in messages)


def test_ask_move_passes_eof_through():
    prompter, _ = make_prompter([])
    with pytest.raises(EOFError):
        prompter.ask_move()


# ==================== RENDERER ====================

def test_render_board_layout():
    game = Game(3, Mark.X)
    game.submit_move(0, 0)
    game.submit_move(2, 1)

    text = BoardRenderer().render_board(game.board)
    assert text.splitlines() == [
        "   0  1  2",
        "",
        "0  X  -  -",
        "",
        "1  -  -  -",
        "",
        "2  -  O  -",
    ]


def test_render_board_without_coordinates():
    config = ConsoleConfig()
    config.SHOW_COORDINATES = False
    text = BoardRenderer(config).render_board(Game(3).board)
    assert text.splitlines() == ["-  -  -", "", "-  -  -", "", "-  -  -"]


def test_render_wide_board_aligns_columns():
    text = BoardRenderer().render_board(Game(11).board)
    lines = [line for line in text.splitlines() if line]
    assert lines[0].endswith("9   10")
    assert lines[1].startswith(" 0  -")
    assert lines[-1].startswith("10  -")


def test_render_round():
    text = BoardRenderer().render_round(2, Mark.O)
    assert "Round 2 - O's" in text


def test_render_outcome():
    renderer = BoardRenderer()
    assert renderer.render_outcome(Outcome.win(Mark.X)) == "Game over!\nX's win!"
    assert renderer.render_outcome(Outcome.draw()) == "Game over!\nIt's a draw!"
    assert "Game over" not in renderer.render_outcome(Outcome.in_progress())


def test_render_error():
    renderer = BoardRenderer()
    assert renderer.render_error(OutOfBoundsError(3, 0, 4), 4) == \
        "Coordinates out of bounds. Options are 0, 1, 2, 3."
    assert renderer.render_error(CellOccupiedError(0, 0, Mark.X), 3) == \
        ConsoleConfig.CELL_OCCUPIED
    assert renderer.render_error(GameAlreadyOverError(Outcome.draw()), 3) == \
        ConsoleConfig.GAME_ALREADY_OVER


# ==================== FULL GAME ====================

def test_scripted_game_with_mistakes():
    lines = [
        "3", "x",
        "0,0",                        # X
        "abc", "0,0", "9,9", "1,0",   # O: bad format, occupied, out of bounds, ok
        "0,1",                        # X
        "1,1",                        # O
        "0,2",                        # X wins
    ]
    messages = []
    prompter = ConsolePrompter(input_func=scripted(lines), print_func=messages.append)
    game = console_main.TicTacToeConsole(prompter=prompter, print_func=messages.append)

    assert game.run() == 0

    output = "\n".join(messages)
    assert "Tic-Tac-Toe" in output
    assert "Round 1 - X's" in output
    assert "Round 3 - X's" in output
    assert ConsoleConfig.BAD_MOVE_FORMAT in output
    assert ConsoleConfig.CELL_OCCUPIED in output
    assert "Coordinates out of bounds. Options are 0, 1, 2." in output
    assert output.endswith("Game over!\nX's win!")

    assert game.game.outcome().winner == Mark.X
    assert game.game.move_count == 5


def test_main_with_flags(monkeypatch, capsys):
    moves = ["1,1", "0,0", "2,1", "0,1", "0,2", "2,0", "1,0", "1,2", "2,2"]
    monkeypatch.setattr("builtins.input", scripted(moves))

    assert console_main.main(["--size", "3", "--first", "o"]) == 0

    out = capsys.readouterr().out
    assert "Round 1 - O's" in out
    assert "It's a draw!" in out
    assert out.rstrip().endswith("Goodbye!")


def test_main_exits_cleanly_on_eof(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", scripted(["4", "X", "0,0"]))

    assert console_main.main([]) == 0

    out = capsys.readouterr().out
    assert "Game interrupted by user." in out
    assert "Goodbye!" in out


def test_main_rejects_small_size():
    with pytest.raises(SystemExit):
        console_main.parse_args(["--size", "2"])
