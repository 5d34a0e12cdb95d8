"""
Engine module for tic-tac-toe.
Handles the board, move rules, turn order and win/draw detection.
"""

from .config import GameConfig
from .errors import MoveError, OutOfBoundsError, CellOccupiedError, GameAlreadyOverError
from .game_state import Board, Mark
from .win_checker import WinChecker, Outcome, GameStatus
from .move_validator import MoveValidator, ValidationResult
from .game import Game, MoveOutcome
