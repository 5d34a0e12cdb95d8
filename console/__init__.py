"""
Console module for tic-tac-toe.
Handles prompting for input and printing the board and results.
"""

from .config import ConsoleConfig
from .prompts import ConsolePrompter
from .renderer import BoardRenderer
