"""
Game configuration for the tic-tac-toe engine.
Board limits and defaults used by the engine and its drivers.
"""


class GameConfig:
    """
    Configuration class for game settings.
    """

    # ==================== BOARD SETTINGS ====================
    # Smallest board that still has a meaningful game
    MIN_BOARD_SIZE = 3

    # Board size used when the player just hits enter
    DEFAULT_BOARD_SIZE = 3

    # ==================== PLAYER SETTINGS ====================
    # Symbols accepted as the first mover (see Mark)
    PLAYER_SYMBOLS = ("X", "O")
    DEFAULT_FIRST_MOVER = "X"
