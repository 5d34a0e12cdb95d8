"""
Console configuration for tic-tac-toe.
Text and layout settings for the prompts and the board printout.
Change these to restyle the console game; the engine never reads them.
"""


class ConsoleConfig:
    """
    Configuration class for console settings.
    """

    # ==================== BANNER ====================
    TITLE = "Tic-Tac-Toe"
    BANNER_WIDTH = 40

    # ==================== PROMPTS ====================
    SIZE_PROMPT = "Board size? [3] "
    FIRST_MOVER_PROMPT = "Who moves first? [X/O] "
    MOVE_PROMPT = "Where will you move? [row,col] "

    # Separator between the two numbers of a move
    COORD_SEPARATOR = ","

    # ==================== MESSAGES ====================
    BAD_MOVE_FORMAT = "Please enter two digits, separated by a comma."
    BAD_SIZE = "Please enter a whole number of at least {min_size}."
    BAD_FIRST_MOVER = "Please enter X or O."
    OUT_OF_BOUNDS = "Coordinates out of bounds. Options are {options}."
    CELL_OCCUPIED = "Someone has already moved there!"
    GAME_ALREADY_OVER = "The game is already over!"

    # ==================== BOARD LAYOUT ====================
    # Gap between cells on a row
    CELL_GAP = "  "

    # Print row/column numbers around the grid
    SHOW_COORDINATES = True
