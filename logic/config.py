"""
Configuration for the console TicTacToe game.
All the settings for the board, symbols and console messages.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Change the console texts here if you want a different look!
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid, coordinates are 1-based
    BOARD_SIZE = 3

    # Numeric cell values used in the numpy grid view
    EMPTY_VALUE = 0

    # ==================== RENDER SETTINGS ====================
    EMPTY_SYMBOL = " "
    CELL_SEPARATOR = "|"

    # ==================== CONSOLE SETTINGS ====================
    PROMPT = "Enter a coordinate (x,y): "
    QUIT_COMMANDS = ("q", "quit")

    CURRENT_TURN_MESSAGE = "Current turn: {mark}"
    INVALID_INPUT_MESSAGE = "Invalid coordinate! Try again."
    OCCUPIED_MESSAGE = "Coordinate already occupied! Try again."
    GAME_OVER_MESSAGE = "Game is already finished!"
    WINNER_MESSAGE = "{mark} WINS! Enter 'q' to quit."
    DRAW_MESSAGE = "It's a DRAW! Enter 'q' to quit."
