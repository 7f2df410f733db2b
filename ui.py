"""
TicTacToe Console UI
A text interface for two players sharing one terminal.

Shows:
- The board as a pipe-delimited grid
- Whose turn it is
- Why a move was rejected
- The result once someone wins or the board fills up
"""

from typing import Callable, Optional

from logic.config import GameConfig
from logic.board import Mark, Position
from logic.game_state import GameState
from logic.move_validator import MoveError


def parse_position(text: str, size: int = GameConfig.BOARD_SIZE) -> Optional[Position]:
    """
    Parse a "column,row" coordinate typed by a player.

    Unlike the game itself, which accepts any position, the console
    rejects coordinates outside the board as invalid input so a player
    never spends a turn off the board.

    Args:
        text: Raw input line.
        size: Board size used for the range check.

    Returns:
        The Position, or None if the text is not two comma-separated
        plain ASCII digit strings inside the board.
    """
    fields = [f.strip() for f in text.strip().split(",")]
    if len(fields) != 2:
        return None

    # int() alone would also take "+1" and non-ASCII digits
    if not all(f.isascii() and f.isdigit() for f in fields):
        return None

    position = Position(int(fields[0]), int(fields[1]))
    if not position.is_on_board(size):
        return None
    return position


class ConsoleUI:
    """
    Console loop for the TicTacToe game.

    Loop:
    1. Show the board and the current turn
    2. Read a coordinate
    3. Feed it to the game and report what happened
    4. Repeat until the player quits or input runs out
    """

    def __init__(
        self,
        game_state: Optional[GameState] = None,
        input_fn: Optional[Callable[[str], str]] = None,
        output: Optional[Callable[[str], None]] = None,
        config: GameConfig = GameConfig()
    ):
        """
        Initialize the console UI.

        Args:
            game_state: Game to drive (default: new game, random first turn).
            input_fn: Reads one line, given a prompt (default: input).
            output: Writes one message (default: print).
            config: Console texts and board settings.
        """
        self.game_state = game_state or GameState.new_game()
        self.input_fn = input_fn or input
        self.output = output or print
        self.config = config
        self.is_running = False

    def run(self) -> Optional[Mark]:
        """
        Run the loop until the player quits or input ends.

        Returns:
            The winner, or None if nobody won.
        """
        self.is_running = True
        while self.is_running:
            self.output(self.game_state.render())
            self.output(self.config.CURRENT_TURN_MESSAGE.format(
                mark=self.game_state.current_turn.value
            ))

            line = self._read_line()
            if line is None or line.strip().lower() in self.config.QUIT_COMMANDS:
                self.is_running = False
                break

            position = parse_position(line, self.config.BOARD_SIZE)
            if position is None:
                self.output(self.config.INVALID_INPUT_MESSAGE)
                continue

            self._play(position)

        return self.game_state.winner

    def _read_line(self) -> Optional[str]:
        """Read a line, None at end of input."""
        try:
            return self.input_fn(self.config.PROMPT)
        except EOFError:
            return None

    def _play(self, position: Position):
        """Apply a parsed move and report the outcome."""
        result = self.game_state.make_move(position)

        if result.error == MoveError.COORD_OCCUPIED:
            self.output(self.config.OCCUPIED_MESSAGE)
        elif result.error == MoveError.GAME_OVER:
            self.output(self.config.GAME_OVER_MESSAGE)
        elif self.game_state.winner is not None:
            self.output(self.config.WINNER_MESSAGE.format(
                mark=self.game_state.winner.value
            ))
        elif self.game_state.is_draw():
            self.output(self.config.DRAW_MESSAGE)
