"""
Game state management for TicTacToe.
Tracks the board, current turn, winner and move history.
"""

import random
from enum import Enum
from typing import Optional, List
from dataclasses import dataclass, field

from .board import Board, Mark, Position, board_positions
from .config import GameConfig
from .move_validator import MoveResult, MoveValidator
from .win_checker import WinChecker


class GameStatus(Enum):
    """Where the game is in its lifecycle."""
    IN_PROGRESS = "in_progress"
    WON = "won"


@dataclass
class Move:
    """
    An accepted move in the game.
    """
    mark: Mark              # Who made the move
    position: Position      # Where the mark went
    move_number: int        # Which move this is (0-based, across both marks)


_validator = MoveValidator()
_win_checker = WinChecker()


@dataclass
class GameState:
    """
    The complete state of the TicTacToe game.

    Tracks:
    - The board (which marks are where)
    - Current turn
    - The winner, once a line is complete
    - Move history

    The only way to change the game is make_move(). Once a winner is set
    it never changes and every further move is rejected.
    """

    current_turn: Mark = Mark.X
    board: Board = field(default_factory=Board)
    winner: Optional[Mark] = None
    moves: List[Move] = field(default_factory=list)

    @classmethod
    def new_game(
        cls,
        initial_turn: Optional[Mark] = None,
        rng: Optional[random.Random] = None
    ) -> "GameState":
        """
        Start a new game.

        Args:
            initial_turn: Mark that moves first. Picked at random if None.
            rng: Random source for the pick (default: a fresh Random()).

        Returns:
            A fresh GameState.
        """
        if initial_turn is None:
            rng = rng or random.Random()
            initial_turn = rng.choice([Mark.X, Mark.O])
        return cls(current_turn=initial_turn)

    @property
    def status(self) -> GameStatus:
        return GameStatus.WON if self.winner is not None else GameStatus.IN_PROGRESS

    @property
    def is_game_over(self) -> bool:
        return self.status == GameStatus.WON

    def make_move(self, position: Position) -> MoveResult:
        """
        Place the current turn's mark at the given position.

        Args:
            position: Target cell. Not range-checked.

        Returns:
            MoveResult. On failure nothing in the game changes.
        """
        result = _validator.validate_move(self, position)
        if not result.is_valid:
            return result

        mark = self.current_turn
        self.board.place(position, mark)
        self.moves.append(Move(mark=mark, position=position, move_number=len(self.moves)))

        self.winner = _win_checker.check_winner(self.board)

        # Winning move keeps the turn on the winner
        if self.winner is None:
            self.current_turn = mark.opposite()

        return result

    def get_cell(self, position: Position) -> Optional[Mark]:
        """Get the mark at a position, or None if empty."""
        return self.board.get(position)

    def valid_moves(self) -> List[Position]:
        """Empty on-board positions, or [] once the game is won."""
        return _validator.get_valid_moves(self)

    def winning_line(self) -> Optional[List[Position]]:
        """Positions of the completed line, if any."""
        return _win_checker.get_winning_line(self.board)

    def is_draw(self) -> bool:
        """
        Full board with no winner.

        The game has no separate draw state: a drawn game still reports
        IN_PROGRESS and every on-board move fails as occupied.
        """
        return self.winner is None and self.board.is_full()

    def render(self) -> str:
        """
        Render the board as text.

        Returns:
            3 lines like "|X|O| |", row 1 first.
        """
        sep = GameConfig.CELL_SEPARATOR
        lines = []
        for row in range(1, self.board.size + 1):
            cells = []
            for column in range(1, self.board.size + 1):
                mark = self.board.get(Position(column, row))
                cells.append(mark.symbol if mark else GameConfig.EMPTY_SYMBOL)
            lines.append(sep + sep.join(cells) + sep)
        return "\n".join(lines)

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            current_turn=self.current_turn,
            board=self.board.copy(),
            winner=self.winner,
            moves=list(self.moves)
        )

    def occupied_count(self) -> int:
        """Number of on-board cells holding a mark."""
        return len(board_positions(self.board.size)) - len(self.board.empty_positions())


# Quick test
if __name__ == "__main__":
    print("Testing GameState...")

    game = GameState.new_game(initial_turn=Mark.X)

    # X takes the top row
    moves = [(1, 1), (1, 2), (2, 1), (2, 2), (3, 1)]

    for column, row in moves:
        print(f"\n{game.current_turn.value} moves to ({column}, {row})")
        game.make_move(Position(column, row))
        print(game.render())

    print(f"\nWinner: {game.winner}")
    assert game.winner == Mark.X

    print("\nGame state test done!")
