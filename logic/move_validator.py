"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from enum import Enum
from typing import Optional, List, TYPE_CHECKING
from dataclasses import dataclass

from .board import Position

if TYPE_CHECKING:
    from .game_state import GameState


class MoveError(Enum):
    """Why a move was rejected."""
    COORD_OCCUPIED = "coord_occupied"
    GAME_OVER = "game_over"


@dataclass
class MoveResult:
    """Result of a move or of its validation."""
    is_valid: bool
    error: Optional[MoveError] = None
    error_message: Optional[str] = None

    @classmethod
    def ok(cls) -> "MoveResult":
        return cls(is_valid=True)

    @classmethod
    def fail(cls, error: MoveError, message: str) -> "MoveResult":
        return cls(is_valid=False, error=error, error_message=message)


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Can only place on empty cells

    Positions are not range-checked; any coordinate is addressable.
    """

    def validate_move(self, game_state: "GameState", position: Position) -> MoveResult:
        """
        Validate a move without changing the game.

        Args:
            game_state: Current game state.
            position: Where the current mark would go.

        Returns:
            MoveResult with is_valid and the error, if any.
        """
        if game_state.is_game_over:
            return MoveResult.fail(
                MoveError.GAME_OVER,
                f"Game is already over! {game_state.winner.value} won."
            )

        occupant = game_state.board.get(position)
        if occupant is not None:
            return MoveResult.fail(
                MoveError.COORD_OCCUPIED,
                f"Cell ({position.column}, {position.row}) is already occupied by {occupant.value}"
            )

        return MoveResult.ok()

    def get_valid_moves(self, game_state: "GameState") -> List[Position]:
        """
        Get all valid on-board moves for the current mark.

        Returns:
            Empty positions in row-major order, or [] once the game is won.
        """
        if game_state.is_game_over:
            return []

        return game_state.board.empty_positions()


# Quick test
if __name__ == "__main__":
    from .game_state import GameState
    from .board import Mark

    print("Testing MoveValidator...")

    game = GameState.new_game(initial_turn=Mark.X)
    validator = MoveValidator()

    result = validator.validate_move(game, Position(2, 2))
    print(f"Move (2,2): valid={result.is_valid}, error={result.error_message}")

    game.make_move(Position(2, 2))

    result = validator.validate_move(game, Position(2, 2))
    print(f"Move (2,2) again: valid={result.is_valid}, error={result.error_message}")

    print(f"Valid moves: {len(validator.get_valid_moves(game))}")

    print("\nMoveValidator test done!")
