"""
Board model for TicTacToe.
Marks, positions and the sparse position -> mark mapping.
"""

from enum import Enum
from typing import Dict, List, Optional
from dataclasses import dataclass, field

import numpy as np

from .config import GameConfig


class Mark(Enum):
    """The two marks a player can place."""
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the opposite mark."""
        return Mark.O if self == Mark.X else Mark.X

    @property
    def symbol(self) -> str:
        """Single-character symbol used when rendering."""
        return self.value


# Values used for each mark in the numpy grid view
MARK_VALUES = {Mark.X: 1, Mark.O: -1}


def mark_from_value(value: int) -> Optional[Mark]:
    """Map a grid value back to its mark (None for empty)."""
    for mark, mark_value in MARK_VALUES.items():
        if mark_value == value:
            return mark
    return None


@dataclass(frozen=True)
class Position:
    """
    A board coordinate.

    Both coordinates are 1-based: column 1 is the left edge,
    row 1 is the top edge.
    """
    column: int
    row: int

    def is_on_board(self, size: int = GameConfig.BOARD_SIZE) -> bool:
        """Check whether the position lies inside the board."""
        return 1 <= self.column <= size and 1 <= self.row <= size


def board_positions(size: int = GameConfig.BOARD_SIZE) -> List[Position]:
    """All on-board positions in row-major order."""
    return [
        Position(column, row)
        for row in range(1, size + 1)
        for column in range(1, size + 1)
    ]


@dataclass
class Board:
    """
    Sparse mapping of positions to marks.

    A position missing from the mapping is empty. The board does not
    bounds-check: any position can be stored, but only on-board cells
    show up in the grid view and count towards a full board.
    """

    cells: Dict[Position, Mark] = field(default_factory=dict)
    size: int = GameConfig.BOARD_SIZE

    def __contains__(self, position: Position) -> bool:
        return position in self.cells

    def __len__(self) -> int:
        return len(self.cells)

    def get(self, position: Position) -> Optional[Mark]:
        """Get the mark at a position, or None if empty."""
        return self.cells.get(position)

    def place(self, position: Position, mark: Mark):
        """Store a mark. Callers must check the position is empty first."""
        self.cells[position] = mark

    def empty_positions(self) -> List[Position]:
        """
        Get all empty on-board positions.

        Returns:
            List of positions in row-major order.
        """
        return [p for p in board_positions(self.size) if p not in self.cells]

    def is_full(self) -> bool:
        """True when every on-board cell holds a mark."""
        return not self.empty_positions()

    def as_array(self) -> np.ndarray:
        """
        Build a numpy grid of the board.

        Returns:
            (size, size) int8 array indexed [row - 1, column - 1],
            1 for X, -1 for O, 0 for empty.
        """
        grid = np.full((self.size, self.size), GameConfig.EMPTY_VALUE, dtype=np.int8)
        for position, mark in self.cells.items():
            if position.is_on_board(self.size):
                grid[position.row - 1, position.column - 1] = MARK_VALUES[mark]
        return grid

    def copy(self) -> "Board":
        """Create a copy of the board."""
        return Board(cells=dict(self.cells), size=self.size)


# Quick test
if __name__ == "__main__":
    print("Testing Board...")

    board = Board()
    board.place(Position(2, 2), Mark.X)
    board.place(Position(1, 3), Mark.O)

    print(board.as_array())
    print(f"Empty cells: {len(board.empty_positions())}")
    assert board.get(Position(2, 2)) == Mark.X
    assert not board.is_full()

    print("\nBoard test done!")
