"""
Win checker for TicTacToe.
Checks if a mark has completed a line or if the game is a draw.
"""

from typing import Optional, List

import numpy as np

from .board import Board, Mark, Position, mark_from_value
from .config import GameConfig


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 of the same mark in a row
    (horizontally, vertically, or diagonally).
    Lines are checked in order: rows, columns, main diagonal,
    anti-diagonal.
    """

    # All possible winning lines as (column, row) positions
    WINNING_LINES = [
        # Rows
        [Position(1, 1), Position(2, 1), Position(3, 1)],
        [Position(1, 2), Position(2, 2), Position(3, 2)],
        [Position(1, 3), Position(2, 3), Position(3, 3)],
        # Columns
        [Position(1, 1), Position(1, 2), Position(1, 3)],
        [Position(2, 1), Position(2, 2), Position(2, 3)],
        [Position(3, 1), Position(3, 2), Position(3, 3)],
        # Diagonals
        [Position(1, 1), Position(2, 2), Position(3, 3)],
        [Position(3, 1), Position(2, 2), Position(1, 3)],
    ]

    def check_winner(self, board: Board) -> Optional[Mark]:
        """
        Check if there's a winner.

        Args:
            board: The board to evaluate.

        Returns:
            The winning Mark, or None if no line is complete.
        """
        grid = board.as_array()
        for line in self.WINNING_LINES:
            winner = self._check_line(grid, line)
            if winner is not None:
                return winner

        return None

    def _check_line(self, grid: np.ndarray, line: List[Position]) -> Optional[Mark]:
        """
        Check if a single line is owned by one mark.

        Args:
            grid: Numpy view of the board.
            line: Positions to check.

        Returns:
            The owning Mark if all 3 cells match, None otherwise.
        """
        cells = np.array([grid[p.row - 1, p.column - 1] for p in line])

        if cells[0] == GameConfig.EMPTY_VALUE:
            return None  # Empty cell, no winner on this line

        if np.all(cells == cells[0]):
            return mark_from_value(int(cells[0]))

        return None

    def get_winning_line(self, board: Board) -> Optional[List[Position]]:
        """
        Get the winning line if there is one.

        Returns:
            The first complete line's positions, or None.
        """
        grid = board.as_array()
        for line in self.WINNING_LINES:
            if self._check_line(grid, line) is not None:
                return line
        return None

    def check_draw(self, board: Board) -> bool:
        """A draw is a full board with no complete line."""
        if self.check_winner(board) is not None:
            return False
        return board.is_full()


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")

    checker = WinChecker()

    # Test 1: Column win
    board = Board()
    for row in (1, 2, 3):
        board.place(Position(1, row), Mark.O)
    winner = checker.check_winner(board)
    print(f"Test 1 (column): winner = {winner}")
    assert winner == Mark.O

    # Test 2: No winner
    board = Board()
    board.place(Position(1, 1), Mark.X)
    board.place(Position(2, 1), Mark.O)
    winner = checker.check_winner(board)
    print(f"Test 2 (no winner): winner = {winner}")
    assert winner is None

    print("\nWinChecker test done!")
