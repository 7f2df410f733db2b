"""
TicTacToe
=========
A two-player TicTacToe game played on a 3x3 board in the console.
Players take turns entering "column,row" coordinates; the first to
complete a row, column or diagonal wins.
"""

__version__ = "1.0.0"
