"""
Logic module for TicTacToe.
Handles the board, game state, rules and win detection.
"""

from .config import GameConfig
from .board import Board, Mark, Position
from .game_state import GameState, GameStatus, Move
from .move_validator import MoveError, MoveResult, MoveValidator
from .win_checker import WinChecker
