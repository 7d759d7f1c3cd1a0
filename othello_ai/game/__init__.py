"""Othello board, rules and game state."""

from .board import Board, PieceCounts
from .constants import BOARD_SIZE, CORNERS, CellState, Difficulty, Position
from .game_state import GameState, MoveResult
from .move_validator import apply_move, get_flipped_discs, get_valid_moves, has_valid_move, is_valid_move

__all__ = [
    "BOARD_SIZE",
    "CORNERS",
    "Board",
    "CellState",
    "Difficulty",
    "GameState",
    "MoveResult",
    "PieceCounts",
    "Position",
    "apply_move",
    "get_flipped_discs",
    "get_valid_moves",
    "has_valid_move",
    "is_valid_move",
]
