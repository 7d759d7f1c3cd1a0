"""Shared constants and small value types for the Othello core."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import NamedTuple

BOARD_SIZE = 8

DIRECTIONS = [(-1, -1), (-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0), (1, 1)]

CORNERS = [(0, 0), (0, BOARD_SIZE - 1), (BOARD_SIZE - 1, 0), (BOARD_SIZE - 1, BOARD_SIZE - 1)]


class CellState(IntEnum):
    """State of a single board cell. Black moves first."""

    EMPTY = 0
    BLACK = 1
    WHITE = 2

    def opponent(self) -> "CellState":
        """Get the opposing colour."""
        if self == CellState.BLACK:
            return CellState.WHITE
        if self == CellState.WHITE:
            return CellState.BLACK
        raise ValueError("EMPTY has no opponent")

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {CellState.EMPTY: ".", CellState.BLACK: "X", CellState.WHITE: "O"}


class Position(NamedTuple):
    row: int
    col: int


class Difficulty(str, Enum):
    """AI difficulty tiers offered to the player."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
