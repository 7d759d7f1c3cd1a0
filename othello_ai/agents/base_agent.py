"""Base strategy interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

import numpy as np

from ..game.board import Board
from ..game.constants import CellState, Position
from ..game.move_validator import get_valid_moves


class BaseAgent(ABC):
    """Base class for all move-picking strategies."""

    @abstractmethod
    def pick_move(self, board: Board, player: CellState) -> Position:
        """
        Return a legal move for ``player`` on ``board``.

        Raises:
            ValueError: If ``player`` has no legal move.
        """

    def legal_moves(self, board: Board, player: CellState) -> List[Position]:
        """Legal moves for ``player``; raises if there are none."""
        moves = get_valid_moves(board, player)
        if not moves:
            raise ValueError(
                f"No legal moves available for {player.name}; "
                "check for a pass before asking the AI for a move"
            )
        return moves


def make_rng(seed: Optional[int] = None, rng: Optional[np.random.Generator] = None) -> np.random.Generator:
    if rng is not None:
        return rng
    return np.random.default_rng(seed)
