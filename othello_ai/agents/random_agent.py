"""Random strategy implementation."""

from typing import Optional

import numpy as np

from ..game.board import Board
from ..game.constants import CellState, Position
from .base_agent import BaseAgent, make_rng


class RandomAgent(BaseAgent):
    """Agent that picks uniformly among legal moves."""

    def __init__(self, seed: Optional[int] = None, rng: Optional[np.random.Generator] = None):
        """
        Initialize random agent.

        Args:
            seed: Random seed for reproducibility
            rng: Generator to draw from (takes precedence over ``seed``)
        """
        self.rng = make_rng(seed, rng)

    def pick_move(self, board: Board, player: CellState) -> Position:
        moves = self.legal_moves(board, player)
        return moves[int(self.rng.integers(len(moves)))]
