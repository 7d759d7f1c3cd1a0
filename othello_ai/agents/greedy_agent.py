"""Single-ply positional strategy."""

from typing import Optional

import numpy as np

from ..game.board import Board
from ..game.constants import CellState, Position
from ..search.weights import POSITION_WEIGHTS
from .base_agent import BaseAgent, make_rng

JITTER = 3.0


class GreedyAgent(BaseAgent):
    """
    Picks the legal move with the best positional weight.

    Each candidate scores ``POSITION_WEIGHTS[row, col] + jitter`` with the
    jitter drawn uniformly from [0, 3), so play is not fully predictable.
    The first move seen wins ties.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
        jitter: float = JITTER,
    ):
        self.rng = make_rng(seed, rng)
        self.jitter = jitter

    def pick_move(self, board: Board, player: CellState) -> Position:
        moves = self.legal_moves(board, player)

        best_score = float("-inf")
        best_move = moves[0]
        for move in moves:
            score = float(POSITION_WEIGHTS[move.row, move.col]) + self.rng.uniform(0.0, self.jitter)
            if score > best_score:
                best_score = score
                best_move = move

        return best_move
