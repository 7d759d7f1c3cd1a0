"""Minimax search strategy with alpha-beta pruning."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple

from ..game.board import Board
from ..game.constants import CellState, Position
from ..game.move_validator import apply_move, get_valid_moves
from ..search.evaluation import evaluate, terminal_score
from .base_agent import BaseAgent

logger = logging.getLogger(__name__)


@dataclass
class MinimaxConfig:
    depth: int = 5
    use_alpha_beta: bool = True


class MinimaxAgent(BaseAgent):
    """
    Fixed-depth minimax over :func:`evaluate`.

    Every root move is searched with a fresh (-inf, +inf) window, so the
    root scores are exact and pruning never changes the chosen score.
    A side with no legal move passes without consuming the board; when
    neither side can move the position is scored as won, lost or drawn.
    """

    def __init__(self, depth: int = 5, use_alpha_beta: bool = True, config: Optional[MinimaxConfig] = None) -> None:
        self.config = config or MinimaxConfig(depth=depth, use_alpha_beta=use_alpha_beta)
        if self.config.depth < 0:
            raise ValueError(f"Minimax depth must be >= 0, got {self.config.depth}")
        self.nodes_evaluated = 0

    @property
    def depth(self) -> int:
        return self.config.depth

    def pick_move(self, board: Board, player: CellState) -> Position:
        move, _ = self.search(board, player)
        return move

    def search(self, board: Board, player: CellState) -> Tuple[Position, float]:
        """
        Search every legal root move.

        Returns:
            Tuple of (best_move, best_score). The first move in row-major
            order wins ties.
        """
        moves = self.legal_moves(board, player)
        self.nodes_evaluated = 0
        child_depth = max(self.config.depth - 1, 0)

        best_score = -math.inf
        best_move = moves[0]
        for move in moves:
            new_board, _ = apply_move(board, move.row, move.col, player)
            score = self._minimax(new_board, child_depth, -math.inf, math.inf, False, player)
            if score > best_score:
                best_score = score
                best_move = move

        logger.debug(
            "Minimax depth=%d picked %s score=%.2f (%d nodes)",
            self.config.depth,
            best_move,
            best_score,
            self.nodes_evaluated,
        )
        return best_move, best_score

    def _minimax(
        self,
        board: Board,
        depth: int,
        alpha: float,
        beta: float,
        is_maximizing: bool,
        ai_player: CellState,
    ) -> float:
        self.nodes_evaluated += 1

        mover = ai_player if is_maximizing else ai_player.opponent()
        moves = get_valid_moves(board, mover)

        if not moves:
            if not get_valid_moves(board, mover.opponent()):
                return terminal_score(board, ai_player)
            # Forced pass: same board, other side to move.
            return self._minimax(board, depth - 1, alpha, beta, not is_maximizing, ai_player)

        if depth <= 0:
            return evaluate(board, ai_player)

        if is_maximizing:
            value = -math.inf
            for move in moves:
                new_board, _ = apply_move(board, move.row, move.col, mover)
                score = self._minimax(new_board, depth - 1, alpha, beta, False, ai_player)
                value = max(value, score)
                alpha = max(alpha, score)
                if self.config.use_alpha_beta and beta <= alpha:
                    break
            return value

        value = math.inf
        for move in moves:
            new_board, _ = apply_move(board, move.row, move.col, mover)
            score = self._minimax(new_board, depth - 1, alpha, beta, True, ai_player)
            value = min(value, score)
            beta = min(beta, score)
            if self.config.use_alpha_beta and beta <= alpha:
                break
        return value
