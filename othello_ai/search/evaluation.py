"""Static evaluation of Othello positions for search algorithms."""

from __future__ import annotations

import numpy as np

from ..game.board import Board
from ..game.constants import BOARD_SIZE, CORNERS, CellState
from ..game.move_validator import get_valid_moves
from .weights import POSITION_WEIGHTS

CORNER_VALUE = 25
CORNER_WEIGHT = 10
POSITIONAL_WEIGHT = 0.5
PHASE_WEIGHT = 5
TERMINAL_SCORE = 10000


def evaluate(board: Board, ai_player: CellState) -> float:
    """
    Score ``board`` from ``ai_player``'s point of view (higher is better).

    Blends four terms:

    * corner occupancy (+/-25 per corner, times 10)
    * mobility, normalised to [-100, 100] and weighted ``5 * (1 - progress)``
    * positional table sum, times 0.5
    * disc differential, normalised to [-100, 100] and weighted ``5 * progress``

    where ``progress`` is the fraction of the 64 cells that are occupied.
    """
    opponent = ai_player.opponent()
    cells = board.cells

    ai_mask = cells == ai_player
    opp_mask = cells == opponent
    ai_count = int(np.count_nonzero(ai_mask))
    opp_count = int(np.count_nonzero(opp_mask))

    corner_score = 0
    for row, col in CORNERS:
        if cells[row, col] == ai_player:
            corner_score += CORNER_VALUE
        elif cells[row, col] == opponent:
            corner_score -= CORNER_VALUE

    ai_moves = len(get_valid_moves(board, ai_player))
    opp_moves = len(get_valid_moves(board, opponent))
    mobility_score = 0.0
    if ai_moves + opp_moves > 0:
        mobility_score = 100 * (ai_moves - opp_moves) / (ai_moves + opp_moves)

    positional_score = int(POSITION_WEIGHTS[ai_mask].sum()) - int(POSITION_WEIGHTS[opp_mask].sum())

    disc_score = 0.0
    if ai_count + opp_count > 0:
        disc_score = 100 * (ai_count - opp_count) / (ai_count + opp_count)

    progress = (ai_count + opp_count) / (BOARD_SIZE * BOARD_SIZE)
    mobility_weight = PHASE_WEIGHT * (1 - progress)
    disc_weight = PHASE_WEIGHT * progress

    return (
        corner_score * CORNER_WEIGHT
        + mobility_score * mobility_weight
        + positional_score * POSITIONAL_WEIGHT
        + disc_score * disc_weight
    )


def terminal_score(board: Board, ai_player: CellState) -> float:
    """Fixed win/loss/draw score for a finished position."""
    counts = board.count_pieces()
    if ai_player == CellState.BLACK:
        ai_count, opp_count = counts.black, counts.white
    else:
        ai_count, opp_count = counts.white, counts.black

    if ai_count > opp_count:
        return float(TERMINAL_SCORE)
    if ai_count < opp_count:
        return float(-TERMINAL_SCORE)
    return 0.0
