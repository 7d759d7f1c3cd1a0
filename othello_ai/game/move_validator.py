"""Move legality, flip computation and move application."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from .board import Board
from .constants import BOARD_SIZE, DIRECTIONS, CellState, Position

Grid = Sequence[Sequence[int]]


def _scan_flips(cells: Grid, row: int, col: int, player: CellState) -> List[Position]:
    if cells[row][col] != CellState.EMPTY:
        return []

    opponent = player.opponent()
    flips: List[Position] = []

    for dr, dc in DIRECTIONS:
        line = []
        r, c = row + dr, col + dc

        while 0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE and cells[r][c] == opponent:
            line.append(Position(r, c))
            r += dr
            c += dc

        if line and 0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE and cells[r][c] == player:
            flips.extend(line)

    return flips


def get_flipped_discs(board: Board, row: int, col: int, player: CellState) -> List[Position]:
    """
    Get all discs that would be flipped by ``player`` placing at (row, col).

    Args:
        board: Board to inspect (not modified).
        row: Row position.
        col: Column position.
        player: Colour to move.

    Returns:
        Flipped positions ordered by scan direction, then by distance from
        the placed cell. Empty when the target is occupied or captures nothing.
    """
    if board.get_cell(row, col) != CellState.EMPTY:
        return []
    return _scan_flips(board.cells.tolist(), row, col, player)


def is_valid_move(board: Board, row: int, col: int, player: CellState) -> bool:
    return len(get_flipped_discs(board, row, col, player)) > 0


def get_valid_moves(board: Board, player: CellState) -> List[Position]:
    """All legal moves for ``player`` in row-major order."""
    cells = board.cells.tolist()
    moves = []
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            if _scan_flips(cells, row, col, player):
                moves.append(Position(row, col))
    return moves


def has_valid_move(board: Board, player: CellState) -> bool:
    cells = board.cells.tolist()
    return any(
        _scan_flips(cells, row, col, player)
        for row in range(BOARD_SIZE)
        for col in range(BOARD_SIZE)
    )


def apply_move(board: Board, row: int, col: int, player: CellState) -> Tuple[Board, List[Position]]:
    """
    Play ``player`` at (row, col) on a copy of ``board``.

    The input board is never mutated. Legality is not checked here: an
    illegal placement still sets the target cell and flips nothing.

    Returns:
        Tuple of (new_board, flipped_positions).
    """
    flips = get_flipped_discs(board, row, col, player)

    new_board = board.clone()
    new_board.cells[row, col] = player
    for flip_row, flip_col in flips:
        new_board.cells[flip_row, flip_col] = player

    return new_board, flips
