"""Fixed 8x8 Othello board."""

from __future__ import annotations

from typing import NamedTuple, Sequence

import numpy as np

from .constants import BOARD_SIZE, CellState

_CHAR_TO_CELL = {
    ".": CellState.EMPTY,
    "X": CellState.BLACK,
    "B": CellState.BLACK,
    "O": CellState.WHITE,
    "W": CellState.WHITE,
}


class PieceCounts(NamedTuple):
    black: int
    white: int
    empty: int


class Board:
    """
    8x8 grid of cell states.

    A new board holds the standard opening: White on (3,3) and (4,4),
    Black on (3,4) and (4,3). Cells live in an ``int8`` numpy array
    holding ``CellState`` values.
    """

    def __init__(self) -> None:
        self.cells = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)

        mid = BOARD_SIZE // 2
        self.cells[mid - 1, mid - 1] = CellState.WHITE
        self.cells[mid - 1, mid] = CellState.BLACK
        self.cells[mid, mid - 1] = CellState.BLACK
        self.cells[mid, mid] = CellState.WHITE

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Board":
        """
        Build a board from 8 strings of 8 characters.

        ``.`` is empty, ``X``/``B`` is black and ``O``/``W`` is white.
        Whitespace inside a row is ignored.
        """
        if len(rows) != BOARD_SIZE:
            raise ValueError(f"Expected {BOARD_SIZE} rows, got {len(rows)}")

        board = cls()
        for row, line in enumerate(rows):
            chars = "".join(line.split()).upper()
            if len(chars) != BOARD_SIZE:
                raise ValueError(f"Row {row} must have {BOARD_SIZE} cells: {line!r}")
            for col, ch in enumerate(chars):
                if ch not in _CHAR_TO_CELL:
                    raise ValueError(f"Unknown cell character {ch!r} in row {row}")
                board.cells[row, col] = _CHAR_TO_CELL[ch]
        return board

    def clone(self) -> "Board":
        new_board = Board.__new__(Board)
        new_board.cells = self.cells.copy()
        return new_board

    copy = clone

    def get_cell(self, row: int, col: int) -> CellState:
        _check_bounds(row, col)
        return CellState(int(self.cells[row, col]))

    def set_cell(self, row: int, col: int, state: CellState) -> None:
        _check_bounds(row, col)
        self.cells[row, col] = state

    def count_pieces(self) -> PieceCounts:
        black = int(np.sum(self.cells == CellState.BLACK))
        white = int(np.sum(self.cells == CellState.WHITE))
        return PieceCounts(black=black, white=white, empty=BOARD_SIZE * BOARD_SIZE - black - white)

    def render(self) -> str:
        lines = ["  " + " ".join(str(i) for i in range(BOARD_SIZE))]
        for row in range(BOARD_SIZE):
            symbols = " ".join(CellState(int(v)).symbol for v in self.cells[row])
            lines.append(f"{row} {symbols}")
        return "\n".join(lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.cells, other.cells))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        counts = self.count_pieces()
        return f"Board(black={counts.black}, white={counts.white}, empty={counts.empty})"

    def __str__(self) -> str:
        return self.render()


def _check_bounds(row: int, col: int) -> None:
    if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
        raise IndexError(f"Cell ({row}, {col}) is outside the {BOARD_SIZE}x{BOARD_SIZE} board")
