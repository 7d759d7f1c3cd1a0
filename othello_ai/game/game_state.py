"""Turn-by-turn game state machine for Othello."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .board import Board, PieceCounts
from .constants import CellState, Position
from .move_validator import get_flipped_discs, get_valid_moves

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveResult:
    """A successful move: where the disc went and what it flipped."""

    placed: Position
    flipped: List[Position] = field(default_factory=list)


class GameState:
    """
    Authoritative state of one game.

    Tracks:
    - The board (mutated in place by successive moves)
    - Whose turn it is
    - Consecutive passes, used to detect that neither side can move
    - Game result (game_over, winner; winner is None for a draw)
    """

    def __init__(self) -> None:
        self.board = Board()
        self.current_player = CellState.BLACK
        self.game_over = False
        self.winner: Optional[CellState] = None
        self.consecutive_passes = 0

    @classmethod
    def from_board(cls, board: Board, current_player: CellState = CellState.BLACK) -> "GameState":
        """Start a game from an arbitrary position. The board is copied."""
        if current_player == CellState.EMPTY:
            raise ValueError("current_player must be BLACK or WHITE")
        state = cls()
        state.board = board.clone()
        state.current_player = current_player
        return state

    def get_valid_moves_for_current(self) -> List[Position]:
        return get_valid_moves(self.board, self.current_player)

    def make_move(self, row: int, col: int) -> Optional[MoveResult]:
        """
        Play the current player's disc at (row, col).

        Args:
            row: Row index (0-7).
            col: Column index (0-7).

        Returns:
            MoveResult on success, None if the game is over or the move is
            illegal. An illegal attempt leaves the state untouched.
        """
        if self.game_over:
            return None

        flipped = get_flipped_discs(self.board, row, col, self.current_player)
        if not flipped:
            return None

        self.board.set_cell(row, col, self.current_player)
        for pos in flipped:
            self.board.set_cell(pos.row, pos.col, self.current_player)

        self.consecutive_passes = 0
        result = MoveResult(placed=Position(row, col), flipped=flipped)

        self._switch_turn()
        return result

    def pass_turn(self) -> bool:
        """
        Explicitly pass when the current player has no legal move.

        Returns:
            True if the pass was recorded, False if passing is not allowed.
        """
        if self.game_over:
            return False
        if self.get_valid_moves_for_current():
            return False

        self.consecutive_passes += 1
        logger.debug("%s passes (consecutive=%d)", self.current_player.name, self.consecutive_passes)
        if self.consecutive_passes >= 2:
            self._end_game()
            return True

        self.current_player = self.current_player.opponent()
        return True

    def _switch_turn(self) -> None:
        self.current_player = self.current_player.opponent()

        if self.get_valid_moves_for_current():
            self.consecutive_passes = 0
            return

        # Next player is stuck: count the pass and hand the turn back.
        self.consecutive_passes += 1
        logger.debug("%s has no legal move and passes", self.current_player.name)
        if self.consecutive_passes >= 2:
            self._end_game()
            return

        self.current_player = self.current_player.opponent()
        if not self.get_valid_moves_for_current():
            self.consecutive_passes += 1
            self._end_game()

    def _end_game(self) -> None:
        self.game_over = True
        counts = self.board.count_pieces()
        if counts.black > counts.white:
            self.winner = CellState.BLACK
        elif counts.white > counts.black:
            self.winner = CellState.WHITE
        else:
            self.winner = None
        logger.debug(
            "Game over: black=%d white=%d winner=%s",
            counts.black,
            counts.white,
            self.winner.name if self.winner is not None else "draw",
        )

    def score(self) -> PieceCounts:
        return self.board.count_pieces()

    def is_board_full(self) -> bool:
        return self.board.count_pieces().empty == 0

    def render(self) -> str:
        counts = self.board.count_pieces()
        lines = [self.board.render(), f"X: {counts.black}, O: {counts.white}"]
        if self.game_over:
            if self.winner is None:
                lines.append("Draw!")
            else:
                lines.append(f"{self.winner.name.capitalize()} ({self.winner.symbol}) wins!")
        else:
            lines.append(f"Current player: {self.current_player.name.capitalize()} ({self.current_player.symbol})")
        return "\n".join(lines)
