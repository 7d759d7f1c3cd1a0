"""Utilities for playing games between move pickers."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from ..game.board import PieceCounts
from ..game.constants import CellState, Position
from ..game.game_state import GameState

logger = logging.getLogger(__name__)


@dataclass
class GameRecord:
    """Outcome of one finished game."""

    winner: Optional[CellState]
    score: PieceCounts
    moves: List[Tuple[CellState, Position]] = field(default_factory=list)
    passes: int = 0


def play_game(black_agent: Any, white_agent: Any, state: Optional[GameState] = None) -> GameRecord:
    """
    Play one game to completion.

    Args:
        black_agent: Move picker for Black (anything with ``pick_move``).
        white_agent: Move picker for White.
        state: Optional starting state (default: a fresh game).

    Returns:
        GameRecord with the winner (None for a draw), final counts and the
        sequence of moves played.
    """
    if state is None:
        state = GameState()

    record_moves: List[Tuple[CellState, Position]] = []
    passes = 0

    while not state.game_over:
        player = state.current_player
        if not state.get_valid_moves_for_current():
            state.pass_turn()
            passes += 1
            continue

        agent = black_agent if player == CellState.BLACK else white_agent
        row, col = agent.pick_move(state.board, player)
        if state.make_move(row, col) is None:
            raise RuntimeError(f"{type(agent).__name__} returned illegal move ({row}, {col}) for {player.name}")
        record_moves.append((player, Position(row, col)))

    return GameRecord(winner=state.winner, score=state.score(), moves=record_moves, passes=passes)


def play_match(
    agent1: Any,
    agent2: Any,
    num_games: int = 10,
    alternate_colors: bool = True,
) -> Tuple[int, int, int]:
    """
    Play a match between two move pickers.

    Args:
        agent1: First agent (plays Black in the first game).
        agent2: Second agent.
        num_games: Number of games to play.
        alternate_colors: If True, agents swap colours every game. If False,
            agent1 always plays Black.

    Returns:
        Tuple of (agent1_wins, draws, agent2_wins).
    """
    agent1_wins = 0
    draws = 0
    agent2_wins = 0

    for game_idx in range(num_games):
        agent1_is_black = not alternate_colors or game_idx % 2 == 0
        if agent1_is_black:
            record = play_game(agent1, agent2)
            agent1_color = CellState.BLACK
        else:
            record = play_game(agent2, agent1)
            agent1_color = CellState.WHITE

        if record.winner is None:
            draws += 1
        elif record.winner == agent1_color:
            agent1_wins += 1
        else:
            agent2_wins += 1

        logger.debug(
            "Game %d: black=%d white=%d winner=%s",
            game_idx + 1,
            record.score.black,
            record.score.white,
            record.winner.name if record.winner is not None else "draw",
        )

    return agent1_wins, draws, agent2_wins
