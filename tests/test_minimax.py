"""Tests for the minimax strategy."""

import numpy as np
import pytest

from othello_ai.agents import MinimaxAgent, MinimaxConfig, RandomAgent
from othello_ai.game import Board, CellState, GameState, get_valid_moves
from othello_ai.search import TERMINAL_SCORE

EMPTY_ROW = "........"


def _random_positions(num_positions, plies, seed=0):
    """Positions reached by random play, as (board, player_to_move)."""
    positions = []
    rng = np.random.default_rng(seed)
    for _ in range(num_positions):
        state = GameState()
        agent = RandomAgent(rng=rng)
        for _ in range(plies):
            if state.game_over:
                break
            move = agent.pick_move(state.board, state.current_player)
            state.make_move(*move)
        if not state.game_over:
            positions.append((state.board.clone(), state.current_player))
    return positions


def test_config_defaults():
    agent = MinimaxAgent()
    assert agent.config == MinimaxConfig(depth=5, use_alpha_beta=True)
    assert agent.depth == 5


def test_negative_depth_rejected():
    with pytest.raises(ValueError):
        MinimaxAgent(depth=-1)


def test_requires_legal_moves():
    board = Board.from_rows(["X......O"] + [EMPTY_ROW] * 7)
    with pytest.raises(ValueError, match="No legal moves"):
        MinimaxAgent(depth=2).pick_move(board, CellState.BLACK)


@pytest.mark.parametrize("depth", [0, 1, 2, 3, 4, 5])
def test_returns_legal_move_from_opening(depth):
    board = Board()
    move = MinimaxAgent(depth=depth).pick_move(board, CellState.BLACK)
    assert move in get_valid_moves(board, CellState.BLACK)


@pytest.mark.parametrize("depth", [0, 1, 2, 3])
def test_returns_legal_move_midgame(depth):
    agent = MinimaxAgent(depth=depth)
    for board, player in _random_positions(4, plies=20, seed=depth):
        move = agent.pick_move(board, player)
        assert move in get_valid_moves(board, player)


def test_depth_zero_matches_depth_one():
    for board, player in _random_positions(3, plies=10, seed=11):
        assert MinimaxAgent(depth=0).search(board, player) == MinimaxAgent(depth=1).search(board, player)


def test_search_does_not_mutate_board():
    board = Board()
    before = board.clone()

    MinimaxAgent(depth=3).search(board, CellState.BLACK)

    assert board == before


@pytest.mark.parametrize("depth", [1, 2, 3])
def test_pruning_preserves_root_score(depth):
    for board, player in _random_positions(4, plies=12, seed=100 + depth):
        pruned = MinimaxAgent(depth=depth, use_alpha_beta=True)
        exhaustive = MinimaxAgent(depth=depth, use_alpha_beta=False)

        pruned_move, pruned_score = pruned.search(board, player)
        full_move, full_score = exhaustive.search(board, player)

        assert pruned_score == pytest.approx(full_score)
        assert pruned_move == full_move
        assert pruned.nodes_evaluated <= exhaustive.nodes_evaluated


def test_pruning_skips_nodes():
    board = Board()
    pruned = MinimaxAgent(depth=4, use_alpha_beta=True)
    exhaustive = MinimaxAgent(depth=4, use_alpha_beta=False)

    pruned.search(board, CellState.BLACK)
    exhaustive.search(board, CellState.BLACK)

    assert pruned.nodes_evaluated < exhaustive.nodes_evaluated


def test_finds_immediate_win():
    board = Board.from_rows(["XO......"] + [EMPTY_ROW] * 7)

    move, score = MinimaxAgent(depth=1).search(board, CellState.BLACK)

    assert move == (0, 2)
    assert score == TERMINAL_SCORE


def test_win_through_forced_pass():
    board = Board.from_rows(["XO......"] + [EMPTY_ROW] * 6 + ["XO......"])

    move, score = MinimaxAgent(depth=3).search(board, CellState.BLACK)

    assert move == (0, 2)
    assert score == TERMINAL_SCORE


def test_pass_at_horizon_evaluates_statically():
    board = Board.from_rows(["XO......"] + [EMPTY_ROW] * 6 + ["XO......"])

    move, score = MinimaxAgent(depth=2).search(board, CellState.BLACK)

    assert move in [(0, 2), (7, 2)]
    assert score != TERMINAL_SCORE


def test_minimax_plays_full_game_against_random():
    state = GameState()
    minimax = MinimaxAgent(depth=2)
    opponent = RandomAgent(seed=0)

    while not state.game_over:
        agent = minimax if state.current_player == CellState.BLACK else opponent
        move = agent.pick_move(state.board, state.current_player)
        assert state.make_move(*move) is not None

    assert state.game_over
