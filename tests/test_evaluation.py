"""Tests for the static evaluator and positional weights."""

import numpy as np
import pytest

from othello_ai.game import Board, CellState, GameState
from othello_ai.search import POSITION_WEIGHTS, TERMINAL_SCORE, evaluate, terminal_score

EMPTY_ROW = "........"


def test_position_weights_table():
    expected = np.array([
        [100, -20, 10, 5, 5, 10, -20, 100],
        [-20, -50, -2, -2, -2, -2, -50, -20],
        [10, -2, 1, 1, 1, 1, -2, 10],
        [5, -2, 1, 0, 0, 1, -2, 5],
        [5, -2, 1, 0, 0, 1, -2, 5],
        [10, -2, 1, 1, 1, 1, -2, 10],
        [-20, -50, -2, -2, -2, -2, -50, -20],
        [100, -20, 10, 5, 5, 10, -20, 100],
    ])

    assert np.array_equal(POSITION_WEIGHTS, expected)
    assert np.array_equal(POSITION_WEIGHTS, POSITION_WEIGHTS.T)
    assert np.array_equal(POSITION_WEIGHTS, np.fliplr(POSITION_WEIGHTS))


def test_position_weights_read_only():
    with pytest.raises(ValueError):
        POSITION_WEIGHTS[0, 0] = 0


def test_opening_is_balanced():
    assert evaluate(Board(), CellState.BLACK) == pytest.approx(0.0)
    assert evaluate(Board(), CellState.WHITE) == pytest.approx(0.0)


def test_evaluate_after_first_move():
    state = GameState()
    state.make_move(2, 3)

    # positional 1 * 0.5 + disc 60 * 5 * 5/64; corners and mobility are even
    assert evaluate(state.board, CellState.BLACK) == pytest.approx(0.5 + 60 * 25 / 64)


def test_evaluate_positional_and_disc_terms():
    board = Board.from_rows(["XX......"] + [EMPTY_ROW] * 6 + [".......O"])

    # corners +25 - 25, positional (80 - 100) * 0.5, disc 100/3 * 5 * 3/64
    assert evaluate(board, CellState.BLACK) == pytest.approx(-10 + 7.8125)


def test_evaluate_corner_term():
    board = Board.from_rows(["X......."] + [EMPTY_ROW] * 7)

    # corner 25 * 10, positional 100 * 0.5, disc 100 * 5 / 64
    assert evaluate(board, CellState.BLACK) == pytest.approx(250 + 50 + 500 / 64)


def test_evaluate_is_antisymmetric():
    state = GameState()
    for move in [(2, 3), (2, 2), (3, 2), (2, 4)]:
        assert state.make_move(*move) is not None

    black = evaluate(state.board, CellState.BLACK)
    white = evaluate(state.board, CellState.WHITE)
    assert black == pytest.approx(-white)


def test_terminal_score():
    board = Board.from_rows(["XX.....O"] + [EMPTY_ROW] * 7)
    assert terminal_score(board, CellState.BLACK) == TERMINAL_SCORE
    assert terminal_score(board, CellState.WHITE) == -TERMINAL_SCORE

    drawn = Board.from_rows(["X......O"] + [EMPTY_ROW] * 7)
    assert terminal_score(drawn, CellState.BLACK) == 0.0
