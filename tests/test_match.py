"""Tests for match play and the command line entry points."""

import itertools

import pytest

from othello_ai.agents import GreedyAgent, RandomAgent
from othello_ai.cli.play_agent_vs_agent import play_agent_vs_agent
from othello_ai.cli.play_human_vs_agent import play_human_vs_agent
from othello_ai.game import Board, CellState, GameState
from othello_ai.utils import play_game, play_match


def test_play_game_records_moves():
    record = play_game(RandomAgent(seed=1), RandomAgent(seed=2))

    assert record.score.black + record.score.white == 4 + len(record.moves)
    assert record.moves[0][0] == CellState.BLACK
    if record.score.black > record.score.white:
        assert record.winner == CellState.BLACK
    elif record.score.white > record.score.black:
        assert record.winner == CellState.WHITE
    else:
        assert record.winner is None


def test_play_game_from_stuck_position():
    board = Board.from_rows(["X......O"] + ["........"] * 7)
    record = play_game(RandomAgent(seed=0), RandomAgent(seed=0), state=GameState.from_board(board))

    assert record.moves == []
    assert record.passes == 2
    assert record.winner is None


def test_play_game_rejects_illegal_agent():
    class _Cheater:
        def pick_move(self, board, player):
            return (0, 0)

    with pytest.raises(RuntimeError):
        play_game(_Cheater(), RandomAgent(seed=0))


def test_play_game_is_reproducible():
    first = play_game(RandomAgent(seed=5), GreedyAgent(seed=6))
    second = play_game(RandomAgent(seed=5), GreedyAgent(seed=6))
    assert first.moves == second.moves


@pytest.mark.parametrize("alternate_colors", [True, False])
def test_play_match_tally(alternate_colors):
    agent1_wins, draws, agent2_wins = play_match(
        GreedyAgent(seed=0), RandomAgent(seed=1), num_games=4, alternate_colors=alternate_colors
    )
    assert agent1_wins + draws + agent2_wins == 4


def test_agent_vs_agent_cli(capsys):
    play_agent_vs_agent(agent1_type="easy", agent2_type="medium", num_games=2, seed=0)
    out = capsys.readouterr().out

    assert "Playing 2 games: easy vs medium" in out
    assert "Draws:" in out


def test_agent_vs_agent_cli_render(capsys):
    play_agent_vs_agent(agent1_type="random", agent2_type="greedy", render=True, seed=0)
    out = capsys.readouterr().out

    assert "Black: random, White: greedy" in out
    assert "X: " in out


def test_human_vs_agent_cli(monkeypatch, capsys):
    # Try every cell in turn; illegal attempts are rejected and retried.
    attempts = itertools.cycle(
        ["bad input", "9 9"] + [f"{row} {col}" for row in range(8) for col in range(8)]
    )
    monkeypatch.setattr("builtins.input", lambda prompt="": next(attempts))

    play_human_vs_agent(difficulty="easy", seed=0)
    out = capsys.readouterr().out

    assert "Your turn! Legal moves:" in out
    assert "Invalid move!" in out
    assert any(line in out for line in ("You win!", "Computer wins!", "It's a draw!"))
