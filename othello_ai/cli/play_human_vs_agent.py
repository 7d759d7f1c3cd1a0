"""CLI for playing against the computer."""

from typing import Literal, Optional, Tuple

import tyro

from othello_ai.agents import make_player
from othello_ai.config import load_config
from othello_ai.game import BOARD_SIZE, CellState, GameState


def _parse_move(text: str) -> Optional[Tuple[int, int]]:
    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        return None
    try:
        row, col = int(parts[0]), int(parts[1])
    except ValueError:
        return None
    if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
        return None
    return row, col


def play_human_vs_agent(
    difficulty: Literal["easy", "medium", "hard"] = "medium",
    human_first: bool = True,
    depth: Optional[int] = None,
    seed: Optional[int] = None,
    config: Optional[str] = None,
):
    """
    Play a game of Othello against the computer.

    Args:
        difficulty: AI difficulty ('easy', 'medium' or 'hard')
        human_first: Whether the human plays Black (Black moves first)
        depth: Search depth override for the 'hard' difficulty
        seed: Random seed for the easy and medium opponents
        config: Optional YAML config; its ``agent`` entry replaces ``difficulty``
    """
    agent_id = difficulty
    params = {}
    if config is not None:
        app_cfg = load_config(config)
        agent_id = app_cfg.agent.id
        params = dict(app_cfg.agent.params)
        human_first = app_cfg.human_first
        if seed is None:
            seed = app_cfg.seed
    if depth is not None:
        params["depth"] = depth

    agent = make_player(agent_id, params, seed=seed)
    human = CellState.BLACK if human_first else CellState.WHITE

    print("=" * 50)
    print("Othello - Human vs Computer")
    print("=" * 50)
    print(f"Opponent: {agent_id}")
    print(f"You play: {human.name.capitalize()} ({human.symbol})")
    print("Enter moves as 'row col', e.g. '2 3'.")
    print("=" * 50)
    print()

    state = GameState()

    while not state.game_over:
        print(state.render())
        player = state.current_player
        legal_moves = state.get_valid_moves_for_current()

        if not legal_moves:
            print(f"{player.name.capitalize()} has no legal move and passes.")
            state.pass_turn()
            continue

        if player == human:
            hints = ", ".join(f"{m.row} {m.col}" for m in legal_moves)
            print(f"Your turn! Legal moves: {hints}")
            while True:
                move = _parse_move(input("Enter move: "))
                if move is None:
                    print("Please enter a row and a column between 0 and 7!")
                    continue
                result = state.make_move(*move)
                if result is not None:
                    break
                print("Invalid move! That cell does not flip anything.")
        else:
            print("Computer's turn...")
            move = agent.pick_move(state.board, player)
            result = state.make_move(move.row, move.col)
            print(f"Computer plays: {move.row} {move.col}")

        print(f"Flipped {len(result.flipped)} disc(s).")
        if state.current_player == player and not state.game_over:
            print(f"{player.opponent().name.capitalize()} has no legal move and passes.")
        print()

    print(state.render())
    if state.winner is None:
        print("It's a draw! 🤝")
    elif state.winner == human:
        print("You win! 🎉")
    else:
        print("Computer wins! 😢")


def main() -> None:
    tyro.cli(play_human_vs_agent)


if __name__ == "__main__":
    main()
