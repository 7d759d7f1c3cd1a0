"""CLI for playing agent vs agent."""

from typing import Literal, Optional

import tyro

from othello_ai.agents import make_player
from othello_ai.config import load_config
from othello_ai.utils import play_game, play_match

AgentChoice = Literal["easy", "medium", "hard", "random", "greedy", "minimax"]


def play_agent_vs_agent(
    agent1_type: AgentChoice = "hard",
    agent2_type: AgentChoice = "medium",
    num_games: int = 10,
    alternate_colors: bool = True,
    render: bool = False,
    seed: Optional[int] = 42,
    config: Optional[str] = None,
):
    """
    Play games between two computer opponents and print the tally.

    Args:
        agent1_type: Difficulty tier or agent id for agent1
        agent2_type: Difficulty tier or agent id for agent2
        num_games: Number of games to play
        alternate_colors: Swap colours between games
        render: Print the final board of a single game instead of a match tally
        seed: Random seed (agent2 uses seed + 1)
        config: Optional YAML config with ``agent`` and ``opponent`` entries
    """
    agent1_params = {}
    agent2_params = {}
    if config is not None:
        app_cfg = load_config(config)
        if app_cfg.opponent is None:
            raise ValueError("Config must define an opponent for agent vs agent play")
        agent1_type, agent1_params = app_cfg.agent.id, dict(app_cfg.agent.params)
        agent2_type, agent2_params = app_cfg.opponent.id, dict(app_cfg.opponent.params)
        num_games = app_cfg.match.num_games
        alternate_colors = app_cfg.match.alternate_colors
        if app_cfg.seed is not None:
            seed = app_cfg.seed

    agent1 = make_player(agent1_type, agent1_params, seed=seed)
    agent2 = make_player(agent2_type, agent2_params, seed=None if seed is None else seed + 1)

    if render:
        record = play_game(agent1, agent2)
        print(f"Black: {agent1_type}, White: {agent2_type}")
        for player, move in record.moves:
            print(f"{player.name.capitalize()} -> {move.row} {move.col}")
        print(f"X: {record.score.black}, O: {record.score.white}")
        print("Draw!" if record.winner is None else f"{record.winner.name.capitalize()} wins!")
        return

    print(f"Playing {num_games} games: {agent1_type} vs {agent2_type}")
    print("=" * 50)
    agent1_wins, draws, agent2_wins = play_match(
        agent1, agent2, num_games=num_games, alternate_colors=alternate_colors
    )
    print(f"{agent1_type} wins: {agent1_wins}")
    print(f"{agent2_type} wins: {agent2_wins}")
    print(f"Draws: {draws}")


def main() -> None:
    tyro.cli(play_agent_vs_agent)


if __name__ == "__main__":
    main()
