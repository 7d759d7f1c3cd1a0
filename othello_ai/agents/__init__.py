"""Agent modules."""

from .base_agent import BaseAgent
from .random_agent import RandomAgent
from .greedy_agent import GreedyAgent
from .minimax_agent import MinimaxAgent, MinimaxConfig
from ..registry import list_agents, register_agent

if "random" not in list_agents():
    register_agent("random", RandomAgent)
if "greedy" not in list_agents():
    register_agent("greedy", GreedyAgent)
if "minimax" not in list_agents():
    register_agent("minimax", MinimaxAgent)

from .ai_player import DIFFICULTY_AGENTS, AIPlayer, make_player  # noqa: E402

__all__ = [
    "AIPlayer",
    "BaseAgent",
    "DIFFICULTY_AGENTS",
    "GreedyAgent",
    "MinimaxAgent",
    "MinimaxConfig",
    "RandomAgent",
    "make_player",
]
