"""Computer opponent bound to a difficulty tier."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple, Union

from ..game.board import Board
from ..game.constants import CellState, Difficulty, Position
from ..registry import make_agent
from .base_agent import BaseAgent

logger = logging.getLogger(__name__)

# Difficulty tier -> (registered agent id, constructor defaults)
DIFFICULTY_AGENTS: Dict[Difficulty, Tuple[str, Dict[str, Any]]] = {
    Difficulty.EASY: ("random", {}),
    Difficulty.MEDIUM: ("greedy", {}),
    Difficulty.HARD: ("minimax", {"depth": 5}),
}

# Agents that draw from a random source and accept ``seed``.
RANDOMIZED_AGENTS = frozenset({"random", "greedy"})


class AIPlayer:
    """
    Selects one strategy when constructed and delegates every move to it.

    Holds no state besides the strategy, so one instance can be reused for
    a whole game.
    """

    def __init__(self, difficulty: Union[Difficulty, str], seed: Optional[int] = None, **overrides: Any) -> None:
        """
        Args:
            difficulty: Difficulty tier (or its name, e.g. ``"hard"``).
            seed: Seed for tiers that play with randomness. Ignored by the
                deterministic minimax tier.
            **overrides: Extra strategy constructor arguments, e.g. ``depth``.
        """
        try:
            self.difficulty = Difficulty(difficulty)
        except ValueError:
            raise ValueError(f"Unknown difficulty: {difficulty!r}") from None

        agent_id, defaults = DIFFICULTY_AGENTS[self.difficulty]
        params = {**defaults, **overrides}
        if seed is not None and agent_id in RANDOMIZED_AGENTS:
            params["seed"] = seed

        self.strategy: BaseAgent = make_agent(agent_id, **params)
        logger.debug("AIPlayer(%s) using %s", self.difficulty.value, type(self.strategy).__name__)

    def pick_move(self, board: Board, player: CellState) -> Position:
        return self.strategy.pick_move(board, player)


def make_player(agent_id: str, params: Optional[Dict[str, Any]] = None, seed: Optional[int] = None) -> Any:
    """
    Build a move picker from a difficulty tier name or a registered agent id.

    Args:
        agent_id: ``easy``/``medium``/``hard`` or an id such as ``minimax``.
        params: Strategy constructor arguments.
        seed: Seed forwarded to randomized strategies. A ``seed`` entry in
            ``params`` takes precedence.

    Returns:
        An object with ``pick_move(board, player)``.
    """
    params = dict(params or {})
    seed = params.pop("seed", seed)
    if agent_id in {d.value for d in Difficulty}:
        return AIPlayer(agent_id, seed=seed, **params)
    if seed is not None and agent_id in RANDOMIZED_AGENTS:
        params["seed"] = seed
    return make_agent(agent_id, **params)
