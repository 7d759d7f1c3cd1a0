"""Configuration schema for games against the computer."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml


@dataclass
class AgentConfig:
    """A difficulty tier name (``easy``/``medium``/``hard``) or a registered agent id."""

    id: str
    params: Dict[str, Any] = field(default_factory=dict)


@dataclass
class MatchConfig:
    num_games: int = 10
    alternate_colors: bool = True


@dataclass
class AppConfig:
    agent: AgentConfig
    opponent: Optional[AgentConfig] = None
    human_first: bool = True
    match: MatchConfig = field(default_factory=MatchConfig)
    seed: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        agent_data = data.get("agent")
        if agent_data is None:
            raise ValueError("agent is required")
        agent = AgentConfig(id=str(agent_data["id"]), params=dict(agent_data.get("params", {})))

        opponent = None
        opponent_data = data.get("opponent")
        if opponent_data is not None:
            opponent = AgentConfig(id=str(opponent_data["id"]), params=dict(opponent_data.get("params", {})))

        match_data = data.get("match", {})
        match = MatchConfig(
            num_games=int(match_data.get("num_games", 10)),
            alternate_colors=bool(match_data.get("alternate_colors", True)),
        )

        seed = data.get("seed")
        if seed is not None:
            seed = int(seed)

        return cls(
            agent=agent,
            opponent=opponent,
            human_first=bool(data.get("human_first", True)),
            match=match,
            seed=seed,
        )


def load_config(path: Union[str, Path]) -> AppConfig:
    """Load AppConfig from a YAML file."""
    path = Path(path)
    with path.open() as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a YAML mapping, got {type(data)}")
    return AppConfig.from_dict(data)
