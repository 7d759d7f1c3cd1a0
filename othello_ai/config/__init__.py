"""Config package exports."""

from .schema import AgentConfig, AppConfig, MatchConfig, load_config

__all__ = ["AgentConfig", "AppConfig", "MatchConfig", "load_config"]
