"""Utility modules."""

from .match import GameRecord, play_game, play_match

__all__ = ["GameRecord", "play_game", "play_match"]
