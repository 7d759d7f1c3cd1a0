"""Position evaluation used by the search strategies."""

from .evaluation import TERMINAL_SCORE, evaluate, terminal_score
from .weights import POSITION_WEIGHTS

__all__ = ["POSITION_WEIGHTS", "TERMINAL_SCORE", "evaluate", "terminal_score"]
