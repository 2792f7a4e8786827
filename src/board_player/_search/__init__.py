# Area: Search
"""
Move engine: evaluation, search strategies and their registry.
"""

from .callbacks import SearchCallbacks
from .evaluator import Evaluator, distance_to_connect
from .registry import (
    DEFAULT_STRATEGY,
    STRATEGIES,
    create_strategy,
    register_strategy,
    strategy_names,
)
from .strategies import (
    AlphaBetaStrategy,
    OneLevelStrategy,
    RandomStrategy,
    SearchStrategy,
)

__all__ = [
    "SearchCallbacks",
    "Evaluator",
    "distance_to_connect",
    "DEFAULT_STRATEGY",
    "STRATEGIES",
    "create_strategy",
    "register_strategy",
    "strategy_names",
    "SearchStrategy",
    "RandomStrategy",
    "OneLevelStrategy",
    "AlphaBetaStrategy",
]
