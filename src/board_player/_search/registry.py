# Area: Search
"""
board_player._search.registry — Strategy registry
==================================================

Strategies are keyed by name. The registry order also defines the
numeric index used by the command line (-s <n>).
"""

import logging
from typing import Dict, List, Type, Union

from ..errors import UnknownStrategyError
from .strategies import (
    AlphaBetaStrategy,
    OneLevelStrategy,
    RandomStrategy,
    SearchStrategy,
)

logger = logging.getLogger("board_player.search.registry")

STRATEGIES: Dict[str, Type[SearchStrategy]] = {
    RandomStrategy.name: RandomStrategy,
    OneLevelStrategy.name: OneLevelStrategy,
    AlphaBetaStrategy.name: AlphaBetaStrategy,
}

DEFAULT_STRATEGY = 2


def strategy_names() -> List[str]:
    """Registered names in index order."""
    return list(STRATEGIES)


def register_strategy(cls: Type[SearchStrategy]) -> None:
    """Add a strategy class under its name (appended to the index order)."""
    STRATEGIES[cls.name] = cls
    logger.debug(f"Registered strategy {cls.name}")


def create_strategy(key: Union[str, int]) -> SearchStrategy:
    """
    Build a fresh strategy instance.

    Args:
        key: Registered name, or index into strategy_names()

    Raises:
        UnknownStrategyError: If nothing is registered under key
    """
    names = strategy_names()
    if isinstance(key, int):
        if not 0 <= key < len(names):
            raise UnknownStrategyError(key, names)
        key = names[key]
    cls = STRATEGIES.get(key)
    if cls is None:
        raise UnknownStrategyError(key, names)
    return cls()
