# Area: Search
"""
board_player._search.callbacks — Search progress sink
======================================================

Strategies report progress through a SearchCallbacks instance. The
default sink only logs; verbosity decides how much of it is visible.
"""

import logging
from typing import Optional

from ..board import Move

logger = logging.getLogger("board_player.search")


class SearchCallbacks:
    """Receives start / best-move / finish notifications from a search."""

    def __init__(self, verbose: int = 0):
        self.verbose = verbose
        self.searches = 0
        self.last_nodes = 0

    def start(self, strategy_name: str, max_depth: int) -> None:
        self.searches += 1
        logger.debug(f"Search {self.searches}: {strategy_name} to depth {max_depth}")

    def found_best_move(self, depth: int, move: Move, value: float) -> None:
        if self.verbose > 1:
            logger.debug(f"  depth {depth}: best so far {move.name()} ({value:.1f})")

    def finished(self, move: Move, value: Optional[float], nodes: int) -> None:
        self.last_nodes = nodes
        if value is None:
            logger.info(f"Search done: {move.name()} ({nodes} nodes)")
        else:
            logger.info(f"Search done: {move.name()} value {value:.1f} ({nodes} nodes)")
