# Area: Runner
"""
board_player.context — Per-process player context
==================================================

Everything the protocol handler needs, built once by PlayerRunner and
passed in explicitly. There are no module-level singletons for the
position, evaluator or loop.
"""

from __future__ import annotations
from dataclasses import dataclass

from ._network.loop import NetworkLoop
from ._search.evaluator import Evaluator
from ._search.strategies import SearchStrategy
from .board import Color, GamePosition


@dataclass
class PlayerContext:
    """
    Attributes:
        board: The one live game position
        strategy: Search strategy installed in board
        evaluator: Evaluator used by strategy
        loop: Event loop; its exit() is the shutdown request
        color: Local color, fixed for the process lifetime
        max_moves: Remaining move budget, negative for unbounded
        change_eval: Redraw the evaluation after every own move
    """
    board: GamePosition
    strategy: SearchStrategy
    evaluator: Evaluator
    loop: NetworkLoop
    color: Color = Color.COLOR1
    max_moves: int = -1
    change_eval: bool = True

    @property
    def budget_unbounded(self) -> bool:
        return self.max_moves < 0
