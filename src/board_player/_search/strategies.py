# Area: Search
"""
board_player._search.strategies — Move search strategies
=========================================================

Every strategy satisfies the same capability interface:
set_max_depth(), set_evaluator(), register_callbacks() and
best_move(board). A depth of 0 selects the strategy's default depth.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
import logging
import random

from ..board import BoardState, GamePosition, Move
from .callbacks import SearchCallbacks
from .evaluator import Evaluator

logger = logging.getLogger("board_player.search")

CONTINUE_STATES = (BoardState.VALID1, BoardState.VALID2)


class SearchStrategy(ABC):
    """Base class: owns depth, evaluator and callbacks; subclasses search."""

    name = "abstract"
    default_depth = 1

    def __init__(self):
        self.max_depth = 0
        self.evaluator: Evaluator = Evaluator()
        self.callbacks = SearchCallbacks()
        self.nodes = 0

    def set_max_depth(self, depth: int) -> None:
        self.max_depth = max(0, depth)

    def set_evaluator(self, evaluator: Evaluator) -> None:
        self.evaluator = evaluator

    def register_callbacks(self, callbacks: SearchCallbacks) -> None:
        self.callbacks = callbacks

    @property
    def depth(self) -> int:
        """Effective search depth."""
        return self.max_depth or self.default_depth

    def best_move(self, board: GamePosition) -> Move:
        self.nodes = 0
        self.callbacks.start(self.name, self.depth)
        if board.valid_state() not in CONTINUE_STATES:
            move, value = Move.none(), None
        else:
            move, value = self.search(board)
        self.callbacks.finished(move, value, self.nodes)
        return move

    @abstractmethod
    def search(self, board: GamePosition) -> Tuple[Move, Optional[float]]:
        """Return the chosen move and its value (None if not scored)."""
        ...


class RandomStrategy(SearchStrategy):
    """Plays a uniformly random legal move."""

    name = "Random"

    def __init__(self, seed: Optional[int] = None):
        super().__init__()
        self._rng = random.Random(seed)

    def search(self, board):
        moves = board.moves()
        self.nodes = len(moves)
        if not moves:
            return Move.none(), None
        return self._rng.choice(moves), None


class OneLevelStrategy(SearchStrategy):
    """Greedy: evaluates every position one move ahead."""

    name = "OneLevel"

    def search(self, board):
        color = board.act_color()
        best: Optional[Move] = None
        best_value = -float("inf")
        for move in board.moves():
            child = board.clone()
            child.play_move(move)
            self.nodes += 1
            value = self.evaluator.evaluate(child, color)
            if value > best_value:
                best, best_value = move, value
                self.callbacks.found_best_move(1, move, value)
        if best is None:
            return Move.none(), None
        return best, best_value


class AlphaBetaStrategy(SearchStrategy):
    """Depth-limited negamax with alpha-beta pruning."""

    name = "AlphaBeta"
    default_depth = 3

    def search(self, board):
        color = board.act_color()
        alpha, beta = -float("inf"), float("inf")
        best: Optional[Move] = None
        for move in self._ordered_moves(board):
            child = board.clone()
            child.play_move(move)
            value = -self._negamax(child, self.depth - 1, -beta, -alpha, color.opponent())
            if best is None or value > alpha:
                best, alpha = move, value
                self.callbacks.found_best_move(self.depth, move, value)
        if best is None:
            return Move.none(), None
        return best, alpha

    def _negamax(self, board, depth: int, alpha: float, beta: float, color) -> float:
        self.nodes += 1
        state = board.valid_state()
        if state not in CONTINUE_STATES:
            # Prefer quicker wins and slower losses
            return self.evaluator.evaluate(board, color) * (1 + depth / 100)
        if depth <= 0:
            return self.evaluator.evaluate(board, color)

        value = -float("inf")
        for move in self._ordered_moves(board):
            child = board.clone()
            child.play_move(move)
            value = max(value, -self._negamax(child, depth - 1, -beta, -alpha, color.opponent()))
            alpha = max(alpha, value)
            if alpha >= beta:
                break
        return value

    @staticmethod
    def _ordered_moves(board: GamePosition) -> List[Move]:
        # sorted() is stable: equal keys keep the position's own order
        return sorted(board.moves(), key=board.move_order_key)


__all__ = [
    "SearchStrategy",
    "RandomStrategy",
    "OneLevelStrategy",
    "AlphaBetaStrategy",
]
