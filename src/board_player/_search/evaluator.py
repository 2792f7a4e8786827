# Area: Search
"""
board_player._search.evaluator — Position evaluation
=====================================================

Scores a Hex position from one color's point of view with the
two-distance heuristic: how many empty cells each side still has to
fill to connect its edges. A small per-cell random bonus is mixed in
so that two games with the same opponent do not repeat move for move;
change_evaluation() redraws it after every own move.

Positions of other games are scored as won, lost, or by their own
GamePosition.heuristic().
"""

from __future__ import annotations
from collections import deque
from typing import Dict, Optional, Tuple
import logging
import random

from ..board import Color, GamePosition
from ..hex_board import HexBoard

logger = logging.getLogger("board_player.search.evaluator")

WIN_SCORE = 10000
DISTANCE_WEIGHT = 10
CENTER_WEIGHT = 1.0
DEFAULT_NOISE = 2.0

Cell = Tuple[int, int]


class Evaluator:
    """Two-distance evaluation with a mutable random cell bonus."""

    def __init__(self, noise: float = DEFAULT_NOISE, seed: Optional[int] = None):
        self.noise = noise
        self._rng = random.Random(seed)
        self._bonus: Dict[int, Dict[Cell, float]] = {}
        self.changes = 0

    def change_evaluation(self) -> None:
        """Redraw the random part of the evaluation."""
        self._bonus.clear()
        self.changes += 1
        logger.debug(f"Evaluation changed ({self.changes})")

    def evaluate(self, board: GamePosition, color: Color) -> float:
        """Higher is better for color."""
        winner = board.winner()
        if winner == color:
            return WIN_SCORE
        if winner == color.opponent():
            return -WIN_SCORE
        if isinstance(board, HexBoard):
            return self._hex_score(board, color)
        return board.heuristic(color)

    def _hex_score(self, board: HexBoard, color: Color) -> float:
        own = distance_to_connect(board, color)
        other = distance_to_connect(board, color.opponent())
        score = DISTANCE_WEIGHT * (other - own)

        bonus = self._cell_bonus(board.size)
        own_symbol = color.symbol
        other_symbol = color.opponent().symbol
        for cell, value in bonus.items():
            stone = board.at(*cell)
            if stone == own_symbol:
                score += value
            elif stone == other_symbol:
                score -= value
        return score

    def _cell_bonus(self, size: int) -> Dict[Cell, float]:
        bonus = self._bonus.get(size)
        if bonus is None:
            center = (size - 1) / 2
            bonus = {}
            for r in range(size):
                for c in range(size):
                    spread = abs(r - center) + abs(c - center)
                    bonus[(r, c)] = (
                        CENTER_WEIGHT * (size - spread) / size
                        + self._rng.uniform(0, self.noise)
                    )
            self._bonus[size] = bonus
        return bonus


def distance_to_connect(board: HexBoard, color: Color) -> int:
    """
    Number of empty cells color still needs to connect its two edges.

    0-1 BFS: own stones cost nothing, empty cells cost one, opponent
    stones are walls. Returns size * size + 1 when no path exists.
    """
    n = board.size
    symbol = color.symbol
    blocked = color.opponent().symbol
    unreachable = n * n + 1
    axis = 0 if color == Color.COLOR1 else 1

    dist: Dict[Cell, int] = {}
    queue: deque = deque()
    for i in range(n):
        cell = (0, i) if axis == 0 else (i, 0)
        stone = board.at(*cell)
        if stone == blocked:
            continue
        cost = 0 if stone == symbol else 1
        if cost < dist.get(cell, unreachable):
            dist[cell] = cost
            if cost == 0:
                queue.appendleft(cell)
            else:
                queue.append(cell)

    best = unreachable
    while queue:
        cell = queue.popleft()
        d = dist[cell]
        if cell[axis] == n - 1:
            best = min(best, d)
            continue
        for nb in board.neighbors(*cell):
            stone = board.at(*nb)
            if stone == blocked:
                continue
            step = 0 if stone == symbol else 1
            if d + step < dist.get(nb, unreachable):
                dist[nb] = d + step
                if step == 0:
                    queue.appendleft(nb)
                else:
                    queue.append(nb)
    return best
