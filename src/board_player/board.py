# Area: Board
"""
board_player.board — Game position interface
=============================================

The protocol layer never looks inside a position. It only decodes,
encodes, classifies and asks for a move through the methods below.
Subclass GamePosition to plug in another game; HexBoard is the
reference implementation shipped with the package.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, IntFlag
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ._search.strategies import SearchStrategy


class Color(IntFlag):
    """Side identity. A position's active-color mask is a combination."""
    NONE = 0
    COLOR1 = 1      # "O", moves first
    COLOR2 = 2      # "X"

    @property
    def symbol(self) -> str:
        return COLOR_SYMBOLS.get(self, "?")

    @classmethod
    def from_symbol(cls, symbol: str) -> "Color":
        for color, sym in COLOR_SYMBOLS.items():
            if sym == symbol:
                return color
        raise ValueError(f"Unknown color symbol: {symbol!r}")

    def opponent(self) -> "Color":
        if self == Color.COLOR1:
            return Color.COLOR2
        if self == Color.COLOR2:
            return Color.COLOR1
        return Color.NONE


COLOR_SYMBOLS = {
    Color.COLOR1: "O",
    Color.COLOR2: "X",
}


class BoardState(Enum):
    """Outcome classification of a position.

    VALID1 / VALID2 mean the game continues with color1 / color2 to move.
    WIN* and TIMEOUT* are terminal. EMPTY and INVALID are neither.
    """
    EMPTY = "empty"
    INVALID = "invalid"
    VALID1 = "valid1"
    VALID2 = "valid2"
    TIMEOUT1 = "timeout1"
    TIMEOUT2 = "timeout2"
    WIN1 = "win1"
    WIN2 = "win2"


STATE_DESCRIPTIONS = {
    BoardState.EMPTY: "Empty board",
    BoardState.INVALID: "Invalid position",
    BoardState.VALID1: "O about to move",
    BoardState.VALID2: "X about to move",
    BoardState.TIMEOUT1: "O has exceeded its time limit (X won)",
    BoardState.TIMEOUT2: "X has exceeded its time limit (O won)",
    BoardState.WIN1: "O won",
    BoardState.WIN2: "X won",
}

WINNERS = {
    BoardState.WIN1: Color.COLOR1,
    BoardState.TIMEOUT2: Color.COLOR1,
    BoardState.WIN2: Color.COLOR2,
    BoardState.TIMEOUT1: Color.COLOR2,
}


class MoveType(Enum):
    NONE = "none"
    PLACE = "place"


@dataclass(frozen=True)
class Move:
    """Result of one search: either no move, or a stone placement."""
    type: MoveType = MoveType.NONE
    row: int = -1
    col: int = -1

    @classmethod
    def none(cls) -> "Move":
        return cls(MoveType.NONE)

    @classmethod
    def place(cls, row: int, col: int) -> "Move":
        return cls(MoveType.PLACE, row, col)

    def is_none(self) -> bool:
        return self.type is MoveType.NONE

    def name(self) -> str:
        """Display name, e.g. 'C4' for row 3 / column 2."""
        if self.is_none():
            return "(none)"
        return f"{chr(ord('A') + self.col)}{self.row + 1}"


class GamePosition(ABC):
    """
    Abstract shared game position.

    One live instance is owned by the protocol handler. It is mutated in
    place by set_state() (remote snapshot) and play_move() (local move)
    and serializes itself to a canonical single-line text.
    """

    def __init__(self):
        self._strategy: Optional["SearchStrategy"] = None

    # ── Codec ─────────────────────────────────────────────────

    @abstractmethod
    def set_state(self, text: str) -> None:
        """Decode a snapshot. Must not raise on garbage; mark INVALID instead."""
        ...

    @abstractmethod
    def get_state(self) -> str:
        """Canonical text encoding of the complete position."""
        ...

    # ── Classification ────────────────────────────────────────

    @abstractmethod
    def valid_state(self) -> BoardState:
        ...

    @abstractmethod
    def act_color(self) -> Color:
        """Mask of the color(s) whose turn it is."""
        ...

    @staticmethod
    def state_description(state: BoardState) -> str:
        return STATE_DESCRIPTIONS.get(state, "Unknown state")

    def winner(self) -> Color:
        """Color that has won (by play or on time), or Color.NONE."""
        return WINNERS.get(self.valid_state(), Color.NONE)

    # ── Search hooks ──────────────────────────────────────────

    def heuristic(self, color: Color) -> float:
        """Static score of an unfinished position for color. 0 if unknown."""
        return 0.0

    def move_order_key(self, move: Move) -> float:
        """Sort key for search; lower is tried first. Ties keep moves() order."""
        return 0.0

    def render(self) -> str:
        """Human readable position for verbose output."""
        return self.get_state()

    # ── Moves ─────────────────────────────────────────────────

    @abstractmethod
    def moves(self) -> list:
        """Legal moves for the side to move."""
        ...

    @abstractmethod
    def play_move(self, move: Move, msecs: int = 0) -> None:
        """Apply a move and charge msecs of thinking time to the mover."""
        ...

    @abstractmethod
    def clone(self) -> "GamePosition":
        ...

    def set_search_strategy(self, strategy: "SearchStrategy") -> None:
        self._strategy = strategy

    @property
    def search_strategy(self) -> Optional["SearchStrategy"]:
        return self._strategy

    def best_move(self) -> Move:
        """Ask the installed search strategy for a move in this position."""
        if self._strategy is None:
            return Move.none()
        return self._strategy.best_move(self)
