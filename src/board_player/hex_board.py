# Area: Board
"""
board_player.hex_board — Reference position: the game of Hex
=============================================================

Hex cannot end in a draw: once the board is full exactly one side owns
a connecting chain. O (color1) connects the top and bottom rows, X
(color2) connects the left and right columns. O moves first.

State text (one line, fields separated by single spaces):

    hex <size> <cells> <next> <move_no> <ms_O> <ms_X> <limit_ms>

cells is row-major using '.', 'O' and 'X'. limit_ms is the thinking
time allowed per side; 0 disables the clock.
"""

from __future__ import annotations
from collections import deque
from typing import Dict, Iterator, List, Optional, Tuple
import logging

from .board import BoardState, Color, GamePosition, Move

logger = logging.getLogger("board_player.board")

MIN_SIZE = 2
MAX_SIZE = 11
DEFAULT_SIZE = 5

EMPTY_CELL = "."
NEIGHBOR_OFFSETS = ((-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0))

Cell = Tuple[int, int]


class HexBoard(GamePosition):
    """Hex position with per-side thinking clocks."""

    def __init__(self, size: int = DEFAULT_SIZE, time_limit_ms: int = 0):
        super().__init__()
        if not MIN_SIZE <= size <= MAX_SIZE:
            raise ValueError(f"Board size must be in {MIN_SIZE}..{MAX_SIZE}, got {size}")
        self.size = size
        self.time_limit_ms = time_limit_ms
        self.reset()

    def reset(self) -> None:
        """Start position: empty board, O to move, clocks at zero."""
        self.cells: List[str] = [EMPTY_CELL] * (self.size * self.size)
        self.next_color = Color.COLOR1
        self.move_no = 0
        self.msecs: Dict[Color, int] = {Color.COLOR1: 0, Color.COLOR2: 0}
        self._decoded: Optional[BoardState] = None

    # ── Codec ─────────────────────────────────────────────────

    def get_state(self) -> str:
        return " ".join([
            "hex",
            str(self.size),
            "".join(self.cells),
            self.next_color.symbol,
            str(self.move_no),
            str(self.msecs[Color.COLOR1]),
            str(self.msecs[Color.COLOR2]),
            str(self.time_limit_ms),
        ])

    def set_state(self, text: str) -> None:
        text = text.strip()
        if not text:
            self.reset()
            self._decoded = BoardState.EMPTY
            return

        parsed = self._parse(text)
        if parsed is None:
            logger.debug(f"Undecodable position: {text!r}")
            self._decoded = BoardState.INVALID
            return

        size, cells, next_color, move_no, ms1, ms2, limit = parsed
        self.size = size
        self.cells = cells
        self.next_color = next_color
        self.move_no = move_no
        self.msecs = {Color.COLOR1: ms1, Color.COLOR2: ms2}
        self.time_limit_ms = limit
        self._decoded = None

    @staticmethod
    def _parse(text: str):
        fields = text.split()
        if len(fields) != 8 or fields[0] != "hex":
            return None
        try:
            size = int(fields[1])
            move_no, ms1, ms2, limit = (int(f) for f in fields[4:8])
            next_color = Color.from_symbol(fields[3])
        except ValueError:
            return None
        if not MIN_SIZE <= size <= MAX_SIZE:
            return None
        if min(move_no, ms1, ms2, limit) < 0:
            return None
        cells = list(fields[2])
        if len(cells) != size * size:
            return None
        if any(c not in (EMPTY_CELL, "O", "X") for c in cells):
            return None
        return size, cells, next_color, move_no, ms1, ms2, limit

    # ── Classification ────────────────────────────────────────

    def valid_state(self) -> BoardState:
        if self._decoded is not None:
            return self._decoded

        if self.time_limit_ms > 0:
            if self.msecs[Color.COLOR1] > self.time_limit_ms:
                return BoardState.TIMEOUT1
            if self.msecs[Color.COLOR2] > self.time_limit_ms:
                return BoardState.TIMEOUT2

        winner = self.winner()
        if winner == Color.COLOR1:
            return BoardState.WIN1
        if winner == Color.COLOR2:
            return BoardState.WIN2

        if self.next_color == Color.COLOR1:
            return BoardState.VALID1
        return BoardState.VALID2

    def act_color(self) -> Color:
        if self._decoded is not None:
            return Color.NONE
        return self.next_color

    def winner(self) -> Color:
        if self._connected(Color.COLOR1):
            return Color.COLOR1
        if self._connected(Color.COLOR2):
            return Color.COLOR2
        return Color.NONE

    def _connected(self, color: Color) -> bool:
        """BFS from the color's first edge to its second edge."""
        symbol = color.symbol
        n = self.size
        # O runs along rows (axis 0), X along columns (axis 1)
        axis = 0 if color == Color.COLOR1 else 1
        if axis == 0:
            start = [(0, c) for c in range(n)]
        else:
            start = [(r, 0) for r in range(n)]

        queue = deque(cell for cell in start if self.at(*cell) == symbol)
        seen = set(queue)
        while queue:
            cell = queue.popleft()
            if cell[axis] == n - 1:
                return True
            for nb in self.neighbors(*cell):
                if nb not in seen and self.at(*nb) == symbol:
                    seen.add(nb)
                    queue.append(nb)
        return False

    # ── Geometry ──────────────────────────────────────────────

    def at(self, row: int, col: int) -> str:
        return self.cells[row * self.size + col]

    def neighbors(self, row: int, col: int) -> Iterator[Cell]:
        for dr, dc in NEIGHBOR_OFFSETS:
            r, c = row + dr, col + dc
            if 0 <= r < self.size and 0 <= c < self.size:
                yield r, c

    # ── Moves ─────────────────────────────────────────────────

    def moves(self) -> List[Move]:
        if self.valid_state() not in (BoardState.VALID1, BoardState.VALID2):
            return []
        n = self.size
        return [
            Move.place(i // n, i % n)
            for i, cell in enumerate(self.cells)
            if cell == EMPTY_CELL
        ]

    def move_order_key(self, move: Move) -> float:
        """Central cells first, which prunes better on Hex."""
        center = (self.size - 1) / 2
        return abs(move.row - center) + abs(move.col - center)

    def play_move(self, move: Move, msecs: int = 0) -> None:
        if move.is_none():
            return
        idx = move.row * self.size + move.col
        if not (0 <= move.row < self.size and 0 <= move.col < self.size):
            raise ValueError(f"Move {move.name()} is off the board")
        if self.cells[idx] != EMPTY_CELL:
            raise ValueError(f"Cell {move.name()} is already occupied")

        mover = self.next_color
        self.cells[idx] = mover.symbol
        self.msecs[mover] += msecs
        self.move_no += 1
        self.next_color = mover.opponent()

    def clone(self) -> "HexBoard":
        other = HexBoard(self.size, self.time_limit_ms)
        other.cells = list(self.cells)
        other.next_color = self.next_color
        other.move_no = self.move_no
        other.msecs = dict(self.msecs)
        other._decoded = self._decoded
        return other

    # ── Display ───────────────────────────────────────────────

    def render(self) -> str:
        """Rhombus drawing of the board for verbose output."""
        header = "  " + " ".join(chr(ord("A") + c) for c in range(self.size))
        lines = [header]
        for r in range(self.size):
            row = " ".join(self.at(r, c) for c in range(self.size))
            lines.append(f"{' ' * r}{r + 1:>2} {row}")
        lines.append(
            f"Move {self.move_no}, {self.next_color.symbol} to move "
            f"(O: {self.msecs[Color.COLOR1]} ms, X: {self.msecs[Color.COLOR2]} ms)"
        )
        return "\n".join(lines)
