# Area: Protocol
"""
board_player._protocol.turn_sync — Turn synchronization handler
================================================================

PlayerDomain is the broadcast endpoint of one computer player:

- a received position is decoded into the shared board and classified;
- if it is our turn, a move is searched, played and the resulting
  position broadcast;
- terminal outcomes and an exhausted move budget shut the loop down;
- a peer that connects after our last broadcast is sent that position.

The search runs synchronously inside received(), so at most one search
is ever in flight and no other message is seen until it returns.
"""

from __future__ import annotations
import logging
import time
from typing import Optional

from .._network.connection import Connection
from .._network.domain import DEFAULT_PORT, NetworkDomain
from .._shared.protocol_logger import ProtocolLogger, get_protocol_logger
from ..board import BoardState, GamePosition
from ..context import PlayerContext
from .messages import QUIT_MESSAGE, MessageKind, encode_position, parse_message
from .outcome import is_continue, is_terminal

logger = logging.getLogger("board_player.protocol")

BROADCAST_PEER = "all"


class PlayerDomain(NetworkDomain):
    """
    Protocol handler for one player.

    Attributes:
        ctx: Player context (board, strategy, loop, color, budget)
        sent: The board if we were the last to broadcast it, else None
    """

    def __init__(
        self,
        ctx: PlayerContext,
        port: int = DEFAULT_PORT,
        protocol_logger: Optional[ProtocolLogger] = None,
    ):
        super().__init__(port)
        self.ctx = ctx
        self.sent: Optional[GamePosition] = None
        self.protocol_logger = protocol_logger or get_protocol_logger()

    # ── Outbound ──────────────────────────────────────────────

    def send_board(self, board: Optional[GamePosition]) -> None:
        """Broadcast board to all peers and remember it as ours."""
        if board is not None:
            state = board.get_state()
            logger.debug(f"Broadcasting position: {state}")
            self.broadcast(encode_position(state))
            self.protocol_logger.log_sent(BROADCAST_PEER, "pos", _move_no(board))
            self.protocol_logger.log_position(board.render())
        self.sent = board

    # ── Inbound ───────────────────────────────────────────────

    def received(self, line: str) -> None:
        peer = self.current_peer or "local"
        message = parse_message(line)

        if message.kind is MessageKind.QUIT:
            self.protocol_logger.log_received(peer, "quit")
            logger.info(f"Quit received from {peer}")
            self.ctx.loop.exit()
            return

        if message.kind is not MessageKind.POSITION:
            logger.debug(f"Ignoring message from {peer}: {line!r}")
            return

        # A remote position: we are no longer the last broadcaster
        self.sent = None

        board = self.ctx.board
        board.set_state(message.payload)
        self.protocol_logger.log_received(peer, "pos", _move_no(board))
        logger.debug(f"Position received: {message.payload}")
        if board.valid_state() not in (BoardState.EMPTY, BoardState.INVALID):
            self.protocol_logger.log_position(board.render())

        state = board.valid_state()
        if not is_continue(state):
            self._report_outcome(state)
            return

        if board.act_color() & self.ctx.color:
            self._draw_move()

    def new_connection(self, conn: Connection) -> None:
        """Accept bookkeeping, then catch the new peer up if we own the position."""
        super().new_connection(conn)
        if self.sent is None:
            return
        conn.send_string(encode_position(self.sent.get_state()))
        self.protocol_logger.log_sent(conn.peer, "catchup", _move_no(self.sent))
        logger.info(f"Sent current position to new peer {conn.peer}")

    def start_game(self, state_text: str) -> None:
        """
        Open a game from a start position owned by this player.

        If we are to move, the opening move is drawn and broadcast;
        otherwise the start position itself is broadcast so the other
        side can move. Either way it is kept for late joiners.
        """
        board = self.ctx.board
        board.set_state(state_text)
        self.sent = None
        state = board.valid_state()
        if not is_continue(state):
            self._report_outcome(state)
            return
        if board.act_color() & self.ctx.color:
            self._draw_move()
        else:
            self.send_board(board)

    # ── Turn ──────────────────────────────────────────────────

    def _draw_move(self) -> None:
        ctx = self.ctx
        board = ctx.board
        symbol = ctx.color.symbol

        self.protocol_logger.log_search_call(ctx.strategy.name, ctx.strategy.depth)
        start = time.monotonic()
        move = board.best_move()
        msecs = int((time.monotonic() - start) * 1000)
        self.protocol_logger.log_search_response(move.name(), msecs)

        if move.is_none():
            self._report(f"{symbol}  can not draw any move ?! Sorry.")
            return

        self._report(
            f"{symbol} draws '{move.name()}' "
            f"(after {msecs // 1000}.{msecs % 1000:03d} secs)..."
        )
        board.play_move(move, msecs)
        self.send_board(board)

        if ctx.change_eval:
            ctx.evaluator.change_evaluation()

        state = board.valid_state()
        if not is_continue(state):
            self._report_outcome(state)

        self._spend_budget()

    def _spend_budget(self) -> None:
        ctx = self.ctx
        if ctx.budget_unbounded:
            return
        ctx.max_moves -= 1
        if ctx.max_moves == 0:
            self._report("Terminating because given number of moves drawn.")
            self.broadcast(QUIT_MESSAGE)
            self.protocol_logger.log_sent(BROADCAST_PEER, "quit")
            ctx.loop.exit()

    # ── Reporting ─────────────────────────────────────────────

    def _report_outcome(self, state: BoardState) -> None:
        """Print a non-continue classification; shut down if it is terminal."""
        self._report(self.ctx.board.state_description(state))
        if is_terminal(state):
            self.ctx.loop.exit()
        else:
            logger.warning(f"Position not playable ({state.value}), waiting for next one")

    def _report(self, text: str) -> None:
        print(text, flush=True)
        logger.info(text, extra={"printed": True})


def _move_no(board: GamePosition) -> Optional[int]:
    return getattr(board, "move_no", None)
