# Area: Network
"""
board_player._network.domain — Broadcast channel endpoint
==========================================================

A NetworkDomain listens on a TCP port and keeps every peer link it
accepts or opens. Each complete line a peer sends is forwarded to the
other peers, so a tree of connected processes acts as one broadcast
channel, and is then handed to received().

Subclasses override received() and new_connection(); overrides of
new_connection() must call the base implementation first.
"""

from __future__ import annotations
import logging
import socket
from typing import TYPE_CHECKING, List, Optional

from ..errors import TransportError
from .connection import Connection

if TYPE_CHECKING:
    from .loop import NetworkLoop

logger = logging.getLogger("board_player.network")

DEFAULT_PORT = 23412
CONNECT_TIMEOUT_SECONDS = 5.0
LISTEN_BACKLOG = 8


class NetworkDomain:
    """Listening endpoint plus the set of live peer links."""

    def __init__(self, port: int = DEFAULT_PORT, bind_host: str = ""):
        self.port = port
        self.bind_host = bind_host
        self.connections: List[Connection] = []
        self.loop: Optional["NetworkLoop"] = None
        self.server: Optional[socket.socket] = None
        self.current_peer: Optional[str] = None

    # ── Setup ─────────────────────────────────────────────────

    def listen(self) -> socket.socket:
        """Open the listening socket (idempotent)."""
        if self.server is not None:
            return self.server
        try:
            server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
            server.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            server.bind((self.bind_host, self.port))
            server.listen(LISTEN_BACKLOG)
            server.setblocking(False)
        except OSError as e:
            raise TransportError(self.bind_host or "*", self.port, str(e)) from e
        self.port = server.getsockname()[1]
        self.server = server
        logger.info(f"Listening on port {self.port}")
        return server

    def add_connection(self, host: str, port: int) -> Connection:
        """
        Open an outbound link to another peer.

        Raises:
            TransportError: If the peer cannot be reached
        """
        try:
            sock = socket.create_connection((host, port), timeout=CONNECT_TIMEOUT_SECONDS)
        except OSError as e:
            raise TransportError(host, port, str(e)) from e
        sock.settimeout(None)
        conn = Connection(sock, peer=f"{host}:{port}")
        logger.info(f"Connected to {conn.peer}")
        self.new_connection(conn)
        return conn

    def accept(self) -> Optional[Connection]:
        """Accept one pending peer from the listening socket."""
        try:
            sock, _ = self.server.accept()
        except (BlockingIOError, InterruptedError):
            return None
        sock.setblocking(True)
        conn = Connection(sock)
        logger.info(f"Accepted connection from {conn.peer}")
        self.new_connection(conn)
        return conn

    # ── Hooks ─────────────────────────────────────────────────

    def new_connection(self, conn: Connection) -> None:
        """Default accept bookkeeping: remember the link and watch it."""
        self.connections.append(conn)
        if self.loop is not None:
            self.loop.register(conn, self)

    def received(self, line: str) -> None:
        """Called for every inbound line. The base class ignores it."""
        logger.debug(f"Unhandled line from {self.current_peer}: {line!r}")

    # ── Traffic ───────────────────────────────────────────────

    def dispatch(self, conn: Connection, line: str) -> None:
        """Forward a peer's line to the other peers, then handle it locally."""
        self.broadcast(line + "\n", exclude=conn)
        self.current_peer = conn.peer
        try:
            self.received(line)
        finally:
            self.current_peer = None

    def broadcast(self, text: str, exclude: Optional[Connection] = None) -> int:
        """Send text to every live peer except exclude. Returns the count sent."""
        sent = 0
        for conn in list(self.connections):
            if conn is exclude:
                continue
            if conn.send_string(text):
                sent += 1
            else:
                self.connection_closed(conn)
        return sent

    def connection_closed(self, conn: Connection) -> None:
        if conn in self.connections:
            self.connections.remove(conn)
            logger.info(f"Connection to {conn.peer} closed")
        if self.loop is not None:
            self.loop.unregister(conn)
        conn.close()

    def close(self) -> None:
        for conn in list(self.connections):
            self.connection_closed(conn)
        if self.server is not None:
            self.server.close()
            self.server = None
