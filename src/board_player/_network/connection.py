# Area: Network
"""
board_player._network.connection — One peer link
=================================================

Wraps a connected TCP socket: splits the inbound byte stream into
newline-terminated ASCII lines and sends outbound text fire-and-forget.
"""

from __future__ import annotations
import logging
import socket
from typing import List, Optional

logger = logging.getLogger("board_player.network")

RECV_SIZE = 4096
ENCODING = "ascii"
MAX_LINE_LENGTH = 64 * 1024


class Connection:
    """A single peer link created by accept or by an outbound connect."""

    def __init__(self, sock: socket.socket, peer: Optional[str] = None):
        self.sock = sock
        self.peer = peer or _peer_name(sock)
        self.closed = False
        self._buffer = ""

    def fileno(self) -> int:
        return self.sock.fileno()

    def send_string(self, text: str) -> bool:
        """
        Send text to this peer. No acknowledgement and no retry.

        Returns False (and closes the link) when the peer is gone.
        """
        if self.closed:
            return False
        try:
            self.sock.sendall(text.encode(ENCODING, errors="replace"))
        except OSError as e:
            logger.warning(f"Send to {self.peer} failed: {e}")
            self.close()
            return False
        return True

    def feed(self, data: bytes) -> List[str]:
        """Add received bytes; return every completed line without its newline."""
        self._buffer += data.decode(ENCODING, errors="replace")
        *lines, self._buffer = self._buffer.split("\n")
        return lines

    def read_lines(self) -> Optional[List[str]]:
        """
        Read once from the socket. None means the link must be dropped:
        the peer closed it, or sent an unterminated line over MAX_LINE_LENGTH.
        """
        try:
            data = self.sock.recv(RECV_SIZE)
        except (BlockingIOError, InterruptedError):
            return []
        except OSError as e:
            logger.warning(f"Receive from {self.peer} failed: {e}")
            return None
        if not data:
            return None
        lines = self.feed(data)
        if len(self._buffer) > MAX_LINE_LENGTH:
            logger.warning(
                f"Dropping {self.peer}: over {MAX_LINE_LENGTH} bytes without a newline"
            )
            return None
        return lines

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        try:
            self.sock.close()
        except OSError:
            pass

    def __repr__(self) -> str:
        state = "closed" if self.closed else "open"
        return f"Connection({self.peer}, {state})"


def _peer_name(sock: socket.socket) -> str:
    try:
        host, port = sock.getpeername()[:2]
        return f"{host}:{port}"
    except OSError:
        return "unknown"
