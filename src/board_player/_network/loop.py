# Area: Network
"""
board_player._network.loop — Single-threaded event loop
========================================================

One thread services accepts, inbound lines and the shutdown flag.
Handler callbacks run to completion before the next event is looked
at, so state owned by a domain needs no locking. exit() only sets a
flag; the loop notices it before the next event.
"""

from __future__ import annotations
import logging
import selectors
from typing import List

from .connection import Connection
from .domain import NetworkDomain

logger = logging.getLogger("board_player.network")

# Upper bound on how long a pending exit() goes unnoticed while idle
POLL_INTERVAL_SECONDS = 0.2

_ACCEPT = "accept"
_READ = "read"


class NetworkLoop:
    """Blocking select loop driving one or more NetworkDomains."""

    def __init__(self):
        self.selector = selectors.DefaultSelector()
        self.domains: List[NetworkDomain] = []
        self._running = False
        self._exit_requested = False

    @property
    def running(self) -> bool:
        return self._running

    @property
    def exit_requested(self) -> bool:
        return self._exit_requested

    def install(self, domain: NetworkDomain) -> None:
        """Attach a domain: start listening and watch its links."""
        domain.loop = self
        server = domain.listen()
        self.selector.register(server, selectors.EVENT_READ, (_ACCEPT, domain, None))
        for conn in domain.connections:
            self.register(conn, domain)
        self.domains.append(domain)

    def register(self, conn: Connection, domain: NetworkDomain) -> None:
        try:
            self.selector.register(conn, selectors.EVENT_READ, (_READ, domain, conn))
        except KeyError:
            pass  # already watched

    def unregister(self, conn: Connection) -> None:
        try:
            self.selector.unregister(conn)
        except (KeyError, ValueError):
            pass

    def exit(self) -> None:
        """Request cooperative shutdown."""
        if not self._exit_requested:
            logger.info("Shutdown requested")
        self._exit_requested = True
        self._running = False

    def run(self) -> None:
        """Process events until exit() is called."""
        self._running = not self._exit_requested
        try:
            while self._running:
                self.run_once(POLL_INTERVAL_SECONDS)
        except KeyboardInterrupt:
            logger.info("Interrupted")
        finally:
            self._running = False
            self.close()
        logger.info("Network loop stopped")

    def run_once(self, timeout: float = 0.0) -> int:
        """Handle the events ready within timeout. Returns how many were handled."""
        handled = 0
        for key, _ in self.selector.select(timeout):
            if self._exit_requested:
                break
            kind, domain, conn = key.data
            try:
                if kind == _ACCEPT:
                    domain.accept()
                else:
                    self._read(domain, conn)
            except Exception as e:
                logger.error(f"Event handler error: {e}", exc_info=True)
            handled += 1
        return handled

    def _read(self, domain: NetworkDomain, conn: Connection) -> None:
        lines = conn.read_lines()
        if lines is None:
            domain.connection_closed(conn)
            return
        for line in lines:
            if self._exit_requested:
                return
            domain.dispatch(conn, line)

    def close(self) -> None:
        for domain in self.domains:
            if domain.server is not None:
                self.unregister_server(domain)
            domain.close()
        self.domains.clear()

    def unregister_server(self, domain: NetworkDomain) -> None:
        try:
            self.selector.unregister(domain.server)
        except (KeyError, ValueError):
            pass
