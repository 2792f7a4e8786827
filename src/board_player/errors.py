"""
board_player.errors — Custom exception classes
===============================================

Defines the exception hierarchy for configuration, search registry
and transport failures. The protocol core itself never raises: bad
input is dropped or reported, never turned into an exception.
"""

from __future__ import annotations
from typing import List, Optional


class BoardPlayerError(Exception):
    """Base exception for all board_player errors."""
    pass


class ConfigurationError(BoardPlayerError):
    """Raised when command-line or config values are unusable."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        self.errors = errors or []
        super().__init__(message)

    def format_error_log(self) -> str:
        lines = [f"ERROR - {self}"]
        for error in self.errors:
            lines.append(f"  • {error}")
        return "\n".join(lines)


class UnknownStrategyError(BoardPlayerError):
    """Raised when a search strategy name or index is not registered."""

    def __init__(self, key, available: List[str]):
        self.key = key
        self.available = available
        super().__init__(
            f"Unknown search strategy {key!r} (available: {', '.join(available)})"
        )


class TransportError(BoardPlayerError):
    """Raised when a listening socket or an outbound link cannot be set up."""

    def __init__(self, host: str, port: int, reason: str):
        self.host = host
        self.port = port
        self.reason = reason
        super().__init__(f"Connection {host}:{port} failed: {reason}")
