# Area: Network
"""
Broadcast transport: newline-framed ASCII over TCP, one thread.
"""

from .connection import Connection
from .domain import DEFAULT_PORT, NetworkDomain
from .loop import NetworkLoop

__all__ = [
    "Connection",
    "DEFAULT_PORT",
    "NetworkDomain",
    "NetworkLoop",
]
