# Area: Shared
"""
Shared utilities used by the protocol, network and runner layers.

This package contains:
- Logging configuration (terminal + JSON file)
- Protocol logger for per-message output
"""

from .logging_config import (
    level_for_verbosity,
    setup_logging,
    setup_verbosity,
)
from .logging_formatters import (
    enable_protocol_mode,
    disable_protocol_mode,
    is_protocol_mode_enabled,
)
from .protocol_logger import get_protocol_logger, ProtocolLogger

__all__ = [
    "level_for_verbosity",
    "setup_logging",
    "setup_verbosity",
    "enable_protocol_mode",
    "disable_protocol_mode",
    "is_protocol_mode_enabled",
    "get_protocol_logger",
    "ProtocolLogger",
]
