# Area: Shared
"""
board_player._shared.logging_config — Structured logging setup
==============================================================

Configures dual logging: terminal (colored) + file (JSON).
Verbosity picks the level and whether protocol mode is on.
"""

from __future__ import annotations
import logging
import sys
from pathlib import Path

from .logging_formatters import (
    JSONFormatter,
    ProtocolFilter,
    TerminalFormatter,
    disable_protocol_mode,
    enable_protocol_mode,
)

# Package logger
logger = logging.getLogger("board_player")


def level_for_verbosity(verbose: int) -> int:
    """0 → WARNING, 1 → INFO, 2+ → DEBUG."""
    if verbose <= 0:
        return logging.WARNING
    if verbose == 1:
        return logging.INFO
    return logging.DEBUG


def setup_logging(
    log_file_path: str = "board_player.log",
    level: int = logging.INFO,
) -> None:
    """
    Configure logging for the package.

    Parameters
    ----------
    log_file_path : str
        Path to the log file. An empty string disables the file handler.
    level : int
        Logging level. Defaults to INFO.
    """
    pkg_logger = logging.getLogger("board_player")
    pkg_logger.setLevel(level)

    # Remove existing handlers
    pkg_logger.handlers.clear()

    # Terminal handler with colors
    terminal_handler = logging.StreamHandler(sys.stdout)
    terminal_handler.setLevel(level)
    terminal_handler.setFormatter(TerminalFormatter(
        fmt="%(asctime)s │ %(levelname)s │ %(name)s │ %(message)s",
        datefmt="%H:%M:%S",
    ))
    terminal_handler.addFilter(ProtocolFilter())
    pkg_logger.addHandler(terminal_handler)

    # File handler with JSON
    if log_file_path:
        try:
            log_path = Path(log_file_path)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(JSONFormatter())
            pkg_logger.addHandler(file_handler)
        except OSError as e:
            pkg_logger.warning(f"Could not create log file: {e}")

    # Prevent propagation to root logger
    pkg_logger.propagate = False


def setup_verbosity(verbose: int, log_file_path: str = "board_player.log") -> None:
    """
    Configure logging from a -v count.

    -v turns on protocol mode (one line per message and search, standard
    logs go to the file only); -vv and more show everything at DEBUG.
    """
    setup_logging(log_file_path=log_file_path, level=level_for_verbosity(verbose))
    if verbose == 1:
        enable_protocol_mode()
    else:
        disable_protocol_mode()
