# Area: Shared
"""
board_player._shared.protocol_logger — Protocol message logging
================================================================

One colored line per received/sent protocol message and per move
search, with the player's color and the position's move number,
plus the rendered position after each one received or sent. Silent
unless enabled (-v and above).
"""

from __future__ import annotations
import sys
from datetime import datetime
from typing import Optional

from .protocol_display import (
    CYAN,
    EXPECTED_RESPONSES,
    GREEN,
    ORANGE,
    RECEIVE_DISPLAY_NAMES,
    RED,
    RESET,
    SEND_DISPLAY_NAMES,
)


class ProtocolLogger:
    """Logger for protocol messages and searches."""

    def __init__(self, enabled: bool = False, color_symbol: str = "?"):
        self.enabled = enabled
        self.color_symbol = color_symbol

    def set_enabled(self, enabled: bool) -> None:
        self.enabled = enabled

    def set_color(self, color_symbol: str) -> None:
        """Set the local color shown in the ROLE column."""
        self.color_symbol = color_symbol

    def _get_role(self) -> str:
        return f"PLAYER-{self.color_symbol}"

    def _now(self) -> str:
        return datetime.now().strftime("%H:%M:%S")

    def _now_ms(self) -> str:
        return datetime.now().strftime("%H:%M:%S:%f")[:-3]

    @staticmethod
    def _move(move_no: Optional[int]) -> str:
        return "-" if move_no is None else str(move_no)

    def log_received(
        self,
        peer: str,
        message_type: str,
        move_no: Optional[int] = None,
    ) -> None:
        """Log a received protocol message."""
        if not self.enabled:
            return
        display = RECEIVE_DISPLAY_NAMES.get(message_type, message_type)
        expected = EXPECTED_RESPONSES.get(message_type, "Unknown")
        line = (
            f"{GREEN}{self._now()} | MOVE: {self._move(move_no):>4} | RECEIVED | "
            f"from {peer:21} | {display:10} | NEXT: {expected:18} | "
            f"ROLE: {self._get_role()}{RESET}"
        )
        print(line, file=sys.stdout)

    def log_sent(
        self,
        peer: str,
        message_type: str,
        move_no: Optional[int] = None,
    ) -> None:
        """Log a sent protocol message."""
        if not self.enabled:
            return
        display = SEND_DISPLAY_NAMES.get(message_type, message_type)
        expected = EXPECTED_RESPONSES.get(message_type, "Unknown")
        line = (
            f"{GREEN}{self._now()} | MOVE: {self._move(move_no):>4} | SENT     | "
            f"to   {peer:21} | {display:10} | NEXT: {expected:18} | "
            f"ROLE: {self._get_role()}{RESET}"
        )
        print(line, file=sys.stdout)

    def log_search_call(self, strategy_name: str, depth: int) -> None:
        """Log the start of a move search."""
        if not self.enabled:
            return
        line = (
            f"{ORANGE}{self._now_ms()} | SEARCH: {strategy_name:12} | "
            f"CALL     | DEPTH: {depth} | ROLE: {self._get_role()}{RESET}"
        )
        print(line, file=sys.stdout)

    def log_search_response(self, move_name: str, msecs: int) -> None:
        """Log the move a search returned."""
        if not self.enabled:
            return
        line = (
            f"{ORANGE}{self._now_ms()} | SEARCH: {move_name:12} | "
            f"RESPONSE | {msecs} ms | ROLE: {self._get_role()}{RESET}"
        )
        print(line, file=sys.stdout)

    def log_position(self, text: str) -> None:
        """Show a position, one indented line per line of text."""
        if not self.enabled:
            return
        for row in text.splitlines():
            print(f"{CYAN}    {row}{RESET}", file=sys.stdout)

    def log_error(self, description: str) -> None:
        """Log an error (always shown)."""
        line = f"{RED}[ERROR] {self._now()} | {description}{RESET}"
        print(line, file=sys.stderr)


# Global singleton instance
_protocol_logger: Optional[ProtocolLogger] = None


def get_protocol_logger() -> ProtocolLogger:
    """Get or create the global protocol logger instance."""
    global _protocol_logger
    if _protocol_logger is None:
        _protocol_logger = ProtocolLogger()
    return _protocol_logger
