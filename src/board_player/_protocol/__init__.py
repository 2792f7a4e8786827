# Area: Protocol
"""
Turn synchronization protocol: wire messages, outcome table and the
PlayerDomain handler.
"""

from .messages import (
    POSITION_PREFIX,
    QUIT_MESSAGE,
    QUIT_TOKEN,
    Message,
    MessageKind,
    encode_position,
    parse_message,
)
from .outcome import (
    CONTINUE_STATES,
    TERMINAL_STATES,
    OutcomeAction,
    classify_outcome,
    is_continue,
    is_terminal,
)
from .turn_sync import PlayerDomain

__all__ = [
    "POSITION_PREFIX",
    "QUIT_MESSAGE",
    "QUIT_TOKEN",
    "Message",
    "MessageKind",
    "encode_position",
    "parse_message",
    "CONTINUE_STATES",
    "TERMINAL_STATES",
    "OutcomeAction",
    "classify_outcome",
    "is_continue",
    "is_terminal",
    "PlayerDomain",
]
