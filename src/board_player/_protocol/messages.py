# Area: Protocol
"""
board_player._protocol.messages — Wire messages
================================================

Two message kinds matter; everything else is dropped:

    quit\\n                 stop the receiving peer
    pos <state-text>\\n     full position snapshot (opaque here)
"""

from dataclasses import dataclass
from enum import Enum

QUIT_TOKEN = "quit"
POSITION_PREFIX = "pos "
QUIT_MESSAGE = QUIT_TOKEN + "\n"


class MessageKind(Enum):
    QUIT = "quit"
    POSITION = "pos"
    OTHER = "other"


@dataclass(frozen=True)
class Message:
    kind: MessageKind
    payload: str = ""


def parse_message(raw: str) -> Message:
    """Classify one inbound line. The line terminator is optional."""
    line = raw.rstrip("\r\n")
    if line == QUIT_TOKEN:
        return Message(MessageKind.QUIT)
    if line.startswith(POSITION_PREFIX):
        return Message(MessageKind.POSITION, line[len(POSITION_PREFIX):])
    return Message(MessageKind.OTHER, line)


def encode_position(state_text: str) -> str:
    return f"{POSITION_PREFIX}{state_text}\n"
