# Area: Protocol
"""
board_player._protocol.outcome — Game progression table
========================================================

The position computes its own classification; this module decides
what the player does with it.

    VALID1 <-> VALID2     keep playing (alternation by accepted positions)
    WIN*, TIMEOUT*        absorbing: report and shut down
    EMPTY, INVALID        report only, keep waiting for the next position
"""

from enum import Enum

from ..board import BoardState


class OutcomeAction(Enum):
    CONTINUE = "continue"
    SHUTDOWN = "shutdown"
    REPORT = "report"


OUTCOME_ACTIONS = {
    BoardState.VALID1: OutcomeAction.CONTINUE,
    BoardState.VALID2: OutcomeAction.CONTINUE,
    BoardState.WIN1: OutcomeAction.SHUTDOWN,
    BoardState.WIN2: OutcomeAction.SHUTDOWN,
    BoardState.TIMEOUT1: OutcomeAction.SHUTDOWN,
    BoardState.TIMEOUT2: OutcomeAction.SHUTDOWN,
    BoardState.EMPTY: OutcomeAction.REPORT,
    BoardState.INVALID: OutcomeAction.REPORT,
}

CONTINUE_STATES = frozenset(
    s for s, a in OUTCOME_ACTIONS.items() if a is OutcomeAction.CONTINUE
)
TERMINAL_STATES = frozenset(
    s for s, a in OUTCOME_ACTIONS.items() if a is OutcomeAction.SHUTDOWN
)


def classify_outcome(state: BoardState) -> OutcomeAction:
    """Unknown classifications are reported, never acted on."""
    return OUTCOME_ACTIONS.get(state, OutcomeAction.REPORT)


def is_continue(state: BoardState) -> bool:
    return state in CONTINUE_STATES


def is_terminal(state: BoardState) -> bool:
    return state in TERMINAL_STATES
