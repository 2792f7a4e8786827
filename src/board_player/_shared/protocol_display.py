# Area: Shared
"""
board_player._shared.protocol_display — Display constants for protocol logging
==============================================================================

ANSI color codes and message type display name mappings
used by ProtocolLogger for structured output.
"""

# ══════════════════════════════════════════════════════════════
# ANSI COLOR CODES
# ══════════════════════════════════════════════════════════════

GREEN = "\033[32m"       # Protocol messages
ORANGE = "\033[38;5;208m"  # Searches
CYAN = "\033[36m"        # Positions
RED = "\033[31m"         # Errors
RESET = "\033[0m"

# ══════════════════════════════════════════════════════════════
# MESSAGE TYPE → DISPLAY NAME MAPPINGS
# ══════════════════════════════════════════════════════════════

# Messages a player RECEIVES
RECEIVE_DISPLAY_NAMES = {
    "quit": "QUIT",
    "pos": "POSITION",
}

# Messages a player SENDS
SEND_DISPLAY_NAMES = {
    "quit": "QUIT",
    "pos": "POSITION",
    "catchup": "CATCH-UP",
}

# What the player does next after each message
EXPECTED_RESPONSES = {
    "quit": "None (terminal)",
    "pos": "Move if our turn",
    "catchup": "None",
}
