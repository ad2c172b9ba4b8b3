# Area: Shared
"""
ants_client._shared.protocol_display — Display constants for the protocol trace
===============================================================================

ANSI color codes and record/callback display names
used by ProtocolLogger for structured output.
"""

# ══════════════════════════════════════════════════════════════
# ANSI COLOR CODES
# ══════════════════════════════════════════════════════════════

GREEN = "\033[32m"       # Protocol records
ORANGE = "\033[38;5;208m"  # Callbacks
RED = "\033[31m"         # Errors
RESET = "\033[0m"

# ══════════════════════════════════════════════════════════════
# RECORD → DISPLAY NAME MAPPINGS
# ══════════════════════════════════════════════════════════════

# Records the client RECEIVES
RECEIVE_DISPLAY_NAMES = {
    "CONFIG": "GAME-CONFIG",
    "NORMAL": "TURN",
    "END": "GAME-OVER",
}

# Lines the client SENDS
SEND_DISPLAY_NAMES = {
    "READY": "READY-ACK",
    "ORDERS": "ORDERS",
}

# Expected response for each record
EXPECTED_RESPONSES = {
    "CONFIG": "go",
    "NORMAL": "orders + go",
    "END": "None (terminal)",
}

# Callback internal name → display name
CALLBACK_DISPLAY_NAMES = {
    "configure": "setup",
    "decide": "make_turn",
    "finalize": "tear_down",
}
