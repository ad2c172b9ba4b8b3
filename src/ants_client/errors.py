"""
ants_client.errors — Custom exception classes
==============================================

Defines the exception hierarchy for protocol errors.
Each exception stores the record it failed on for structured logging.
"""

from __future__ import annotations
from typing import List, Optional, Sequence

from .error_formatter import format_error_block

# Lines kept on an error for the error log
MAX_CONTEXT_LINES = 20


class AntsClientError(Exception):
    """Base exception for all ants_client errors."""

    error_type = "ANTS_CLIENT_ERROR"
    record = "unknown"

    def __init__(self, reason: str, lines: Optional[Sequence[str]] = None):
        self.reason = reason
        self.lines: List[str] = list(lines or [])[-MAX_CONTEXT_LINES:]
        super().__init__(f"{self.__class__.__name__}: {reason}")

    def __eq__(self, other):
        return (
            type(self) is type(other)
            and self.reason == other.reason
            and self.lines == other.lines
        )

    def __hash__(self):
        return hash((type(self), self.reason))

    def format_error_log(self) -> str:
        return format_error_block(
            error_type=self.error_type,
            record=self.record,
            reason=self.reason,
            lines=self.lines,
        )


class CannotParseGameConfig(AntsClientError):
    """Raised when the ``turn 0`` record does not yield all nine parameters."""

    error_type = "CANNOT_PARSE_GAME_CONFIG"
    record = "turn 0"


class CannotParseTurnInfo(AntsClientError):
    """Raised when a turn record never reaches its ``go`` line."""

    error_type = "CANNOT_PARSE_TURN_INFO"
    record = "turn"


class CannotParseEndInfo(AntsClientError):
    """Raised when the ``end`` record is incomplete or inconsistent."""

    error_type = "CANNOT_PARSE_END_INFO"
    record = "end"


class InvalidOrderError(AntsClientError):
    """Describes a value returned by decide() that is not an Order.

    Only logged: rejected entries are dropped and the turn goes on.
    """

    error_type = "INVALID_ORDER"
    record = "orders"

    def __init__(self, index: int, value: object):
        self.index = index
        self.value = value
        super().__init__(
            f"entry {index} is {type(value).__name__}, expected Order",
            lines=[repr(value)],
        )
