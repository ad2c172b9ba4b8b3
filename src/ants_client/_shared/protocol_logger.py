# Area: Shared
"""
ants_client._shared.protocol_logger — Protocol trace logging
============================================================

One colored line per received record, sent batch and bot callback,
written to stderr so it never mixes with the protocol on stdout.
"""

from __future__ import annotations
import sys
from datetime import datetime
from typing import Optional

from .protocol_display import (
    CALLBACK_DISPLAY_NAMES,
    EXPECTED_RESPONSES,
    GREEN,
    ORANGE,
    RECEIVE_DISPLAY_NAMES,
    RED,
    RESET,
    SEND_DISPLAY_NAMES,
)


class ProtocolLogger:
    """Logger for protocol records and callbacks."""

    def __init__(self, enabled: bool = False, stream=None):
        self.enabled = enabled
        self._stream = stream
        self._current_turn: Optional[int] = None

    @property
    def stream(self):
        return self._stream if self._stream is not None else sys.stderr

    def set_turn(self, turn: Optional[int]) -> None:
        """Set current turn number for logging context."""
        self._current_turn = turn

    def _turn(self) -> str:
        return "-" if self._current_turn is None else str(self._current_turn)

    def _now(self) -> str:
        return datetime.now().strftime("%H:%M:%S")

    def _now_ms(self) -> str:
        return datetime.now().strftime("%H:%M:%S:%f")[:-3]

    def _emit(self, line: str) -> None:
        if self.enabled:
            print(line, file=self.stream, flush=True)

    def log_received(self, record: str, summary: str = "") -> None:
        """Log a received record."""
        display = RECEIVE_DISPLAY_NAMES.get(record, record)
        expected = EXPECTED_RESPONSES.get(record, "Unknown")
        self._emit(
            f"{GREEN}{self._now()} | TURN: {self._turn():>5} | RECEIVED | "
            f"{display:12} | EXPECTED-RESPONSE: {expected:16} | {summary}{RESET}"
        )

    def log_sent(self, kind: str, order_count: int = 0) -> None:
        """Log a sent batch of lines."""
        display = SEND_DISPLAY_NAMES.get(kind, kind)
        self._emit(
            f"{GREEN}{self._now()} | TURN: {self._turn():>5} | SENT     | "
            f"{display:12} | ORDERS: {order_count}{RESET}"
        )

    def log_callback_call(self, callback_name: str) -> None:
        """Log a callback invocation."""
        display = CALLBACK_DISPLAY_NAMES.get(callback_name, callback_name)
        self._emit(
            f"{ORANGE}{self._now_ms()} | CALLBACK: {display:12} | CALL{RESET}"
        )

    def log_callback_response(self, callback_name: str) -> None:
        """Log a callback response."""
        display = CALLBACK_DISPLAY_NAMES.get(callback_name, callback_name)
        self._emit(
            f"{ORANGE}{self._now_ms()} | CALLBACK: {display:12} | RESPONSE{RESET}"
        )

    def log_error(self, description: str) -> None:
        """Log an error."""
        self._emit(f"{RED}[ERROR] {self._now()} | {description}{RESET}")


# Global singleton instance
_protocol_logger: Optional[ProtocolLogger] = None


def get_protocol_logger() -> ProtocolLogger:
    """Get or create the global protocol logger instance."""
    global _protocol_logger
    if _protocol_logger is None:
        _protocol_logger = ProtocolLogger()
    return _protocol_logger
