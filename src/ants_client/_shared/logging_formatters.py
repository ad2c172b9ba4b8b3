# Area: Shared
"""
ants_client._shared.logging_formatters — Logging formatters and filters
=======================================================================

Contains formatter/filter classes and the trace mode flag/functions.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

# Flag to control trace-only terminal output
_trace_mode_enabled = False


class TraceFilter(logging.Filter):
    """Filter that suppresses terminal logs while the protocol trace is on.

    In trace mode the ProtocolLogger prints one line per record instead
    of the standard logging output.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        # Errors still reach the terminal
        return not _trace_mode_enabled or record.levelno >= logging.ERROR


class TerminalFormatter(logging.Formatter):
    """Colored formatter for terminal output."""

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        # Color a copy so other handlers see the plain level name
        record = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(record.levelname, self.RESET)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


class JSONFormatter(logging.Formatter):
    """JSON formatter for file output.

    Protocol context passed through ``extra`` (turn number, record kind,
    error type) is copied into the payload when present.
    """

    CONTEXT_FIELDS = ("turn", "record", "error_type")

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in self.CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                log_data[field] = value
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def enable_trace_mode() -> None:
    """Enable trace mode.

    In trace mode:
    - Standard logs below ERROR are suppressed from the terminal
    - The ProtocolLogger prints records, orders and callbacks instead
    - File logging remains unchanged for debugging
    """
    global _trace_mode_enabled
    _trace_mode_enabled = True


def disable_trace_mode() -> None:
    """Disable trace mode (restore standard logging)."""
    global _trace_mode_enabled
    _trace_mode_enabled = False


def is_trace_mode_enabled() -> bool:
    """Check if trace mode is enabled."""
    return _trace_mode_enabled
