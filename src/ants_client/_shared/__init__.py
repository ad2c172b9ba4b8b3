# Area: Shared
"""
Shared utilities used by the runner, the executor and the CLI.

This package contains:
- Logging configuration
- Protocol trace logging
"""

from .logging_config import (
    setup_logging,
    log_and_terminate,
    log_protocol_error,
)
from .logging_formatters import (
    enable_trace_mode,
    disable_trace_mode,
    is_trace_mode_enabled,
)
from .protocol_logger import get_protocol_logger, ProtocolLogger

__all__ = [
    "setup_logging",
    "log_and_terminate",
    "log_protocol_error",
    "enable_trace_mode",
    "disable_trace_mode",
    "is_trace_mode_enabled",
    "get_protocol_logger",
    "ProtocolLogger",
]
