# Area: Shared
"""
ants_client._shared.logging_config — Structured logging setup
=============================================================

Configures dual logging: terminal (colored, stderr) + file (JSON).
Provides error logging and termination functions.

stdout belongs to the game engine: nothing here ever writes to it.
"""

from __future__ import annotations
import logging
import sys
from pathlib import Path
from typing import Optional, TYPE_CHECKING

from .logging_formatters import JSONFormatter, TerminalFormatter, TraceFilter

if TYPE_CHECKING:
    from ..errors import AntsClientError

# Package logger
logger = logging.getLogger("ants_client")


def setup_logging(
    log_file_path: Optional[str] = None,
    level: int = logging.INFO,
) -> None:
    """
    Configure logging for the package.

    Parameters
    ----------
    log_file_path : str, optional
        Path to a JSON log file. No file is written when None.
    level : int
        Logging level. Defaults to INFO.
    """
    pkg_logger = logging.getLogger("ants_client")
    pkg_logger.setLevel(level)

    # Close and remove existing handlers
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()

    # Terminal handler with colors
    terminal_handler = logging.StreamHandler(sys.stderr)
    terminal_handler.setLevel(level)
    terminal_handler.setFormatter(TerminalFormatter(
        fmt="%(asctime)s │ %(levelname)s │ %(name)s │ %(message)s",
        datefmt="%H:%M:%S",
    ))
    terminal_handler.addFilter(TraceFilter())
    pkg_logger.addHandler(terminal_handler)

    # File handler with JSON
    if log_file_path:
        try:
            log_path = Path(log_file_path)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(JSONFormatter())
            pkg_logger.addHandler(file_handler)
        except OSError as e:
            pkg_logger.warning(f"Could not create log file: {e}")

    # Prevent propagation to root logger
    pkg_logger.propagate = False


def log_protocol_error(error: "AntsClientError") -> None:
    """
    Log a protocol error in the structured format.

    Parameters
    ----------
    error : AntsClientError
        The error to log.
    """
    error_block = error.format_error_log()

    # Print to terminal (bypassing logger for exact formatting)
    print(error_block, file=sys.stderr)

    # Also log to file via logger
    logger.error(
        f"Protocol error: {error.__class__.__name__}: {error.reason}",
        extra={"error_type": error.error_type, "record": error.record},
    )


def log_and_terminate(error: "AntsClientError", exit_code: int = 1) -> None:
    """
    Log the error and terminate the process.

    Parameters
    ----------
    error : AntsClientError
        The error to log.
    exit_code : int
        Exit code for the process. Defaults to 1.
    """
    log_protocol_error(error)
    logger.critical("Process terminated due to protocol error")
    sys.exit(exit_code)
