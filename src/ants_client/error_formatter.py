# Area: Shared
"""Error formatting for structured protocol error logs."""

from __future__ import annotations
from typing import Sequence


def format_error_block(
    error_type: str,
    record: str,
    reason: str,
    lines: Sequence[str],
) -> str:
    """Format a structured error block for a failed record."""
    from datetime import datetime, timezone

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    block = [
        "",
        "=" * 64,
        " PROTOCOL ERROR — PROCESS TERMINATED",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Error Type:   {error_type}",
        f" Record:       {record}",
        f" Reason:       {reason}",
    ]

    if lines:
        block.append("")
        block.append(" ── RECORD LINES " + "─" * 47)
        block.append(indent_lines(lines))

    block.append("")
    block.append("=" * 64)
    block.append("")

    return "\n".join(block)


def indent_lines(lines: Sequence[str], indent: int = 2) -> str:
    """Indent raw protocol lines for error logs."""
    pad = " " * indent
    return "\n".join(f"{pad}{line!r}" if not line.strip() else f"{pad}{line}"
                     for line in lines)
