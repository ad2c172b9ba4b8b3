# Area: Protocol
"""
ants_client._protocol.config_extractor — Game-config extractor
==============================================================

Reads the parameter lines of the ``turn 0`` record up to ``ready`` and
builds the GameConfig. A config is only built when all nine parameters
were read as integers.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Dict, Iterator, Optional

from pydantic import ValidationError

from ..errors import MAX_CONTEXT_LINES, CannotParseGameConfig
from ..types import GameConfig
from .._runner_config import CONFIG_KEYS, WIDE_CONFIG_FIELDS
from .enums import LineKind
from .lines import classify, parse_int

logger = logging.getLogger("ants_client.parser")


def extract_game_config(lines: Iterator[str]) -> GameConfig:
    """
    Consume lines up to and including ``ready`` and build the GameConfig.

    A parameter line is ``<key> <value>``. A key seen again replaces the
    earlier reading, a bad value included. Unrecognized lines are skipped.
    Running out of lines ends the record like ``ready`` does.

    Args:
        lines: Iterator positioned just after the ``turn 0`` line

    Returns:
        The complete GameConfig

    Raises:
        CannotParseGameConfig: If a parameter is missing or not an integer
    """
    readings: Dict[str, Optional[int]] = {}
    context: deque = deque(maxlen=MAX_CONTEXT_LINES)

    for line in lines:
        context.append(line)
        parsed = classify(line)
        if parsed.kind is LineKind.READY:
            break
        if parsed.kind is not LineKind.PARAMETER:
            logger.debug(f"Ignoring config line: {line!r}")
            continue

        field = CONFIG_KEYS[parsed.tag]
        bits = 64 if field in WIDE_CONFIG_FIELDS else 32
        value = parse_int(parsed.args[0] if parsed.args else None, bits)
        if value is None:
            logger.debug(f"Unparsable value for {parsed.tag}: {line!r}")
        readings[field] = value
    else:
        logger.warning("Input ended before 'ready'")

    missing = [f for f in CONFIG_KEYS.values() if readings.get(f) is None]
    if missing:
        raise CannotParseGameConfig(
            f"missing or invalid parameters: {', '.join(missing)}",
            lines=context,
        )

    try:
        return GameConfig(**readings)
    except ValidationError as e:
        raise CannotParseGameConfig(str(e), lines=context) from e
