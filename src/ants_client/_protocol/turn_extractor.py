# Area: Protocol
"""
ants_client._protocol.turn_extractor — Turn-snapshot extractor
==============================================================

Reads the body of a turn record up to ``go`` and builds the TurnInfo.

Body lines:
    w <row> <col>           water
    f <row> <col>           food
    a <row> <col> <owner>   live ant
    h <row> <col> <owner>   ant hill
    d <row> <col> <owner>   dead ant

A line whose numbers do not parse is dropped; the record goes on.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Iterator, List

from ..errors import MAX_CONTEXT_LINES, CannotParseTurnInfo
from ..types import Entity, Position, TurnInfo
from .enums import LineKind
from .lines import classify, parse_ints

logger = logging.getLogger("ants_client.parser")

# Line kind -> (TurnInfo field, number of integer arguments)
_BODY_LINES = {
    LineKind.WATER: ("water", 2),
    LineKind.FOOD: ("food", 2),
    LineKind.ANT: ("ant", 3),
    LineKind.HILL: ("ant_hill", 3),
    LineKind.DEAD: ("dead_ant", 3),
}


def extract_turn_info(lines: Iterator[str]) -> TurnInfo:
    """
    Consume lines up to and including ``go`` and build the TurnInfo.

    Args:
        lines: Iterator positioned just after the record's opening line

    Returns:
        The TurnInfo, with every collection in input order

    Raises:
        CannotParseTurnInfo: If the lines run out before ``go``
    """
    seen = {field: [] for field, _ in _BODY_LINES.values()}
    context: deque = deque(maxlen=MAX_CONTEXT_LINES)

    for line in lines:
        context.append(line)
        parsed = classify(line)
        if parsed.kind is LineKind.GO:
            return TurnInfo(**{field: tuple(items) for field, items in seen.items()})

        body = _BODY_LINES.get(parsed.kind)
        if body is None:
            logger.debug(f"Ignoring turn line: {line!r}")
            continue

        field, arity = body
        values = parse_ints(parsed.args[:arity])
        if values is None or len(values) < arity:
            logger.debug(f"Dropping malformed turn line: {line!r}")
            continue
        seen[field].append(_build(values))

    raise CannotParseTurnInfo("input ended before 'go'", lines=context)


def _build(values: List[int]):
    pos = Position(row=values[0], col=values[1])
    if len(values) == 2:
        return pos
    return Entity(owner=values[2], pos=pos)
