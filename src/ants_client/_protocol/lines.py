# Area: Protocol
"""
ants_client._protocol.lines — Line classifier
==============================================

Splits one input line into tokens and names its record type by the
leading token. Pure functions, no state.
"""

from __future__ import annotations

import re
from typing import List, NamedTuple, Optional

from .._runner_config import (
    ANT,
    CONFIG_KEYS,
    DEAD,
    END,
    FOOD,
    GO,
    HILL,
    PLAYERS,
    READY,
    SCORE,
    TURN,
    WATER,
)
from .enums import LineKind

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")

# Leading tokens that must stand alone on their line
_STANDALONE = {
    END: LineKind.END,
    READY: LineKind.READY,
    GO: LineKind.GO,
}

# Leading tokens followed by arguments
_TAGGED = {
    WATER: LineKind.WATER,
    FOOD: LineKind.FOOD,
    ANT: LineKind.ANT,
    HILL: LineKind.HILL,
    DEAD: LineKind.DEAD,
    PLAYERS: LineKind.PLAYERS,
    SCORE: LineKind.SCORE,
}


class Line(NamedTuple):
    """A classified input line."""
    kind: LineKind
    tag: str
    args: List[str]


def strip_terminator(line: str) -> str:
    """Drop the trailing newline (and carriage return) of a raw line."""
    return line.rstrip("\r\n")


def tokenize(line: str) -> List[str]:
    return line.split()


def parse_int(token: Optional[str], bits: int = 32) -> Optional[int]:
    """
    Parse a signed decimal integer that fits in ``bits`` bits.

    Returns None for a missing, malformed or out-of-range token.
    """
    if token is None or not _INT_PATTERN.fullmatch(token):
        return None
    bound = 1 << (bits - 1)
    # Longer than the bound can never fit; int() would also reject huge digit strings
    if len(token.lstrip("+-").lstrip("0")) > len(str(bound)):
        return None
    value = int(token)
    if not -bound <= value < bound:
        return None
    return value


def parse_ints(tokens: List[str], bits: int = 32) -> Optional[List[int]]:
    """Parse every token, or return None if any of them fails."""
    values = []
    for token in tokens:
        value = parse_int(token, bits)
        if value is None:
            return None
        values.append(value)
    return values


def classify(line: str) -> Line:
    """
    Identify the record type of a line.

    ``turn`` needs at least one argument; ``end``, ``ready`` and ``go``
    must stand alone. Anything else is UNKNOWN.
    """
    tokens = tokenize(line)
    if not tokens:
        return Line(LineKind.UNKNOWN, "", [])

    tag, args = tokens[0], tokens[1:]

    if tag == TURN:
        kind = LineKind.TURN if args else LineKind.UNKNOWN
        return Line(kind, tag, args)

    if tag in _STANDALONE:
        kind = LineKind.UNKNOWN if args else _STANDALONE[tag]
        return Line(kind, tag, args)

    if tag in _TAGGED:
        return Line(_TAGGED[tag], tag, args)

    if tag in CONFIG_KEYS:
        return Line(LineKind.PARAMETER, tag, args)

    return Line(LineKind.UNKNOWN, tag, args)
