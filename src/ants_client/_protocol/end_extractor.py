# Area: Protocol
"""
ants_client._protocol.end_extractor — End-of-game extractor
===========================================================

Reads the ``end`` record:

    players <N>
    score <s1> <s2> ... <sN>
    ...turn body lines...
    go

``players`` and ``score`` must be the first two lines of the record.
The rest is the final visible state, read by the turn extractor.
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Tuple

from ..errors import CannotParseEndInfo, CannotParseTurnInfo
from ..types import EndInfo
from .enums import LineKind
from .lines import classify, parse_int, parse_ints
from .turn_extractor import extract_turn_info

logger = logging.getLogger("ants_client.parser")


def extract_end_info(lines: Iterator[str]) -> EndInfo:
    """
    Consume the end record up to and including ``go`` and build the EndInfo.

    When the ``players`` or ``score`` line is bad, the rest of the record
    is still read so the next call starts after its ``go``.

    Args:
        lines: Iterator positioned just after the ``end`` line

    Returns:
        The EndInfo with one score per player

    Raises:
        CannotParseEndInfo: On a missing or malformed ``players``/``score``
            line, a player/score count mismatch, or a truncated final state
    """
    consumed: List[str] = []
    player_count, problem = _read_header(lines, consumed, LineKind.PLAYERS, _player_count)
    scores: Optional[List[int]] = None
    if problem is None:
        scores, problem = _read_header(lines, consumed, LineKind.SCORE, _scores)

    if problem == _RECORD_CLOSED:
        raise CannotParseEndInfo("record closed before 'players' and 'score'", lines=consumed)

    try:
        turn_info = extract_turn_info(lines)
    except CannotParseTurnInfo as e:
        raise CannotParseEndInfo(
            f"final state: {e.reason}", lines=consumed + e.lines
        ) from e

    if problem is not None:
        raise CannotParseEndInfo(problem, lines=consumed)

    if player_count != len(scores):
        raise CannotParseEndInfo(
            f"{player_count} players but {len(scores)} scores", lines=consumed
        )

    return EndInfo(scores=tuple(scores), turn_info=turn_info)


_RECORD_CLOSED = "closed"


def _read_header(lines, consumed, expected, parse) -> Tuple[object, Optional[str]]:
    """Read the next line as an ``expected`` header and parse its arguments."""
    line = next(lines, None)
    if line is None:
        return None, f"input ended before '{expected.value.lower()}'"
    consumed.append(line)

    parsed = classify(line)
    if parsed.kind is LineKind.GO:
        return None, _RECORD_CLOSED
    if parsed.kind is not expected:
        return None, f"expected '{expected.value.lower()}', got {line!r}"

    value = parse(parsed.args)
    if value is None:
        return None, f"malformed line {line!r}"
    return value, None


def _player_count(args: List[str]) -> Optional[int]:
    if len(args) != 1:
        return None
    return parse_int(args[0])


def _scores(args: List[str]) -> Optional[List[int]]:
    return parse_ints(args)
