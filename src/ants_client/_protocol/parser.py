# Area: Protocol
"""
ants_client._protocol.parser — Record parser
============================================

Pull interface over a line source:

    parser = Parser(lines)
    config = parser.next_start_turn()      # the turn 0 record
    while (turn := parser.next_turn()) is not None:
        ...                                # Turn(NORMAL, ...) or Turn(END, ...)

The parser owns the line cursor. Each call reads exactly one record
(to completion, success or failure) and leaves the rest of the input
untouched. Lines outside a record are skipped.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

from ..errors import CannotParseEndInfo, CannotParseGameConfig, CannotParseTurnInfo
from ..types import GameConfig, Turn, TurnKind
from .._runner_config import START_TURN_LINE
from .config_extractor import extract_game_config
from .end_extractor import extract_end_info
from .enums import LineKind
from .lines import classify, parse_int, strip_terminator
from .turn_extractor import extract_turn_info

logger = logging.getLogger("ants_client.parser")


class Parser:
    """
    Incremental parser for the game engine's output.

    Attributes:
        last_turn_number: N of the last ``turn N`` line, or None if it was
            not an integer
        records_read: Number of records (config included) read so far
    """

    def __init__(self, lines: Iterable[str]):
        self._lines: Iterator[str] = (strip_terminator(line) for line in lines)
        self.last_turn_number: Optional[int] = None
        self.records_read = 0

    def next_start_turn(self) -> GameConfig:
        """
        Skip to ``turn 0`` and read the game configuration.

        Returns:
            The GameConfig

        Raises:
            CannotParseGameConfig: If ``turn 0`` never appears or the
                record lacks a valid value for any parameter
        """
        for line in self._lines:
            if line == START_TURN_LINE:
                break
            logger.debug(f"Skipping line before turn 0: {line!r}")
        else:
            raise CannotParseGameConfig("input ended before 'turn 0'")

        config = extract_game_config(self._lines)
        self.last_turn_number = 0
        self.records_read += 1
        return config

    def next_turn(self) -> Optional[Turn]:
        """
        Read the next turn or end record.

        Returns:
            Turn(NORMAL, ...) for a ``turn N`` record, Turn(END, ...) for
            the ``end`` record, or None when the input is exhausted
        """
        for line in self._lines:
            parsed = classify(line)
            if parsed.kind is LineKind.TURN:
                self.last_turn_number = parse_int(parsed.args[0])
                return self._read(TurnKind.NORMAL)
            if parsed.kind is LineKind.END:
                return self._read(TurnKind.END)
            logger.debug(f"Skipping line outside a record: {line!r}")
        return None

    def _read(self, kind: TurnKind) -> Turn:
        self.records_read += 1
        try:
            if kind is TurnKind.END:
                return Turn(kind, info=extract_end_info(self._lines))
            return Turn(kind, info=extract_turn_info(self._lines))
        except (CannotParseTurnInfo, CannotParseEndInfo) as e:
            logger.debug(f"Record {kind.value} failed: {e.reason}")
            return Turn(kind, error=e)
