# Area: Protocol
"""
Protocol engine for the ants game engine's line protocol.

This package contains:
- Line classifier and integer parsing
- Extractors for the turn 0, turn and end records
- The pull-based Parser
- The OrderEncoder
- The run loop state machine
"""

from .enums import LineKind, RunEvent, RunState
from .lines import Line, classify, parse_int, tokenize
from .config_extractor import extract_game_config
from .turn_extractor import extract_turn_info
from .end_extractor import extract_end_info
from .parser import Parser
from .encoder import OrderEncoder, encode_order
from .state_machine import RunStateMachine

__all__ = [
    "LineKind",
    "RunEvent",
    "RunState",
    "Line",
    "classify",
    "parse_int",
    "tokenize",
    "extract_game_config",
    "extract_turn_info",
    "extract_end_info",
    "Parser",
    "OrderEncoder",
    "encode_order",
    "RunStateMachine",
]
