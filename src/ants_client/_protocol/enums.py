# Area: Protocol
"""
ants_client._protocol.enums — Protocol and Run Loop Enums
=========================================================

Defines the input line kinds recognized by the classifier and the
states and events of the run loop state machine.
"""

from enum import Enum


class LineKind(Enum):
    """Record type of one input line, decided by its leading token."""
    TURN = "TURN"
    END = "END"
    READY = "READY"
    GO = "GO"
    PARAMETER = "PARAMETER"
    WATER = "WATER"
    FOOD = "FOOD"
    ANT = "ANT"
    HILL = "HILL"
    DEAD = "DEAD"
    PLAYERS = "PLAYERS"
    SCORE = "SCORE"
    UNKNOWN = "UNKNOWN"


class RunState(Enum):
    """
    States of the run loop.

    State transitions:
    UNINITIALIZED -> CONFIGURED (on CONFIGURED)
    CONFIGURED -> AWAITING_DECISION (on TURN_RECEIVED)
    AWAITING_DECISION -> EMITTING (on DECIDED)
    EMITTING -> AWAITING_DECISION (on TURN_RECEIVED)
    CONFIGURED or EMITTING -> FINISHED (on GAME_ENDED or STREAM_EXHAUSTED)
    Any non-final state -> FAILED (on ABORT)
    """
    UNINITIALIZED = "UNINITIALIZED"
    CONFIGURED = "CONFIGURED"
    AWAITING_DECISION = "AWAITING_DECISION"
    EMITTING = "EMITTING"
    FINISHED = "FINISHED"
    FAILED = "FAILED"


class RunEvent(Enum):
    """
    Events that trigger run loop transitions.

    Events are triggered by:
    - CONFIGURED: turn 0 record parsed and handed to configure()
    - TURN_RECEIVED: a well-formed turn record was read
    - DECIDED: decide() returned the orders for the turn
    - GAME_ENDED: a well-formed end record was handed to finalize()
    - STREAM_EXHAUSTED: input ended without an end record
    - ABORT: a record failed to parse
    """
    CONFIGURED = "CONFIGURED"
    TURN_RECEIVED = "TURN_RECEIVED"
    DECIDED = "DECIDED"
    GAME_ENDED = "GAME_ENDED"
    STREAM_EXHAUSTED = "STREAM_EXHAUSTED"
    ABORT = "ABORT"
