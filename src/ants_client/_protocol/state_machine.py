# Area: Protocol
"""
ants_client._protocol.state_machine — Run Loop State Machine
============================================================

Tracks where the run loop is in the session:
configure once, then decide/emit per turn, then finish.
"""

import logging
from typing import Optional

from .enums import RunEvent, RunState

logger = logging.getLogger("ants_client.state_machine")

_ABORT = {RunEvent.ABORT: RunState.FAILED}

# Valid state transitions: {current_state: {event: next_state}}
TRANSITIONS = {
    RunState.UNINITIALIZED: {
        RunEvent.CONFIGURED: RunState.CONFIGURED,
        **_ABORT,
    },
    RunState.CONFIGURED: {
        RunEvent.TURN_RECEIVED: RunState.AWAITING_DECISION,
        RunEvent.GAME_ENDED: RunState.FINISHED,
        RunEvent.STREAM_EXHAUSTED: RunState.FINISHED,
        **_ABORT,
    },
    RunState.AWAITING_DECISION: {
        RunEvent.DECIDED: RunState.EMITTING,
        **_ABORT,
    },
    RunState.EMITTING: {
        RunEvent.TURN_RECEIVED: RunState.AWAITING_DECISION,
        RunEvent.GAME_ENDED: RunState.FINISHED,
        RunEvent.STREAM_EXHAUSTED: RunState.FINISHED,
        **_ABORT,
    },
    RunState.FINISHED: {},
    RunState.FAILED: {},
}


class RunStateMachine:
    """
    State machine for one client session.

    Attributes:
        current_state: The current state of the state machine
        last_event: The event that led to the current state
    """

    def __init__(self):
        """Initialize state machine in UNINITIALIZED."""
        self.current_state = RunState.UNINITIALIZED
        self.last_event: Optional[RunEvent] = None

    @property
    def is_final(self) -> bool:
        return not TRANSITIONS[self.current_state]

    def can_transition(self, event: RunEvent) -> bool:
        """
        Check if a transition is valid from current state.

        Args:
            event: The event to check

        Returns:
            True if the transition is valid, False otherwise
        """
        return event in TRANSITIONS.get(self.current_state, {})

    def transition(self, event: RunEvent) -> RunState:
        """
        Execute a state transition.

        Args:
            event: The event triggering the transition

        Returns:
            The new state after transition

        Raises:
            ValueError: If the transition is not valid
        """
        if not self.can_transition(event):
            raise ValueError(
                f"Invalid transition: {event.value} from {self.current_state.value}"
            )

        next_state = TRANSITIONS[self.current_state][event]
        logger.debug(f"{self.current_state.value} -> {next_state.value} on {event.value}")
        self.current_state = next_state
        self.last_event = event
        return next_state
