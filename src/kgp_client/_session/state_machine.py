# Area: Session
"""
kgp_client._session.state_machine — Session State Machine
=========================================================

Tracks the phase of the connection and validates transitions
triggered by inbound messages and by the agent returning.
"""

import logging

from .enums import Phase, SessionEvent

logger = logging.getLogger("kgp_client.session.state_machine")


# Valid transitions: {current_phase: {event: next_phase}}
TRANSITIONS = {
    Phase.CONNECTING: {
        SessionEvent.CHALLENGE: Phase.AUTHENTICATING,
        SessionEvent.READY: Phase.IDLE,
        SessionEvent.END: Phase.ENDED,
    },
    Phase.AUTHENTICATING: {
        SessionEvent.AUTH_SENT: Phase.IDLE,
        SessionEvent.END: Phase.ENDED,
    },
    Phase.IDLE: {
        SessionEvent.DECISION_REQUESTED: Phase.AWAITING_DECISION,
        SessionEvent.END: Phase.ENDED,
    },
    Phase.AWAITING_DECISION: {
        SessionEvent.DECISION_RETURNED: Phase.IDLE,
        SessionEvent.END: Phase.ENDED,
    },
    Phase.ENDED: {},
}


class SessionStateMachine:
    """
    State machine for the session lifecycle.

    Attributes:
        current_phase: The current phase of the session
    """

    def __init__(self):
        """Initialize state machine in CONNECTING."""
        self.current_phase = Phase.CONNECTING

    @property
    def is_ended(self) -> bool:
        return self.current_phase is Phase.ENDED

    def can_transition(self, event: SessionEvent) -> bool:
        """
        Check if a transition is valid from the current phase.

        Args:
            event: The event to check

        Returns:
            True if the transition is valid, False otherwise
        """
        return event in TRANSITIONS.get(self.current_phase, {})

    def transition(self, event: SessionEvent) -> Phase:
        """
        Execute a phase transition.

        Args:
            event: The event triggering the transition

        Returns:
            The new phase after transition

        Raises:
            ValueError: If the transition is not valid from the current phase
        """
        if not self.can_transition(event):
            raise ValueError(
                f"Invalid transition: {event.value} from {self.current_phase.value}"
            )
        next_phase = TRANSITIONS[self.current_phase][event]
        logger.info(f"Phase: {self.current_phase.value} → {next_phase.value}")
        self.current_phase = next_phase
        return next_phase

    def end(self) -> None:
        """Move to ENDED from any phase. No-op when already ended."""
        if not self.is_ended:
            self.transition(SessionEvent.END)
