# Area: Session Tests
"""Tests for the session state machine."""

import pytest

from kgp_client._session.enums import Phase, SessionEvent
from kgp_client._session.state_machine import TRANSITIONS, SessionStateMachine


class TestSessionStateMachineBase:
    """Tests for basic state machine functionality."""

    def test_initial_phase_is_connecting(self):
        """Test that the state machine starts in CONNECTING."""
        sm = SessionStateMachine()
        assert sm.current_phase == Phase.CONNECTING
        assert sm.is_ended is False

    def test_can_transition_returns_true_for_valid(self):
        sm = SessionStateMachine()
        assert sm.can_transition(SessionEvent.CHALLENGE) is True

    def test_can_transition_returns_false_for_invalid(self):
        sm = SessionStateMachine()
        assert sm.can_transition(SessionEvent.DECISION_REQUESTED) is False

    def test_transition_raises_on_invalid(self):
        """Test that invalid transition raises ValueError."""
        sm = SessionStateMachine()
        with pytest.raises(ValueError):
            sm.transition(SessionEvent.DECISION_RETURNED)


class TestSessionStateMachineTransitions:
    """Tests for specific phase transitions."""

    def test_authenticated_happy_path(self):
        """Test the path through authentication and one decision."""
        sm = SessionStateMachine()

        sm.transition(SessionEvent.CHALLENGE)
        assert sm.current_phase == Phase.AUTHENTICATING

        sm.transition(SessionEvent.AUTH_SENT)
        assert sm.current_phase == Phase.IDLE

        sm.transition(SessionEvent.DECISION_REQUESTED)
        assert sm.current_phase == Phase.AWAITING_DECISION

        sm.transition(SessionEvent.DECISION_RETURNED)
        assert sm.current_phase == Phase.IDLE

    def test_unauthenticated_path(self):
        """Test that READY skips authentication."""
        sm = SessionStateMachine()
        assert sm.transition(SessionEvent.READY) == Phase.IDLE

    @pytest.mark.parametrize("phase", [p for p in Phase if p is not Phase.ENDED])
    def test_every_live_phase_can_end(self, phase):
        """Test that END is reachable from every phase but ENDED."""
        assert SessionEvent.END in TRANSITIONS[phase]

    def test_ended_is_terminal(self):
        sm = SessionStateMachine()
        sm.end()
        assert sm.is_ended
        for event in SessionEvent:
            assert sm.can_transition(event) is False

    def test_end_is_idempotent(self):
        sm = SessionStateMachine()
        sm.end()
        sm.end()
        assert sm.current_phase == Phase.ENDED

    def test_no_second_authentication(self):
        """Test that a challenge is not accepted once IDLE."""
        sm = SessionStateMachine()
        sm.transition(SessionEvent.READY)
        assert sm.can_transition(SessionEvent.CHALLENGE) is False
