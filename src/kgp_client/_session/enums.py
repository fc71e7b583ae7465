# Area: Session
"""
kgp_client._session.enums — Session phases and events
=====================================================

Defines the phases and events of the session state machine.
"""

from enum import Enum


class Phase(Enum):
    """
    Phases of one client session.

    Phase transitions:
    CONNECTING -> AUTHENTICATING (on CHALLENGE, credential configured)
    CONNECTING -> IDLE (on READY: first state, or a challenge
                        answered with "forgo")
    AUTHENTICATING -> IDLE (on AUTH_SENT)
    IDLE -> AWAITING_DECISION (on DECISION_REQUESTED)
    AWAITING_DECISION -> IDLE (on DECISION_RETURNED)
    Any phase -> ENDED (on END)
    """
    CONNECTING = "CONNECTING"
    AUTHENTICATING = "AUTHENTICATING"
    IDLE = "IDLE"
    AWAITING_DECISION = "AWAITING_DECISION"
    ENDED = "ENDED"


class SessionEvent(Enum):
    """
    Events that move the session between phases.

    - CHALLENGE: auth challenge received and a credential is configured
    - AUTH_SENT: challenge response written to the server
    - READY: handshake finished (first state received, or auth forgone)
    - DECISION_REQUESTED: state message received
    - DECISION_RETURNED: agent returned from search
    - END: goodbye received, or the session failed
    """
    CHALLENGE = "CHALLENGE"
    AUTH_SENT = "AUTH_SENT"
    READY = "READY"
    DECISION_REQUESTED = "DECISION_REQUESTED"
    DECISION_RETURNED = "DECISION_RETURNED"
    END = "END"
