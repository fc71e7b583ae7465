# Area: Session
"""
Session engine: phases, state, inbound handlers and the agent handle.
"""

from .control import SearchControl
from .engine import SessionEngine
from .enums import Phase, SessionEvent
from .options import OptionRegistry
from .state import SessionState
from .state_machine import SessionStateMachine

__all__ = [
    "SearchControl",
    "SessionEngine",
    "Phase",
    "SessionEvent",
    "OptionRegistry",
    "SessionState",
    "SessionStateMachine",
]
