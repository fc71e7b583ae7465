# Area: Session
"""
kgp_client._session.handler_base — Base Message Handler
=======================================================

Abstract base class for inbound message handlers. Provides argument
checking helpers shared by all handlers.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, NamedTuple, Optional, Tuple

from ..errors import ProtocolError
from .._shared.codec import Arg, Message, encode
from .state import SessionState

logger = logging.getLogger("kgp_client.session.handler")


class Reply(NamedTuple):
    """Outbound message produced by a handler; the engine assigns its id."""
    verb: str
    args: Tuple[Arg, ...] = ()
    ref: Optional[int] = None


class BaseMessageHandler(ABC):
    """
    Abstract base class for inbound message handlers.

    Handlers update the SessionState and return the replies the
    engine should send, in order.
    """

    def __init__(self, state: SessionState):
        self.state = state

    @abstractmethod
    def handle(self, message: Message) -> List[Reply]:
        """
        Handle an inbound message.

        Args:
            message: The decoded message

        Returns:
            Replies to send (possibly empty)
        """

    def expect_arity(self, message: Message, minimum: int, maximum: Optional[int] = None) -> None:
        """Raise ProtocolError unless ``minimum <= len(args) <= maximum``."""
        maximum = minimum if maximum is None else maximum
        count = len(message.args)
        if not minimum <= count <= maximum:
            expected = str(minimum) if minimum == maximum else f"{minimum}-{maximum}"
            raise ProtocolError(
                f"'{message.verb}' expects {expected} argument(s), got {count}",
                line=encode(message),
            )

    def int_arg(self, message: Message, index: int, name: str, minimum: int = 0) -> int:
        """Return argument ``index`` as an int >= ``minimum`` or raise ProtocolError."""
        value = message.args[index]
        if not isinstance(value, int) or value < minimum:
            raise ProtocolError(
                f"'{message.verb}' argument {name} must be an integer >= {minimum}, got {value!r}",
                line=encode(message),
            )
        return value

    def str_arg(self, message: Message, index: int, name: str) -> str:
        value = message.args[index]
        if not isinstance(value, str):
            raise ProtocolError(
                f"'{message.verb}' argument {name} must be a string, got {value!r}",
                line=encode(message),
            )
        return value

    def unexpected(self, message: Message) -> ProtocolError:
        """Build the error for a verb arriving in the wrong phase."""
        return ProtocolError(
            f"Unexpected '{message.verb}' in phase {self.state.phase.value}",
            line=encode(message),
        )

    def log_handling(self, message: Message) -> None:
        logger.debug(f"Handling {message.verb} (id={message.id}, ref={message.ref})")
