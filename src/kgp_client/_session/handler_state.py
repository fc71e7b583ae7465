# Area: Session
"""
kgp_client._session.handler_state — Decision Requests and Stop
==============================================================

``state <board> [<clock> <opclock>]`` asks the client for a move.
``stop`` (ref = id of the state) tells it to stop searching.
"""

import logging
from typing import List

from ..errors import ProtocolError
from .._shared.codec import Message, encode
from ..types import BoardSnapshot
from .enums import Phase, SessionEvent
from .handler_base import BaseMessageHandler, Reply

logger = logging.getLogger("kgp_client.session.handler.state")


class StateHandler(BaseMessageHandler):
    """
    Handler for ``state`` messages.

    The engine only routes a state while IDLE; one arriving mid-search
    is held back until the agent returns. Clock arguments are optional:
    without them this request is untimed.
    """

    def handle(self, message: Message) -> List[Reply]:
        self.log_handling(message)
        if self.state.phase is not Phase.IDLE:
            raise self.unexpected(message)
        self.expect_arity(message, 1, 3)
        if len(message.args) == 2:
            raise ProtocolError(
                "'state' clock arguments come in pairs (clock, opclock)",
                line=encode(message),
            )
        token = self.str_arg(message, 0, "board")
        try:
            board = BoardSnapshot.parse(token)
        except ValueError as e:
            raise ProtocolError(f"Malformed board: {e}", line=encode(message)) from e

        clock = opponent_clock = None
        if len(message.args) == 3:
            clock = self.int_arg(message, 1, "clock")
            opponent_clock = self.int_arg(message, 2, "opclock")

        self.state.begin_request(message.id, board, clock, opponent_clock)
        self.state.machine.transition(SessionEvent.DECISION_REQUESTED)
        return []


class StopHandler(BaseMessageHandler):
    """
    Handler for ``stop``.

    Only sets the pending-stop flag; the agent is expected to notice via
    should_stop(). A stop referring to an older request is ignored.
    """

    def handle(self, message: Message) -> List[Reply]:
        self.log_handling(message)
        if self.state.phase is not Phase.AWAITING_DECISION:
            logger.debug(f"Ignoring stop in phase {self.state.phase.value}")
            return []
        if message.ref is not None and message.ref != self.state.request_id:
            logger.debug(
                f"Ignoring stale stop for {message.ref} (current request {self.state.request_id})"
            )
            return []
        self.state.stop_requested = True
        logger.info(f"Stop requested for {self.state.request_id}")
        return []
