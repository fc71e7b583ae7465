# Area: Session
"""
kgp_client._session.handler_options — Option Exchange
=====================================================

Handles ``set <key> <value>`` and ``get <key>`` from the server.
Engine keys update the session's clocks and server name as well as the
option table.
"""

import logging
from typing import List

from ..errors import ProtocolError
from .._shared.codec import Message, encode
from ..types import TimeMode
from .handler_base import BaseMessageHandler, Reply

logger = logging.getLogger("kgp_client.session.handler.options")

TIME_MODE_KEY = "time:mode"
CLOCK_KEY = "time:clock"
OPPONENT_CLOCK_KEY = "time:opclock"
SERVER_NAME_KEY = "info:name"


class SetOptionHandler(BaseMessageHandler):
    """Handler for ``set``. Last write wins."""

    def handle(self, message: Message) -> List[Reply]:
        self.log_handling(message)
        self.expect_arity(message, 2)
        key = self.str_arg(message, 0, "key")
        value = message.args[1]

        if key == TIME_MODE_KEY:
            mode = TimeMode.parse(str(value))
            if mode is None:
                raise ProtocolError(f"Unknown time mode {value!r}", line=encode(message))
            self.state.time_mode = mode
        elif key == CLOCK_KEY:
            self.state.clock = self.int_arg(message, 1, "clock")
        elif key == OPPONENT_CLOCK_KEY:
            self.state.opponent_clock = self.int_arg(message, 1, "opclock")
        elif key == SERVER_NAME_KEY:
            self.state.server_name = str(value)

        self.state.options.set(key, value)
        logger.debug(f"Option {key} = {value!r}")
        return []


class GetOptionHandler(BaseMessageHandler):
    """Handler for ``get``: answers with ``set`` or, for unknown keys, ``error``."""

    def handle(self, message: Message) -> List[Reply]:
        self.log_handling(message)
        self.expect_arity(message, 1)
        key = self.str_arg(message, 0, "key")
        value = self.state.options.get(key)
        if value is None:
            return [Reply("error", (f"unknown option {key}",), message.id)]
        return [Reply("set", (key, value), message.id)]
