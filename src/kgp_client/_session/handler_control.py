# Area: Session
"""
kgp_client._session.handler_control — Keepalive and Session Control
===================================================================

Handles ``ping``, ``ok``, ``error`` and ``goodbye`` from the server.
"""

import logging
from typing import List

from .._shared.codec import Message
from .handler_base import BaseMessageHandler, Reply

logger = logging.getLogger("kgp_client.session.handler.control")


class PingHandler(BaseMessageHandler):
    """Handler for ``ping``: returns ``pong`` echoing the ping's arguments."""

    def handle(self, message: Message) -> List[Reply]:
        logger.debug(f"Ping received (id={message.id})")
        return [Reply("pong", message.args, message.id)]


class AckHandler(BaseMessageHandler):
    """Handler for ``ok`` and ``error``. Server errors are logged, not fatal."""

    def handle(self, message: Message) -> List[Reply]:
        if message.verb == "error":
            detail = " ".join(str(a) for a in message.args) or "(no detail)"
            logger.warning(f"Server reported error for {message.ref}: {detail}")
        else:
            logger.debug(f"Server acknowledged {message.ref}")
        return []


class GoodbyeHandler(BaseMessageHandler):
    """Handler for ``goodbye``: ends the session from any phase."""

    def handle(self, message: Message) -> List[Reply]:
        reason = " ".join(str(a) for a in message.args)
        logger.info(f"Server said goodbye{': ' + reason if reason else ''}")
        self.state.machine.end()
        return []
