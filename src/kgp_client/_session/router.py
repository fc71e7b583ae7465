# Area: Session
"""
kgp_client._session.router — Inbound Message Router
===================================================

Routes decoded server messages to their handlers by verb.
"""

import logging
from typing import Dict, List, Optional, Protocol

from ..errors import ProtocolError
from .._shared.codec import Message, encode
from .handler_base import Reply

logger = logging.getLogger("kgp_client.session.router")


class MessageHandler(Protocol):
    """Protocol for inbound message handlers."""

    def handle(self, message: Message) -> List[Reply]:
        """Handle a message and return replies to send."""
        ...


class MessageRouter:
    """
    Routes server messages to handlers.

    Usage:
        router = MessageRouter()
        router.register_handler("ping", ping_handler)
        replies = router.route(message)
    """

    def __init__(self):
        """Initialize router with empty handler registry."""
        self._handlers: Dict[str, MessageHandler] = {}

    def register_handler(self, verb: str, handler: MessageHandler) -> None:
        """
        Register a handler for a verb.

        Args:
            verb: The verb to handle
            handler: The handler instance
        """
        self._handlers[verb] = handler
        logger.debug(f"Registered handler for {verb}")

    def get_handler(self, verb: str) -> Optional[MessageHandler]:
        return self._handlers.get(verb)

    def route(self, message: Message) -> List[Reply]:
        """
        Route a message to its handler.

        Raises:
            ProtocolError: If no handler accepts the verb (a client-only
                verb sent by the server)
        """
        handler = self._handlers.get(message.verb)
        if handler is None:
            raise ProtocolError(
                f"Server sent client-only verb '{message.verb}'", line=encode(message)
            )
        return handler.handle(message)
