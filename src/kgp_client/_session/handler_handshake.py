# Area: Session
"""
kgp_client._session.handler_handshake — Greeting and Authentication
===================================================================

Handles the server greeting (``kgp``) and the RSA challenge (``auth``).
Both are only legal while the session is CONNECTING.
"""

import logging
from typing import List, Optional

from ..errors import ProtocolError
from .._shared.codec import PROTOCOL_MAJOR, Message, encode
from .._shared.credentials import Credential
from .enums import Phase, SessionEvent
from .handler_base import BaseMessageHandler, Reply
from .state import SessionState

logger = logging.getLogger("kgp_client.session.handler.handshake")

AUTH_FORGO = "forgo"


class GreetingHandler(BaseMessageHandler):
    """
    Handler for ``kgp <major> <minor> <patch>``.

    1. Check the major version
    2. Reply with the client mode
    3. Announce the agent's name, authors and description
    """

    def __init__(self, state: SessionState, mode: str, agent_info: dict):
        super().__init__(state)
        self.mode = mode
        self.agent_info = agent_info

    def handle(self, message: Message) -> List[Reply]:
        self.log_handling(message)
        if self.state.phase is not Phase.CONNECTING or self.state.protocol_version is not None:
            raise self.unexpected(message)
        self.expect_arity(message, 3)
        version = tuple(
            self.int_arg(message, i, name) for i, name in enumerate(("major", "minor", "patch"))
        )
        if version[0] != PROTOCOL_MAJOR:
            raise ProtocolError(
                f"Unsupported protocol version {'.'.join(map(str, version))}, "
                f"client speaks {PROTOCOL_MAJOR}.x",
                line=encode(message),
            )
        self.state.protocol_version = version
        logger.info(f"Server speaks KGP {'.'.join(map(str, version))}")

        replies = [Reply("mode", (self.mode,), message.id)]
        for key in ("name", "authors", "description"):
            value = self.agent_info.get(key)
            if value is not None:
                replies.append(Reply("set", (f"info:{key}", value)))
        return replies


class AuthChallengeHandler(BaseMessageHandler):
    """
    Handler for ``auth <challenge>``.

    With a credential: enter AUTHENTICATING, answer with the signature
    and move to IDLE. Without one: answer ``auth forgo`` and move to IDLE.
    The client cannot know whether the server accepted the answer.
    """

    def __init__(self, state: SessionState, credential: Optional[Credential]):
        super().__init__(state)
        self.credential = credential

    def handle(self, message: Message) -> List[Reply]:
        self.log_handling(message)
        if self.state.phase is not Phase.CONNECTING:
            raise self.unexpected(message)
        self.expect_arity(message, 1)
        challenge = self.int_arg(message, 0, "challenge")
        machine = self.state.machine

        if self.credential is None:
            logger.info("Authentication requested but no credential configured")
            machine.transition(SessionEvent.READY)
            return [Reply("auth", (AUTH_FORGO,), message.id)]

        machine.transition(SessionEvent.CHALLENGE)
        self.state.auth_challenge = challenge
        response = self.credential.sign(challenge)
        self.state.auth_challenge = None
        machine.transition(SessionEvent.AUTH_SENT)
        logger.info("Answered authentication challenge")
        return [Reply("auth", (response,), message.id)]
