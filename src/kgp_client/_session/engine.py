# Area: Session
"""
kgp_client._session.engine — Session engine
===========================================

Drives one connection: reads lines from the transport, decodes them,
routes them to handlers, sends replies, and runs the agent when the
server asks for a move.

While the agent searches, nothing happens on the wire unless the agent
calls into its SearchControl; ``should_stop()`` drains the transport and
applies every message received so far, in order. A new ``state``
arriving mid-search is held back (with everything after it) until the
search returns.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING, Deque, Optional, Sequence

from ..errors import KgpClientError, UsageError
from .._shared.codec import Arg, Message, MessageIds, decode, encode
from .._shared.credentials import Credential
from .._shared.protocol_logger import ProtocolLogger, get_protocol_logger
from .._shared.transport import Transport
from .callback_executor import execute_hook
from .control import SearchControl
from .enums import Phase, SessionEvent
from .handler_control import AckHandler, GoodbyeHandler, PingHandler
from .handler_handshake import AuthChallengeHandler, GreetingHandler
from .handler_options import GetOptionHandler, SetOptionHandler
from .handler_state import StateHandler, StopHandler
from .router import MessageRouter
from .state import SessionState

if TYPE_CHECKING:
    from ..agent import Agent

logger = logging.getLogger("kgp_client.session.engine")

NOTICE_TIMEOUT_SECONDS = 1.0


class SessionEngine:
    """
    Protocol engine for one connection.

    Owns the SessionState, the transport and the id counter. The agent
    only ever sees ``self.control``.
    """

    def __init__(
        self,
        transport: Transport,
        agent: "Agent",
        credential: Optional[Credential] = None,
        mode: str = "freeplay",
        poll_interval: float = 0.1,
        protocol_logger: Optional[ProtocolLogger] = None,
    ):
        self.transport = transport
        self.agent = agent
        self.poll_interval = poll_interval
        self.state = SessionState()
        self.control = SearchControl(self)
        self.router = MessageRouter()
        self._plog = protocol_logger or get_protocol_logger()
        self._ids = MessageIds()
        self._inbox: Deque[str] = deque()
        self._connected = False
        self._searching = False
        self._game_started = False
        self._register_handlers(credential, mode)

    def _register_handlers(self, credential: Optional[Credential], mode: str) -> None:
        reg = self.router.register_handler
        agent_info = {
            "name": self.agent.name,
            "authors": self.agent.authors,
            "description": self.agent.description,
        }
        reg("kgp", GreetingHandler(self.state, mode, agent_info))
        reg("auth", AuthChallengeHandler(self.state, credential))
        reg("state", StateHandler(self.state))
        reg("stop", StopHandler(self.state))
        reg("set", SetOptionHandler(self.state))
        reg("get", GetOptionHandler(self.state))
        reg("ping", PingHandler(self.state))
        ack = AckHandler(self.state)
        reg("ok", ack)
        reg("error", ack)
        reg("goodbye", GoodbyeHandler(self.state))

    @property
    def phase(self) -> Phase:
        return self.state.phase

    # ── Lifecycle ─────────────────────────────────────────────

    def run(self, host: str, port: int) -> None:
        """
        Connect, play until the server says goodbye, close.

        Any failure is reported to the server (best effort) before the
        connection is closed and the error re-raised.
        """
        try:
            self.transport.connect(host, port)
            self._connected = True
            self._loop()
        except BaseException as e:
            self._fail(e)
            raise
        finally:
            self.transport.close()
            self._connected = False

    def _loop(self) -> None:
        while not self.state.machine.is_ended:
            message = self._next_message()
            if message is None:
                continue
            self._dispatch(message)
            if self.phase is Phase.AWAITING_DECISION:
                self._run_search()
            self._raise_recorded_error()

    def _next_message(self) -> Optional[Message]:
        if not self._inbox:
            self._fill(self.poll_interval)
        return decode(self._inbox.popleft()) if self._inbox else None

    def _fill(self, timeout: float) -> None:
        """Move every line the transport has into the inbox.

        Lines are decoded when taken out, so a malformed line only fails
        the session once everything before it has been applied.
        """
        for line in self.transport.poll_incoming(timeout):
            self._plog.log_received(line)
            self._inbox.append(line)

    def _dispatch(self, message: Message) -> None:
        machine = self.state.machine
        if self.phase is Phase.CONNECTING and message.verb == "state":
            machine.transition(SessionEvent.READY)
        for reply in self.router.route(message):
            self._send(reply.verb, reply.args, reply.ref)

    def _run_search(self) -> None:
        self._searching = True
        try:
            if not self._game_started:
                self._game_started = True
                execute_hook(
                    self.agent.before_game_starts, "before_game_starts", self.control,
                    protocol_logger=self._plog,
                )
            if not self.state.machine.is_ended:
                execute_hook(
                    self.agent.search, "search", self.state.board, self.control,
                    protocol_logger=self._plog,
                )
        finally:
            self._searching = False
        if not self.state.machine.is_ended:
            self.state.machine.transition(SessionEvent.DECISION_RETURNED)

    def _absorb(self) -> None:
        """Apply queued server messages during a search. Never raises."""
        if self.state.machine.is_ended:
            return
        try:
            self._fill(0.0)
            while self._inbox and not self.state.machine.is_ended:
                message = decode(self._inbox[0])
                if message.verb == "state":
                    # Next request: this search is over
                    self.state.stop_requested = True
                    break
                self._inbox.popleft()
                self._dispatch(message)
        except KgpClientError as e:
            logger.error(f"Session failed during search: {e}")
            self._fail(e)

    # ── Failure handling ──────────────────────────────────────

    def _fail(self, error: BaseException) -> None:
        """Record ``error``, notify the server once, end the session."""
        self.state.record_error(error)
        if self.state.machine.is_ended:
            return
        if self._connected:
            self._notify_failure(error)
        self.state.machine.end()

    def _notify_failure(self, error: BaseException) -> None:
        if isinstance(error, KgpClientError):
            notice = f"{error.error_type.lower()}: {error}"
        else:
            notice = f"client failure: {error.__class__.__name__}: {error}"
        try:
            self._send("error", (notice,), timeout=NOTICE_TIMEOUT_SECONDS)
        except KgpClientError as e:
            logger.debug(f"Could not notify server of failure: {e}")

    def _raise_recorded_error(self) -> None:
        if self.state.last_error is not None:
            raise self.state.last_error

    # ── Outbound ──────────────────────────────────────────────

    def _send(
        self,
        verb: str,
        args: Sequence[Arg] = (),
        ref: Optional[int] = None,
        timeout: Optional[float] = None,
    ) -> Optional[Message]:
        if self.state.machine.is_ended:
            logger.debug(f"Session ended, not sending {verb}")
            return None
        message = Message(id=next(self._ids), verb=verb, args=tuple(args), ref=ref)
        line = encode(message)
        self.transport.send(line, timeout=timeout)
        self._plog.log_sent(line)
        return message

    def _agent_send(self, operation: str, verb: str, args: Sequence[Arg], ref: Optional[int] = None) -> None:
        """Send on behalf of the agent. Inside a search, failures end the session quietly."""
        if self.state.machine.is_ended:
            if self._searching:
                logger.debug(f"Session ended, dropping {operation}")
                return
            raise UsageError(operation, self.phase.value)
        try:
            self._send(verb, args, ref)
        except KgpClientError as e:
            if not self._searching:
                raise
            logger.error(f"Session failed during {operation}: {e}")
            self._fail(e)

    def _require_phase(self, operation: str, *phases: Phase) -> None:
        if self.phase not in phases:
            raise UsageError(operation, self.phase.value)

    def _require_live(self, operation: str) -> None:
        if self.state.machine.is_ended and not self._searching:
            raise UsageError(operation, self.phase.value)

    # ── Operations exposed through SearchControl ─────────────

    def submit_move(self, move: int) -> None:
        """Send ``move`` (0-based) as the 1-based protocol move for the current request."""
        if self.state.machine.is_ended and self._searching:
            logger.debug(f"Session ended, dropping move {move}")
            return
        self._require_phase("submit_move", Phase.AWAITING_DECISION)
        board = self.state.board
        if isinstance(move, bool) or not isinstance(move, int) or not board.is_valid_move(move):
            raise UsageError(
                "submit_move", self.phase.value,
                reason=f"move {move!r} outside 0..{board.size - 1}",
            )
        self._agent_send("submit_move", "move", (move + 1,), self.state.request_id)

    def should_stop(self) -> bool:
        if self.state.machine.is_ended and self._searching:
            return True
        self._require_phase("should_stop", Phase.AWAITING_DECISION)
        self._absorb()
        if self.state.machine.is_ended:
            return True
        return self.state.stop_requested

    def send_comment(self, text: str) -> None:
        self._agent_send("send_comment", "comment", (str(text),), self.state.request_id)

    def get_option(self, key: str) -> Optional[str]:
        return self.state.options.get(key)

    def set_option(self, key: str, value: str) -> None:
        self._require_live("set_option")
        self.state.options.set(key, value)

    def send_option(self, key: str, value: str) -> None:
        self._require_live("send_option")
        self.state.options.set(key, value)
        self._agent_send("send_option", "set", (key, str(value)))
