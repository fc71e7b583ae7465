# Area: Session
"""
kgp_client._session.state — Session state tracker
=================================================

Everything the engine knows about one connection: phase, the current
decision request, clocks, the pending-stop flag and the option table.
One instance per connection, owned by the engine. Agents never see it.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Tuple
import logging

from ..types import BoardSnapshot, Side, TimeMode
from .enums import Phase
from .options import OptionRegistry
from .state_machine import SessionStateMachine

logger = logging.getLogger("kgp_client.session.state")


@dataclass
class SessionState:
    """Live state of one connection."""
    machine: SessionStateMachine = field(default_factory=SessionStateMachine)

    # Handshake
    protocol_version: Optional[Tuple[int, int, int]] = None
    server_name: Optional[str] = None
    auth_challenge: Optional[int] = None        # outstanding until answered

    # Current decision request
    side: Optional[Side] = None
    board: Optional[BoardSnapshot] = None
    request_id: Optional[int] = None             # id of the state message
    stop_requested: bool = False

    # Clocks (seconds); None means untimed
    time_mode: TimeMode = TimeMode.NONE
    clock: Optional[int] = None
    opponent_clock: Optional[int] = None

    options: OptionRegistry = field(default_factory=OptionRegistry)
    last_error: Optional[BaseException] = None

    @property
    def phase(self) -> Phase:
        return self.machine.current_phase

    def begin_request(
        self,
        request_id: int,
        board: BoardSnapshot,
        clock: Optional[int] = None,
        opponent_clock: Optional[int] = None,
    ) -> None:
        """Record a new decision request; clears the stop flag."""
        self.request_id = request_id
        self.board = board
        self.side = board.side_to_move
        self.stop_requested = False
        self.clock = clock
        self.opponent_clock = opponent_clock
        logger.debug(f"Decision request {request_id}: {board.to_token()}")

    def record_error(self, error: BaseException) -> None:
        """Keep the first fatal error; later ones are consequences."""
        if self.last_error is None:
            self.last_error = error
