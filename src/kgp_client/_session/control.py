# Area: Session
"""
kgp_client._session.control — Capability handle for agents
==========================================================

The only view of the session an agent gets: submit moves, poll for
stop, comment, read and write options, read clocks. Moves are 0-based
here; the engine adds one for the wire.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Optional

from ..types import BoardSnapshot, Side, TimeMode

if TYPE_CHECKING:
    from .engine import SessionEngine


class SearchControl:
    """Narrow handle into a running session, passed to every Agent hook."""

    def __init__(self, engine: "SessionEngine"):
        self._engine = engine

    def submit_move(self, move: int) -> None:
        """Tell the server the currently best move (0-based pit index).

        May be called any number of times; the server honours the last one.
        """
        self._engine.submit_move(move)

    def should_stop(self) -> bool:
        """Process pending server messages; True once the server said stop.

        Call this a few times per second during search.
        """
        return self._engine.should_stop()

    def send_comment(self, text: str) -> None:
        """Comment on the current position. Line breaks are allowed."""
        self._engine.send_comment(text)

    def get_option(self, key: str) -> Optional[str]:
        return self._engine.get_option(key)

    def set_option(self, key: str, value: str) -> None:
        """Update the local option table only."""
        self._engine.set_option(key, value)

    def send_option(self, key: str, value: str) -> None:
        """Update the local option table and tell the server."""
        self._engine.send_option(key, value)

    @property
    def board(self) -> Optional[BoardSnapshot]:
        return self._engine.state.board

    @property
    def side(self) -> Optional[Side]:
        return self._engine.state.side

    @property
    def time_mode(self) -> TimeMode:
        return self._engine.state.time_mode

    @property
    def clock(self) -> Optional[int]:
        """Seconds left on the agent's clock, None when untimed."""
        return self._engine.state.clock

    @property
    def opponent_clock(self) -> Optional[int]:
        """Seconds left on the opponent's clock, None when untimed."""
        return self._engine.state.opponent_clock

    @property
    def server_name(self) -> Optional[str]:
        return self._engine.state.server_name
