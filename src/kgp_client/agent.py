# Area: Agent
"""
kgp_client.agent — The class agent authors implement
=====================================================

Subclass Agent and implement ``search()``. The engine calls it every
time the server asks for a move and hands it two things: the board and
a SearchControl, the agent's only way to talk to the server.

Agents never see lines, message ids or phases.

    from kgp_client import Agent, KalahClient

    class MyAgent(Agent):
        name = "MyAgent"

        def search(self, board, control):
            control.submit_move(board.lowest_legal_move())
            while not control.should_stop():
                ...

    KalahClient(MyAgent()).run()
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

from .types import BoardSnapshot

if TYPE_CHECKING:
    from ._session.control import SearchControl


class Agent(ABC):
    """
    Abstract base class for a Kalah agent.

    ``name``, ``authors`` and ``description`` are announced to the server
    after the greeting when they are not None. Keep the constructor fast:
    servers may penalise clients that connect late.

    The engine is single-threaded. Protocol messages are only processed
    while the agent is inside a SearchControl call, so ``should_stop()``
    must be called a few times per second; an agent that never calls it
    stalls the session.
    """

    name: Optional[str] = None
    authors: Optional[str] = None
    description: Optional[str] = None

    # ──────────────────────────────────────────────────────────────
    # HOOK 1: Prepare for the first game
    # ──────────────────────────────────────────────────────────────
    def before_game_starts(self, control: "SearchControl") -> None:
        """
        Called once, when the first move is requested and before the
        first ``search()``. Options the server set before that point are
        visible through ``control.get_option()``.

        Example
        -------
        >>> def before_game_starts(self, control):
        ...     if control.get_option("custom:tournaments:available"):
        ...         control.send_option("custom:tournament:name", "FAU cup")
        """

    # ──────────────────────────────────────────────────────────────
    # HOOK 2: Find a move
    # ──────────────────────────────────────────────────────────────
    @abstractmethod
    def search(self, board: BoardSnapshot, control: "SearchControl") -> None:
        """
        Called when the server asks for a move. It is always south's turn.

        Parameters
        ----------
        board : BoardSnapshot
            The position. Moves are pit indices 0..board.size-1 in sowing
            direction.
        control : SearchControl
            submit_move(i), should_stop(), send_comment(text),
            get_option/set_option/send_option, time_mode, clock,
            opponent_clock, server_name.

        Submit at least one move: the server uses the last one submitted.
        Return as soon as ``control.should_stop()`` is True; returning
        earlier is fine too, for example after finding a proven win.

        Exceptions raised here end the session: the server is told the
        client failed, the connection is closed and the exception
        propagates out of ``KalahClient.run()``.
        """
        ...
