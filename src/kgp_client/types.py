"""
kgp_client.types — Values handed to the agent
==============================================

This module documents the values the engine passes to an Agent:
the board snapshot for the current decision request, the side the
client plays and the time-control mode.

All types are exported from the main package:

    from kgp_client import BoardSnapshot, Side, TimeMode

Board token on the wire
-----------------------
    <size,south_store,north_store,s1,...,s_size,n1,...,n_size>

The server normalises every board so that the receiving client is
south and south is to move.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple


class Side(Enum):
    """The two players of a Kalah board."""
    SOUTH = "south"
    NORTH = "north"


class TimeMode(Enum):
    """Time control announced by the server via ``time:mode``."""
    NONE     = "none"        # untimed play
    ABSOLUTE = "absolute"    # one clock per player for the whole game
    RELATIVE = "relative"    # fixed budget per move

    @classmethod
    def parse(cls, value: str) -> Optional["TimeMode"]:
        for mode in cls:
            if mode.value == value.lower():
                return mode
        return None


@dataclass(frozen=True)
class BoardSnapshot:
    """A Kalah position as received in a ``state`` message.

    Fields
    ------
    size : int
        Pits per side.
    south_store, north_store : int
        Seeds in each player's store.
    south, north : tuple of int
        Seeds per pit, indexed in sowing direction.
    side_to_move : Side
        Always SOUTH for boards coming from the server.
    """
    size: int
    south_store: int
    north_store: int
    south: Tuple[int, ...]
    north: Tuple[int, ...]
    side_to_move: Side = Side.SOUTH

    @classmethod
    def parse(cls, token: str) -> "BoardSnapshot":
        """Parse a wire board token. Raises ValueError on malformed input."""
        if not (token.startswith("<") and token.endswith(">")):
            raise ValueError(f"board must be enclosed in <...>: {token!r}")
        try:
            numbers = [int(part) for part in token[1:-1].split(",")]
        except ValueError:
            raise ValueError(f"board contains a non-integer field: {token!r}") from None
        if len(numbers) < 3:
            raise ValueError(f"board too short: {token!r}")
        size = numbers[0]
        if size < 1 or len(numbers) != 3 + 2 * size:
            raise ValueError(
                f"board of size {size} needs {3 + 2 * size} fields, got {len(numbers)}"
            )
        if any(n < 0 for n in numbers):
            raise ValueError(f"board contains a negative count: {token!r}")
        return cls(
            size=size,
            south_store=numbers[1],
            north_store=numbers[2],
            south=tuple(numbers[3:3 + size]),
            north=tuple(numbers[3 + size:]),
        )

    def to_token(self) -> str:
        fields = [self.size, self.south_store, self.north_store, *self.south, *self.north]
        return "<" + ",".join(str(n) for n in fields) + ">"

    def is_valid_move(self, index: int) -> bool:
        """True if ``index`` (0-based) is inside the board."""
        return 0 <= index < self.size

    def legal_moves(self) -> List[int]:
        """0-based indices of the non-empty pits of the side to move."""
        pits = self.south if self.side_to_move is Side.SOUTH else self.north
        return [i for i, seeds in enumerate(pits) if seeds > 0]

    def lowest_legal_move(self) -> Optional[int]:
        moves = self.legal_moves()
        return moves[0] if moves else None
