"""
kgp_client.demo_agent — Random example agent
============================================

A ready-to-use Agent that plays uniformly random legal moves. It sends
a safe move immediately, then new random "best" moves in growing
intervals until the server says stop. No algorithm is provided here;
it only shows how an agent uses its SearchControl.

Usage:
    from kgp_client import KalahClient, RandomAgent

    KalahClient(RandomAgent()).run()
"""

import random
import time
from typing import Optional

from .agent import Agent
from .types import BoardSnapshot

POLL_SLICE_SECONDS = 0.05


class RandomAgent(Agent):
    """Chooses among the legal moves uniformly at random."""

    name = "RandomAgent"
    authors = "kgp-client contributors"
    description = (
        "Example Kalah agent.\n\n"
        "Chooses among the legal moves uniformly at random.\n"
        "Very friendly to the environment."
    )

    def __init__(self, seed: Optional[int] = None, initial_wait: float = 0.05, max_wait: float = 1.0):
        self.rng = random.Random(seed)
        self.initial_wait = initial_wait
        self.max_wait = max_wait

    def before_game_starts(self, control) -> None:
        # Some servers host several tournaments at once
        if control.get_option("custom:tournaments:available") is not None:
            control.send_option("custom:tournament:name", "Kalah championship")

    def search(self, board: BoardSnapshot, control) -> None:
        moves = board.legal_moves()
        if not moves:
            return

        # Something legal goes out first in case time runs out early
        control.submit_move(moves[0])

        wait = self.initial_wait
        while not control.should_stop():
            move = self.rng.choice(moves)
            control.submit_move(move)
            control.send_comment(
                f"I chose move {move + 1} because the RNG told me so.\n"
                "evaluation: how am I supposed to know?"
            )
            control.send_option("custom:emotions:emotion", "pure happiness")

            if self._wait_or_stop(control, wait):
                break
            wait = min(wait * 2, self.max_wait)

    def _wait_or_stop(self, control, seconds: float) -> bool:
        """Sleep in short slices, polling the server between them."""
        deadline = time.monotonic() + seconds
        while time.monotonic() < deadline:
            if control.should_stop():
                return True
            time.sleep(POLL_SLICE_SECONDS)
        return False
