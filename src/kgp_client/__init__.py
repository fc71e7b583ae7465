"""
kgp_client — Kalah Game Protocol client
=======================================

Connects a Kalah agent to a KGP tournament server. The package owns the
connection, framing, authentication, clocks, options and the stop
handshake; the agent only finds moves.

Quick Start (no implementation needed):
    from kgp_client import KalahClient, RandomAgent
    KalahClient(RandomAgent()).run()

Custom Implementation:
    from kgp_client import Agent, KalahClient
    class MyAgent(Agent): ...  # Implement search()
    KalahClient(MyAgent(), config={"host": "kalah.example.org"}).run()
"""

from .agent import Agent
from .demo_agent import RandomAgent
from .runner import KalahClient
from ._runner_config import ClientConfig, DEFAULT_HOST, DEFAULT_PORT
from ._session.control import SearchControl
from ._session.enums import Phase
from .errors import (
    KgpClientError,
    KgpConnectionError,
    ProtocolError,
    DecodeError,
    AuthConfigError,
    UsageError,
)
from .types import BoardSnapshot, Side, TimeMode

__all__ = [
    # Main classes
    "Agent",
    "RandomAgent",
    "KalahClient",
    "ClientConfig",
    "SearchControl",
    "Phase",
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    # Errors
    "KgpClientError",
    "KgpConnectionError",
    "ProtocolError",
    "DecodeError",
    "AuthConfigError",
    "UsageError",
    # Types
    "BoardSnapshot",
    "Side",
    "TimeMode",
]
__version__ = "1.0.0"
