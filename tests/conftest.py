# Area: Test Support
"""Shared fixtures: a scripted in-memory transport and small agents."""

import pytest

from kgp_client._shared.protocol_logger import ProtocolLogger
from kgp_client._shared.transport import Transport
from kgp_client.agent import Agent
from kgp_client.errors import KgpConnectionError


class FakeTransport(Transport):
    """
    Transport that replays scripted batches of inbound lines.

    Each call to poll_incoming() returns the next batch. A batch is a
    list of lines or a single line. Once the script is exhausted the
    stream counts as closed by the server.
    """

    def __init__(self, batches, fail_send_after=None):
        self.batches = [[b] if isinstance(b, str) else list(b) for b in batches]
        self.sent = []
        self.send_timeouts = []
        self.connected_to = None
        self.closed = False
        self.polls = 0
        self.fail_send_after = fail_send_after

    def connect(self, host, port):
        self.connected_to = (host, port)

    def send(self, line, timeout=None):
        if self.fail_send_after is not None and len(self.sent) >= self.fail_send_after:
            raise KgpConnectionError("Send failed: broken pipe")
        self.sent.append(line)
        self.send_timeouts.append(timeout)

    def poll_incoming(self, timeout=0.0):
        self.polls += 1
        if not self.batches:
            raise KgpConnectionError("Connection closed by server")
        return self.batches.pop(0)

    def close(self):
        self.closed = True


class IdleAgent(Agent):
    """Agent that submits the lowest legal move and returns."""

    name = "TestAgent"

    def __init__(self):
        self.boards = []
        self.started = 0

    def before_game_starts(self, control):
        self.started += 1

    def search(self, board, control):
        self.boards.append(board)
        control.submit_move(board.lowest_legal_move())


@pytest.fixture
def quiet_logger():
    """Protocol logger that prints nothing."""
    return ProtocolLogger(enabled=False)


@pytest.fixture
def make_transport():
    return FakeTransport
