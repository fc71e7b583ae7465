# Area: Agent Tests
"""Tests for the random demo agent."""

from unittest.mock import MagicMock

from conftest import FakeTransport
from kgp_client import RandomAgent
from kgp_client._session.engine import SessionEngine
from kgp_client.types import BoardSnapshot


def fake_control(stop_after):
    """Control mock whose should_stop turns True after ``stop_after`` calls."""
    control = MagicMock()
    control.should_stop.side_effect = [False] * stop_after + [True] * 10
    control.get_option.return_value = None
    return control


class TestRandomAgent:
    """Tests for RandomAgent."""

    def test_announces_itself(self):
        agent = RandomAgent()
        assert agent.name == "RandomAgent"
        assert agent.authors
        assert "\n" in agent.description

    def test_first_move_is_lowest_legal(self):
        agent = RandomAgent(seed=1, initial_wait=0.0)
        board = BoardSnapshot.parse("<4,0,0,0,0,5,5,1,1,1,1>")
        control = fake_control(stop_after=0)

        agent.search(board, control)

        control.submit_move.assert_called_once_with(2)

    def test_only_legal_moves_submitted(self):
        agent = RandomAgent(seed=7, initial_wait=0.0)
        board = BoardSnapshot.parse("<4,0,0,0,3,0,3,1,1,1,1>")
        control = fake_control(stop_after=5)

        agent.search(board, control)

        moves = [c.args[0] for c in control.submit_move.call_args_list]
        assert len(moves) > 1
        assert set(moves) <= {1, 3}
        control.send_comment.assert_called()
        control.send_option.assert_called_with("custom:emotions:emotion", "pure happiness")

    def test_no_legal_moves_returns(self):
        agent = RandomAgent()
        control = fake_control(stop_after=0)
        agent.search(BoardSnapshot.parse("<2,5,5,0,0,1,1>"), control)
        control.submit_move.assert_not_called()

    def test_joins_tournament_when_offered(self):
        agent = RandomAgent()
        control = MagicMock()
        control.get_option.return_value = "kalah championship"

        agent.before_game_starts(control)

        control.send_option.assert_called_once_with("custom:tournament:name", "Kalah championship")

    def test_plays_through_engine(self, quiet_logger):
        """Test a full session with the demo agent and a prompt stop."""
        transport = FakeTransport([
            ["1 kgp 1 0 0", "2 state <3,0,0,3,3,3,3,3,3>"],
            ["3@2 stop"],
            ["4 goodbye"],
        ])
        engine = SessionEngine(
            transport, RandomAgent(seed=3), poll_interval=0.0, protocol_logger=quiet_logger,
        )
        engine.run("localhost", 2671)

        assert transport.sent[0] == "1@1 mode freeplay"
        assert any(line.startswith("2 set info:name RandomAgent") for line in transport.sent)
        assert "5@2 move 1" in transport.sent
