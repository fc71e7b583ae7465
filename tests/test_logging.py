# Area: Shared Tests
"""Tests for logging setup, formatters and error blocks."""

import json
import logging

from kgp_client._shared import logging_formatters
from kgp_client._shared.logging_config import log_client_error, setup_logging
from kgp_client._shared.logging_formatters import (
    JSONFormatter,
    ProtocolFilter,
    TerminalFormatter,
    disable_protocol_mode,
    enable_protocol_mode,
    is_protocol_mode_enabled,
)
from kgp_client.error_formatter import format_error_block
from kgp_client.errors import ProtocolError, UsageError


def make_record(level=logging.INFO, msg="hello", **extra):
    record = logging.LogRecord("kgp_client.test", level, __file__, 1, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestProtocolFilter:
    """Tests for protocol mode filtering."""

    def teardown_method(self):
        disable_protocol_mode()

    def test_passes_everything_when_disabled(self):
        disable_protocol_mode()
        assert ProtocolFilter().filter(make_record(logging.DEBUG)) is True

    def test_drops_info_in_protocol_mode(self):
        enable_protocol_mode()
        assert is_protocol_mode_enabled()
        assert ProtocolFilter().filter(make_record(logging.INFO)) is False
        assert ProtocolFilter().filter(make_record(logging.WARNING)) is True


class TestFormatters:
    """Tests for terminal and JSON formatters."""

    def test_terminal_formatter_restores_levelname(self):
        record = make_record()
        output = TerminalFormatter(fmt="%(levelname)s %(message)s").format(record)
        assert "\033[32m" in output
        assert record.levelname == "INFO"

    def test_json_formatter_includes_extras(self):
        record = make_record(phase="IDLE", verb="state")
        data = json.loads(JSONFormatter().format(record))
        assert data["message"] == "hello"
        assert data["phase"] == "IDLE"
        assert data["verb"] == "state"
        assert "error_type" not in data


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_file_handler_writes_json(self, tmp_path):
        log_path = tmp_path / "logs" / "client.log"
        setup_logging(str(log_path), level=logging.DEBUG)
        logging.getLogger("kgp_client.test").info("written")
        for handler in logging.getLogger("kgp_client").handlers:
            handler.flush()

        lines = log_path.read_text(encoding="utf-8").splitlines()
        assert json.loads(lines[-1])["message"] == "written"
        setup_logging(None)

    def test_no_file_handler_when_disabled(self):
        setup_logging(None)
        pkg_logger = logging.getLogger("kgp_client")
        assert len(pkg_logger.handlers) == 1
        assert pkg_logger.propagate is False


class TestErrorBlocks:
    """Tests for structured error output."""

    def test_block_contains_type_phase_and_line(self):
        block = format_error_block("PROTOCOL_ERROR", "IDLE", "bad board", line="3 state <x>")
        assert "Error Type:   PROTOCOL_ERROR" in block
        assert "Phase:        IDLE" in block
        assert "'3 state <x>'" in block

    def test_protocol_error_formats_itself(self):
        block = ProtocolError("unknown verb", line="1 dance").format_error_log(phase="CONNECTING")
        assert "PROTOCOL_ERROR" in block
        assert "OFFENDING LINE" in block

    def test_usage_error_message(self):
        assert "not allowed in phase IDLE" in str(UsageError("submit_move", "IDLE"))

    def test_log_client_error_agent_failure(self, capsys):
        log_client_error(RuntimeError("boom"), phase="AWAITING_DECISION", agent_name="Bot")
        err = capsys.readouterr().err
        assert "AGENT_FAILURE" in err
        assert "RuntimeError: boom" in err
        assert "Agent:        Bot" in err

    def test_protocol_mode_flag_module_state(self):
        enable_protocol_mode()
        assert logging_formatters._protocol_mode_enabled is True
        disable_protocol_mode()
        assert logging_formatters._protocol_mode_enabled is False
