# Area: Shared
"""
kgp_client._shared.logging_config — Structured logging setup
============================================================

Configures dual logging: terminal (colored) + file (JSON).
Provides the structured error logging used when a session dies.
"""

from __future__ import annotations
import logging
import sys
from pathlib import Path
from typing import Optional

from .logging_formatters import JSONFormatter, ProtocolFilter, TerminalFormatter

# Package logger
logger = logging.getLogger("kgp_client")


def setup_logging(
    log_file_path: Optional[str] = "kgp_client.log",
    level: int = logging.INFO,
) -> None:
    """
    Configure logging for the package.

    Parameters
    ----------
    log_file_path : str or None
        Path to the JSON log file. None disables file logging.
    level : int
        Logging level. Defaults to INFO.
    """
    pkg_logger = logging.getLogger("kgp_client")
    pkg_logger.setLevel(level)

    # Remove existing handlers
    pkg_logger.handlers.clear()

    # Terminal handler with colors; stdout may be owned by the agent
    terminal_handler = logging.StreamHandler(sys.stderr)
    terminal_handler.setLevel(level)
    terminal_handler.setFormatter(TerminalFormatter(
        fmt="%(asctime)s │ %(levelname)s │ %(name)s │ %(message)s",
        datefmt="%H:%M:%S",
    ))
    terminal_handler.addFilter(ProtocolFilter())
    pkg_logger.addHandler(terminal_handler)

    if log_file_path:
        try:
            log_path = Path(log_file_path)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(JSONFormatter())
            pkg_logger.addHandler(file_handler)
        except OSError as e:
            pkg_logger.warning(f"Could not create log file: {e}")

    # Prevent propagation to root logger
    pkg_logger.propagate = False


def log_client_error(
    error: BaseException,
    phase: Optional[str] = None,
    agent_name: Optional[str] = None,
) -> None:
    """
    Log a fatal session error in the structured format.

    Engine errors format themselves; any other exception (an agent
    failure) is wrapped in the same block layout.
    """
    from ..error_formatter import format_error_block

    format_log = getattr(error, "format_error_log", None)
    if format_log is not None:
        error_block = format_log(phase=phase)
    else:
        error_block = format_error_block(
            error_type="AGENT_FAILURE",
            phase=phase,
            detail=f"{error.__class__.__name__}: {error}",
            agent_name=agent_name,
        )

    # Print to terminal (bypassing logger for exact formatting)
    print(error_block, file=sys.stderr)

    logger.error(
        f"Session error: {error.__class__.__name__}: {error}",
        extra={"phase": phase, "error_type": error.__class__.__name__},
    )
