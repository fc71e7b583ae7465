# Area: Shared
"""
kgp_client._shared.protocol_logger — Wire traffic logging
=========================================================

Echoes every line exchanged with the server to stderr (stdout may belong
to the agent), plus agent hook calls. Colored like the terminal log.
"""

from __future__ import annotations
import sys
from datetime import datetime
from typing import Optional, TextIO

# ══════════════════════════════════════════════════════════════
# ANSI COLOR CODES
# ══════════════════════════════════════════════════════════════

GREEN = "\033[32m"         # Wire lines
ORANGE = "\033[38;5;208m"  # Agent hooks
RED = "\033[31m"           # Errors
RESET = "\033[0m"

# Hook internal name → display name
HOOK_DISPLAY_NAMES = {
    "before_game_starts": "BEFORE-GAME",
    "search": "SEARCH",
}


class ProtocolLogger:
    """Logger for wire lines and agent hooks."""

    def __init__(self, enabled: bool = True, stream: Optional[TextIO] = None):
        self.enabled = enabled
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stderr

    def _now_ms(self) -> str:
        return datetime.now().strftime("%H:%M:%S:%f")[:-3]

    def _emit(self, line: str) -> None:
        if self.enabled:
            print(line, file=self.stream, flush=True)

    def log_received(self, line: str) -> None:
        """Log a line received from the server."""
        self._emit(f"{GREEN}{self._now_ms()} | RECEIVED | < {line}{RESET}")

    def log_sent(self, line: str) -> None:
        """Log a line sent to the server."""
        self._emit(f"{GREEN}{self._now_ms()} | SENT     | > {line}{RESET}")

    def log_hook_call(self, hook_name: str) -> None:
        display = HOOK_DISPLAY_NAMES.get(hook_name, hook_name)
        self._emit(f"{ORANGE}{self._now_ms()} | AGENT: {display:12} | CALL{RESET}")

    def log_hook_return(self, hook_name: str) -> None:
        display = HOOK_DISPLAY_NAMES.get(hook_name, hook_name)
        self._emit(f"{ORANGE}{self._now_ms()} | AGENT: {display:12} | RETURN{RESET}")

    def log_error(self, description: str) -> None:
        """Log an error."""
        self._emit(f"{RED}[ERROR] {self._now_ms()} | {description}{RESET}")


# Global singleton instance
_protocol_logger: Optional[ProtocolLogger] = None


def get_protocol_logger() -> ProtocolLogger:
    """Get or create the global protocol logger instance."""
    global _protocol_logger
    if _protocol_logger is None:
        _protocol_logger = ProtocolLogger()
    return _protocol_logger
