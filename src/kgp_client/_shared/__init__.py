# Area: Shared
"""
Shared building blocks used by the session engine.

This package contains:
- Line transport over TCP
- Wire codec for KGP messages
- RSA challenge/response credential
- Logging configuration
"""

from .codec import (
    LINE_TERMINATOR,
    PROTOCOL_MAJOR,
    VERBS,
    Message,
    MessageIds,
    decode,
    encode,
    encode_arg,
)
from .credentials import Credential
from .logging_config import setup_logging, log_client_error
from .logging_formatters import (
    enable_protocol_mode,
    disable_protocol_mode,
    is_protocol_mode_enabled,
)
from .protocol_logger import get_protocol_logger, ProtocolLogger
from .transport import SocketTransport, Transport

__all__ = [
    "LINE_TERMINATOR",
    "PROTOCOL_MAJOR",
    "VERBS",
    "Message",
    "MessageIds",
    "decode",
    "encode",
    "encode_arg",
    "Credential",
    "setup_logging",
    "log_client_error",
    "enable_protocol_mode",
    "disable_protocol_mode",
    "is_protocol_mode_enabled",
    "get_protocol_logger",
    "ProtocolLogger",
    "SocketTransport",
    "Transport",
]
