"""
kgp_client.errors — Custom exception classes
=============================================

Defines the exception hierarchy for the protocol engine.
Each exception stores enough context for structured logging.
"""

from __future__ import annotations
from typing import Optional

from .error_formatter import format_error_block


class KgpClientError(Exception):
    """Base exception for all kgp_client errors."""

    error_type = "CLIENT_ERROR"

    def format_error_log(self, phase: Optional[str] = None) -> str:
        return format_error_block(
            error_type=self.error_type,
            phase=phase,
            detail=str(self),
            line=getattr(self, "line", None),
        )


class KgpConnectionError(KgpClientError, ConnectionError):
    """Raised when the server cannot be reached or the stream breaks."""

    error_type = "CONNECTION_ERROR"


class ProtocolError(KgpClientError):
    """Raised when the server violates the protocol (fatal to the session)."""

    error_type = "PROTOCOL_ERROR"

    def __init__(self, message: str, line: Optional[str] = None):
        self.line = line
        super().__init__(message)


class DecodeError(ProtocolError):
    """Raised when an inbound line does not match the wire grammar."""

    error_type = "DECODE_ERROR"


class AuthConfigError(KgpClientError):
    """Raised at construction when the RSA triple is only partially given."""

    error_type = "AUTH_CONFIG_ERROR"

    def __init__(self, missing: list):
        self.missing = missing
        super().__init__(
            f"Incomplete RSA credential, missing: {', '.join(missing)} "
            "(give modulus, public and private exponent together or none)"
        )


class UsageError(KgpClientError):
    """Raised when an engine operation is called outside its legal phase."""

    error_type = "USAGE_ERROR"

    def __init__(self, operation: str, phase: str, reason: Optional[str] = None):
        self.operation = operation
        self.phase = phase
        message = f"'{operation}' is not allowed in phase {phase}"
        if reason:
            message = f"'{operation}': {reason}"
        super().__init__(message)
