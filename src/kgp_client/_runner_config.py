# Area: Shared
"""
kgp_client._runner_config — Runner Configuration
================================================

Configuration model and defaults for KalahClient.
"""

from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError


DEFAULT_HOST = "localhost"
DEFAULT_PORT = 2671  # KGP default port
DEFAULT_MODE = "freeplay"


class ClientConfig(BaseModel):
    """Connection, logging and credential settings."""

    model_config = ConfigDict(extra="forbid")

    host: str = DEFAULT_HOST
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    mode: str = Field(default=DEFAULT_MODE, pattern=r"^[a-z][a-z0-9-]*$")
    poll_interval_seconds: float = Field(default=0.1, gt=0, le=5)
    connect_timeout_seconds: float = Field(default=10.0, gt=0)

    log_file: Optional[str] = None
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    protocol_log: bool = True

    # RSA: public key (N, e), private key (N, d); all three or none
    rsa_modulus: Optional[int] = Field(default=None, gt=1)
    rsa_public_exponent: Optional[int] = Field(default=None, gt=0)
    rsa_private_exponent: Optional[int] = Field(default=None, gt=0)


def validate_config(config: Optional[Dict[str, Any]]) -> ClientConfig:
    """
    Validate a configuration dict.

    Args:
        config: Configuration dict (None means all defaults)

    Returns:
        The validated ClientConfig

    Raises:
        ValueError: If a key is unknown or a value is invalid
    """
    try:
        return ClientConfig(**(config or {}))
    except ValidationError as e:
        raise ValueError(f"Invalid client config: {e}") from e
