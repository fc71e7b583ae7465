"""
kgp_client.runner — Client entry point
======================================

KalahClient is what agent authors instantiate and call .run() on.
It validates the configuration, builds the transport and the session
engine, and plays until the server says goodbye.
"""

from __future__ import annotations
import logging
from typing import Any, Dict, Optional

from .agent import Agent
from ._runner_config import ClientConfig, validate_config
from ._session.engine import SessionEngine
from ._shared import (
    Credential,
    ProtocolLogger,
    SocketTransport,
    Transport,
    disable_protocol_mode,
    enable_protocol_mode,
    log_client_error,
    setup_logging,
)

logger = logging.getLogger("kgp_client")


class KalahClient:
    """
    Main entry point for agent authors.

    Usage
    -----
        from kgp_client import KalahClient
        from my_agent import MyAgent

        config = {
            "host": "localhost",
            "port": 2671,
            # optional RSA credential, all three or none
            "rsa_modulus": 3233,
            "rsa_public_exponent": 17,
            "rsa_private_exponent": 413,
        }

        client = KalahClient(MyAgent(), config=config)
        client.run()

    A partial RSA triple raises AuthConfigError here, before any
    connection attempt.
    """

    def __init__(
        self,
        agent: Agent,
        config: Optional[Dict[str, Any]] = None,
        transport: Optional[Transport] = None,
    ):
        self.config: ClientConfig = validate_config(config)
        self.agent = agent

        self.credential = Credential.from_optional(
            self.config.rsa_modulus,
            self.config.rsa_public_exponent,
            self.config.rsa_private_exponent,
        )

        setup_logging(
            log_file_path=self.config.log_file,
            level=logging.getLevelName(self.config.log_level),
        )
        if self.config.protocol_log:
            enable_protocol_mode()
        else:
            disable_protocol_mode()
        self._protocol_logger = ProtocolLogger(enabled=self.config.protocol_log)

        self.transport = transport or SocketTransport(
            connect_timeout=self.config.connect_timeout_seconds,
        )
        self.engine = SessionEngine(
            transport=self.transport,
            agent=agent,
            credential=self.credential,
            mode=self.config.mode,
            poll_interval=self.config.poll_interval_seconds,
            protocol_logger=self._protocol_logger,
        )

    @property
    def phase(self):
        return self.engine.phase

    def run(self) -> None:
        """
        Connect, play the session, close the connection.

        Raises whatever ended the session abnormally: KgpConnectionError,
        ProtocolError, or the agent's own exception.
        """
        self._log_startup()
        try:
            self.engine.run(self.config.host, self.config.port)
        except BaseException as e:
            log_client_error(e, phase=self.engine.phase.value, agent_name=self.agent.name)
            raise
        logger.info("Session finished.")

    def _log_startup(self) -> None:
        """Log startup information."""
        logger.info("=" * 60)
        logger.info("  KGP Client — Starting")
        logger.info(f"  Agent:  {self.agent.name or self.agent.__class__.__name__}")
        logger.info(f"  Server: {self.config.host}:{self.config.port}")
        logger.info(f"  Mode:   {self.config.mode}")
        logger.info(f"  Auth:   {'RSA' if self.credential else 'none'}")
        logger.info("=" * 60)
