# Area: Shared
"""
kgp_client.cli — Command-line interface
=======================================

Runs the random demo agent against a server.

Usage:
    kgp-client                                  # localhost:2671
    kgp-client --host kalah.example.org --port 2671
    kgp-client --config client.json

Settings are read from (later wins):
    1. JSON config file (--config)
    2. .env file / environment variables (KGP_HOST, KGP_PORT, ...)
    3. CLI flags
"""

import argparse
import json
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from .demo_agent import RandomAgent
from .errors import AuthConfigError, KgpClientError

ENV_MAPPINGS = {
    "KGP_HOST": "host",
    "KGP_PORT": "port",
    "KGP_MODE": "mode",
    "KGP_LOG_FILE": "log_file",
    "KGP_LOG_LEVEL": "log_level",
    "KGP_RSA_N": "rsa_modulus",
    "KGP_RSA_E": "rsa_public_exponent",
    "KGP_RSA_D": "rsa_private_exponent",
}


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="KGP client - play Kalah on a tournament server with the demo agent",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  kgp-client
  kgp-client --host kalah.example.org --port 2671
  kgp-client --config client.json --quiet
  KGP_RSA_N=... KGP_RSA_E=... KGP_RSA_D=... kgp-client
        """,
    )
    parser.add_argument("--config", type=str, help="Path to JSON config file")
    parser.add_argument("--host", type=str, help="Server host (default localhost)")
    parser.add_argument("--port", type=int, help="Server port (default 2671)")
    parser.add_argument("--seed", type=int, help="Random seed for the demo agent")
    parser.add_argument("--log-file", type=str, help="Write JSON logs to this file")
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Do not echo protocol traffic to stderr",
    )
    return parser.parse_args(argv)


def load_config(config_path: Optional[str]) -> Dict[str, Any]:
    """Load config from file, then overlay environment variables."""
    config: Dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if path.exists():
            with open(path, encoding="utf-8") as f:
                config = json.load(f)

    load_dotenv()
    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key in os.environ:
            config[config_key] = os.environ[env_key]

    return config


def main(argv=None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)
    config = load_config(args.config)

    if args.host:
        config["host"] = args.host
    if args.port:
        config["port"] = args.port
    if args.log_file:
        config["log_file"] = args.log_file
    if args.quiet:
        config["protocol_log"] = False

    from .runner import KalahClient

    try:
        client = KalahClient(RandomAgent(seed=args.seed), config=config)
    except (AuthConfigError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    try:
        client.run()
    except KeyboardInterrupt:
        return 130
    except KgpClientError:
        # already reported by the client
        return 1
    return 0
