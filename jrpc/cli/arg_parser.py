"""Argument parsing for the jrpc CLI."""

import argparse
import json
from pathlib import Path
from typing import Any

from jrpc.rpc.protocol import SUPPORTED_VERSIONS


def parse_param(value: str) -> Any:
    """Parse one positional param as a JSON literal, falling back to the raw string."""
    try:
        return json.loads(value)
    except json.JSONDecodeError:
        return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jrpc",
        description="Call a remote JSON-RPC method and print the result as JSON.",
    )
    parser.add_argument("url", help="Remote JSON-RPC service URL")
    parser.add_argument("method", help="Remote method name")
    parser.add_argument(
        "params",
        nargs="*",
        type=parse_param,
        help="Positional params, each parsed as JSON (e.g. 1 '\"text\"' '[1,2]')",
    )
    parser.add_argument(
        "--notify", "-n",
        action="store_true",
        help="Send a notification (no reply expected)",
    )
    parser.add_argument(
        "--protocol",
        dest="protocol_version",
        choices=SUPPORTED_VERSIONS,
        help="JSON-RPC version (default: from config, else 1.0)",
    )
    parser.add_argument(
        "--timeout", "-t",
        type=float,
        help="Request timeout in seconds (default: from config, else 30)",
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        help="Config file path (default: ~/.jrpc/config.json if present)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log requests and replies to stderr",
    )
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)
