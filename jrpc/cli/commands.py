"""CLI command for calling a remote JSON-RPC method.

Prints the result as JSON to stdout and returns an exit code. Errors go to
stderr so they never pollute JSON output.
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any, TextIO

from jrpc.cli.arg_parser import parse_args
from jrpc.client import JsonRpcClient
from jrpc.config.loader import load_config
from jrpc.core.errors import JrpcError, RpcFaultError
from jrpc.core.logging import configure_logging


def _print_json(data: Any, file: TextIO | None = None) -> None:
    """Print data as formatted JSON to stdout, or to file if given."""
    print(json.dumps(data, indent=2, ensure_ascii=False), file=file)


def _print_error(message: str) -> None:
    """Print error message to stderr."""
    print(f"Error: {message}", file=sys.stderr)


async def cmd_call(args: argparse.Namespace) -> int:
    """Call (or notify) a remote method.

    Returns:
        Exit code: 0 on success, 1 on any jrpc error.
    """
    try:
        config = load_config(
            args.config,
            overrides={
                "url": args.url,
                "protocol_version": args.protocol_version,
                "timeout": args.timeout,
                "verbose": args.verbose or None,
            },
        )
        async with JsonRpcClient.from_config(config) as client:
            if args.notify:
                await client.notify(args.method, args.params)
                return 0
            result = await client.request(args.method, args.params)
    except RpcFaultError as e:
        _print_error(f"RPC error {e.code}: {e.message}")
        if e.data is not None:
            _print_json(e.data, file=sys.stderr)
        return 1
    except JrpcError as e:
        _print_error(e.message)
        return 1

    _print_json(result)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the jrpc command."""
    args = parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)
    return asyncio.run(cmd_call(args))
