"""Command line interface for jrpc."""

from jrpc.cli.commands import cmd_call, main

__all__ = ["cmd_call", "main"]
