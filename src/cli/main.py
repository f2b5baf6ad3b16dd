"""Toolbox CLI entry points.

This module maps argparse commands onto input resolution and
transform actions. Failures are rendered once, on standard error.
"""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from cli.command_tree import TOOL_FAMILIES, add_tool_commands, run_tool_command
from cli.uuid_command import add_uuid_command, run_uuid_command
from core.config import ToolboxConfig
from core.constants import DEFAULT_LOG_LEVEL, LOG_LEVELS, PROGRAM_NAME, TOOLBOX_VERSION
from core.errors import ToolboxError, render_error_chain
from core.logging_config import configure_logging


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description="Minify, encode, hash, and generate identifiers from the command line",
    )
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        choices=LOG_LEVELS,
        help="Structured log level on stderr",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {TOOLBOX_VERSION}")
    subparsers = parser.add_subparsers(dest="command", required=True)
    add_tool_commands(subparsers)
    add_uuid_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the toolbox CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = ToolboxConfig.from_args(args.log_level)
        configure_logging(config.log_level)
        if args.command == "uuid":
            return run_uuid_command()
        if args.command in TOOL_FAMILIES:
            return run_tool_command(args)
    except ToolboxError as error:
        print(render_error_chain(error), file=sys.stderr)
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2
