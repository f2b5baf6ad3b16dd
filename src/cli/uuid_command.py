"""CLI command for UUID generation."""

from __future__ import annotations

from typing import Any

from transforms.uuid_generator import generate_uuid


def add_uuid_command(subparsers: Any) -> None:
    """Register uuid subcommand."""
    subparsers.add_parser("uuid", help="Generate an UUID")


def run_uuid_command() -> int:
    """Print a fresh version-4 UUID."""
    print(generate_uuid())
    return 0
