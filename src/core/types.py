"""Shared typed models.

This module defines the immutable values passed between the command
tree, the input resolver, and the action invoker.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class InputSource:
    """Where a leaf action reads its input from.

    Attributes:
        value: Literal text, a file path, or None to read standard input.
        raw: Treat ``value`` as literal text instead of a file path.
            Piped standard input still takes precedence over both fields.
    """

    value: str | None = None
    raw: bool = False


@dataclass(frozen=True)
class ActionSpec:
    """A leaf of the command tree bound to one transform.

    Attributes:
        family: Tool family name, e.g. ``hash``.
        action: Action name within the family, e.g. ``sha256``.
        label: Context label attached to failures, e.g. ``SHA256 Hash``.
        transform: Function from resolved input text to output text.
        help: One-line help text for the CLI.
    """

    family: str
    action: str
    label: str
    transform: Callable[[str], str]
    help: str = ""
