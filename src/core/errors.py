"""Toolbox exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each layer raises a specific error type, and the CLI renders the
``__cause__`` chain once at the process boundary.
"""

from __future__ import annotations


class ToolboxError(Exception):
    """Base exception for all toolbox failures."""


class ToolboxConfigError(ToolboxError):
    """Raised for invalid runtime configuration."""


class ToolboxUsageError(ToolboxError):
    """Raised for command-tree paths that name no action."""


class ToolboxInputError(ToolboxError):
    """Raised when input text cannot be resolved."""


class NoInputSourceError(ToolboxInputError):
    """Raised when nothing is piped and no positional input was given."""


class InputFileReadError(ToolboxInputError):
    """Raised when a positional input path cannot be read as UTF-8 text."""


class StdinReadError(ToolboxInputError):
    """Raised when piped standard input cannot be read completely."""


class ToolboxTransformError(ToolboxError):
    """Raised when a transform rejects its input."""


class ToolboxActionError(ToolboxError):
    """Context wrapper naming the action that was running.

    Attributes:
        label: Human-readable action label, e.g. ``Base64 Decoding``.
    """

    def __init__(self, label: str) -> None:
        super().__init__(label)
        self.label = label


def render_error_chain(error: BaseException) -> str:
    """Render an error and its causes for standard error.

    Args:
        error: Outermost raised error.

    Returns:
        ``Error: <message>`` followed by a numbered ``Caused by:`` section
        when the error has chained causes.
    """
    lines = [f"Error: {_describe(error)}"]
    causes = _collect_causes(error)
    if len(causes) == 1:
        lines.extend(["", "Caused by:", f"    {_describe(causes[0])}"])
    elif causes:
        lines.extend(["", "Caused by:"])
        lines.extend(f"    {index}: {_describe(cause)}" for index, cause in enumerate(causes))
    return "\n".join(lines)


def _collect_causes(error: BaseException) -> list[BaseException]:
    causes: list[BaseException] = []
    current = error.__cause__
    while current is not None and current not in causes:
        causes.append(current)
        current = current.__cause__
    return causes


def _describe(error: BaseException) -> str:
    message = str(error)
    return message if message else type(error).__name__
