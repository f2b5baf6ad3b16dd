"""Bind resolved input to a transform and print its result."""

from __future__ import annotations

import sys
from typing import TextIO

from core.errors import ToolboxActionError, ToolboxError
from core.input_resolver import resolve_input
from core.logging_config import get_logger
from core.types import ActionSpec, InputSource

_LOGGER = get_logger(__name__)


def invoke_action(
    spec: ActionSpec,
    source: InputSource,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Resolve input, run the action transform, and print the result.

    Args:
        spec: Leaf action to run.
        source: Input source parsed from the command line.
        stdin: Standard input stream; defaults to ``sys.stdin``.
        stdout: Output stream; defaults to ``sys.stdout``.

    Returns:
        Exit code ``0``.

    Raises:
        ToolboxActionError: Wrapping any resolution or transform failure,
            labelled with ``spec.label``.
    """
    try:
        text = resolve_input(source, stdin=stdin, stdout=stdout)
        result = spec.transform(text)
    except ToolboxError as error:
        _LOGGER.debug("action_failed", family=spec.family, action=spec.action)
        raise ToolboxActionError(spec.label) from error
    _LOGGER.debug("action_completed", family=spec.family, action=spec.action)
    print(result, file=sys.stdout if stdout is None else stdout)
    return 0
