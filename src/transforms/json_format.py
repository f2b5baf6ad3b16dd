"""JSON minification and pretty-printing."""

from __future__ import annotations

import json

from core.constants import JSON_PRETTY_INDENT
from core.errors import ToolboxTransformError

_INSIGNIFICANT_WHITESPACE = frozenset(" \t\n\r")


def minify_json(text: str) -> str:
    """Remove whitespace outside string literals.

    The input is not validated, so malformed JSON is minified on a
    best-effort basis instead of failing.

    Args:
        text: JSON source.

    Returns:
        Minified JSON text.
    """
    output: list[str] = []
    in_string = False
    escaped = False
    for char in text:
        if in_string:
            output.append(char)
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
        elif char == '"':
            in_string = True
            output.append(char)
        elif char not in _INSIGNIFICANT_WHITESPACE:
            output.append(char)
    return "".join(output)


def unminify_json(text: str) -> str:
    """Parse JSON and render it indented.

    Args:
        text: JSON source.

    Returns:
        Pretty-printed JSON with two-space indentation.

    Raises:
        ToolboxTransformError: If text is not valid JSON.
    """
    try:
        value = json.loads(text, parse_constant=_reject_constant)
    except ValueError as error:
        raise ToolboxTransformError("Parse Valid JSON") from error
    return json.dumps(value, indent=JSON_PRETTY_INDENT, ensure_ascii=False)


def _reject_constant(name: str) -> None:
    raise ValueError(f"{name} is not a valid JSON value")
