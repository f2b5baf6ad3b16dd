"""Input resolution shared by every leaf action.

Precedence, evaluated in order:

1. Standard input that is not a terminal (pipe, redirect, file) always
   wins. Its lines are read eagerly and joined with ``\\n``; the
   positional value and ``--raw`` are ignored.
2. With an interactive terminal and no positional value, resolution fails
   with :class:`NoInputSourceError`.
3. With ``--raw``, the positional value is returned verbatim.
4. Otherwise the positional value is a path to a UTF-8 text file.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO

from core.constants import NO_INPUT_NOTICE, NO_INPUT_SOURCE_MESSAGE, TEXT_ENCODING
from core.errors import InputFileReadError, NoInputSourceError, StdinReadError
from core.logging_config import get_logger
from core.types import InputSource

_LOGGER = get_logger(__name__)


def resolve_input(
    source: InputSource,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> str:
    """Produce the input text for one action.

    Args:
        source: Positional value and raw flag from the command line.
        stdin: Standard input stream; defaults to ``sys.stdin``.
        stdout: Stream for the no-input notice; defaults to ``sys.stdout``.

    Returns:
        Fully read input text, unmodified.

    Raises:
        NoInputSourceError: If nothing is piped and no value was given.
        InputFileReadError: If the value names an unreadable or non-UTF-8 file.
        StdinReadError: If piped input cannot be read completely.
    """
    stream = sys.stdin if stdin is None else stdin
    if not stream.isatty():
        if source.value is not None:
            _LOGGER.debug("positional_input_ignored", reason="stdin_piped", raw=source.raw)
        return _read_piped_lines(stream)
    if source.value is None:
        print(NO_INPUT_NOTICE, file=sys.stdout if stdout is None else stdout)
        raise NoInputSourceError(NO_INPUT_SOURCE_MESSAGE)
    if source.raw:
        _LOGGER.debug("input_resolved", source="raw", length=len(source.value))
        return source.value
    return _read_input_file(source.value)


def _read_piped_lines(stream: TextIO) -> str:
    """Read every line of piped input and join with newlines.

    Args:
        stream: Non-interactive standard input. When it wraps a binary
            buffer, lines are read from the buffer as strict UTF-8.

    Returns:
        Joined lines without terminators; empty for an empty pipe.

    Raises:
        StdinReadError: If any line fails to read or decode.
    """
    # Streams backed by bytes are decoded here, bypassing the locale codec.
    buffer = getattr(stream, "buffer", None)
    lines: list[str] = []
    try:
        if buffer is None:
            lines.extend(_strip_line_terminator(line) for line in stream)
        else:
            lines.extend(
                _strip_line_terminator(line.decode(TEXT_ENCODING)) for line in buffer
            )
    except (OSError, UnicodeDecodeError) as error:
        raise StdinReadError("Could not read line from standard in") from error
    _LOGGER.debug("input_resolved", source="stdin", line_count=len(lines))
    return "\n".join(lines)


def _strip_line_terminator(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def _read_input_file(path_value: str) -> str:
    """Read a positional input path as UTF-8 text.

    Args:
        path_value: Path exactly as given on the command line.

    Returns:
        Entire file contents.

    Raises:
        InputFileReadError: If the file is missing, unreadable, or not UTF-8.
    """
    try:
        text = Path(path_value).read_text(encoding=TEXT_ENCODING)
    except (OSError, UnicodeDecodeError) as error:
        raise InputFileReadError(
            f"Reading from file '{path_value}', if this is raw input then specify --raw flag"
        ) from error
    _LOGGER.debug("input_resolved", source="file", path=path_value, length=len(text))
    return text
