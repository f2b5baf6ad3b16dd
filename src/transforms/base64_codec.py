"""Base64 encoding of UTF-8 text."""

from __future__ import annotations

import base64

from core.constants import TEXT_ENCODING
from core.errors import ToolboxTransformError


def encode_base64(text: str) -> str:
    """Encode the UTF-8 bytes of text with the padded standard alphabet."""
    return base64.b64encode(text.encode(TEXT_ENCODING)).decode("ascii")


def decode_base64(text: str) -> str:
    """Decode padded standard base64 into UTF-8 text.

    Args:
        text: Base64 payload. Characters outside the alphabet, including
            whitespace, are rejected.

    Returns:
        Decoded text.

    Raises:
        ToolboxTransformError: If text is not valid base64 or the decoded
            bytes are not UTF-8.
    """
    try:
        payload = base64.b64decode(text, validate=True)
    except ValueError as error:
        raise ToolboxTransformError("Invalid base64 input") from error
    try:
        return payload.decode(TEXT_ENCODING)
    except UnicodeDecodeError as error:
        raise ToolboxTransformError("Decoded bytes are not valid UTF-8") from error
