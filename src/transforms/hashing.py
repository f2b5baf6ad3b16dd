"""Hex digests of UTF-8 text."""

from __future__ import annotations

import hashlib

import blake3

from core.constants import SUPPORTED_HASH_ALGORITHMS, TEXT_ENCODING
from core.errors import ToolboxTransformError


def supported_hash_algorithms() -> tuple[str, ...]:
    """Return hash algorithm names in CLI order."""
    return SUPPORTED_HASH_ALGORITHMS


def hash_text(algorithm: str, text: str) -> str:
    """Hash the UTF-8 bytes of text.

    Args:
        algorithm: One of :func:`supported_hash_algorithms`.
        text: Input text.

    Returns:
        Lowercase hexadecimal digest.

    Raises:
        ToolboxTransformError: If algorithm is not supported.
    """
    if algorithm not in SUPPORTED_HASH_ALGORITHMS:
        raise ToolboxTransformError(
            f"Unsupported hash algorithm '{algorithm}'. "
            f"Supported algorithms: {', '.join(SUPPORTED_HASH_ALGORITHMS)}."
        )
    data = text.encode(TEXT_ENCODING)
    if algorithm == "blake3":
        return blake3.blake3(data).hexdigest()
    return hashlib.new(algorithm, data).hexdigest()
