"""Random UUID generation."""

from __future__ import annotations

import uuid


def generate_uuid() -> str:
    """Return a random version-4 UUID in canonical lowercase form."""
    return str(uuid.uuid4())
