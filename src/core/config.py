"""Runtime configuration model for toolbox.

This module owns validation of global command-line options.
Other modules consume a typed config object instead of raw args.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.constants import DEFAULT_LOG_LEVEL, LOG_LEVELS
from core.errors import ToolboxConfigError


@dataclass(frozen=True)
class ToolboxConfig:
    """Validated runtime configuration.

    Attributes:
        log_level: Minimum structured log level written to standard error.
    """

    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_args(cls, log_level: str | None) -> "ToolboxConfig":
        """Build config from parsed global options.

        Args:
            log_level: Raw ``--log-level`` value, or None for the default.

        Returns:
            A validated config object.

        Raises:
            ToolboxConfigError: If the log level is not recognized.
        """
        if log_level is None:
            return cls()
        return cls(log_level=_parse_log_level(log_level))


def _parse_log_level(raw_value: str) -> str:
    """Normalize and validate a log level name.

    Args:
        raw_value: Level name as typed by the user.

    Returns:
        Lowercase level name.

    Raises:
        ToolboxConfigError: If value is not a supported level.
    """
    normalized = raw_value.strip().lower()
    if normalized not in LOG_LEVELS:
        raise ToolboxConfigError(
            f"Invalid log level '{raw_value}': expected one of {', '.join(LOG_LEVELS)}."
        )
    return normalized
