"""Configuration constants and environment helpers for TRASHPANDA.

This module centralizes the few constants the helpers share and the
environment variables read by the command line.
"""

import logging
import os
import re

# Relative URLs are resolved against this base only to split them into parts.
# It never appears in merged output.
PLACEHOLDER_BASE = "http://localhost/"  # pragma: no mutate

ABSOLUTE_URL_PATTERN = re.compile(r"^https?://", re.IGNORECASE)

LOG_LEVEL_ENV_VAR = "TRASHPANDA_LOG_LEVEL"  # pragma: no mutate
DEFAULT_LOG_LEVEL = logging.WARNING


class InvalidLogLevelError(Exception):
    """Raised when TRASHPANDA_LOG_LEVEL names an unknown logging level."""

    def __init__(self, value: str) -> None:
        super().__init__(
            f"{LOG_LEVEL_ENV_VAR}={value!r} is not a logging level "
            "(expected DEBUG, INFO, WARNING, ERROR or CRITICAL)"
        )
        self.value = value


def get_log_level() -> int:
    """Get the base console log level from the environment.

    Returns:
        The numeric level named by `TRASHPANDA_LOG_LEVEL`, or `logging.WARNING`
        when the variable is unset or empty.

    Raises:
        InvalidLogLevelError: If the variable names an unknown level.
    """
    if not (value := os.environ.get(LOG_LEVEL_ENV_VAR, "").strip()):
        return DEFAULT_LOG_LEVEL
    level = logging.getLevelName(value.upper())
    if not isinstance(level, int):
        raise InvalidLogLevelError(value)
    return level
