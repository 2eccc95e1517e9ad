"""Validation utilities for pivotal-cli arguments."""

import sys
from typing import Any

from loguru import logger

# Settings stored as JSON numbers; everything else is stored as a string.
INTEGER_SETTINGS = frozenset({"current_project"})


def validate_setting_name(name: str) -> bool:
    """Validate a setting name given on the command line.

    Args:
        name: Setting name to validate

    Returns:
        True if valid, False otherwise
    """
    if not name or not name.strip():
        logger.error("Setting name cannot be empty")
        return False

    if not name.replace("_", "").replace("-", "").isalnum():
        logger.error("Setting name can only contain letters, numbers, hyphens and underscores")
        return False

    return True


def parse_setting_value(name: str, raw: str) -> Any:
    """Convert a command-line value to the type stored for ``name``.

    Args:
        name: Setting name
        raw: Value as typed by the user

    Returns:
        int for integer settings, the raw string otherwise
    """
    if name in INTEGER_SETTINGS:
        try:
            return int(raw)
        except ValueError:
            exit_on_validation_error(f"{name} must be an integer, got {raw!r}")
    return raw


def exit_on_validation_error(message: str) -> None:
    """Print error message and exit with error code.

    Args:
        message: Error message to display
    """
    logger.error(message)
    sys.exit(1)
