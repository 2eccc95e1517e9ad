"""Shared utilities for pivotal-cli commands."""

from .output import OutputFormatter, format_setting_value, terminal_width, truncate
from .validation import exit_on_validation_error, parse_setting_value, validate_setting_name

__all__ = [
    "OutputFormatter",
    "format_setting_value",
    "terminal_width",
    "truncate",
    "exit_on_validation_error",
    "parse_setting_value",
    "validate_setting_name",
]
