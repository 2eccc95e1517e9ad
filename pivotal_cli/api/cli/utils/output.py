"""Output formatting utilities for pivotal-cli commands."""

import sys
from typing import Any, List, Optional

from pivotal_cli.terminal import terminal_size

DEFAULT_WIDTH = 80
MASKED_SETTINGS = frozenset({"token"})


class OutputFormatter:
    """Handles consistent output formatting across CLI commands."""

    def __init__(self, verbose: bool = False):
        """Initialize output formatter.

        Args:
            verbose: Whether to enable verbose output
        """
        self.verbose = verbose

    def info(self, message: str) -> None:
        print(f"ℹ️  {message}")

    def success(self, message: str) -> None:
        print(f"✅ {message}")

    def error(self, message: str) -> None:
        print(f"❌ {message}", file=sys.stderr)

    def verbose_info(self, message: str) -> None:
        """Print a verbose info message if verbose mode is enabled."""
        if self.verbose:
            print(f"🔍 {message}")

    def table_header(self, headers: List[str], widths: Optional[List[int]] = None) -> None:
        """Print a table header.

        Args:
            headers: Column headers
            widths: Optional column widths
        """
        if widths:
            row = " | ".join(header.ljust(width) for header, width in zip(headers, widths))
        else:
            row = " | ".join(headers)

        print(row.rstrip())
        print("-" * len(row))

    def table_row(self, values: List[str], widths: Optional[List[int]] = None) -> None:
        """Print a table row.

        Args:
            values: Column values
            widths: Optional column widths
        """
        if widths:
            row = " | ".join(str(value).ljust(width) for value, width in zip(values, widths))
        else:
            row = " | ".join(str(value) for value in values)

        print(row.rstrip())


def terminal_width() -> int:
    """Terminal columns, falling back to 80 when the size is unknown."""
    size = terminal_size()
    if size is None or size[0] <= 0:
        return DEFAULT_WIDTH
    return size[0]


def truncate(text: str, width: int) -> str:
    """Shorten text to ``width`` characters, marking the cut with '...'."""
    if len(text) <= width:
        return text
    if width <= 3:
        return text[:width]
    return text[:width - 3] + "..."


def format_setting_value(name: str, value: Any) -> str:
    """Format a stored setting for display, masking secrets.

    Args:
        name: Setting name
        value: Stored value

    Returns:
        Display string; tokens show only their last four characters
    """
    if value is None:
        return "(unset)"
    text = str(value)
    if name in MASKED_SETTINGS and len(text) > 4:
        return "*" * (len(text) - 4) + text[-4:]
    return text
