"""Pivotal CLI Core Exceptions - Core exception classes for error handling.

This module contains the exception hierarchy for the pivotal-cli package.
Store failures are raised to the immediate caller; the CLI layer is the only
place that catches and reports them.
"""

from pathlib import Path
from typing import Optional, Any, Dict, Union


class PivotalCliError(Exception):
    """Base exception for all pivotal-cli errors.

    Carries an optional context dictionary (file paths, setting names) and
    the underlying exception that caused it, if any.
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None
    ):
        """Initialize pivotal-cli error.

        Args:
            message: Human-readable error description
            context: Optional dictionary with error context (e.g., file paths)
            cause: Optional underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.cause = cause

    def __str__(self) -> str:
        """Return formatted error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} (context: {context_str})"
        return self.message

    def add_context(self, key: str, value: Any) -> "PivotalCliError":
        """Add context information to the error."""
        self.context[key] = value
        return self


class ConfigurationError(PivotalCliError):
    """Raised when the settings file cannot be used.

    Base class for the load, save and not-loaded errors of the config store.
    """

    prefix = "Configuration error"

    def __init__(
        self,
        path: Optional[Union[str, Path]] = None,
        reason: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None
    ):
        """Initialize configuration error.

        Args:
            path: Settings file involved in the failure
            reason: Description of what went wrong
            context: Optional additional context
            cause: Underlying exception, if any
        """
        message = f"{self.prefix}: {reason}" if reason else self.prefix
        context = dict(context or {})
        if path is not None:
            context.setdefault("path", str(path))

        super().__init__(message, context, cause)
        self.path = Path(path) if path is not None else None
        self.reason = reason


class ConfigLoadError(ConfigurationError):
    """Raised when an existing settings file is unreadable or not a JSON object."""

    prefix = "Unable to load config file"


class ConfigSaveError(ConfigurationError):
    """Raised when writing or replacing the settings file fails.

    The store keeps its dirty flag set, so the save can be retried.
    """

    prefix = "Unable to save config file"


class NotLoadedError(ConfigurationError):
    """Raised when a setting is read before the store was loaded."""

    prefix = "Configuration not loaded"
