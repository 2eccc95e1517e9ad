"""Pivotal CLI Core Exceptions Package - exception classes for error handling.

The hierarchy is rooted at PivotalCliError. Configuration store failures
derive from ConfigurationError so callers can catch them together.
"""

from .core import (
    ConfigLoadError,
    ConfigSaveError,
    ConfigurationError,
    NotLoadedError,
    PivotalCliError,
)

__all__ = [
    # Base exception
    "PivotalCliError",

    # Configuration store exceptions
    "ConfigurationError",
    "ConfigLoadError",
    "ConfigSaveError",
    "NotLoadedError",
]
