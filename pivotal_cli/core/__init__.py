"""Core building blocks for pivotal-cli: exceptions and runtime settings."""

from .exceptions import (
    ConfigLoadError,
    ConfigSaveError,
    ConfigurationError,
    NotLoadedError,
    PivotalCliError,
)
from .settings import PivotalCliSettings, default_config_file

__all__ = [
    "PivotalCliError",
    "ConfigurationError",
    "ConfigLoadError",
    "ConfigSaveError",
    "NotLoadedError",
    "PivotalCliSettings",
    "default_config_file",
]
