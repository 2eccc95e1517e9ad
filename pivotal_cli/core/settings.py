"""
Runtime settings for pivotal-cli.

These are settings of the tool itself, read from the environment, as opposed
to the user's Pivotal Tracker settings kept in the JSON config file.

Environment Variable Examples:
    PIVOTAL_CLI_CONFIG_FILE=/tmp/tracker.json
    PIVOTAL_CLI_DEBUG=true
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

CONFIG_FILENAME = ".pivotal_tracker_cli.json"


def default_config_file() -> Path:
    """Default location of the settings file in the user's home directory."""
    return Path.home() / CONFIG_FILENAME


class PivotalCliSettings(BaseSettings):
    """Environment driven settings for the CLI."""

    model_config = SettingsConfigDict(
        env_prefix='PIVOTAL_CLI_',
        case_sensitive=False,
        extra='ignore',
        env_file=None,  # Disable automatic .env loading
    )

    config_file: Path = Field(
        default_factory=default_config_file,
        description="Path to the JSON settings file"
    )

    debug: bool = Field(
        default=False,
        description="Enable debug logging"
    )
