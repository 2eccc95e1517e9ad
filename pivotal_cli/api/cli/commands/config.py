"""Config command module - reads and writes the settings file."""

import argparse
import sys

from loguru import logger

from pivotal_cli.config import ConfigStore, get_config_store
from pivotal_cli.core.exceptions import ConfigurationError
from ..utils.output import OutputFormatter, format_setting_value, terminal_width, truncate
from ..utils.validation import parse_setting_value, validate_setting_name

# Room for the " | " column separator
_SEPARATOR_WIDTH = 3
_MIN_VALUE_WIDTH = 10


def config_command(args: argparse.Namespace) -> None:
    """Execute the config command with appropriate subcommand.

    Args:
        args: Parsed command-line arguments
    """
    subcommand_handlers = {
        "show": config_show_command,
        "get": config_get_command,
        "set": config_set_command,
        "path": config_path_command,
    }

    handler = subcommand_handlers.get(args.config_command)
    if handler is None:
        logger.error(f"Unknown config command: {args.config_command}")
        sys.exit(1)

    formatter = OutputFormatter(verbose=getattr(args, "verbose", False))
    try:
        handler(args, _open_store(args), formatter)
    except ConfigurationError as e:
        formatter.error(str(e))
        sys.exit(1)


def _open_store(args: argparse.Namespace) -> ConfigStore:
    config_path = getattr(args, "config", None)
    return get_config_store(config_path)


def config_show_command(
    args: argparse.Namespace, store: ConfigStore, formatter: OutputFormatter
) -> None:
    """Handle config show command."""
    settings = store.snapshot()
    formatter.verbose_info(f"Settings file: {store.path}")

    if not settings:
        formatter.info(f"No settings stored in {store.path}")
        return

    key_width = max(len("Setting"), *(len(name) for name in settings))
    value_width = max(terminal_width() - key_width - _SEPARATOR_WIDTH, _MIN_VALUE_WIDTH)
    widths = [key_width, value_width]

    formatter.table_header(["Setting", "Value"], widths)
    for name, value in settings.items():
        formatter.table_row([name, truncate(format_setting_value(name, value), value_width)], widths)


def config_get_command(
    args: argparse.Namespace, store: ConfigStore, formatter: OutputFormatter
) -> None:
    """Handle config get command."""
    value = store.get(args.name)
    if value is None:
        formatter.error(f"{args.name} is not set")
        sys.exit(1)
    print(value)


def config_set_command(
    args: argparse.Namespace, store: ConfigStore, formatter: OutputFormatter
) -> None:
    """Handle config set command."""
    if not validate_setting_name(args.name):
        sys.exit(1)

    value = parse_setting_value(args.name, args.value)
    if args.name not in store.setting_names:
        formatter.verbose_info(f"'{args.name}' is not a known setting, storing it anyway")

    store.set(args.name, value)
    store.save()
    formatter.success(f"Updated {args.name} in {store.path}")


def config_path_command(
    args: argparse.Namespace, store: ConfigStore, formatter: OutputFormatter
) -> None:
    """Handle config path command."""
    print(store.path)
