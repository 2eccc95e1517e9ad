"""Config command argument parser for pivotal-cli."""

import argparse

from .main_parser import add_common_arguments


def add_config_subparser(subparsers) -> argparse.ArgumentParser:
    """Add config command subparser to the main parser.

    Args:
        subparsers: Subparsers object from the main argument parser

    Returns:
        The configured config subparser
    """
    config_parser = subparsers.add_parser(
        "config",
        help="Show and change stored settings",
        description="Read and write the Pivotal Tracker settings file"
    )

    config_subparsers = config_parser.add_subparsers(
        dest="config_command",
        help="Configuration commands",
        required=True
    )

    # Config show command
    show_parser = config_subparsers.add_parser(
        "show",
        help="List all stored settings"
    )
    add_common_arguments(show_parser)

    # Config get command
    get_parser = config_subparsers.add_parser(
        "get",
        help="Print the value of one setting"
    )
    get_parser.add_argument(
        "name",
        help="Setting name (token, current_project, api_url, ...)"
    )
    add_common_arguments(get_parser)

    # Config set command
    set_parser = config_subparsers.add_parser(
        "set",
        help="Change one setting and save"
    )
    set_parser.add_argument(
        "name",
        help="Setting name (token, current_project, api_url, ...)"
    )
    set_parser.add_argument(
        "value",
        help="New value (current_project must be an integer)"
    )
    add_common_arguments(set_parser)

    # Config path command
    path_parser = config_subparsers.add_parser(
        "path",
        help="Print the settings file location"
    )
    add_common_arguments(path_parser)

    return config_parser


__all__ = ["add_config_subparser"]
