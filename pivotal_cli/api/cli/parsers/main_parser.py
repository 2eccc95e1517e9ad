"""Main argument parser for pivotal-cli."""

import argparse
from pathlib import Path

from pivotal_cli import __version__


def create_main_parser() -> argparse.ArgumentParser:
    """Create and configure the main argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="pivotal-cli",
        description="Command-line client for Pivotal Tracker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pivotal-cli config show
  pivotal-cli config set token 0123456789abcdef
  pivotal-cli config set current_project 789
  pivotal-cli config get api_url --config ./tracker.json
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"pivotal-cli {__version__}",
    )

    return parser


def setup_subparsers(parser: argparse.ArgumentParser) -> argparse._SubParsersAction:
    """Set up subparsers for the main parser.

    Args:
        parser: Main argument parser

    Returns:
        Subparsers action for adding command parsers
    """
    return parser.add_subparsers(dest="command", help="Available commands")


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    """Add common arguments used across multiple commands.

    Args:
        parser: Parser to add arguments to
    """
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Settings file path (default: ~/.pivotal_tracker_cli.json)",
    )


__all__ = [
    "create_main_parser",
    "setup_subparsers",
    "add_common_arguments",
]
