"""Argument parser utilities for pivotal-cli commands."""

from .main_parser import create_main_parser, setup_subparsers, add_common_arguments
from .config_parser import add_config_subparser

__all__ = [
    "create_main_parser",
    "setup_subparsers",
    "add_common_arguments",
    "add_config_subparser",
]
