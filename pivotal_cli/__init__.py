"""pivotal-cli - command-line client for Pivotal Tracker."""

__version__ = "0.1.0"
__description__ = "Command-line client for Pivotal Tracker"

__all__ = [
    "ConfigStore",
    "get_config_store",
    "reset_config_store",
    "terminal_size",
    "command_exists",
]


def __getattr__(name: str):
    """Lazy import so `--version` does not pull in pydantic."""
    if name in ("ConfigStore", "get_config_store", "reset_config_store"):
        from . import config
        return getattr(config, name)
    elif name in ("terminal_size", "command_exists"):
        from . import terminal
        return getattr(terminal, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
