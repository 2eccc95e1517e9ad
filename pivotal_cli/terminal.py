"""Terminal helpers - terminal size probing and executable lookup."""

import os
import subprocess
from pathlib import Path
from typing import List, Optional, Tuple

from loguru import logger


def find_command(name: str) -> Optional[Path]:
    """Find an executable regular file called ``name`` on PATH.

    Args:
        name: Exact file name to look for

    Returns:
        Path of the first match, or None
    """
    search_path = os.environ.get("PATH", "")
    for directory in search_path.split(os.pathsep):
        if not directory:
            continue
        candidate = Path(directory) / name
        if candidate.is_file() and os.access(candidate, os.X_OK):
            return candidate
    return None


def command_exists(name: str) -> bool:
    """Check whether ``name`` is an executable on PATH."""
    return find_command(name) is not None


def _run(executable: Path, args: List[str]) -> str:
    result = subprocess.run(
        [str(executable), *args],
        stdout=subprocess.PIPE,
        stderr=subprocess.DEVNULL,
        text=True,
        check=False,
    )
    return result.stdout


def _size_from_env() -> Optional[Tuple[int, int]]:
    columns = os.environ["COLUMNS"]
    lines = os.environ["LINES"]
    try:
        return int(columns), int(lines)
    except ValueError:
        logger.debug(f"Ignoring non-numeric COLUMNS={columns!r} LINES={lines!r}")
        return None


def terminal_size() -> Optional[Tuple[int, int]]:
    """Report the terminal size as ``(columns, lines)``.

    Probes, in order: the COLUMNS and LINES environment variables, ``tput``,
    then ``stty size``. Only the first available source is used.

    Returns:
        (columns, lines), or None if no source is available or its output
        cannot be parsed
    """
    if "COLUMNS" in os.environ and "LINES" in os.environ:
        return _size_from_env()

    tput = find_command("tput")
    if tput is not None:
        try:
            return int(_run(tput, ["cols"])), int(_run(tput, ["lines"]))
        except (OSError, ValueError) as e:
            logger.debug(f"tput did not report a terminal size: {e}")
            return None

    stty = find_command("stty")
    if stty is not None:
        try:
            lines, columns = (int(part) for part in _run(stty, ["size"]).split())
        except (OSError, ValueError) as e:
            logger.debug(f"stty did not report a terminal size: {e}")
            return None
        return columns, lines

    return None
