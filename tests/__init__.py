"""pivotal-cli test package."""

import os
import stat
from pathlib import Path


# Test utilities
def make_executable(directory: Path, name: str, body: str, mode: int = 0o700) -> Path:
    """Write a shell script called name into directory."""
    path = directory / name
    path.write_text("#!/bin/sh\n" + body + "\n")
    os.chmod(path, mode)
    return path


def file_mode(path: Path) -> int:
    """Permission bits of path."""
    return stat.S_IMODE(path.stat().st_mode)
