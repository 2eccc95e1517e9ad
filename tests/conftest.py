"""Shared fixtures for pivotal-cli tests."""

import json
from pathlib import Path
from typing import Any, Dict

import pytest

from pivotal_cli.config import reset_config_store


@pytest.fixture(autouse=True)
def isolated_config_store():
    """Drop the process-wide store around every test."""
    reset_config_store()
    yield
    reset_config_store()


@pytest.fixture
def config_contents() -> Dict[str, Any]:
    """Settings as written by a configured client."""
    return {
        'token': '1234',
        'current_project': 789,
        'api_url': 'https://example.com/api',
    }


@pytest.fixture
def config_file(tmp_path: Path, config_contents: Dict[str, Any]) -> Path:
    """Settings file holding config_contents in compact JSON."""
    path = tmp_path / "pivotal_tracker_cli.json"
    path.write_text(json.dumps(config_contents, separators=(",", ":")), encoding="utf-8")
    return path


@pytest.fixture
def missing_config_file(tmp_path: Path) -> Path:
    """Path of a settings file that does not exist."""
    return tmp_path / "missing.json"
