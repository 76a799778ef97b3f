"""Shared pytest configuration and fixtures for tests."""

import sys
from pathlib import Path

import pytest

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from ticklist.core.constants import ENV_TASKS_FILE


@pytest.fixture(autouse=True)
def tasks_file(monkeypatch, tmp_path):
    """Point every test at a temporary task file instead of ~/.ticklist."""
    path = tmp_path / "tasks.txt"
    monkeypatch.setenv(ENV_TASKS_FILE, str(path))
    yield path
