"""
FILE: ticklist/config.py
PURPOSE: Resolve runtime settings from the environment
EXPORTS:
  - TASKS_DIR / TASKS_PATH: default task file location (~/.ticklist/tasks.txt)
  - get_tasks_path(override) -> Path
  - get_log_level() -> int
DEPENDENCIES:
  - os, pathlib, logging (stdlib)
  - ticklist.core.constants (names and defaults)
NOTES:
  - Values are read at call time so tests can monkeypatch the environment
  - An explicit override (CLI --file) beats the environment
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

from .core.constants import (
    DEFAULT_DIRNAME,
    DEFAULT_FILENAME,
    ENV_LOG_LEVEL,
    ENV_TASKS_FILE,
)

# Default task file location (cross-platform)
TASKS_DIR = Path.home() / DEFAULT_DIRNAME
TASKS_PATH = TASKS_DIR / DEFAULT_FILENAME


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def get_tasks_path(override: Optional[Union[str, Path]] = None) -> Path:
    """
    Path of the task file.

    Order: explicit override, then $TICKLIST_FILE, then ~/.ticklist/tasks.txt.
    """
    if override:
        return Path(override).expanduser()
    return _env_path(ENV_TASKS_FILE, TASKS_PATH)


def get_log_level(default: int = logging.ERROR) -> int:
    """Console log level from $TICKLIST_LOG_LEVEL (name like "DEBUG")."""
    raw = os.getenv(ENV_LOG_LEVEL)
    if raw is None or raw.strip() == "":
        return default
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else default
