"""
FILE: ticklist/core/service.py
PURPOSE: Session layer shared by the CLI and the REPL
EXPORTS:
  - TaskSession (dataclass: store bound to its file)
  - open_session(path) -> TaskSession
  - parse_task_id(raw) -> int
  - parse_task_ids(raw) -> List[int]
  - validate_description(text) -> str
DEPENDENCIES:
  - ticklist.core.repository (load, save)
  - ticklist.core.store (TaskStore)
  - ticklist.core.exceptions (StorageError, InvalidInputError)
  - ticklist.config (default path)
NOTES:
  - Load failures are kept on the session, not raised: the caller decides
    whether to continue with the empty store
  - save() propagates StorageError; try_save() turns it into a return value
  - The store is never modified by a failed save
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from . import repository
from .exceptions import InvalidInputError, StorageError
from .store import TaskStore
from .. import config

logger = logging.getLogger(__name__)


@dataclass
class TaskSession:
    """
    A TaskStore and the file it persists to.

    Attributes:
        path: Task file location
        store: In-memory tasks for this run
        load_error: Set when the file existed but could not be read
        dirty: True when the store changed since the last load/save
    """
    path: Path
    store: TaskStore = field(default_factory=TaskStore)
    load_error: Optional[StorageError] = None
    dirty: bool = False

    def save(self) -> None:
        """
        Write the store to disk.

        Raises:
            StorageError: If the file cannot be written
        """
        repository.save(self.path, self.store)
        self.dirty = False

    def try_save(self) -> Optional[StorageError]:
        """Save, returning the StorageError instead of raising it."""
        try:
            self.save()
        except StorageError as e:
            return e
        return None


def open_session(path: Optional[Union[str, Path]] = None) -> TaskSession:
    """
    Load the task file into a new session.

    Args:
        path: Task file; defaults to config.get_tasks_path()

    Returns:
        TaskSession. If reading failed, store is empty and load_error is set.
    """
    path = config.get_tasks_path(path)
    try:
        store = repository.load(path)
    except StorageError as e:
        logger.warning("Starting with an empty task list: %s", e)
        return TaskSession(path=path, load_error=e)

    return TaskSession(path=path, store=store)


def parse_task_id(raw: str) -> int:
    """
    Parse a single task id typed by the user.

    Raises:
        InvalidInputError: If raw is not an integer
    """
    try:
        return int(raw.strip())
    except ValueError:
        raise InvalidInputError(f"Invalid task ID: {raw.strip() or raw!r}")


def parse_task_ids(raw: str) -> List[int]:
    """
    Parse comma-separated task ids.

    Examples:
        "3" -> [3]
        "1,2, 5" -> [1, 2, 5]

    Raises:
        InvalidInputError: If any part is not an integer or nothing was given
    """
    parts = [part.strip() for part in raw.split(",") if part.strip()]
    if not parts:
        raise InvalidInputError("Task ID required")
    return [parse_task_id(part) for part in parts]


def validate_description(text: str) -> str:
    """
    Check a description before it goes into the store.

    Surrounding whitespace is trimmed. Line breaks are rejected because the
    task file holds one task per line.

    Raises:
        InvalidInputError: If text is empty or contains a line break
    """
    text = text.strip()
    if not text:
        raise InvalidInputError("Task description cannot be empty")
    if "\n" in text or "\r" in text:
        raise InvalidInputError("Task description cannot contain line breaks")
    return text
