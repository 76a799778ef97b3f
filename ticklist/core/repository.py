"""
FILE: ticklist/core/repository.py
PURPOSE: Load and save the task file
EXPORTS:
  - load(path) -> TaskStore
  - save(path, store) -> None
DEPENDENCIES:
  - pathlib, logging (stdlib)
  - ticklist.core.codec (encode, decode)
  - ticklist.core.exceptions (StorageError)
NOTES:
  - Missing file (or a missing parent directory) loads as an empty store
  - Any OSError is wrapped in StorageError with the original as cause
  - save never touches the in-memory store, even on failure
  - Whole-file rewrite on every save, UTF-8
"""

import logging
from pathlib import Path
from typing import Union

from .codec import decode, encode
from .exceptions import StorageError
from .store import TaskStore

logger = logging.getLogger(__name__)


def load(path: Union[str, Path]) -> TaskStore:
    """
    Read the task file into a new store.

    Args:
        path: Task file location

    Returns:
        Decoded store, or an empty store if the file does not exist

    Raises:
        StorageError: If the file exists but cannot be read
    """
    path = Path(path)

    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            text = f.read()
    except (FileNotFoundError, NotADirectoryError):
        logger.debug("No task file at %s, starting empty", path)
        return TaskStore()
    except OSError as e:
        logger.warning("Failed to read %s: %s", path, e)
        raise StorageError(path, e, action="read") from e
    except UnicodeDecodeError as e:
        logger.warning("Task file %s is not valid UTF-8: %s", path, e)
        cause = OSError(f"not valid UTF-8 ({e.reason})")
        raise StorageError(path, cause, action="read") from e

    store = decode(text)
    logger.debug("Loaded %d task(s) from %s", len(store), path)
    return store


def save(path: Union[str, Path], store: TaskStore) -> None:
    """
    Overwrite the task file with the encoded store.

    Creates the parent directory if needed.

    Raises:
        StorageError: If the directory or file cannot be written
    """
    path = Path(path)
    text = encode(store)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(text)
    except OSError as e:
        logger.warning("Failed to write %s: %s", path, e)
        raise StorageError(path, e, action="write") from e

    logger.debug("Saved %d task(s) to %s", len(store), path)
