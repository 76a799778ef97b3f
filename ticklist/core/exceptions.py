"""
FILE: ticklist/core/exceptions.py
PURPOSE: Custom exception classes for error handling
EXPORTS:
  - TicklistError (base exception)
  - StorageError
  - InvalidInputError
DEPENDENCIES:
  - None (stdlib only)
NOTES:
  - All exceptions inherit from TicklistError for easy catching
  - Missing task ids are not exceptions: store operations return False
  - Repository raises StorageError, UI layers catch and display
"""

from pathlib import Path
from typing import Union


class TicklistError(Exception):
    """Base exception for all ticklist errors."""
    pass


class StorageError(TicklistError):
    """Task file could not be read or written."""

    def __init__(self, path: Union[str, Path], cause: OSError, action: str = "access"):
        self.path = Path(path)
        self.cause = cause
        self.action = action
        reason = cause.strerror or str(cause)
        super().__init__(f"Could not {action} {self.path}: {reason}")


class InvalidInputError(TicklistError):
    """Input validation failed."""

    def __init__(self, message: str):
        super().__init__(message)
