"""
FILE: ticklist/core/codec.py
PURPOSE: Convert between a TaskStore and the flat task-file text
EXPORTS:
  - encode(store) -> str
  - decode(text) -> TaskStore
  - encode_task(task) -> str
  - decode_line(line) -> (done, description)
DEPENDENCIES:
  - ticklist.core.store (TaskStore)
  - ticklist.core.constants (format constants)
NOTES:
  - One record per line: "<flag>|<description>", flag "1" = done, "0" = todo
  - No escaping. A "|" inside a description survives because decode only
    splits on the first one. A newline inside a description does not: it
    becomes extra records on the next load.
  - Ids are never stored; decode numbers lines 1..N
  - decode never fails: unknown flags read as not done, a line without a
    delimiter becomes the flag with an empty description
"""

import logging
from typing import Tuple

from .constants import FLAG_DONE, FLAG_TODO, LINE_SEPARATOR, RECORD_DELIMITER
from .models import Task
from .store import TaskStore

logger = logging.getLogger(__name__)


def encode_task(task: Task) -> str:
    """Render one task as a single record (no line terminator)."""
    flag = FLAG_DONE if task.done else FLAG_TODO
    return f"{flag}{RECORD_DELIMITER}{task.description}"


def encode(store: TaskStore) -> str:
    """
    Serialize a store to task-file text.

    Lines are joined with "\\n" and there is no trailing newline, so an
    empty store encodes to "".
    """
    return LINE_SEPARATOR.join(encode_task(task) for task in store.list())


def decode_line(line: str) -> Tuple[bool, str]:
    """
    Parse one record.

    Examples:
        >>> decode_line("1|buy milk")
        (True, 'buy milk')
        >>> decode_line("0|a|b")
        (False, 'a|b')
        >>> decode_line("garbage")
        (False, '')

    Returns:
        (done, description)
    """
    parts = line.split(RECORD_DELIMITER, 1)
    flag = parts[0]
    description = parts[1] if len(parts) > 1 else ""

    if flag not in (FLAG_DONE, FLAG_TODO) or len(parts) == 1:
        logger.debug("Malformed task line %r, reading as not done", line)

    return flag == FLAG_DONE, description


def decode(text: str) -> TaskStore:
    """
    Parse task-file text into a store.

    Args:
        text: File contents; "\\r\\n" and "\\n" line endings both accepted

    Returns:
        TaskStore with ids 1..N following line order

    Notes:
        - "" gives an empty store (same as a missing file)
        - A single trailing line terminator is ignored
        - Interior empty lines become empty, not-done tasks
    """
    text = text.replace("\r\n", "\n")
    if not text:
        return TaskStore()

    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()

    store = TaskStore()
    for line in lines:
        done, description = decode_line(line)
        task = store.add(description)
        if done:
            store.complete(task.id)

    return store
