"""
FILE: ticklist/core/store.py
PURPOSE: In-memory ordered task collection with dense ids
EXPORTS:
  - TaskStore
DEPENDENCIES:
  - logging (stdlib)
  - dataclasses (stdlib)
  - ticklist.core.models (Task)
NOTES:
  - Ids are always exactly 1..N in list order
  - remove() renumbers every later task, so ids must not be cached across it
  - Unknown ids are reported with a False result, never an exception
  - No I/O here: persistence lives in repository/codec
"""

import logging
from dataclasses import replace
from typing import Iterable, Iterator, List, Optional

from .models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Ordered collection of tasks.

    The list position is the source of truth for ids: a task at index i
    always has id i + 1. Every mutation keeps that true.
    """

    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        self._tasks: List[Task] = []
        for task in tasks or ():
            # Positional ids, whatever the caller passed in
            self._tasks.append(Task(len(self._tasks) + 1, task.description, task.done))

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.list())

    def __eq__(self, other) -> bool:
        if not isinstance(other, TaskStore):
            return NotImplemented
        return self._tasks == other._tasks

    def __repr__(self) -> str:
        return f"TaskStore({self._tasks!r})"

    def add(self, description: str) -> Task:
        """
        Append a new task at the end.

        Args:
            description: Task text (may be empty)

        Returns:
            Copy of the new task, with id = previous size + 1 and done=False
        """
        task = Task(id=len(self._tasks) + 1, description=description)
        self._tasks.append(task)
        logger.debug("Added task %d", task.id)
        return replace(task)

    def get(self, task_id: int) -> Optional[Task]:
        """Return a copy of the task with this id, or None."""
        task = self._find(task_id)
        return replace(task) if task else None

    def complete(self, task_id: int) -> bool:
        """
        Mark task as done.

        Idempotent: completing a done task succeeds again.

        Returns:
            True if the task exists, False otherwise (store unchanged)
        """
        return self._set_done(task_id, True)

    def uncomplete(self, task_id: int) -> bool:
        """Mark task as not done. Returns False for an unknown id."""
        return self._set_done(task_id, False)

    def edit(self, task_id: int, description: str) -> bool:
        """Replace a task's description. Returns False for an unknown id."""
        task = self._find(task_id)
        if task is None:
            return False
        task.description = description
        logger.debug("Edited task %d", task_id)
        return True

    def remove(self, task_id: int) -> bool:
        """
        Delete a task and shift later tasks down by one id.

        Only the range 1..size is accepted. Because ids are dense that is
        the same as "the task exists".

        Example:
            ids 1, 2, 3 -> remove(2) -> ids 1, 2 (old 3 is now 2)

        Returns:
            True if a task was removed, False otherwise (store unchanged)
        """
        if task_id < 1 or task_id > len(self._tasks):
            return False

        del self._tasks[task_id - 1]
        for task in self._tasks[task_id - 1:]:
            task.id -= 1

        logger.debug("Removed task %d, %d remaining", task_id, len(self._tasks))
        return True

    def remove_many(self, task_ids: Iterable[int]) -> List[int]:
        """
        Remove several tasks named by their ids before any removal.

        Works from the highest id down so earlier removals do not shift
        the ids still to be removed. Duplicates and invalid ids are skipped.

        Returns:
            The ids that were removed, ascending
        """
        removed = []
        for task_id in sorted(set(task_ids), reverse=True):
            if self.remove(task_id):
                removed.append(task_id)
        return sorted(removed)

    def list(self) -> List[Task]:
        """Snapshot of all tasks in id order (copies, safe to mutate)."""
        return [replace(task) for task in self._tasks]

    def _find(self, task_id: int) -> Optional[Task]:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def _set_done(self, task_id: int, done: bool) -> bool:
        task = self._find(task_id)
        if task is None:
            return False
        task.done = done
        logger.debug("Task %d done=%s", task_id, done)
        return True
