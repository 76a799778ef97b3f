"""
FILE: ticklist/repl/completer.py
PURPOSE: Autocomplete logic for REPL commands and arguments
EXPORTS:
  - TicklistCompleter (Completer for command/arg completion)
  - create_completer(get_tasks) -> TicklistCompleter
DEPENDENCIES:
  - prompt_toolkit.completion (Completer, Completion)
  - logging (stdlib)
  - ticklist.core.models (Task)
NOTES:
  - Suggests command names when at start of line
  - Suggests task IDs (with description) for commands that take IDs
  - Task IDs come from a callable so completions follow renumbering
  - Case-insensitive matching
"""

import logging
from typing import Callable, Iterable, List, Optional

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from ..core.models import Task

logger = logging.getLogger(__name__)


class TicklistCompleter(Completer):
    """
    Custom completer for the ticklist REPL.

    Provides context-aware autocomplete:
    - Command names at start of input
    - Task IDs after done/undone/rm/edit/show
    """

    COMMANDS = [
        "add", "ls", "done", "undone", "edit", "rm", "show",
        "save", "help", "clear", "exit", "quit",
    ]

    # Commands whose first argument is a task ID (or comma-separated IDs)
    ID_COMMANDS = {"done", "undone", "rm", "edit", "show"}

    COMMAND_DESCRIPTIONS = {
        "add": "Create a new task",
        "ls": "List tasks",
        "done": "Mark task(s) as done",
        "undone": "Mark task(s) as not done",
        "edit": "Change task description",
        "rm": "Delete task(s)",
        "show": "Show one task",
        "save": "Write tasks to disk now",
        "help": "Show available commands",
        "clear": "Clear the screen",
        "exit": "Save and exit REPL",
        "quit": "Save and exit REPL",
    }

    def __init__(self, get_tasks: Optional[Callable[[], List[Task]]] = None):
        self.get_tasks = get_tasks

    def get_completions(
        self, document: Document, complete_event
    ) -> Iterable[Completion]:
        """
        Generate completions based on current input.

        Logic:
            1. If at start or typing first word -> suggest commands
            2. If command takes IDs and we're on its first argument -> suggest IDs
            3. Otherwise -> no suggestions (free text)
        """
        text_before_cursor = document.text_before_cursor
        words = text_before_cursor.split()

        if not words or (not text_before_cursor.endswith(" ") and len(words) == 1):
            word = words[0] if words else ""
            yield from self._complete_commands(word)
            return

        command = words[0].lower()
        if command not in self.ID_COMMANDS:
            return

        if len(words) == 1 and text_before_cursor.endswith(" "):
            yield from self._complete_task_ids("")
        elif len(words) == 2 and not text_before_cursor.endswith(" "):
            # Only complete the part after the last comma: "done 1,2,"
            yield from self._complete_task_ids(words[1].rsplit(",", 1)[-1])

    def _complete_commands(self, word: str) -> Iterable[Completion]:
        """
        Complete command names.

        Args:
            word: Partial command being typed
        """
        word_lower = word.lower()
        for command in self.COMMANDS:
            if command.startswith(word_lower):
                yield Completion(
                    command,
                    start_position=-len(word),
                    display=command,
                    display_meta=self.COMMAND_DESCRIPTIONS.get(command, ""),
                )

    def _complete_task_ids(self, word: str) -> Iterable[Completion]:
        """Complete task IDs with a short description as the label."""
        if self.get_tasks is None:
            return

        try:
            tasks = self.get_tasks()
        except Exception:
            logger.debug("Task ID completion failed", exc_info=True)
            tasks = []

        for t in tasks[:200]:  # cap for responsiveness
            id_str = str(t.id)
            if id_str.startswith(word):
                description = t.description.strip()
                if len(description) > 40:
                    description = description[:37] + "..."
                marker = "✓ " if t.done else ""
                yield Completion(
                    id_str,
                    start_position=-len(word),
                    display=id_str,
                    display_meta=f"{marker}{description}",
                )


def create_completer(get_tasks: Optional[Callable[[], List[Task]]] = None) -> TicklistCompleter:
    """
    Create and return a TicklistCompleter instance.

    Args:
        get_tasks: Callable returning the current tasks (for ID completion)

    Usage:
        completer = create_completer(lambda: session.store.list())
        session = PromptSession(completer=completer)
    """
    return TicklistCompleter(get_tasks)
