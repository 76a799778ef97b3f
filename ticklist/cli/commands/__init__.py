"""
FILE: ticklist/cli/commands/__init__.py
PURPOSE: CLI command modules
"""

# Export all command handlers for easy importing
from .tasks import (
    add,
    ls,
    done,
    undone,
    edit,
    rm,
)
from .system import (
    version,
    help,
    repl,
)

__all__ = [
    "add",
    "ls",
    "done",
    "undone",
    "edit",
    "rm",
    "version",
    "help",
    "repl",
]
