"""
FILE: ticklist/repl/commands/__init__.py
PURPOSE: REPL command handler modules
"""

from .tasks import (
    handle_add_command,
    handle_ls_command,
    handle_done_command,
    handle_undone_command,
    handle_edit_command,
    handle_rm_command,
    handle_show_command,
)
from .system import (
    handle_save_command,
    handle_help_command,
    handle_clear_command,
)

__all__ = [
    "handle_add_command",
    "handle_ls_command",
    "handle_done_command",
    "handle_undone_command",
    "handle_edit_command",
    "handle_rm_command",
    "handle_show_command",
    "handle_save_command",
    "handle_help_command",
    "handle_clear_command",
]
