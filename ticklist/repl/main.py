"""
FILE: ticklist/repl/main.py
PURPOSE: Interactive REPL for task management with prompt-toolkit
EXPORTS:
  - REPLContext / repl_context - Session state shared by command handlers
  - execute_command(result) -> bool
  - run_repl(path) - Main REPL loop
  - main(path) - Entry point for REPL mode
DEPENDENCIES:
  - prompt_toolkit (REPL interface, history, completion)
  - rich (formatted output)
  - ticklist.core.service (session load/save)
  - ticklist.repl.parser (command parsing)
  - ticklist.repl.completer (autocomplete)
NOTES:
  - Loads the task file once at startup, keeps the store in memory
  - "save" writes immediately; exit/quit/Ctrl+D save if anything changed
  - A failed save is a warning: the session and the store carry on
  - A failed load is a warning: the session starts with an empty list
  - Falls back to plain input() when not attached to a TTY
"""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.formatted_text import HTML
from rich.console import Console
from rich.markup import escape

from ..core import service
from ..core.service import TaskSession
from ..core.store import TaskStore
from .parser import parse_command, ParseResult
from .completer import create_completer

logger = logging.getLogger(__name__)

# Rich console for formatted output
console = Console()

PROMPT = "ticklist> "


# --- REPL Context (Persistent State) ---


@dataclass
class REPLContext:
    """
    State for the running REPL.

    Attributes:
        session: Loaded task session (store + file path)
    """
    session: Optional[TaskSession] = None

    @property
    def store(self) -> TaskStore:
        assert self.session is not None, "REPL session not opened"
        return self.session.store

    def mark_dirty(self) -> None:
        assert self.session is not None, "REPL session not opened"
        self.session.dirty = True


# Global REPL context (lives for one run of the REPL)
repl_context = REPLContext()


def save_session(quiet: bool = False) -> bool:
    """
    Save the current session, reporting failure as a warning.

    Args:
        quiet: Don't print anything on success

    Returns:
        True if the file was written
    """
    error = repl_context.session.try_save()
    if error:
        console.print(f"[yellow]Warning:[/yellow] {escape(str(error))}")
        console.print("[dim]Your tasks are still in memory. Fix the problem and run 'save'.[/dim]")
        return False

    if not quiet:
        console.print(f"[green]✓ Saved {len(repl_context.store)} task(s)[/green] [dim]to {repl_context.session.path}[/dim]")
    return True


def get_bottom_toolbar() -> HTML:
    """Bottom toolbar with open/done counts."""
    try:
        tasks = repl_context.store.list()
        done_count = sum(1 for t in tasks if t.done)
        open_count = len(tasks) - done_count
        unsaved = " | unsaved changes" if repl_context.session.dirty else ""
        return HTML(f"<style bg='#444444' fg='#ffffff'> ○ {open_count} open | ✓ {done_count} done{unsaved} </style>")
    except Exception:
        return HTML("<style bg='#444444' fg='#ffffff'> ticklist </style>")


# Import command handlers after console/repl_context exist (handlers import them)
from .commands import (
    handle_add_command,
    handle_ls_command,
    handle_done_command,
    handle_undone_command,
    handle_edit_command,
    handle_rm_command,
    handle_show_command,
    handle_save_command,
    handle_help_command,
    handle_clear_command,
)


def execute_command(result: ParseResult) -> bool:
    """
    Execute a parsed command.

    Args:
        result: Parsed command from parser

    Returns:
        True to continue REPL loop, False to exit
    """
    command = result.command.lower()

    if command in ("exit", "quit"):
        if repl_context.session.dirty:
            save_session(quiet=True)
        console.print("[dim]Goodbye![/dim]")
        return False

    # Empty command (just Enter pressed)
    if not command:
        return True

    handlers = {
        "add": handle_add_command,
        "ls": handle_ls_command,
        "list": handle_ls_command,
        "done": handle_done_command,
        "undone": handle_undone_command,
        "edit": handle_edit_command,
        "rm": handle_rm_command,
        "show": handle_show_command,
        "save": handle_save_command,
        "help": handle_help_command,
        "clear": handle_clear_command,
    }

    handler = handlers.get(command)
    if handler:
        handler(result)
        console.print()
    else:
        console.print(f"[red]Unknown command:[/red] {escape(command)}")
        console.print("[dim]Type 'help' for available commands[/dim]")
        console.print()

    return True


def run_repl(path: Optional[Union[str, Path]] = None) -> None:
    """
    Main REPL loop.

    Args:
        path: Task file (defaults to $TICKLIST_FILE or ~/.ticklist/tasks.txt)

    Exits on:
    - Ctrl+D (EOFError)
    - "exit" or "quit" commands
    """
    repl_context.session = service.open_session(path)
    if repl_context.session.load_error:
        console.print(f"[yellow]Warning:[/yellow] {escape(str(repl_context.session.load_error))}")
        console.print("[dim]Starting with an empty task list.[/dim]")

    has_tty = sys.stdin.isatty() and sys.stdout.isatty()

    session = None
    use_simple_input = not has_tty

    if has_tty:
        try:
            session = PromptSession(
                history=InMemoryHistory(),
                completer=create_completer(lambda: repl_context.store.list()),
                complete_while_typing=True,
                bottom_toolbar=get_bottom_toolbar,
            )
        except Exception as e:
            console.print(f"[yellow]Warning:[/yellow] Running in simple input mode: {e}")
            use_simple_input = True

    console.print("[bold cyan]ticklist REPL[/bold cyan] - Type 'help' for commands, 'exit' to quit")
    if use_simple_input:
        console.print("[dim](Running in simple mode - no autocomplete)[/dim]")
    console.print()

    while True:
        try:
            if use_simple_input or session is None:
                user_input = input(PROMPT)
            else:
                user_input = session.prompt(HTML("<b>ticklist&gt; </b>"))

            result = parse_command(user_input)

            if not execute_command(result):
                break

        except KeyboardInterrupt:
            console.print("[dim]^C (Press Ctrl+D or type 'exit' to quit)[/dim]")
            continue
        except EOFError:
            console.print()
            if repl_context.session.dirty:
                save_session(quiet=True)
            console.print("[dim]Goodbye![/dim]")
            break
        except Exception as e:
            # Unexpected error - show but don't crash
            logger.exception("Unhandled error in REPL command")
            console.print(f"[red]Unexpected error:[/red] {escape(str(e))}")


def main(path: Optional[Union[str, Path]] = None) -> None:
    """
    Entry point for REPL mode.

    Called when user runs: ticklist (no command) or ticklist repl
    """
    try:
        run_repl(path)
    except Exception as e:
        console.print(f"[red]Fatal error:[/red] {escape(str(e))}")
        sys.exit(1)
