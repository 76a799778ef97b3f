"""
FILE: ticklist/repl/commands/system.py
PURPOSE: System command handlers for REPL
"""

from rich.panel import Panel

from ..main import console, save_session
from ..parser import ParseResult


def handle_save_command(result: ParseResult) -> None:
    """
    Handle 'save' command - write tasks to disk now.

    Usage:
        save
    """
    save_session()


def handle_help_command(result: ParseResult) -> None:
    """
    Handle 'help' command - show available commands.

    Args:
        result: Parsed command (unused)
    """
    help_text = """
[bold cyan]Available Commands:[/bold cyan]

  [cyan]add <description>[/cyan]          Create a new task
  [cyan]ls [--open|--done][/cyan]         List tasks
  [cyan]done <id>[,<id>...][/cyan]        Mark task(s) as done
  [cyan]undone <id>[,<id>...][/cyan]      Mark task(s) as not done
  [cyan]edit <id> <description>[/cyan]    Change a task's description
  [cyan]rm <id>[,<id>...] | *[/cyan]      Delete task(s)
  [cyan]show <id>[/cyan]                  Show one task
  [cyan]save[/cyan]                       Write tasks to disk now
  [cyan]help[/cyan]                       Show this help
  [cyan]clear[/cyan]                      Clear the screen
  [cyan]exit[/cyan] or [cyan]quit[/cyan]              Save and exit

[bold cyan]Examples:[/bold cyan]

  [dim]add Buy groceries
  add "Task with spaces"
  done 1
  done 1,2,3                  # Mark several tasks as done
  edit 2 Call the plumber
  rm 2                        # Task 3 becomes task 2
  rm 1,3                      # IDs as shown by the last ls[/dim]

[bold yellow]Task IDs:[/bold yellow]
  [dim]IDs are always 1..N in list order. Deleting a task moves every later
  task up by one, so run 'ls' again before using IDs after an rm.[/dim]
"""
    console.print(Panel(help_text, title="ticklist REPL Help", border_style="cyan"))


def handle_clear_command(result: ParseResult) -> None:
    """
    Clear the screen.

    Args:
        result: Parsed command (no arguments used)
    """
    console.clear()
    console.print("[dim]Screen cleared[/dim]")
