"""
FILE: ticklist/formatting.py
PURPOSE: Shared task display for CLI and REPL output
EXPORTS:
  - status_marker() - Checkbox glyph for a task
  - display_task() - Display a single task
  - display_tasks_table() - Display tasks in a formatted table
DEPENDENCIES:
  - rich (formatted output)
  - ticklist.core.models (Task model)
NOTES:
  - Shared by the REPL and the one-shot CLI
  - Accepts a console parameter to avoid circular imports
  - Task text is escaped so "[" in a description is not read as markup
"""

from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .core.models import Task

console = Console()


def status_marker(task: Task) -> str:
    """Rich markup for the done column."""
    return "[green]✓[/green]" if task.done else "[yellow]○[/yellow]"


def display_task(task: Task, message: str = "", console_instance: Optional[Console] = None) -> None:
    """
    Display a single task with optional message.

    Args:
        task: Task object to display
        message: Optional message to show before task (e.g., "✓ Completed:")
        console_instance: Optional Rich console instance (defaults to module console)
    """
    if console_instance is None:
        console_instance = console

    if message:
        console_instance.print(f"[green]{message}[/green]")

    console_instance.print(f"  {status_marker(task)} [cyan]{task.id}[/cyan]: {escape(task.description)}")


def display_tasks_table(tasks: List[Task], console_instance: Optional[Console] = None) -> None:
    """
    Display tasks in a formatted table.

    Args:
        tasks: Tasks in id order
        console_instance: Optional Rich console instance (defaults to module console)
    """
    if console_instance is None:
        console_instance = console

    if not tasks:
        console_instance.print("[dim]No tasks found[/dim]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("ID", style="cyan", width=6)
    table.add_column("Done", width=4, justify="center")
    table.add_column("Description", style="white")

    for task in tasks:
        description = escape(task.description)
        if task.done:
            description = f"[dim strike]{description}[/dim strike]"
        table.add_row(str(task.id), status_marker(task), description)

    console_instance.print(table)

    done_count = sum(1 for t in tasks if t.done)
    console_instance.print(f"[dim]{len(tasks)} task(s), {done_count} done[/dim]")
