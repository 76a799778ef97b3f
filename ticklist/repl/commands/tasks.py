"""
FILE: ticklist/repl/commands/tasks.py
PURPOSE: Task command handlers for REPL
"""

from typing import Callable, List

from rich.markup import escape

from ..main import console, repl_context
from ..parser import ParseResult
from ...core import service
from ...core.exceptions import InvalidInputError
from ..style import celebrate_add, celebrate_done, celebrate_delete, celebrate_bulk
from ...formatting import display_task, display_tasks_table


def ask_confirmation(message: str) -> bool:
    """Ask user for confirmation (y/n)."""
    response = input(f"{message} (y/n): ").strip().lower()
    return response in ('y', 'yes')


def _require_ids(result: ParseResult, usage: str) -> List[int]:
    """Parse the comma-separated IDs in the first argument or print usage."""
    if not result.args:
        console.print("[red]Error:[/red] Task ID required")
        console.print(f"[dim]Usage: {usage}[/dim]")
        return []
    try:
        return service.parse_task_ids(result.args[0])
    except InvalidInputError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        return []


def handle_add_command(result: ParseResult) -> None:
    """
    Handle 'add' command - create new task.

    Usage:
        add Buy groceries
        add "Task with spaces"
        add call plumber | landlord     (text is kept verbatim)
    """
    text = result.text_after()
    if not text.strip():
        console.print("[red]Error:[/red] Task description required")
        console.print("[dim]Usage: add <description>[/dim]")
        return

    try:
        description = service.validate_description(text)
    except InvalidInputError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        return

    task = repl_context.store.add(description)
    repl_context.mark_dirty()

    console.print(f"[dim]{celebrate_add()}[/dim]")
    console.print(f"[green]✓ Created task [bold]#{task.id}[/bold]:[/green] {escape(task.description)}")


def handle_ls_command(result: ParseResult) -> None:
    """
    Handle 'ls' command - list all tasks.

    Usage:
        ls
        ls --done       (only completed tasks)
        ls --open       (only open tasks)
    """
    tasks = repl_context.store.list()

    if result.flags.get("done"):
        tasks = [t for t in tasks if t.done]
    elif result.flags.get("open"):
        tasks = [t for t in tasks if not t.done]

    display_tasks_table(tasks, console)


def _apply_to_ids(
    result: ParseResult,
    usage: str,
    action: Callable[[int], bool],
    message: str,
    bulk_word: str,
) -> int:
    task_ids = _require_ids(result, usage)
    if not task_ids:
        return 0

    changed = 0
    for task_id in task_ids:
        if not action(task_id):
            console.print(f"[red]Error:[/red] Task {task_id} not found")
            continue
        display_task(repl_context.store.get(task_id), message, console)
        changed += 1

    if changed:
        repl_context.mark_dirty()
    if changed > 1:
        console.print(f"[green]{celebrate_bulk(changed, bulk_word)}[/green]")
    return changed


def handle_done_command(result: ParseResult) -> None:
    """
    Handle 'done' command - mark task(s) complete.

    Completing a task that is already done is fine.

    Usage:
        done 2
        done 1,2,3
    """
    completed = _apply_to_ids(result, "done <id>[,<id>...]", repl_context.store.complete, "✓ Completed:", "completed")
    if completed:
        console.print(f"[dim]{celebrate_done()}[/dim]")


def handle_undone_command(result: ParseResult) -> None:
    """
    Handle 'undone' command - mark task(s) as not done.

    Usage:
        undone 2
        undone 1,3
    """
    _apply_to_ids(result, "undone <id>[,<id>...]", repl_context.store.uncomplete, "○ Reopened:", "reopened")


def handle_edit_command(result: ParseResult) -> None:
    """
    Handle 'edit' command - replace a task's description.

    Usage:
        edit 2 New description
    """
    # Tokens are read from the raw line; "--word" is part of the text here
    id_token = result.raw_input.split(None, 2)[1:2]
    text = result.text_after(1)
    if not id_token or not text.strip():
        console.print("[red]Error:[/red] Task ID and new description required")
        console.print("[dim]Usage: edit <id> <description>[/dim]")
        return

    try:
        task_id = service.parse_task_id(id_token[0])
        description = service.validate_description(text)
    except InvalidInputError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        return

    if not repl_context.store.edit(task_id, description):
        console.print(f"[red]Error:[/red] Task {task_id} not found")
        return

    repl_context.mark_dirty()
    display_task(repl_context.store.get(task_id), "✓ Updated:", console)


def handle_rm_command(result: ParseResult) -> None:
    """
    Handle 'rm' command - delete task(s).

    IDs refer to the list as shown before this command; tasks after a
    removed one move up and get new IDs.

    Usage:
        rm 2
        rm 1,2,3
        rm *            (delete everything, asks first)
    """
    if result.args and result.args[0].strip() == "*":
        count = len(repl_context.store)
        if not count:
            console.print("[dim]No tasks to delete[/dim]")
            return
        if not ask_confirmation(f"Delete all {count} tasks?"):
            console.print("[yellow]Cancelled[/yellow]")
            return
        task_ids = list(range(1, count + 1))
    else:
        task_ids = _require_ids(result, "rm <id>[,<id>...] | *")
        if not task_ids:
            return

    removed = repl_context.store.remove_many(task_ids)

    for task_id in sorted(set(task_ids) - set(removed)):
        console.print(f"[red]Error:[/red] Task {task_id} not found")

    if not removed:
        return

    repl_context.mark_dirty()
    console.print(f"[dim]{celebrate_delete()}[/dim]")
    for task_id in removed:
        console.print(f"[green]✓ Deleted task {task_id}[/green]")
    if len(removed) > 1:
        console.print(f"[green]{celebrate_bulk(len(removed), 'deleted')}[/green]")
    if removed[0] <= len(repl_context.store):
        console.print("[dim]Task IDs after the deleted ones have moved up. Run 'ls' to see them.[/dim]")


def handle_show_command(result: ParseResult) -> None:
    """
    Handle 'show' command - display one task.

    Usage:
        show 2
    """
    if not result.args:
        console.print("[red]Error:[/red] Task ID required")
        console.print("[dim]Usage: show <id>[/dim]")
        return

    try:
        task_id = service.parse_task_id(result.args[0])
    except InvalidInputError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        return

    task = repl_context.store.get(task_id)
    if task is None:
        console.print(f"[red]Error:[/red] Task {task_id} not found")
        return

    display_task(task, console_instance=console)
