"""
FILE: ticklist/cli/commands/tasks.py
PURPOSE: Task management commands (add, ls, done, undone, edit, rm)
"""

import json
from typing import List

import typer
from rich.markup import escape

from ..main import app, console, error_console
from ...core import service
from ...core.exceptions import InvalidInputError, StorageError
from ...core.service import TaskSession
from ...formatting import display_tasks_table


def _open_session(ctx: typer.Context) -> TaskSession:
    """Load the task file or exit 1 if it exists but can't be read."""
    session = service.open_session(ctx.obj)
    if session.load_error:
        # Don't go on to overwrite a file we couldn't read
        error_console.print(f"[red]Error:[/red] {escape(str(session.load_error))}")
        raise typer.Exit(1)
    return session


def _save_session(session: TaskSession) -> None:
    """Save or exit 1. A one-shot command has nothing left to do on failure."""
    try:
        session.save()
    except StorageError as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


def _parse_ids(raw: str) -> List[int]:
    try:
        return service.parse_task_ids(raw)
    except InvalidInputError as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


@app.command()
def add(
    ctx: typer.Context,
    description: str = typer.Argument(..., help="Task description"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    raw: bool = typer.Option(False, "--raw", help="Plain text output (no colors)"),
):
    """
    Create a new task.

    Example:
        ticklist add "Write documentation"
    """
    try:
        description = service.validate_description(description)
    except InvalidInputError as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    session = _open_session(ctx)
    task = session.store.add(description)
    _save_session(session)

    if json_output:
        console.print_json(task.to_json())
    elif raw:
        print(f"{task.id}: {task.description}")
    else:
        console.print(f"[green]✓ Created task [bold]#{task.id}[/bold]:[/green] {escape(task.description)}")


@app.command()
def ls(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    raw: bool = typer.Option(False, "--raw", help="Plain text output (no colors)"),
):
    """
    List all tasks.

    Example:
        ticklist ls
        ticklist ls --json
    """
    session = _open_session(ctx)
    tasks = session.store.list()

    if json_output:
        console.print_json(json.dumps([t.to_dict() for t in tasks]))
    elif raw:
        # Plain text, one per line
        for task in tasks:
            marker = "x" if task.done else " "
            print(f"{task.id}: [{marker}] {task.description}")
    else:
        display_tasks_table(tasks, console)


def _update_many(ctx: typer.Context, task_ids: str, action: str, verb: str) -> None:
    ids = _parse_ids(task_ids)
    session = _open_session(ctx)
    update = getattr(session.store, action)

    changed = 0
    for task_id in ids:
        if update(task_id):
            task = session.store.get(task_id)
            console.print(f"[green]✓ {verb} task {task_id}:[/green] {escape(task.description)}")
            changed += 1
        else:
            error_console.print(f"[red]Error:[/red] Task {task_id} not found")

    if not changed:
        raise typer.Exit(1)
    _save_session(session)


@app.command()
def done(
    ctx: typer.Context,
    task_ids: str = typer.Argument(..., help="Task ID or comma-separated IDs (e.g. 1,2,3)"),
):
    """
    Mark task(s) as done.

    Example:
        ticklist done 2
        ticklist done 1,3
    """
    _update_many(ctx, task_ids, "complete", "Completed")


@app.command()
def undone(
    ctx: typer.Context,
    task_ids: str = typer.Argument(..., help="Task ID or comma-separated IDs"),
):
    """
    Mark task(s) as not done.

    Example:
        ticklist undone 2
    """
    _update_many(ctx, task_ids, "uncomplete", "Reopened")


@app.command()
def edit(
    ctx: typer.Context,
    task_id: str = typer.Argument(..., help="Task ID"),
    description: str = typer.Argument(..., help="New description"),
):
    """
    Change a task's description.

    Example:
        ticklist edit 2 "Call the plumber"
    """
    try:
        parsed_id = service.parse_task_id(task_id)
        description = service.validate_description(description)
    except InvalidInputError as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    session = _open_session(ctx)
    if not session.store.edit(parsed_id, description):
        error_console.print(f"[red]Error:[/red] Task {parsed_id} not found")
        raise typer.Exit(1)

    _save_session(session)
    console.print(f"[green]✓ Updated task {parsed_id}:[/green] {escape(description)}")


@app.command()
def rm(
    ctx: typer.Context,
    task_ids: str = typer.Argument(..., help="Task ID or comma-separated IDs, as shown by ls"),
):
    """
    Delete task(s).

    Later tasks move up to keep IDs 1..N.

    Example:
        ticklist rm 2
        ticklist rm 1,3
    """
    ids = _parse_ids(task_ids)
    session = _open_session(ctx)

    removed = session.store.remove_many(ids)
    for task_id in sorted(set(ids) - set(removed)):
        error_console.print(f"[red]Error:[/red] Task {task_id} not found")

    if not removed:
        raise typer.Exit(1)

    _save_session(session)
    for task_id in removed:
        console.print(f"[green]✓ Deleted task {task_id}[/green]")
