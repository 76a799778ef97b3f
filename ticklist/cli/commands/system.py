"""
FILE: ticklist/cli/commands/system.py
PURPOSE: System commands (version, help, repl)
"""

import typer
from rich.markup import escape

# Import shared objects from main module
# These will be available after main.py imports this module
from ..main import app, console, error_console, __version__
from ... import config


@app.command()
def version():
    """Show ticklist version."""
    console.print(f"ticklist v{__version__}")


@app.command()
def help(ctx: typer.Context):
    """Show available commands and usage."""
    console.print("\n[bold cyan]ticklist[/bold cyan] - Personal task list in a plain text file\n")
    console.print(f"[dim]Version {__version__}[/dim]\n")

    console.print("[bold]Usage:[/bold]")
    console.print(escape("  ticklist [--file PATH] COMMAND [OPTIONS]"))
    console.print("  ticklist                    [dim]# Launch interactive REPL (default)[/dim]\n")

    console.print("[bold]Commands:[/bold]")

    commands = [
        ("add", "Create a new task", 'ticklist add "Task description"'),
        ("ls", "List tasks", "ticklist ls [--json] [--raw]"),
        ("done", "Mark task(s) as done", "ticklist done <id>[,<id>...]"),
        ("undone", "Mark task(s) as not done", "ticklist undone <id>[,<id>...]"),
        ("edit", "Change task description", 'ticklist edit <id> "New description"'),
        ("rm", "Delete task(s)", "ticklist rm <id>[,<id>...]"),
        ("repl", "Launch interactive REPL", "ticklist repl"),
        ("version", "Show version", "ticklist version"),
        ("help", "Show this help message", "ticklist help"),
    ]

    for cmd, desc, example in commands:
        console.print(f"  [green]{cmd:8}[/green] {desc}")
        console.print(f"           [dim]{example}[/dim]\n")

    console.print("[bold]Task file:[/bold]")
    console.print(f"  {config.get_tasks_path(ctx.obj)}")
    console.print("  [dim]Override with --file PATH or the TICKLIST_FILE environment variable[/dim]\n")

    console.print("[bold]Task IDs:[/bold]")
    console.print("  IDs are always 1..N. After rm, later tasks move up by one.\n")


@app.command()
def repl(ctx: typer.Context):
    """
    Launch interactive REPL mode.

    The REPL provides:
    - Command history (up/down arrows)
    - Autocomplete (Tab key)
    - All task management commands
    - Exit with Ctrl+D or type 'exit' (saves on exit)

    Example:
        ticklist repl
    """
    # Import here to avoid loading REPL dependencies for one-shot commands
    from ...repl import main as repl_main

    try:
        repl_main(ctx.obj)
    except Exception as e:
        error_console.print(f"[red]Error starting REPL:[/red] {e}")
        raise typer.Exit(1)
