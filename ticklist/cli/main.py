"""
FILE: ticklist/cli/main.py
PURPOSE: Typer-based CLI for one-shot task management commands
EXPORTS:
  - app (Typer application)
  - main() (entry point)
  - version() - Show version
  - help() - Show command list and usage
  - repl() - Launch interactive REPL
  - add() - Create task
  - ls() - List tasks
  - done() / undone() - Mark task(s) done / not done
  - edit() - Change task description
  - rm() - Delete task(s)
DEPENDENCIES:
  - typer (CLI framework)
  - rich (formatted output)
  - ticklist.core.service (session load/save)
  - ticklist.repl (interactive mode)
NOTES:
  - Global --file/-f picks the task file (else $TICKLIST_FILE, else ~/.ticklist/tasks.txt)
  - Every mutating command is load -> change -> save
  - Error messages go to stderr
  - Exit codes: 0=success, 1=error
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from .. import __version__
from ..logging_setup import setup_logging

# Typer app setup
app = typer.Typer(
    name="ticklist",
    help="Personal task list kept in a plain text file",
    add_completion=False,
)

# Rich console for formatted output
console = Console()
error_console = Console(stderr=True)


@app.callback(invoke_without_command=True)
def default_command(
    ctx: typer.Context,
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Task file to use"),
):
    """
    Default callback - launches REPL when no command is specified.

    If a subcommand is invoked, this only records the --file option.
    """
    setup_logging()
    ctx.obj = file

    if ctx.invoked_subcommand is None:
        from ..repl import main as repl_main
        try:
            repl_main(file)
        except Exception as e:
            error_console.print(f"[red]Error starting REPL:[/red] {e}")
            raise typer.Exit(1)


# Import command modules to register commands with app
from .commands import (
    # System commands
    version,
    help,
    repl,
    # Task commands
    add,
    ls,
    done,
    undone,
    edit,
    rm,
)


def main():
    """Main entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
