"""Main entry point for Task Tracker CLI."""

from pathlib import Path

import typer

from tasktracker_cli import __version__
from tasktracker_cli.commands import (
    add_command,
    config_command,
    delete_command,
    list_command,
    mark_command,
    update_command,
)
from tasktracker_cli.config import get_config_manager
from tasktracker_cli.utils.typer_helpers import SuggestingGroup
from tasktracker_cli.utils.ui.console import get_console

app = typer.Typer(
    name="task-cli",
    cls=SuggestingGroup,
    help="Track your tasks from the command line",
    no_args_is_help=True,
)

console = get_console()


@app.callback()
def cli(
    file: Path | None = typer.Option(
        None,
        "--file",
        "-f",
        help="Task file to use (default: $TASK_CLI_FILE, then storage.file)",
    ),
) -> None:
    """Track your tasks from the command line."""
    get_config_manager().file_override = str(file) if file else None


# Task commands
app.command("add")(add_command.add)
app.command("update")(update_command.update)
app.command("delete")(delete_command.delete)
app.command("mark-in-progress")(mark_command.mark_in_progress)
app.command("mark-done")(mark_command.mark_done)
app.command("list")(list_command.list_tasks)

# Subcommands
app.add_typer(config_command.app, name="config", help="Configuration management")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]Task Tracker CLI[/bold] version [cyan]{__version__}[/cyan]")


# Main entry point
def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
