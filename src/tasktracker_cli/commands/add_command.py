"""Command 'add' of task-cli"""

import typer

from tasktracker_cli.services.task_service import get_task_service
from tasktracker_cli.utils.ui.console import get_console

from .decorators import command_wrapper

console = get_console()


@command_wrapper
def add(
    description: str = typer.Argument(..., help="Task description"),
) -> None:
    """Add a new task."""
    task = get_task_service().add_task(description)
    console.print(f"Task added successfully (ID: {task.id})")
