"""Update command - Change a task's description."""

import typer

from tasktracker_cli.services.task_service import get_task_service
from tasktracker_cli.utils.ui.console import get_console

from .decorators import command_wrapper

console = get_console()


@command_wrapper
def update(
    task_id: int = typer.Argument(..., metavar="ID", help="Task ID"),
    description: str = typer.Argument(..., help="New task description"),
) -> None:
    """Update a task."""
    task = get_task_service().update_task(task_id, description)
    console.print(f"Task updated successfully (ID: {task.id})")
