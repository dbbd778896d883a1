"""Delete command - Remove a task."""

import typer

from tasktracker_cli.services.task_service import get_task_service
from tasktracker_cli.utils.ui.console import get_console

from .decorators import command_wrapper

console = get_console()


@command_wrapper
def delete(
    task_id: int = typer.Argument(..., metavar="ID", help="Task ID"),
) -> None:
    """Delete a task."""
    task = get_task_service().delete_task(task_id)
    console.print(f"Task deleted successfully (ID: {task.id})")
