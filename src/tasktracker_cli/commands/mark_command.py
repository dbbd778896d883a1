"""Mark commands - Move a task to in-progress or done.

Transitions are not checked: a ``todo`` task can go straight to ``done``.
"""

import typer

from tasktracker_cli.services.task_service import get_task_service
from tasktracker_cli.utils.ui.console import get_console

from .decorators import command_wrapper

console = get_console()


@command_wrapper
def mark_in_progress(
    task_id: int = typer.Argument(..., metavar="ID", help="Task ID"),
) -> None:
    """Mark a task as in-progress."""
    task = get_task_service().mark_in_progress(task_id)
    console.print(f"Task marked as in-progress successfully (ID: {task.id})")


@command_wrapper
def mark_done(
    task_id: int = typer.Argument(..., metavar="ID", help="Task ID"),
) -> None:
    """Mark a task as done."""
    task = get_task_service().mark_done(task_id)
    console.print(f"Task marked as done successfully (ID: {task.id})")
