"""Task service - Business logic for task operations.

This service layer sits between commands and repositories, providing
a clean API for task-related business logic.
"""

from __future__ import annotations

from tasktracker_cli.adapters.json_file import JsonTaskRepository
from tasktracker_cli.config import get_config_manager
from tasktracker_cli.models import Task, TaskStatus
from tasktracker_cli.repositories import TaskRepository


class TaskService:
    """Service for task business logic."""

    def __init__(self, task_repository: TaskRepository):
        """Initialize the task service.

        Args:
            task_repository: TaskRepository implementation for data access
        """
        self.repository = task_repository

    def add_task(self, description: str) -> Task:
        """Create a new task with status ``todo``."""
        return self.repository.add(description)

    def update_task(self, task_id: int, description: str) -> Task:
        """Replace the description of an existing task."""
        return self.repository.update(task_id, description)

    def delete_task(self, task_id: int) -> Task:
        """Delete a task, returning the record that was removed."""
        return self.repository.delete(task_id)

    def mark_in_progress(self, task_id: int) -> Task:
        """Mark a task as in progress, whatever its current status."""
        return self.repository.mark(task_id, TaskStatus.IN_PROGRESS)

    def mark_done(self, task_id: int) -> Task:
        """Mark a task as done, whatever its current status."""
        return self.repository.mark(task_id, TaskStatus.DONE)

    def list_tasks(self, status: TaskStatus | str | None = None) -> list[Task]:
        """List tasks in insertion order.

        Args:
            status: Only return tasks with this status

        Returns:
            List of Task objects
        """
        if status is not None:
            status = TaskStatus(status)
        return self.repository.list_all(status)


def get_task_service() -> TaskService:
    """Build a TaskService over the configured task file."""
    config_manager = get_config_manager()
    repository = JsonTaskRepository(
        config_manager.tasks_file(),
        id_strategy=config_manager.config.storage.id_strategy,
    )
    return TaskService(repository)
