"""Repository abstraction layer for Task Tracker CLI.

Defines the interface the service layer talks to, so the storage format
(currently a single JSON file) stays an adapter detail.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from tasktracker_cli.models import Task, TaskStatus


class TaskRepository(ABC):
    """Abstract base class for task persistence operations."""

    @abstractmethod
    def initialize(self) -> None:
        """Create an empty backing store if none exists. Idempotent."""
        raise NotImplementedError(
            "TaskRepository.initialize() must be implemented by adapter"
        )

    @abstractmethod
    def add(self, name: str) -> Task:
        """Create a new ``todo`` task.

        Args:
            name: Task description

        Returns:
            Created Task object with generated ID and timestamps

        Raises:
            StoreReadWriteError: If the store cannot be read or written
        """
        raise NotImplementedError("TaskRepository.add() must be implemented by adapter")

    @abstractmethod
    def update(self, task_id: int, name: str) -> Task:
        """Replace a task's name.

        Raises:
            TaskNotFoundError: If task does not exist
        """
        raise NotImplementedError(
            "TaskRepository.update() must be implemented by adapter"
        )

    @abstractmethod
    def delete(self, task_id: int) -> Task:
        """Remove a task and return the removed record.

        Raises:
            TaskNotFoundError: If task does not exist
        """
        raise NotImplementedError(
            "TaskRepository.delete() must be implemented by adapter"
        )

    @abstractmethod
    def mark(self, task_id: int, status: TaskStatus) -> Task:
        """Set a task's status to ``in-progress`` or ``done``.

        Raises:
            TaskNotFoundError: If task does not exist
            ValueError: If status is not a markable status
        """
        raise NotImplementedError("TaskRepository.mark() must be implemented by adapter")

    @abstractmethod
    def list_all(self, status: TaskStatus | None = None) -> list[Task]:
        """List tasks in insertion order, optionally filtered by status.

        Raises:
            StoreUnreadableError: If the store cannot be read or parsed
        """
        raise NotImplementedError(
            "TaskRepository.list_all() must be implemented by adapter"
        )
