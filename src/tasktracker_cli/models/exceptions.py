"""Custom exceptions for Task Tracker CLI."""

from tasktracker_cli.utils.exit_codes import (
    ERROR_GENERAL,
    ERROR_NOT_FOUND,
    ERROR_STORAGE,
)


class TaskTrackerError(Exception):
    """Base exception for all Task Tracker errors, with the exit code to use."""

    exit_code = ERROR_GENERAL

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class TaskNotFoundError(TaskTrackerError):
    """Raised when no task with the given id exists."""

    exit_code = ERROR_NOT_FOUND

    def __init__(self, task_id: int):
        super().__init__(f"Task not found (ID: {task_id})")
        self.task_id = task_id


class StoreReadWriteError(TaskTrackerError):
    """Raised when the task file cannot be created, read, written or parsed."""

    exit_code = ERROR_STORAGE


class StoreUnreadableError(StoreReadWriteError):
    """Raised by listing when the task file cannot be read or parsed.

    An empty task file is not an error; it lists as an empty sequence.
    """

    def __init__(self, message: str = "No tasks found"):
        super().__init__(message)
