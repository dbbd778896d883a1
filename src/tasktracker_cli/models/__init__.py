"""Task Tracker CLI domain models.

Pydantic models for tasks and configuration, plus the exception hierarchy
raised by the task store.
"""

from .config_models import Config, OutputConfig, StorageConfig
from .exceptions import (
    StoreReadWriteError,
    StoreUnreadableError,
    TaskNotFoundError,
    TaskTrackerError,
)
from .task import MARKABLE_STATUSES, Task, TaskStatus

__all__ = [
    # Task models
    "Task",
    "TaskStatus",
    "MARKABLE_STATUSES",
    # Config models
    "Config",
    "StorageConfig",
    "OutputConfig",
    # Errors
    "TaskTrackerError",
    "TaskNotFoundError",
    "StoreReadWriteError",
    "StoreUnreadableError",
]
