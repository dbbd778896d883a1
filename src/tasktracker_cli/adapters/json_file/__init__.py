"""JSON file storage adapter."""

from .task_repository import DEFAULT_TASKS_FILE, JsonTaskRepository

__all__ = ["DEFAULT_TASKS_FILE", "JsonTaskRepository"]
