"""Service layer for Task Tracker CLI."""

from .task_service import TaskService, get_task_service

__all__ = ["TaskService", "get_task_service"]
