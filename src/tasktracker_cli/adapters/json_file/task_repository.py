"""JSON file implementation of TaskRepository.

The whole task list lives in one JSON array. Every public method re-reads the
file, applies one mutation and rewrites the complete array; nothing is cached
between calls.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from tasktracker_cli.models import (
    MARKABLE_STATUSES,
    StoreReadWriteError,
    StoreUnreadableError,
    Task,
    TaskNotFoundError,
    TaskStatus,
)
from tasktracker_cli.models.config_models import IdStrategy
from tasktracker_cli.repositories import TaskRepository

logger = logging.getLogger(__name__)

DEFAULT_TASKS_FILE = "tasks.json"

_TASK_LIST = TypeAdapter(list[Task])


def now_utc() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


class JsonTaskRepository(TaskRepository):
    """JSON file implementation of task repository."""

    def __init__(
        self,
        path: str | Path = DEFAULT_TASKS_FILE,
        *,
        id_strategy: IdStrategy = "max",
    ):
        """Initialize the JSON task repository.

        Args:
            path: Task file path. Relative paths resolve against the current
                working directory at call time.
            id_strategy: ``"max"`` assigns ``max(existing ids) + 1``;
                ``"length"`` assigns ``len(tasks) + 1``, which can repeat an id
                after a delete.
        """
        self.path = Path(path)
        self.id_strategy = id_strategy

    # ---- low-level helpers ----

    def _load(self) -> list[Task]:
        raw = self.path.read_bytes()
        tasks = _TASK_LIST.validate_json(raw)
        logger.debug("loaded %d task(s) from %s", len(tasks), self.path)
        return tasks

    def _save(self, tasks: list[Task]) -> None:
        self.path.write_bytes(_TASK_LIST.dump_json(tasks, by_alias=True))
        logger.debug("saved %d task(s) to %s", len(tasks), self.path)

    def _read_tasks(self) -> list[Task]:
        try:
            return self._load()
        except (OSError, ValidationError) as e:
            logger.warning("failed to read task file %s: %s", self.path, e)
            raise StoreReadWriteError(
                f"Could not read task file {self.path}: {_reason(e)}"
            ) from e

    def _write_tasks(self, tasks: list[Task]) -> None:
        try:
            self._save(tasks)
        except OSError as e:
            logger.warning("failed to write task file %s: %s", self.path, e)
            raise StoreReadWriteError(
                f"Could not write task file {self.path}: {_reason(e)}"
            ) from e

    @staticmethod
    def _find_index(tasks: list[Task], task_id: int) -> int:
        for index, task in enumerate(tasks):
            if task.id == task_id:
                return index
        raise TaskNotFoundError(task_id)

    def _next_id(self, tasks: list[Task]) -> int:
        if self.id_strategy == "length":
            return len(tasks) + 1
        return max((t.id for t in tasks), default=0) + 1

    # ---- public API ----

    def initialize(self) -> None:
        if self.path.exists():
            return
        self._save([])
        logger.info("created task file %s", self.path)

    def add(self, name: str) -> Task:
        try:
            self.initialize()
            tasks = self._load()
            now = now_utc()
            task = Task(
                id=self._next_id(tasks),
                name=name,
                status=TaskStatus.TODO,
                created_at=now,
                updated_at=now,
            )
            tasks.append(task)
            self._save(tasks)
        except (OSError, ValidationError) as e:
            logger.warning("failed to add task to %s: %s", self.path, e)
            raise StoreReadWriteError("Error adding task") from e

        logger.info("task added id=%s", task.id)
        return task

    def update(self, task_id: int, name: str) -> Task:
        tasks = self._read_tasks()
        task = tasks[self._find_index(tasks, task_id)]
        task.name = name
        task.updated_at = now_utc()
        self._write_tasks(tasks)
        logger.info("task updated id=%s", task_id)
        return task

    def delete(self, task_id: int) -> Task:
        tasks = self._read_tasks()
        removed = tasks.pop(self._find_index(tasks, task_id))
        self._write_tasks(tasks)
        logger.info("task deleted id=%s remaining=%d", task_id, len(tasks))
        return removed

    def mark(self, task_id: int, status: TaskStatus) -> Task:
        status = TaskStatus(status)
        if status not in MARKABLE_STATUSES:
            raise ValueError(
                f"Cannot mark a task as '{status}' "
                f"(expected one of: {', '.join(MARKABLE_STATUSES)})"
            )

        tasks = self._read_tasks()
        task = tasks[self._find_index(tasks, task_id)]
        task.status = status
        task.updated_at = now_utc()
        self._write_tasks(tasks)
        logger.info("task marked id=%s status=%s", task_id, status)
        return task

    def list_all(self, status: TaskStatus | None = None) -> list[Task]:
        try:
            tasks = self._load()
        except (OSError, ValidationError) as e:
            logger.warning("failed to list tasks from %s: %s", self.path, e)
            raise StoreUnreadableError() from e

        if status is None:
            return tasks
        status = TaskStatus(status)
        return [t for t in tasks if t.status == status]


def _reason(exc: Exception) -> str:
    if isinstance(exc, ValidationError):
        return "file is not a valid task list"
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    return str(exc)
