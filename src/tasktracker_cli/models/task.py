"""Task data models."""

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class TaskStatus(StrEnum):
    """Task lifecycle status.

    The store does not enforce an order between states: any task can be
    marked ``in-progress`` or ``done`` at any time, and nothing moves a task
    back to ``todo``.
    """

    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"


# Statuses reachable through the mark operation.
MARKABLE_STATUSES = (TaskStatus.IN_PROGRESS, TaskStatus.DONE)


class Task(BaseModel):
    """Task model.

    Timestamps are stored under the camelCase keys used by the task file
    (``createdAt``/``updatedAt``); dump with ``by_alias=True`` to write them.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., ge=1)
    name: str
    status: TaskStatus = TaskStatus.TODO
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")

    def to_record(self) -> dict:
        """Return the task as a JSON-ready dict using the on-disk field names."""
        return self.model_dump(mode="json", by_alias=True)
