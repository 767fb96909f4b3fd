"""
TODOLIST - Task Schema Definition
=================================
Pydantic models for the task list and its persisted layout.

A snapshot is a JSON array of tasks, newest first:
    [{"id": 4, "text": "Buy milk", "completed": false,
      "createdAt": "2026-01-28T09:15:00Z"}, ...]
"""

from enum import Enum
from typing import List
from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TaskFilter(str, Enum):
    """View selectors (never persisted)"""
    ALL = "all"                 # Every task, store order
    ACTIVE = "active"           # Not completed
    COMPLETED = "completed"     # Completed only


class Task(BaseModel):
    """Individual to-do item"""
    model_config = ConfigDict(populate_by_name=True)

    id: int
    text: str
    completed: bool = False
    created_at: datetime = Field(default_factory=utcnow, alias="createdAt")

    @field_validator("text")
    @classmethod
    def _strip_text(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("task text must not be empty")
        return value

    def to_record(self) -> dict:
        """Persisted form (camelCase keys, ISO timestamp)"""
        return self.model_dump(mode="json", by_alias=True)


# The whole snapshot is validated in one pass
TaskListAdapter = TypeAdapter(List[Task])


# ============================================================
# FIRST-RUN SAMPLE TASKS
# ============================================================

SAMPLE_TASKS = [
    {"id": 1, "text": "Welcome to your ToDo app!"},
    {"id": 2, "text": "Click the checkbox to mark tasks complete"},
    {"id": 3, "text": "Double-click to edit a task"},
]


def create_sample_tasks() -> List[Task]:
    """Build the three tasks shown on an empty first run"""
    now = utcnow()
    return [Task(created_at=now, **sample) for sample in SAMPLE_TASKS]
