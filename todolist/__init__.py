"""
TODOLIST - Single-List Task Manager
===================================

Add, toggle, edit, delete and filter short text tasks, persisted
to a local storage directory.

Usage:
    from todolist import TaskStore, TaskFilter

    store = TaskStore.open(".todo")     # seeds 3 sample tasks on first run
    task = store.add("Buy milk")
    store.toggle(task.id)

    store.set_filter(TaskFilter.COMPLETED)
    for task in store.visible_tasks():
        print(task.text)
    print(store.active_count())
"""

from .schema import (
    Task,
    TaskFilter,
    SAMPLE_TASKS,
    create_sample_tasks
)

from .errors import TodoError, TaskValidationError, StorageError
from .storage import LocalStorage
from .manager import TaskStore

__version__ = "1.0.0"
__all__ = [
    "TaskStore",
    "LocalStorage",
    "Task",
    "TaskFilter",
    "SAMPLE_TASKS",
    "create_sample_tasks",
    "TodoError",
    "TaskValidationError",
    "StorageError"
]
