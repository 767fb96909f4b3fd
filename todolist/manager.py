"""
TODOLIST - Task Store
=====================
Owns the ordered task list and the current filter.
Every mutation is written to local storage before it becomes visible
in memory, so the persisted snapshot never lags behind the store.
"""

import json
from typing import Optional, List, Union
import logging

from pydantic import ValidationError

from .errors import TaskValidationError
from .schema import Task, TaskFilter, TaskListAdapter, create_sample_tasks, utcnow
from .storage import LocalStorage

logger = logging.getLogger("todolist")

DEFAULT_STORAGE_KEY = "tasks"


class TaskStore:
    """
    In-memory task list backed by a LocalStorage key.

    Tasks are kept newest first. The filter is view state only
    and is never written.
    """

    def __init__(self, storage: LocalStorage, storage_key: str = DEFAULT_STORAGE_KEY):
        self.storage = storage
        self.storage_key = storage_key
        self.tasks: List[Task] = []
        self.filter: TaskFilter = TaskFilter.ALL
        self._next_id: int = 1

    @classmethod
    def open(
        cls,
        storage_dir: str = ".todo",
        storage_key: str = DEFAULT_STORAGE_KEY
    ) -> "TaskStore":
        """Load the store from disk, seeding sample tasks on first run"""
        store = cls(LocalStorage(storage_dir), storage_key=storage_key)
        store.load()
        store.seed()
        return store

    # ========================================
    # PERSISTENCE OPERATIONS
    # ========================================

    def _serialize(self, tasks: List[Task]) -> str:
        return json.dumps([task.to_record() for task in tasks])

    def _commit(self, tasks: List[Task]) -> None:
        """Persist tasks, then make them the in-memory state"""
        self.storage.set_item(self.storage_key, self._serialize(tasks))
        self.tasks = tasks
        logger.info(f"✅ Saved {len(tasks)} tasks ({self.active_count()} active)")

    def save(self) -> None:
        """Write the full task list under the storage key"""
        self._commit(list(self.tasks))

    def load(self) -> List[Task]:
        """Read the snapshot; absent or corrupt data loads as empty"""
        tasks: List[Task] = []
        try:
            raw = self.storage.get_item(self.storage_key)
        except UnicodeDecodeError as e:
            logger.warning(f"Ignoring corrupt task snapshot: {e.reason}")
            raw = ""

        if raw is None:
            logger.info(f"📂 No saved tasks under '{self.storage_key}'")
        else:
            try:
                tasks = TaskListAdapter.validate_json(raw)
            except ValidationError as e:
                logger.warning(f"Ignoring corrupt task snapshot: {e.error_count()} errors")
                tasks = []

            ids = [task.id for task in tasks]
            if len(ids) != len(set(ids)):
                logger.warning("Ignoring task snapshot with duplicate ids")
                tasks = []

            logger.info(f"📂 Loaded {len(tasks)} tasks from '{self.storage_key}'")

        self.tasks = tasks
        self._next_id = max((task.id for task in tasks), default=0) + 1
        return tasks

    def seed(self) -> bool:
        """Install the sample tasks if the store is empty"""
        if self.tasks:
            return False

        samples = create_sample_tasks()
        self._commit(samples)
        self._next_id = max(task.id for task in samples) + 1

        logger.info(f"🌱 Seeded {len(samples)} sample tasks")
        return True

    # ========================================
    # TASK OPERATIONS
    # ========================================

    def add(self, text: str) -> Task:
        """Create a task at the front of the list"""
        text = self._clean_text(text)

        task = Task(id=self._next_id, text=text, completed=False, created_at=utcnow())
        self._commit([task] + self.tasks)
        self._next_id += 1

        logger.info(f"➕ Added task: {task.text} ({task.id})")
        return task

    def toggle(self, task_id: int) -> Optional[Task]:
        """Flip a task's completed flag"""
        task = self.get(task_id)
        if task is None:
            logger.debug(f"Toggle ignored, no task {task_id}")
            return None

        updated = task.model_copy(update={"completed": not task.completed})
        self._commit(self._replace(updated))

        logger.info(f"🔁 Toggled task {task_id}: completed={updated.completed}")
        return updated

    def delete(self, task_id: int) -> bool:
        """Remove a task; False if there was nothing to remove"""
        remaining = [task for task in self.tasks if task.id != task_id]
        if len(remaining) == len(self.tasks):
            logger.debug(f"Delete ignored, no task {task_id}")
            return False

        self._commit(remaining)
        logger.info(f"🗑️ Deleted task {task_id}")
        return True

    def edit(self, task_id: int, new_text: str) -> Optional[Task]:
        """Replace a task's text"""
        text = self._clean_text(new_text)

        task = self.get(task_id)
        if task is None:
            logger.debug(f"Edit ignored, no task {task_id}")
            return None

        updated = task.model_copy(update={"text": text})
        self._commit(self._replace(updated))

        logger.info(f"✏️ Edited task {task_id}: {text}")
        return updated

    def clear_completed(self) -> int:
        """Remove every completed task; returns how many went"""
        remaining = [task for task in self.tasks if not task.completed]
        removed = len(self.tasks) - len(remaining)

        self._commit(remaining)
        logger.info(f"🧹 Cleared {removed} completed tasks")
        return removed

    def set_filter(self, task_filter: Union[TaskFilter, str]) -> TaskFilter:
        try:
            self.filter = TaskFilter(task_filter)
        except ValueError:
            choices = ", ".join(f.value for f in TaskFilter)
            raise TaskValidationError(
                f"Unknown filter: {task_filter!r} (expected one of: {choices})"
            ) from None
        return self.filter

    # ========================================
    # DERIVED VIEWS
    # ========================================

    def visible_tasks(self) -> List[Task]:
        """Tasks matching the current filter, in store order"""
        if self.filter == TaskFilter.ACTIVE:
            return [task for task in self.tasks if not task.completed]
        if self.filter == TaskFilter.COMPLETED:
            return [task for task in self.tasks if task.completed]
        return list(self.tasks)

    def active_count(self) -> int:
        return sum(1 for task in self.tasks if not task.completed)

    def completed_count(self) -> int:
        return sum(1 for task in self.tasks if task.completed)

    # ========================================
    # HELPER METHODS
    # ========================================

    def get(self, task_id: int) -> Optional[Task]:
        """Get task by ID"""
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    def _replace(self, updated: Task) -> List[Task]:
        return [updated if task.id == updated.id else task for task in self.tasks]

    @staticmethod
    def _clean_text(text: str) -> str:
        text = (text or "").strip()
        if not text:
            raise TaskValidationError("Please enter a task!")
        return text

    def __len__(self) -> int:
        return len(self.tasks)

    def __repr__(self) -> str:
        return (
            f"TaskStore(tasks={len(self.tasks)}, filter={self.filter.value}, "
            f"key={self.storage_key!r})"
        )
