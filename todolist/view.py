"""
TODOLIST - Rendering
====================
Pure functions from a TaskStore to text, HTML or JSON.
Nothing here mutates the store; adapters call these after every change.
"""

import json
from html import escape
from typing import List

from .manager import TaskStore
from .schema import Task, TaskFilter

EMPTY_HINT = "Add some tasks to get started!"


def count_label(active: int) -> str:
    """'1 task left' / '3 tasks left'"""
    return f"{active} {'task' if active == 1 else 'tasks'} left"


def empty_message(task_filter: TaskFilter) -> str:
    if task_filter == TaskFilter.ALL:
        return "No tasks"
    return f"No tasks {task_filter.value}"


def render_text(store: TaskStore) -> str:
    """Terminal listing of the visible tasks plus the count line"""
    visible = store.visible_tasks()
    lines: List[str] = []

    if not visible:
        lines.extend([empty_message(store.filter), f"  {EMPTY_HINT}"])
    else:
        width = max(len(str(task.id)) for task in visible)
        for task in visible:
            mark = "x" if task.completed else " "
            lines.append(f"[{mark}] {task.id:>{width}}  {task.text}")

    lines.extend([
        "-" * 40,
        f"{count_label(store.active_count())} | filter: {store.filter.value}",
    ])
    return "\n".join(lines)


def _render_task_html(task: Task) -> str:
    css = "task-item completed" if task.completed else "task-item"
    checked = " checked" if task.completed else ""
    return (
        f'<div class="{css}" data-id="{task.id}">'
        f'<input type="checkbox" class="task-checkbox"{checked}>'
        f'<span class="task-text">{escape(task.text)}</span>'
        f'<button class="delete-btn">Delete</button>'
        f'</div>'
    )


def render_html(store: TaskStore) -> str:
    """HTML fragment for the task list; task text is always escaped"""
    visible = store.visible_tasks()

    if not visible:
        return (
            '<div class="empty-state">'
            f'<p>{escape(empty_message(store.filter))}</p>'
            f'<small>{EMPTY_HINT}</small>'
            '</div>'
        )

    return "\n".join(_render_task_html(task) for task in visible)


def render_json(store: TaskStore) -> str:
    payload = {
        "filter": store.filter.value,
        "active_count": store.active_count(),
        "tasks": [task.to_record() for task in store.visible_tasks()],
    }
    return json.dumps(payload, indent=2)
