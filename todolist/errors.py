"""Exception types raised by the task store and its storage."""


class TodoError(Exception):
    """Base class for todolist errors"""


class TaskValidationError(TodoError, ValueError):
    """Rejected input (empty task text, unknown filter). Nothing was changed."""


class StorageError(TodoError):
    """Reading or writing local storage failed"""
