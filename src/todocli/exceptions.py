"""Exceptions raised by the task store and its persistence layer."""

from pathlib import Path


class TodoError(Exception):
    """Base exception for todocli errors."""

    pass


class TaskNotFoundError(TodoError):
    """No task with the requested id exists."""

    def __init__(self, task_id: int) -> None:
        self.task_id = task_id
        super().__init__(f"Task #{task_id} not found.")


class StoreLoadError(TodoError):
    """The tasks file exists but is not a valid task store."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read tasks file {path}: {reason}")


class StoreSaveError(TodoError):
    """Writing the tasks file failed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot write tasks file {path}: {reason}")
