"""Data models."""

from .store import TaskStore
from .task import Task, TaskFilter, TaskStatus

__all__ = [
    "Task",
    "TaskFilter",
    "TaskStatus",
    "TaskStore",
]
