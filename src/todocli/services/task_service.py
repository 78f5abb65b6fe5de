"""Service for task CRUD operations."""

import logging
from collections.abc import Callable, Sequence

from ..models import Task, TaskFilter, TaskStore
from ..repositories import RepositoryProtocol

logger = logging.getLogger(__name__)


class TaskService:
    """Service for task CRUD operations.

    Each call loads the store, applies a single operation and, if the
    operation changed anything, saves the store back. A call that raises
    leaves the persisted data untouched.
    """

    def __init__(self, repository: RepositoryProtocol) -> None:
        self.repository = repository

    def add_task(self, description: str) -> Task:
        """Create a new Todo task."""
        store = self.repository.load()
        task = store.add(description)
        self.repository.save(store)
        logger.info("Task created: #%d", task.id)
        return task

    def list_tasks(self, task_filter: TaskFilter = TaskFilter.ALL) -> Sequence[Task]:
        """Get tasks matching the filter, in insertion order."""
        return self.repository.load().list_tasks(task_filter)

    def get_task(self, task_id: int) -> Task | None:
        """Get a task by ID."""
        return self.repository.load().find(task_id)

    def mark_done(self, task_id: int) -> Task:
        """Mark a task as done.

        Raises:
            TaskNotFoundError: If the task does not exist.
        """
        return self._mutate(lambda store: store.mark_done(task_id), "Task done")

    def mark_undone(self, task_id: int) -> Task:
        """Move a task back to Todo.

        Raises:
            TaskNotFoundError: If the task does not exist.
        """
        return self._mutate(lambda store: store.mark_undone(task_id), "Task reopened")

    def remove_task(self, task_id: int) -> Task:
        """Delete a task by ID.

        Raises:
            TaskNotFoundError: If the task does not exist.
        """
        return self._mutate(lambda store: store.remove(task_id), "Task removed")

    def clear_completed(self) -> int:
        """Delete all Done tasks and return how many were removed."""
        store = self.repository.load()
        count = store.clear_completed()
        self.repository.save(store)
        logger.info("Cleared %d completed task(s)", count)
        return count

    def _mutate(self, operation: Callable[[TaskStore], Task], action: str) -> Task:
        store = self.repository.load()
        task = operation(store)
        self.repository.save(store)
        logger.info("%s: #%d", action, task.id)
        return task
