"""Task store aggregate."""

import logging
from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..exceptions import TaskNotFoundError
from .task import Task, TaskFilter, TaskId, TaskStatus

logger = logging.getLogger(__name__)


class TaskStore(BaseModel):
    """In-memory collection of tasks plus the id counter.

    Tasks keep insertion order; no operation re-sorts them. ``next_id`` is
    always greater than every id ever issued, so ids of removed tasks are
    never handed out again.
    """

    model_config = ConfigDict(extra="ignore")

    tasks: list[Task] = Field(default_factory=list)
    next_id: TaskId = 1

    @field_validator("tasks")
    @classmethod
    def validate_unique_ids(cls, v: list[Task]) -> list[Task]:
        """Reject task lists that reuse an id."""
        ids = [task.id for task in v]
        if len(ids) != len(set(ids)):
            raise ValueError("Task IDs must be unique")
        return v

    @model_validator(mode="after")
    def repair_next_id(self) -> "TaskStore":
        """Raise next_id above the highest stored id if it lags behind."""
        if self.tasks:
            highest = max(task.id for task in self.tasks)
            if self.next_id <= highest:
                logger.warning(
                    "next_id %d does not exceed highest id %d, repairing to %d",
                    self.next_id,
                    highest,
                    highest + 1,
                )
                self.next_id = highest + 1
        return self

    # --- Mutations ---

    def add(self, description: str) -> Task:
        """Append a new Todo task and return it."""
        task = Task(id=self.next_id, description=description)
        self.tasks.append(task)
        self.next_id += 1
        return task

    def set_status(self, task_id: int, status: TaskStatus) -> Task:
        """Overwrite the status of a task.

        Raises:
            TaskNotFoundError: If no task has the given id.
        """
        task = self.find(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        task.status = status
        return task

    def mark_done(self, task_id: int) -> Task:
        return self.set_status(task_id, TaskStatus.DONE)

    def mark_undone(self, task_id: int) -> Task:
        return self.set_status(task_id, TaskStatus.TODO)

    def remove(self, task_id: int) -> Task:
        """Delete a task, keeping the order of the rest.

        Raises:
            TaskNotFoundError: If no task has the given id.
        """
        for index, task in enumerate(self.tasks):
            if task.id == task_id:
                return self.tasks.pop(index)
        raise TaskNotFoundError(task_id)

    def clear_completed(self) -> int:
        """Remove all Done tasks and return how many were removed."""
        before = len(self.tasks)
        self.tasks = [task for task in self.tasks if not task.is_done]
        return before - len(self.tasks)

    # --- Queries ---

    def find(self, task_id: int) -> Task | None:
        """Return the first task with the given id, or None."""
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    def list_tasks(self, task_filter: TaskFilter = TaskFilter.ALL) -> Sequence[Task]:
        """Return tasks passing the filter, in insertion order."""
        return tuple(task for task in self.tasks if task_filter.matches(task))
