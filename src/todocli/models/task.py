"""Task domain model."""

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

# Strict so JSON booleans and numeric strings are not coerced into ids
TaskId = Annotated[int, Field(strict=True, gt=0)]


class TaskStatus(str, Enum):
    """Valid states for a task."""

    TODO = "Todo"
    DONE = "Done"


class TaskFilter(str, Enum):
    """Which tasks a listing should include."""

    ALL = "all"
    TODO = "todo"
    DONE = "done"

    def matches(self, task: "Task") -> bool:
        """Check if a task passes this filter."""
        if self is TaskFilter.TODO:
            return not task.is_done
        if self is TaskFilter.DONE:
            return task.is_done
        return True


class Task(BaseModel):
    """Represents a single to-do entry."""

    model_config = ConfigDict(extra="ignore")

    id: TaskId  # Issued by TaskStore, never reused
    description: str
    status: TaskStatus = TaskStatus.TODO

    @property
    def is_done(self) -> bool:
        """True when the task has been completed."""
        return self.status is TaskStatus.DONE
