"""Repository protocol for task store backends."""

from typing import Protocol

from ..models import TaskStore


class RepositoryProtocol(Protocol):
    """Interface for task store persistence.

    A repository always reads and writes the whole store; there are no
    incremental updates.
    """

    def load(self) -> TaskStore:
        """Load the task store.

        Returns:
            The persisted store, or an empty one if nothing was saved yet.

        Raises:
            StoreLoadError: If persisted data exists but cannot be parsed.
        """
        ...

    def save(self, store: TaskStore) -> None:
        """Persist the full task store, replacing what was there.

        Args:
            store: The store to write.

        Raises:
            StoreSaveError: If the write fails. Previous content is kept.
        """
        ...
