"""JSON file repository for task storage."""

import json
import logging
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError

from ..exceptions import StoreLoadError, StoreSaveError
from ..models import TaskStore

logger = logging.getLogger(__name__)


class JsonFileRepository:
    """
    Repository for a task store kept in a single JSON file.

    The file holds every task plus the id counter:

        {"tasks": [{"id": 1, "description": "...", "status": "Todo"}], "next_id": 2}

    Saves replace the file atomically, so readers see either the old or
    the new content.
    """

    def __init__(self, path: Path) -> None:
        """
        Initialize repository.

        Args:
            path: Path to the tasks file (need not exist yet)
        """
        self.path = path

    def load(self) -> TaskStore:
        """Load the store, or return an empty one if the file is missing."""
        if not self.path.exists():
            logger.debug("No %s found, starting with an empty store", self.path)
            return TaskStore()

        try:
            contents = self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise StoreLoadError(self.path, f"invalid UTF-8: {e}") from e
        except OSError as e:
            raise StoreLoadError(self.path, str(e)) from e

        try:
            data = json.loads(contents)
        except json.JSONDecodeError as e:
            raise StoreLoadError(self.path, f"invalid JSON: {e}") from e
        except RecursionError as e:
            raise StoreLoadError(self.path, "invalid JSON: nested too deeply") from e

        if not isinstance(data, dict):
            raise StoreLoadError(self.path, "expected a JSON object at top level")

        try:
            store = TaskStore.model_validate(data)
        except ValidationError as e:
            raise StoreLoadError(self.path, _format_validation_error(e)) from e

        logger.info("Loaded %d task(s) from %s", len(store.tasks), self.path)
        return store

    def save(self, store: TaskStore) -> None:
        """Write the full store to disk, replacing the file atomically."""
        content = json.dumps(store.model_dump(mode="json"), indent=2, ensure_ascii=False) + "\n"
        directory = self.path.parent

        try:
            directory.mkdir(parents=True, exist_ok=True)
            # Temp file must live in the target directory for os.replace to be atomic
            fd, tmp_name = tempfile.mkstemp(
                dir=directory, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(content)
                    f.flush()
                    os.fsync(f.fileno())
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StoreSaveError(self.path, str(e)) from e

        logger.info("Saved %d task(s) to %s", len(store.tasks), self.path)


def _format_validation_error(error: ValidationError) -> str:
    """Condense a pydantic ValidationError into one line."""
    parts = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"]) or "root"
        parts.append(f"{location}: {detail['msg']}")
    return "; ".join(parts)
