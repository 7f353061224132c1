"""JSON file task storage adapter."""

import json
import logging
import os
import tempfile
from pathlib import Path

from todo_cli.core.errors import TodoError
from todo_cli.core.tasks import Task

logger = logging.getLogger(__name__)


class StoreMissing(TodoError):
    """Raised when the task file does not exist yet."""

    pass


class StoreCorrupt(TodoError):
    """Raised when the task file exists but cannot be parsed."""

    pass


class JsonTaskStore:
    """
    JSON file task storage.

    Implements TaskStore protocol. The file holds a JSON array of task
    records in position order.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def exists(self) -> bool:
        return self.path.exists()

    def create(self) -> None:
        """Write an empty collection."""
        self.save([])

    def load(self) -> list[Task]:
        """Load all tasks. An empty file counts as an empty collection."""
        if not self.path.exists():
            raise StoreMissing(f"The file '{self.path}' does not exist")

        try:
            content = self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise StoreCorrupt(f"Cannot read '{self.path}': not valid UTF-8 ({e.reason})") from e
        if not content.strip():
            return []

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise StoreCorrupt(f"Cannot parse '{self.path}': {e}") from e

        if not isinstance(data, list):
            raise StoreCorrupt(f"Cannot parse '{self.path}': expected a list of todo items")

        tasks = []
        for index, record in enumerate(data, start=1):
            try:
                if not isinstance(record, dict):
                    raise TypeError(f"expected an object, got {type(record).__name__}")
                tasks.append(Task.from_record(record))
            except KeyError as e:
                raise StoreCorrupt(f"Todo item {index} in '{self.path}' is missing {e}") from e
            except (TypeError, TodoError) as e:
                raise StoreCorrupt(f"Todo item {index} in '{self.path}' is invalid: {e}") from e

        logger.debug(f"Loaded {len(tasks)} tasks from {self.path}")
        return tasks

    def save(self, tasks: list[Task]) -> None:
        """Write all tasks, replacing the file in one step."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps([t.to_record() for t in tasks], indent=2)

        fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", dir=self.path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        logger.debug(f"Saved {len(tasks)} tasks to {self.path}")
