"""Task store interface."""

from typing import Protocol

from todo_cli.core.tasks import Task


class TaskStore(Protocol):
    """Interface for loading and persisting the whole task collection."""

    def exists(self) -> bool:
        """Check if the backing store is present."""
        ...

    def create(self) -> None:
        """Create an empty store."""
        ...

    def load(self) -> list[Task]:
        """Load every task in file order."""
        ...

    def save(self, tasks: list[Task]) -> None:
        """Replace the stored collection with tasks."""
        ...
