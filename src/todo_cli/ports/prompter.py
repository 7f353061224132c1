"""Interactive prompt interface."""

from typing import Protocol


class Prompter(Protocol):
    """Interface for blocking yes/no and free-text questions."""

    def notify(self, message: str) -> None:
        """Show an informational line before a question."""
        ...

    def confirm(self, message: str) -> bool:
        """Ask a yes/no question."""
        ...

    def ask(self, label: str, current: str) -> str:
        """Ask for a new value. Empty string means keep current."""
        ...
