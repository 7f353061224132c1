"""Ports - interfaces/protocols for external dependencies."""

from .prompter import Prompter
from .task_store import TaskStore

__all__ = [
    "TaskStore",
    "Prompter",
]
