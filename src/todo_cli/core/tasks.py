"""Pure task domain logic - no I/O dependencies."""

from dataclasses import dataclass, field
from datetime import date

from .dates import format_date, parse_stored_date
from .errors import InvalidPriority

WAITING_CONTEXT = "WF"
CLEAR_WORDS = ("clear", "none")


@dataclass
class Task:
    """A todo item as stored in the task file."""

    description: str
    start_date: date
    priority: str | None = None
    context: str | None = None
    project: str | None = None
    tags: list[str] = field(default_factory=list)
    done_date: date | None = None
    due_date: date | None = None

    @property
    def is_done(self) -> bool:
        return self.done_date is not None

    def is_overdue(self, as_of: date) -> bool:
        """Due date strictly before as_of."""
        return self.due_date is not None and self.due_date < as_of

    def is_waiting(self, waiting_context: str = WAITING_CONTEXT) -> bool:
        return self.context == waiting_context

    def age_days(self, as_of: date) -> int:
        """Whole days since the task was created."""
        return (as_of - self.start_date).days

    def to_record(self) -> dict:
        """Serialize to a JSON-ready dict; absent optionals are explicit None."""
        return {
            "priority": self.priority,
            "description": self.description,
            "context": self.context,
            "project": self.project,
            "tags": list(self.tags),
            "start_date": format_date(self.start_date),
            "done_date": format_date(self.done_date) if self.done_date else None,
            "due_date": format_date(self.due_date) if self.due_date else None,
        }

    @classmethod
    def from_record(cls, data: dict) -> "Task":
        """
        Create Task from a stored record.

        Raises KeyError, TypeError or InvalidDate for malformed records.
        """
        tags = data.get("tags") or []
        if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
            raise TypeError("tags must be a list of strings")
        priority = data.get("priority")
        return cls(
            description=str(data["description"]),
            start_date=parse_stored_date(data["start_date"]),
            priority=normalize_priority(str(priority)) if priority else None,
            context=_optional_text(data, "context"),
            project=_optional_text(data, "project"),
            tags=list(tags),
            done_date=parse_stored_date(data["done_date"]) if data.get("done_date") else None,
            due_date=parse_stored_date(data["due_date"]) if data.get("due_date") else None,
        )


def _optional_text(data: dict, key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise TypeError(f"{key} must be a string, got {type(value).__name__}")
    return value or None


def is_clear_word(value: str) -> bool:
    return value.strip().lower() in CLEAR_WORDS


def normalize_priority(value: str) -> str | None:
    """
    Validate a priority argument.

    'clear' (any case) -> None, a single letter -> upper-cased letter.
    """
    stripped = value.strip()
    if stripped.lower() == "clear":
        return None
    letter = stripped.upper()
    if len(letter) != 1 or not ("A" <= letter <= "Z"):
        raise InvalidPriority(value)
    return letter


def is_older_than(start_date: date, reference_date: date, threshold_days: int) -> bool:
    """Strictly older: exactly threshold_days old does not count."""
    return (reference_date - start_date).days > threshold_days


def filter_older_than(
    entries: list[tuple[int, Task]],
    threshold_days: int,
    reference_date: date,
) -> list[tuple[int, Task]]:
    """Keep entries whose task was created more than threshold_days ago."""
    return [
        (pos, t) for pos, t in entries if is_older_than(t.start_date, reference_date, threshold_days)
    ]


def filter_open(entries: list[tuple[int, Task]]) -> list[tuple[int, Task]]:
    """Drop completed tasks."""
    return [(pos, t) for pos, t in entries if not t.is_done]


def filter_waiting(
    entries: list[tuple[int, Task]],
    waiting_context: str = WAITING_CONTEXT,
) -> list[tuple[int, Task]]:
    """Drop tasks parked in the waiting context (exact match)."""
    return [(pos, t) for pos, t in entries if not t.is_waiting(waiting_context)]


def tier(task: Task) -> int:
    """
    Importance tier (0-3).

    0: due date + priority
    1: due date only
    2: priority only
    3: neither
    """
    if task.due_date and task.priority:
        return 0
    elif task.due_date:
        return 1
    elif task.priority:
        return 2
    else:
        return 3


def sort_tasks(entries: list[tuple[int, Task]]) -> list[tuple[int, Task]]:
    """
    Order (position, task) pairs by tier, then within each tier.

    Pure function - no I/O. sorted() is stable so equal keys keep input order.
    """

    def sort_key(entry: tuple[int, Task]) -> tuple:
        pos, t = entry
        level = tier(t)
        if level == 0:
            return (level, t.priority, t.due_date)
        elif level == 1:
            return (level, t.due_date)
        elif level == 2:
            return (level, t.priority)
        return (level, pos)

    return sorted(entries, key=sort_key)


def collect_projects(tasks: list[Task]) -> list[str]:
    """Distinct projects across done and open tasks, alphabetical."""
    return sorted({t.project for t in tasks if t.project})
