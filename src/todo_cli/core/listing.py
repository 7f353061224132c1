"""Listing pipeline - filters and ordering for the list view."""

from dataclasses import dataclass
from datetime import date

from .dates import parse_duration
from .tasks import (
    WAITING_CONTEXT,
    Task,
    filter_older_than,
    filter_open,
    filter_waiting,
    sort_tasks,
)


@dataclass
class ListOptions:
    """Flags accepted by the list command."""

    show_all: bool = False
    by_priority: bool = False  # accepted for --pr; ordering is the same
    age_filter: str | None = None
    hide_waiting: bool = False
    waiting_context: str = WAITING_CONTEXT


@dataclass
class ListedTask:
    """A task ready for rendering."""

    position: int
    task: Task
    overdue: bool


def number_tasks(tasks: list[Task]) -> list[tuple[int, Task]]:
    """Attach 1-based file positions."""
    return list(enumerate(tasks, start=1))


def build_listing(
    tasks: list[Task],
    options: ListOptions,
    as_of: date,
) -> list[ListedTask]:
    """
    Apply done/age/waiting filters, then the tiered sort.

    Pure function - no I/O. Raises InvalidDuration for a bad age filter.
    options.by_priority is not read: the tiers already order prioritized
    tasks by priority, so --pr and the default view list the same order.
    """
    threshold = parse_duration(options.age_filter) if options.age_filter else None

    entries = number_tasks(tasks)
    if not options.show_all:
        entries = filter_open(entries)
    if threshold is not None:
        entries = filter_older_than(entries, threshold, as_of)
    if options.hide_waiting:
        entries = filter_waiting(entries, options.waiting_context)

    return [
        ListedTask(position=pos, task=t, overdue=t.is_overdue(as_of))
        for pos, t in sort_tasks(entries)
    ]
