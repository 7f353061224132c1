"""Functional core - pure business logic with no I/O."""

from .dates import format_date, parse_duration, resolve_date
from .errors import (
    AlreadyDone,
    ConversionError,
    InvalidDate,
    InvalidDuration,
    InvalidPriority,
    PositionOutOfRange,
    TodoError,
)
from .listing import ListedTask, ListOptions, build_listing
from .markers import ParsedMarkers, extract_markers
from .tasks import Task, collect_projects, is_older_than, normalize_priority, sort_tasks
from .todotxt import parse_txt, parse_txt_line

__all__ = [
    # Tasks
    "Task",
    "normalize_priority",
    "is_older_than",
    "sort_tasks",
    "collect_projects",
    # Dates
    "resolve_date",
    "parse_duration",
    "format_date",
    # Markers
    "ParsedMarkers",
    "extract_markers",
    # Listing
    "ListOptions",
    "ListedTask",
    "build_listing",
    # todo.txt
    "parse_txt",
    "parse_txt_line",
    # Errors
    "TodoError",
    "InvalidDate",
    "InvalidDuration",
    "PositionOutOfRange",
    "AlreadyDone",
    "InvalidPriority",
    "ConversionError",
]
