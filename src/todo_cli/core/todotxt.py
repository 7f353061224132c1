"""Import of plain todo.txt style lines.

    (A) Call mom @phone P:Family T:weekly S:2025/11/29 D:2025/11/30 Due:2025-12-01

The leading (X) priority is optional; S: and D: carry start and done dates.
"""

from datetime import date

from .dates import parse_absolute_date, resolve_date
from .errors import ConversionError, TodoError
from .markers import CONTEXT, DUE, PROJECT, TAG, classify_token
from .tasks import Task


def _split_priority(line: str) -> tuple[str | None, str]:
    """Strip a leading '(X) ' priority, if present."""
    if len(line) > 3 and line[0] == "(" and line[2] == ")" and line[1].isascii() and line[1].isalpha():
        return line[1].upper(), line[3:].lstrip()
    return None, line


def parse_txt_line(line: str, reference_date: date) -> Task:
    """Parse one todo.txt line; a missing S: defaults to reference_date."""
    priority, remaining = _split_priority(line.strip())

    words: list[str] = []
    context = project = None
    tags: list[str] = []
    start_date = done_date = due_date = None

    for word in remaining.split():
        prefix = word[:2]
        if prefix in ("S:", "s:") and len(word) > 2:
            start_date = parse_absolute_date(word[2:])
            continue
        if prefix in ("D:", "d:") and len(word) > 2:
            done_date = parse_absolute_date(word[2:])
            continue

        marker = classify_token(word)
        if marker is None:
            words.append(word)
            continue
        kind, value = marker
        if kind == CONTEXT:
            context = context or value
        elif kind == PROJECT:
            project = project or value
        elif kind == TAG:
            tags.append(value)
        elif kind == DUE and due_date is None:
            due_date = resolve_date(value, reference_date)

    return Task(
        description=" ".join(words),
        start_date=start_date or reference_date,
        priority=priority,
        context=context,
        project=project,
        tags=tags,
        done_date=done_date,
        due_date=due_date,
    )


def parse_txt(text: str, reference_date: date) -> list[Task]:
    """Parse a whole todo.txt file, skipping blank lines."""
    tasks = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            tasks.append(parse_txt_line(line, reference_date))
        except TodoError as e:
            raise ConversionError(f"line {lineno}: {e}") from e
    return tasks
