"""Command workflows shared by the CLI.

Each function loads the whole collection, applies at most one change in
memory, and saves once. Errors are raised before anything is written.
"""

import dataclasses
import logging
from datetime import date
from pathlib import Path

from .adapters.json_store import JsonTaskStore, StoreMissing
from .config import Config
from .core.dates import format_date, resolve_date
from .core.errors import AlreadyDone, ConversionError, PositionOutOfRange
from .core.listing import ListedTask, ListOptions, build_listing
from .core.markers import extract_markers
from .core.tasks import Task, collect_projects, is_clear_word, normalize_priority
from .core.todotxt import parse_txt
from .ports import Prompter, TaskStore
from .render import format_plain_line

logger = logging.getLogger(__name__)


class CreationDeclined(Exception):
    """User chose not to create a missing task file."""

    pass


def get_store(config: Config, override: str | None = None) -> JsonTaskStore:
    """Resolve the task file from an explicit path or config."""
    return JsonTaskStore(Path(override or config.todo_file))


def load_tasks(store: TaskStore, prompter: Prompter) -> list[Task]:
    """Load tasks, offering to create the store on first run."""
    try:
        return store.load()
    except StoreMissing as e:
        prompter.notify(str(e))
        if not prompter.confirm("Would you like to create it?"):
            raise CreationDeclined() from e
        store.create()
        prompter.notify("Created empty todo file")
        return []


def _task_at(tasks: list[Task], position: int) -> Task:
    if position < 1 or position > len(tasks):
        raise PositionOutOfRange(position)
    return tasks[position - 1]


def add_task(store: TaskStore, prompter: Prompter, text: str, today: date) -> int:
    """Parse markers out of text, append the task, return its position."""
    tasks = load_tasks(store, prompter)
    parsed = extract_markers(text, today)
    task = Task(
        description=parsed.description,
        start_date=today,
        context=parsed.context,
        project=parsed.project,
        tags=parsed.tags,
        due_date=parsed.due_date,
    )
    tasks.append(task)
    store.save(tasks)
    logger.debug(f"Added task {len(tasks)}: {task}")
    return len(tasks)


def list_tasks(
    store: TaskStore,
    prompter: Prompter,
    options: ListOptions,
    today: date,
) -> list[ListedTask]:
    """Filtered, tier-sorted rows for the list view."""
    return build_listing(load_tasks(store, prompter), options, today)


def mark_done(store: TaskStore, prompter: Prompter, position: int, today: date) -> bool:
    """
    Confirm and complete a task.

    Returns False if the user cancelled. Raises before prompting when the
    position is invalid or the task is already done.
    """
    tasks = load_tasks(store, prompter)
    task = _task_at(tasks, position)
    if task.is_done:
        raise AlreadyDone(position)

    prompter.notify("Mark this item as done?")
    prompter.notify(f"  {format_plain_line(position, task)}")
    if not prompter.confirm("Confirm"):
        return False

    task.done_date = today
    store.save(tasks)
    logger.debug(f"Task {position} marked done on {today}")
    return True


def set_priority(store: TaskStore, prompter: Prompter, value: str, position: int) -> Task:
    """Set (A-Z) or clear a task's priority."""
    tasks = load_tasks(store, prompter)
    task = _task_at(tasks, position)
    task.priority = normalize_priority(value)
    store.save(tasks)
    logger.debug(f"Task {position} priority set to {task.priority}")
    return task


def _optional(answer: str, current: str | None, prefix: str = "") -> str | None:
    """Apply an edit answer to an optional text field."""
    if not answer:
        return current
    if is_clear_word(answer):
        return None
    return answer.removeprefix(prefix) or None


def edit_task(store: TaskStore, prompter: Prompter, position: int, today: date) -> Task:
    """
    Re-prompt every field of a task.

    Enter keeps a value, 'clear' or 'none' empties an optional one. Every
    answer is validated before the task is touched.
    """
    tasks = load_tasks(store, prompter)
    task = _task_at(tasks, position)

    prompter.notify(f"Editing todo item {position}:")
    prompter.notify("Press Enter to keep current value, or type new value\n")

    description = prompter.ask("Description", task.description)
    priority = prompter.ask("Priority (A-Z, or 'clear')", task.priority or "none")
    context = prompter.ask("Context (without @)", task.context or "none")
    project = prompter.ask("Project (without P:)", task.project or "none")
    tags = prompter.ask("Tags (comma-separated, without T:)", ", ".join(task.tags) or "none")
    due = prompter.ask(
        "Due date (YYYY-MM-DD, +3d, +2w, or 'clear')",
        format_date(task.due_date) if task.due_date else "none",
    )

    changes: dict = {
        "context": _optional(context, task.context, "@"),
        "project": _optional(project, task.project, "P:"),
    }
    if description:
        changes["description"] = " ".join(description.split())
    if priority:
        changes["priority"] = None if is_clear_word(priority) else normalize_priority(priority)
    if tags:
        changes["tags"] = [] if is_clear_word(tags) else [t.strip() for t in tags.split(",") if t.strip()]
    if due:
        changes["due_date"] = None if is_clear_word(due) else resolve_date(due, today)

    updated = dataclasses.replace(task, **changes)
    tasks[position - 1] = updated
    store.save(tasks)
    logger.debug(f"Task {position} edited: {updated}")
    return updated


def list_projects(store: TaskStore, prompter: Prompter) -> list[str]:
    return collect_projects(load_tasks(store, prompter))


def convert_file(
    input_path: Path,
    output: JsonTaskStore,
    prompter: Prompter,
    today: date,
) -> int | None:
    """
    Convert a todo.txt file into a task store.

    Returns the number of converted items, or None if the user declined
    to overwrite an existing output file.
    """
    if not input_path.exists():
        raise ConversionError(f"Input file '{input_path}' does not exist")

    tasks = parse_txt(input_path.read_text(), today)

    if output.exists() and not prompter.confirm(
        f"Output file '{output.path}' already exists. Overwrite?"
    ):
        return None

    output.save(tasks)
    logger.debug(f"Converted {len(tasks)} items from {input_path} to {output.path}")
    return len(tasks)
