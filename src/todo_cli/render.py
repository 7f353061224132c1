"""Terminal formatting for todo items."""

import click

from .core.dates import format_date
from .core.listing import ListedTask
from .core.tasks import Task


def format_task_line(item: ListedTask) -> str:
    """
    One listing row.

    <pos> [(<pri>)] [Due:<due>] S:<start> <description> [@ctx] [P:proj] [T:tag]... [D:<done>]
    """
    task = item.task
    parts = [click.style(str(item.position), fg="cyan")]

    if task.priority:
        parts.append(f"({click.style(task.priority, fg='magenta')})")

    if task.due_date:
        due = format_date(task.due_date)
        if item.overdue:
            due = click.style(due, fg="red", bold=True)
        parts.append(f"Due:{due}")

    parts.append(f"S:{format_date(task.start_date)}")

    if task.description:
        parts.append(task.description)
    if task.context:
        parts.append(f"@{click.style(task.context, fg='green')}")
    if task.project:
        parts.append(f"P:{click.style(task.project, fg='yellow')}")
    parts.extend(f"T:{click.style(tag, fg='bright_blue')}" for tag in task.tags)

    if task.done_date:
        parts.append(f"D:{format_date(task.done_date)}")

    return " ".join(parts)


def format_plain_line(position: int, task: Task) -> str:
    """The listing row without colour, shown in confirmations."""
    return click.unstyle(format_task_line(ListedTask(position=position, task=task, overdue=False)))


def format_projects(projects: list[str]) -> str:
    if not projects:
        return "No projects found"
    lines = ["Projects:"]
    lines.extend(f"  P:{click.style(p, fg='yellow')}" for p in projects)
    return "\n".join(lines)
