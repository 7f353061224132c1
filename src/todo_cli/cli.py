"""todo - command line todo list manager."""

import logging
import sys
from datetime import date
from pathlib import Path

import click

from .adapters.click_prompter import ClickPrompter
from .adapters.json_store import JsonTaskStore
from .config import load_config
from .core.errors import TodoError
from .core.listing import ListOptions
from .render import format_projects, format_task_line
from .workflows import (
    CreationDeclined,
    add_task,
    convert_file,
    edit_task,
    get_store,
    list_projects,
    list_tasks,
    mark_done,
    set_priority,
)


def today() -> date:
    return date.today()


@click.group()
@click.version_option(package_name="todo-cli")
@click.option(
    "--file",
    "todo_file",
    envvar="TODO_FILE",
    default=None,
    help="Task file to use (default: todo.json in the current directory)",
)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, todo_file: str | None, debug: bool):
    """A command line todo list manager."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )

    config = load_config()
    ctx.obj = {
        "config": config,
        "store": get_store(config, todo_file),
        "prompter": ClickPrompter(),
    }


def _fail(e: Exception) -> None:
    click.echo(f"Error: {e}", err=True)
    sys.exit(1)


def _declined() -> None:
    click.echo("File not created. Exiting.")
    sys.exit(0)


@main.command()
@click.argument("text", nargs=-1, required=True)
@click.pass_obj
def add(obj, text: tuple[str, ...]):
    """Add a new todo item (markers: @context P:project T:tag Due:date)."""
    try:
        position = add_task(obj["store"], obj["prompter"], " ".join(text), today())
    except CreationDeclined:
        _declined()
    except TodoError as e:
        _fail(e)
    click.echo(f"Added todo item {position}")


@main.command("list")
@click.option("--all", "show_all", is_flag=True, help="Show all items including done items")
@click.option("--pr", "by_priority", is_flag=True, help="Sort by priority")
@click.option("--hide-waiting", is_flag=True, help="Hide items in the waiting context (@WF)")
@click.argument("age_filter", required=False)
@click.pass_obj
def list_cmd(obj, show_all: bool, by_priority: bool, hide_waiting: bool, age_filter: str | None):
    """List todo items.

    AGE_FILTER keeps items older than the given age: +1d, +2w, +3m, +1y.
    """
    config = obj["config"]
    options = ListOptions(
        show_all=show_all,
        by_priority=by_priority,
        age_filter=age_filter,
        hide_waiting=hide_waiting,
        waiting_context=config.waiting_context,
    )
    try:
        rows = list_tasks(obj["store"], obj["prompter"], options, today())
    except CreationDeclined:
        _declined()
    except TodoError as e:
        _fail(e)

    if not rows:
        click.echo("No todo items found")
        return

    for row in rows:
        click.echo(format_task_line(row), color=config.color_flag)


@main.command()
@click.argument("position", type=int)
@click.pass_obj
def done(obj, position: int):
    """Mark a todo item as done."""
    try:
        completed = mark_done(obj["store"], obj["prompter"], position, today())
    except CreationDeclined:
        _declined()
    except TodoError as e:
        _fail(e)

    if completed:
        click.echo(f"Todo item {position} marked as done")
    else:
        click.echo("Cancelled")


@main.command()
@click.argument("priority")
@click.argument("position", type=int)
@click.pass_obj
def pr(obj, priority: str, position: int):
    """Set (A-Z) or clear the priority of a todo item."""
    try:
        task = set_priority(obj["store"], obj["prompter"], priority, position)
    except CreationDeclined:
        _declined()
    except TodoError as e:
        _fail(e)

    if task.priority:
        click.echo(f"Set priority for todo item {position}")
    else:
        click.echo(f"Cleared priority for todo item {position}")


@main.command()
@click.argument("position", type=int)
@click.pass_obj
def edit(obj, position: int):
    """Edit a todo item interactively."""
    try:
        edit_task(obj["store"], obj["prompter"], position, today())
    except CreationDeclined:
        _declined()
    except TodoError as e:
        _fail(e)
    click.echo(f"\nTodo item {position} updated successfully")


@main.command()
@click.pass_obj
def projects(obj):
    """List all unique projects."""
    try:
        names = list_projects(obj["store"], obj["prompter"])
    except CreationDeclined:
        _declined()
    except TodoError as e:
        _fail(e)
    click.echo(format_projects(names), color=obj["config"].color_flag)


@main.command()
@click.argument("input_file", type=click.Path(path_type=Path))
@click.option("--output", "-o", default=None, help="Output JSON file (defaults to the task file)")
@click.pass_obj
def convert(obj, input_file: Path, output: str | None):
    """Convert a todo.txt file to the JSON task format."""
    target = JsonTaskStore(output) if output else obj["store"]
    try:
        count = convert_file(input_file, target, obj["prompter"], today())
    except TodoError as e:
        _fail(e)

    if count is None:
        click.echo("Cancelled")
        return
    click.echo(f"Converted {count} todo items from '{input_file}' to '{target.path}'")


if __name__ == "__main__":
    main()
