"""Configuration management for todo-cli."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

TODO_HOME = Path(os.environ.get("TODO_HOME", Path.home() / ".config" / "todo-cli"))
CONFIG_FILE = TODO_HOME / "todo.conf"
DEFAULT_TODO_FILE = "todo.json"

COLOR_MODES = ("auto", "always", "never")


@dataclass
class Config:
    """todo-cli configuration."""

    todo_file: str = DEFAULT_TODO_FILE
    waiting_context: str = "WF"
    color: str = "auto"

    @property
    def color_flag(self) -> bool | None:
        """Value for click.echo(color=...): None lets click detect a TTY."""
        return {"always": True, "never": False}.get(self.color)


def _unquote(value: str) -> str:
    """Handle quoted values with inline comments: "value" # comment"""
    if value.startswith('"') or value.startswith("'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        if end_quote != -1:
            return value[1:end_quote]
        return value[1:]
    # Unquoted: strip inline comments
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from todo.conf file."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "todo_file":
                if value:
                    config.todo_file = value
            case "waiting_context":
                if value:
                    config.waiting_context = value.lstrip("@")
            case "color":
                if value.lower() in COLOR_MODES:
                    config.color = value.lower()
                else:
                    logger.warning(f"Ignoring COLOR={value!r}; expected one of {', '.join(COLOR_MODES)}")
            case _:
                logger.warning(f"Unknown config key in {path}: {key}")

    return config
