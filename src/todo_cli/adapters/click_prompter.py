"""Terminal prompt adapter backed by click."""

import click


class ClickPrompter:
    """
    Interactive prompts on the terminal.

    Implements Prompter protocol.
    """

    def notify(self, message: str) -> None:
        click.echo(message)

    def confirm(self, message: str) -> bool:
        return click.confirm(message, default=False)

    def ask(self, label: str, current: str) -> str:
        """Show the current value in brackets; Enter keeps it."""
        return click.prompt(f"{label} [{current}]", default="", show_default=False).strip()
