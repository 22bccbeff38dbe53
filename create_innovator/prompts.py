"""
prompts.py

Responsibility: Interactive terminal I/O (questions, choices, status lines).

All prompting goes through `ConsoleUI`; the pipeline modules receive it as a
collaborator so tests can substitute a scripted UI. Cancelling a prompt
(Ctrl+C / Ctrl+D) raises `UserCancelled` instead of exiting here.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from contextlib import contextmanager

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import IntPrompt, Prompt

from create_innovator.errors import UserCancelled


class ConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    @contextmanager
    def _cancellable(self) -> Iterator[None]:
        try:
            yield
        except (KeyboardInterrupt, EOFError) as e:
            self.console.print()
            raise UserCancelled() from e

    def text(self, message: str, default: str | None = None) -> str:
        with self._cancellable():
            if default is None:
                return Prompt.ask(message, console=self.console)
            return Prompt.ask(message, console=self.console, default=default)

    def secret(self, message: str) -> str:
        with self._cancellable():
            return Prompt.ask(message, console=self.console, password=True)

    def select(self, message: str, options: Sequence[str], default: int = 0) -> int:
        """Show a numbered list and return the chosen index."""
        self.console.print(f"\n[bold]{escape(message)}[/bold]")
        for i, option in enumerate(options, 1):
            self.console.print(f"  {i}. {escape(option)}")
        with self._cancellable():
            choice = IntPrompt.ask(
                "Select",
                console=self.console,
                choices=[str(i) for i in range(1, len(options) + 1)],
                default=default + 1,
                show_choices=False,
            )
        return choice - 1

    def note(self, body: str, title: str = "") -> None:
        self.console.print(Panel(body, title=title or None, expand=False))

    @contextmanager
    def status(self, message: str) -> Iterator[None]:
        with self.console.status(message):
            yield

    def info(self, message: str) -> None:
        self.console.print(escape(message))

    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {escape(message)}")

    def warn(self, message: str) -> None:
        self.console.print(f"[yellow]Warning:[/yellow] {escape(message)}")

    def error(self, message: str) -> None:
        self.console.print(f"[red]Error:[/red] {escape(message)}")
