"""Progress reporting for the scaffolding pipeline."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional

from rich.console import Console

from .console import console as default_console
from .console import err_console as default_err_console


class Reporter:
    """Prints stage progress and messages.

    One reporter is created per run and handed to every stage that talks to
    the user, so output can be redirected or silenced in tests.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        err_console: Optional[Console] = None,
    ) -> None:
        self.console = console or default_console
        self.err_console = err_console or default_err_console

    @contextmanager
    def step(self, text: str, done: str) -> Iterator[None]:
        """Show a spinner with *text* while the block runs, then mark it done."""
        with self.console.status(text):
            yield
        self.console.print(f"[bold green]✓[/] {done}")
        self.console.print()

    def info(self, text: str = "") -> None:
        self.console.print(text)

    def success(self, text: str) -> None:
        self.console.print(text, style="green")

    def warn(self, text: str) -> None:
        self.console.print(text, style="yellow")

    def error(self, text: object) -> None:
        self.err_console.print()
        self.err_console.print(str(text), style="bold red", markup=False)
