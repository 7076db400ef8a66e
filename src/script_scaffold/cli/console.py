"""Console sink used for scaffolding status lines."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.markup import escape


class _RawWriter:
    def __init__(self, console: Console):
        self._console = console

    def write_line(self, message: str = "") -> None:
        self._console.print(message, markup=False, highlight=False)


class ScriptConsole:
    """Severity-tagged line writers on top of a Rich console.

    Messages are printed with markup disabled; file paths routinely contain
    square brackets that Rich would otherwise swallow.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()
        self.out = _RawWriter(self.console)

    def write_normal(self, message: str) -> None:
        self.console.print(message, markup=False, highlight=False)

    def write_success(self, message: str) -> None:
        self.console.print(message, style="green", markup=False, highlight=False)

    def write_highlighted(self, message: str) -> None:
        self.console.print(message, style="yellow", markup=False, highlight=False)

    def write_error(self, message: str) -> None:
        self.console.print(f"[red]Error:[/red] {escape(message)}", highlight=False)
