"""``script-scaffold register`` command."""

from __future__ import annotations

import typer

from script_scaffold.cli.commands._common import (
    ScaffolderFactory,
    default_scaffolder_factory,
    run_scaffold_step,
)
from script_scaffold.cli.console import ScriptConsole


def register_register_command(
    app: typer.Typer,
    *,
    console: ScriptConsole,
    scaffolder_factory: ScaffolderFactory = default_scaffolder_factory,
) -> None:
    @app.command("register")
    def register() -> None:
        """Register dotnet-script as the handler for .csx files (Windows only)."""
        scaffolder = scaffolder_factory(console)
        run_scaffold_step(console, scaffolder.register_file_handler)
