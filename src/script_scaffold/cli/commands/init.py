"""``script-scaffold init`` command."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from script_scaffold.cli.commands._common import (
    ScaffolderFactory,
    default_scaffolder_factory,
    resolve_directory,
    run_scaffold_step,
)
from script_scaffold.cli.commands.init_help import INIT_COMMAND_DOC
from script_scaffold.cli.console import ScriptConsole


def register_init_command(
    app: typer.Typer,
    *,
    console: ScriptConsole,
    scaffolder_factory: ScaffolderFactory = default_scaffolder_factory,
) -> None:
    def init(
        file_name: Optional[str] = typer.Argument(
            None, help="Script to create instead of main.csx (.csx is appended when no extension is given)"
        ),
        directory: Optional[Path] = typer.Option(
            None, "--directory", "-d", help="Folder to initialize (defaults to the current directory)"
        ),
    ) -> None:
        target = resolve_directory(directory)
        scaffolder = scaffolder_factory(console)
        run_scaffold_step(console, lambda: scaffolder.initialize_folder(file_name, target))

    init.__doc__ = INIT_COMMAND_DOC
    app.command("init")(init)
