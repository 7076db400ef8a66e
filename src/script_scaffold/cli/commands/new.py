"""``script-scaffold new`` command."""

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
from script_scaffold.cli.console import ScriptConsole
from script_scaffold.scaffolder import HELLO_WORLD_TEMPLATE


def register_new_command(
    app: typer.Typer,
    *,
    console: ScriptConsole,
    scaffolder_factory: ScaffolderFactory = default_scaffolder_factory,
) -> None:
    @app.command("new")
    def new(
        file_name: str = typer.Argument(..., help="Script file to create (.csx is appended when no extension is given)"),
        directory: Optional[Path] = typer.Option(
            None, "--directory", "-d", help="Folder to create the script in (defaults to the current directory)"
        ),
        template: str = typer.Option(
            HELLO_WORLD_TEMPLATE, "--template", "-t", help="Bundled template to render"
        ),
    ) -> None:
        """Create a single script file from a template."""
        target = resolve_directory(directory)
        scaffolder = scaffolder_factory(console)
        run_scaffold_step(console, lambda: scaffolder.create_new_script_file(file_name, target, template))
