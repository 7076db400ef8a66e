"""Helpers shared by the command modules."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

import typer

from script_scaffold.cli.console import ScriptConsole
from script_scaffold.exceptions import ScaffoldError, TemplateNotFoundError
from script_scaffold.scaffolder import Scaffolder
from script_scaffold.template.loader import available_templates

ScaffolderFactory = Callable[[ScriptConsole], Scaffolder]


def default_scaffolder_factory(console: ScriptConsole) -> Scaffolder:
    return Scaffolder(console=console)


def resolve_directory(directory: Optional[Path]) -> Path:
    target = (directory or Path.cwd()).expanduser()
    if not target.is_dir():
        raise typer.BadParameter(f"Directory does not exist: {target}")
    return target.resolve()


def run_scaffold_step(console: ScriptConsole, step: Callable[[], object]) -> None:
    """Run a scaffolding step, turning fatal failures into exit code 1."""
    try:
        step()
    except TemplateNotFoundError as exc:
        console.write_error(str(exc))
        console.write_normal(f"Available templates: {', '.join(available_templates())}")
        raise typer.Exit(1)
    except (OSError, ScaffoldError) as exc:
        console.write_error(str(exc))
        raise typer.Exit(1)
