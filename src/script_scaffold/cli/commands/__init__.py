"""CLI command modules for script-scaffold."""

from __future__ import annotations

import typer

from script_scaffold.cli.commands._common import ScaffolderFactory, default_scaffolder_factory
from script_scaffold.cli.commands.init import register_init_command
from script_scaffold.cli.commands.new import register_new_command
from script_scaffold.cli.commands.register import register_register_command
from script_scaffold.cli.console import ScriptConsole


def register_commands(
    app: typer.Typer,
    *,
    console: ScriptConsole,
    scaffolder_factory: ScaffolderFactory = default_scaffolder_factory,
) -> None:
    register_init_command(app, console=console, scaffolder_factory=scaffolder_factory)
    register_new_command(app, console=console, scaffolder_factory=scaffolder_factory)
    register_register_command(app, console=console, scaffolder_factory=scaffolder_factory)


__all__ = [
    "register_commands",
    "register_init_command",
    "register_new_command",
    "register_register_command",
]
