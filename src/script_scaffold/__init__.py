"""
script-scaffold - set up folders for C# scripting with dotnet-script.

Usage:
    script-scaffold init [FILE_NAME]
    script-scaffold new <file-name>
    script-scaffold register
"""

import logging
import os

import typer
from rich.console import Console

from script_scaffold.cli.commands import register_commands
from script_scaffold.cli.console import ScriptConsole

__version__ = "0.1.0"

LOG_LEVEL_ENV = "SCRIPT_SCAFFOLD_LOG_LEVEL"

console = Console()

app = typer.Typer(
    name="script-scaffold",
    help="Scaffold script folders for dotnet-script: launch config, OmniSharp config, starter scripts",
    add_completion=False,
    no_args_is_help=True,
)


def resolve_log_level(name: str, default: int = logging.WARNING) -> int:
    """Map a level name such as ``info`` to its numeric value, falling back on unknown names."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def configure_logging(verbose: bool = False, debug: bool = False) -> None:
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = resolve_log_level(os.environ.get(LOG_LEVEL_ENV, "WARNING"))
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.callback()
def callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log scaffolding decisions"),
    debug: bool = typer.Option(False, "--debug", help="Log probes and external commands as well"),
) -> None:
    """Configure logging before any command runs."""
    configure_logging(verbose=verbose, debug=debug)


register_commands(app, console=ScriptConsole(console))


def main():
    app()


if __name__ == "__main__":
    main()
