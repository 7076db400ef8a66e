"""CLI helpers exposed for other modules."""

from .console import ScriptConsole

__all__ = ["ScriptConsole"]
