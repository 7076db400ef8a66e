"""Exception hierarchy for script-scaffold."""

from __future__ import annotations


class ScaffoldError(RuntimeError):
    """Base exception for scaffolding errors."""


class TemplateNotFoundError(ScaffoldError, FileNotFoundError):
    """Raised when a template identifier has no bundled template."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"Unknown template: {identifier}")
