"""Create-or-skip provisioning of a single file."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Union

from script_scaffold.cli.console import ScriptConsole
from script_scaffold.provision.platform import PlatformAdapter
from script_scaffold.template.loader import read_template

logger = logging.getLogger(__name__)

ContentSource = Union[str, Callable[[], str]]


class ProvisionStatus(str, Enum):
    CREATED = "created"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class TemplateSource:
    """Content source backed by a bundled template."""

    identifier: str

    def __call__(self) -> str:
        return read_template(self.identifier)


@dataclass(frozen=True)
class ProvisionTarget:
    path: Path
    source: ContentSource
    decorate: bool = False

    def render(self) -> str:
        if callable(self.source):
            return self.source()
        return self.source


def read_text_file(path: Path) -> str:
    """Read ``path`` as UTF-8 keeping its line endings untouched."""
    with path.open("r", encoding="utf-8", newline="") as handle:
        return handle.read()


def write_text_file(path: Path, content: str) -> None:
    """Write ``content`` in one call as UTF-8 without BOM or newline translation."""
    path.write_text(content, encoding="utf-8", newline="")


class FileProvisioner:
    """Create a file from its content source unless it already exists.

    Existence alone decides: an existing file is never compared or rewritten.
    """

    def __init__(self, platform: PlatformAdapter, console: ScriptConsole):
        self.platform = platform
        self.console = console

    def provision(self, path: Path, source: ContentSource, decorate: bool = False) -> ProvisionStatus:
        return self.provision_target(ProvisionTarget(Path(path), source, decorate))

    def provision_target(self, target: ProvisionTarget) -> ProvisionStatus:
        path = target.path
        if path.exists():
            self.console.write_highlighted(f"...'{path}' already exists [Skipping]")
            return ProvisionStatus.SKIPPED

        content = target.render()
        if target.decorate:
            content = self.platform.decorate_content(content)

        path.parent.mkdir(parents=True, exist_ok=True)
        write_text_file(path, content)
        logger.debug("Wrote %d characters to %s", len(content), path)

        if target.decorate:
            self.platform.after_write(path)

        self.console.write_success(f"...'{path}' [Created]")
        return ProvisionStatus.CREATED
