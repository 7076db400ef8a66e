"""Targeted patching of the VS Code launch configuration.

The launch configuration is the one provisioned file whose content can drift:
users hand-edit it, and a path-dependent install bakes the absolute path of
the runner's entry module into it. Re-running ``init`` therefore:

- writes the full template when the file is absent;
- for a global-tool install, swaps in the canonical template when the file
  differs from it (the whole file is tool-owned in that case);
- otherwise rewrites only the quoted entry-module path, leaving every other
  byte as the user left it.

The substitution pattern and its three capture groups are a contract with
``launch.json.template``; change them together.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from script_scaffold.cli.console import ScriptConsole
from script_scaffold.core.constants import DEFAULT_SETTINGS, ScaffoldSettings
from script_scaffold.core.environment import ScriptEnvironment
from script_scaffold.provision.platform import normalize_path
from script_scaffold.provision.provisioner import read_text_file, write_text_file
from script_scaffold.template.loader import read_template

logger = logging.getLogger(__name__)

LAUNCH_TEMPLATE = "launch.json.template"
GLOBAL_TOOL_LAUNCH_TEMPLATE = "globaltool.launch.json.template"
TOOL_PATH_PLACEHOLDER = "PATH_TO_DOTNET-SCRIPT"

# group 1: indentation and opening quote
# group 2: the path value, ending in the entry module name
# group 3: closing quote and the trailing comma
_PATTERN_HEAD = r'^([ \t]*")([^"\r\n]*'
_PATTERN_TAIL = r')("[ \t]*,)'


def tool_path_pattern(entry_module: str) -> str:
    return _PATTERN_HEAD + re.escape(entry_module) + _PATTERN_TAIL


class PatchOutcome(str, Enum):
    CREATED = "created"
    UPDATED = "updated"
    UNCHANGED = "unchanged"
    PATTERN_NOT_FOUND = "pattern_not_found"


@dataclass(frozen=True)
class PatchRule:
    """Either a full-content swap or a capture-preserving substitution."""

    content: Optional[str] = None
    pattern: Optional[re.Pattern[str]] = None
    value: Optional[str] = None

    @classmethod
    def full_content(cls, content: str) -> "PatchRule":
        return cls(content=content)

    @classmethod
    def substitution(cls, pattern: str, value: str) -> "PatchRule":
        return cls(pattern=re.compile(pattern, re.MULTILINE), value=value)

    def matches(self, current: str) -> bool:
        if self.pattern is None:
            return True
        return self.pattern.search(current) is not None

    def apply(self, current: str) -> Optional[str]:
        """Return the patched content, or None when ``current`` needs no change."""
        if self.pattern is None:
            updated = self.content
        else:
            updated = self.pattern.sub(lambda m: m.group(1) + self.value + m.group(3), current)
        if updated == current:
            return None
        return updated


class LaunchConfigPatcher:
    def __init__(
        self,
        environment: ScriptEnvironment,
        console: ScriptConsole,
        settings: ScaffoldSettings = DEFAULT_SETTINGS,
    ):
        self.environment = environment
        self.console = console
        self.settings = settings

    @property
    def is_global_tool(self) -> bool:
        location = normalize_path(self.environment.install_location).lower()
        return self.settings.global_tool_marker.lower() in location

    @property
    def tool_path(self) -> str:
        location = normalize_path(self.environment.install_location).rstrip("/")
        return f"{location}/{self.settings.tool_entry_module}"

    def render(self) -> str:
        if self.is_global_tool:
            return read_template(GLOBAL_TOOL_LAUNCH_TEMPLATE)
        return read_template(LAUNCH_TEMPLATE).replace(TOOL_PATH_PLACEHOLDER, self.tool_path)

    def rule(self) -> PatchRule:
        if self.is_global_tool:
            return PatchRule.full_content(read_template(GLOBAL_TOOL_LAUNCH_TEMPLATE))
        return PatchRule.substitution(tool_path_pattern(self.settings.tool_entry_module), self.tool_path)

    def apply(self, path: Path) -> PatchOutcome:
        if not path.exists():
            path.parent.mkdir(parents=True, exist_ok=True)
            write_text_file(path, self.render())
            self.console.write_success(f"...'{path}' [Created]")
            return PatchOutcome.CREATED

        current = read_text_file(path)
        rule = self.rule()
        if not rule.matches(current):
            logger.debug("No %s path field in %s", self.settings.tool_entry_module, path)
            self.console.write_highlighted(
                f"...'{path}' already exists, no {self.settings.tool_entry_module} path to update [Skipping]"
            )
            return PatchOutcome.PATTERN_NOT_FOUND

        updated = rule.apply(current)
        if updated is None:
            self.console.write_highlighted(f"...'{path}' already exists [Skipping]")
            return PatchOutcome.UNCHANGED

        write_text_file(path, updated)
        if self.is_global_tool:
            self.console.write_highlighted(f"...'{path}' Use global tool launch config [Updated]")
        else:
            self.console.write_highlighted(f"...'{path}' Fixed path to dotnet-script: '{self.tool_path}' [Updated]")
        return PatchOutcome.UPDATED
