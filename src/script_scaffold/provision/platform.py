"""OS-specific decorations applied while provisioning scripts.

The adapter is chosen once from the probed environment and handed to the
provisioner, so call sites never branch on the OS themselves.
"""

from __future__ import annotations

import logging
import os
from pathlib import PurePath
from typing import Optional, Union

from script_scaffold.core.constants import SCRIPT_EXTENSION, SHEBANG
from script_scaffold.core.environment import ScriptEnvironment
from script_scaffold.core.process import CommandRunner

logger = logging.getLogger(__name__)

CHMOD = "/bin/chmod"
REG = "reg"
FILE_HANDLER_NAME = "dotnetscript"

EXTENSION_ASSOCIATION_ARGS = [
    "add",
    rf"HKCU\Software\classes\{SCRIPT_EXTENSION}",
    "/f",
    "/ve",
    "/t",
    "REG_SZ",
    "/d",
    FILE_HANDLER_NAME,
]
OPEN_COMMAND_ARGS = [
    "add",
    rf"HKCU\Software\Classes\{FILE_HANDLER_NAME}\Shell\Open\Command",
    "/f",
    "/ve",
    "/t",
    "REG_EXPAND_SZ",
    "/d",
    r'"%ProgramFiles%\dotnet\dotnet.exe" script "%1" -- %*',
]


def normalize_path(path: Union[str, PurePath]) -> str:
    """Return ``path`` with forward slashes, as embedded in generated files."""
    return str(path).replace("\\", "/")


class PlatformAdapter:
    """No-op adapter for hosts that get neither shebangs nor registry entries."""

    name = "generic"

    def __init__(self, runner: CommandRunner, line_ending: str = os.linesep):
        self.runner = runner
        self.line_ending = line_ending

    def decorate_content(self, content: str) -> str:
        return content

    def after_write(self, path: PurePath) -> None:
        return None

    def register_file_handler(self) -> None:
        return None


class UnixPlatformAdapter(PlatformAdapter):
    """Prepend a shebang and mark scripts executable."""

    name = "unix"

    def decorate_content(self, content: str) -> str:
        # a shebang line does not work with CRLF endings, so normalize the whole file
        body = content.replace("\r\n", "\n")
        if self.line_ending != "\n":
            body = body.replace("\n", self.line_ending)
        return SHEBANG + self.line_ending + body

    def after_write(self, path: PurePath) -> None:
        status = self.runner.execute(CHMOD, ["+x", str(path)])
        logger.debug("chmod +x %s returned %s", path, status)


class WindowsPlatformAdapter(PlatformAdapter):
    """Register the script runner as the handler for script files."""

    name = "windows"

    def register_file_handler(self) -> None:
        self.runner.execute(REG, EXTENSION_ASSOCIATION_ARGS)
        self.runner.execute(REG, OPEN_COMMAND_ARGS)


def select_platform_adapter(
    environment: ScriptEnvironment, runner: Optional[CommandRunner] = None
) -> PlatformAdapter:
    runner = runner or CommandRunner()
    if environment.is_windows:
        return WindowsPlatformAdapter(runner, line_ending="\r\n")
    if environment.is_unix:
        return UnixPlatformAdapter(runner, line_ending="\n")
    logger.debug("No platform decorations for OS family %r", environment.os_family)
    return PlatformAdapter(runner)
