"""Host environment probe.

Provides the facts scaffolding depends on:
- the OS family (``windows``, ``linux``, ``osx`` or whatever else the host reports)
- the target framework moniker written into ``omnisharp.json``
- the install location of the script runner (drives the launch configuration)
- the directory holding the running .NET runtime's own assemblies

Every value can be pinned through an environment variable, which is how tests
and cross-provisioning avoid touching the real ``dotnet`` installation.
"""

from __future__ import annotations

import logging
import os
import platform
import re
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from script_scaffold.core.constants import DEFAULT_TARGET_FRAMEWORK, NETCORE_RUNTIME_NAME
from script_scaffold.core.process import CommandRunner

logger = logging.getLogger(__name__)

OS_ENV = "SCRIPT_SCAFFOLD_OS"
INSTALL_LOCATION_ENV = "SCRIPT_SCAFFOLD_INSTALL_LOCATION"
TARGET_FRAMEWORK_ENV = "SCRIPT_SCAFFOLD_TARGET_FRAMEWORK"
RUNTIME_DIR_ENV = "SCRIPT_SCAFFOLD_RUNTIME_DIR"

# e.g. "Microsoft.NETCore.App 8.0.1 [/usr/share/dotnet/shared/Microsoft.NETCore.App]"
_RUNTIME_LINE_RE = re.compile(r"^(?P<name>\S+)\s+(?P<version>\S+)\s+\[(?P<root>[^\]]+)\]\s*$")

_SYSTEM_TO_FAMILY = {
    "windows": "windows",
    "linux": "linux",
    "darwin": "osx",
}


@dataclass(frozen=True)
class RuntimeInfo:
    """One ``dotnet --list-runtimes`` entry."""

    name: str
    version: str
    directory: Path

    @property
    def version_key(self) -> tuple[int, ...]:
        parts = []
        for piece in re.split(r"[.-]", self.version):
            if not piece.isdigit():
                break
            parts.append(int(piece))
        return tuple(parts)

    @property
    def target_framework(self) -> str:
        key = self.version_key
        if len(key) < 2:
            return DEFAULT_TARGET_FRAMEWORK
        if key[0] < 5:
            return f"netcoreapp{key[0]}.{key[1]}"
        return f"net{key[0]}.{key[1]}"


@dataclass(frozen=True)
class ScriptEnvironment:
    os_family: str
    target_framework: str
    install_location: str
    runtime_assembly_dir: Optional[Path] = None

    @property
    def is_windows(self) -> bool:
        return self.os_family == "windows"

    @property
    def is_unix(self) -> bool:
        return self.os_family in ("linux", "osx")


def detect_os_family() -> str:
    if env_os := os.environ.get(OS_ENV):
        return env_os.strip().lower()
    system = platform.system().lower()
    return _SYSTEM_TO_FAMILY.get(system, system)


def detect_install_location() -> str:
    """Return the directory the script runner is installed in.

    Resolution order:
    1. SCRIPT_SCAFFOLD_INSTALL_LOCATION environment variable
    2. Directory of ``dotnet-script`` found on PATH (symlinks resolved)
    3. The global tools directory ``~/.dotnet/tools``
    """
    if env_location := os.environ.get(INSTALL_LOCATION_ENV):
        return env_location
    executable = shutil.which("dotnet-script")
    if executable:
        return str(Path(executable).resolve().parent)
    return str(Path.home() / ".dotnet" / "tools")


def parse_runtime_listing(listing: str) -> list[RuntimeInfo]:
    """Parse the output of ``dotnet --list-runtimes``."""
    runtimes: list[RuntimeInfo] = []
    for line in listing.splitlines():
        match = _RUNTIME_LINE_RE.match(line.strip())
        if not match:
            continue
        runtimes.append(
            RuntimeInfo(
                name=match.group("name"),
                version=match.group("version"),
                directory=Path(match.group("root")) / match.group("version"),
            )
        )
    return runtimes


def find_netcore_runtime(runner: CommandRunner) -> Optional[RuntimeInfo]:
    listing = runner.capture("dotnet", ["--list-runtimes"])
    if not listing:
        logger.debug("No .NET runtimes reported; dotnet may not be installed")
        return None
    candidates = [rt for rt in parse_runtime_listing(listing) if rt.name == NETCORE_RUNTIME_NAME]
    if not candidates:
        return None
    return max(candidates, key=lambda rt: rt.version_key)


def detect_environment(runner: Optional[CommandRunner] = None) -> ScriptEnvironment:
    """Probe the host once and return an immutable snapshot."""
    runner = runner or CommandRunner()
    env_framework = os.environ.get(TARGET_FRAMEWORK_ENV)
    env_runtime_dir = os.environ.get(RUNTIME_DIR_ENV)

    runtime: Optional[RuntimeInfo] = None
    if not (env_framework and env_runtime_dir):
        runtime = find_netcore_runtime(runner)

    if env_framework:
        target_framework = env_framework
    elif runtime is not None:
        target_framework = runtime.target_framework
    else:
        target_framework = DEFAULT_TARGET_FRAMEWORK

    if env_runtime_dir:
        runtime_dir: Optional[Path] = Path(env_runtime_dir)
    elif runtime is not None:
        runtime_dir = runtime.directory
    else:
        runtime_dir = None

    environment = ScriptEnvironment(
        os_family=detect_os_family(),
        target_framework=target_framework,
        install_location=detect_install_location(),
        runtime_assembly_dir=runtime_dir,
    )
    logger.debug("Detected environment: %s", environment)
    return environment
