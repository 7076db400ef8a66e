from __future__ import annotations

import io
from pathlib import Path
from typing import Callable, Optional

import pytest
from rich.console import Console

from script_scaffold.cli.console import ScriptConsole
from script_scaffold.core.environment import ScriptEnvironment

from tests.utils import RecordingRunner, build_pe_image


@pytest.fixture()
def runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture()
def script_console() -> ScriptConsole:
    return ScriptConsole(Console(file=io.StringIO(), force_terminal=False, soft_wrap=True))


@pytest.fixture()
def runtime_root(tmp_path: Path) -> Path:
    """A fake ``dotnet/shared`` tree with the NETCore runtime directory in place."""
    runtime_dir = tmp_path / "dotnet" / "shared" / "Microsoft.NETCore.App" / "8.0.1"
    runtime_dir.mkdir(parents=True)
    return runtime_dir


@pytest.fixture()
def make_environment(runtime_root: Path) -> Callable[..., ScriptEnvironment]:
    def factory(
        os_family: str = "linux",
        install_location: str = "/opt/dotnet-script",
        target_framework: str = "net8.0",
        runtime_assembly_dir: Optional[Path] = runtime_root,
    ) -> ScriptEnvironment:
        return ScriptEnvironment(
            os_family=os_family,
            target_framework=target_framework,
            install_location=install_location,
            runtime_assembly_dir=runtime_assembly_dir,
        )

    return factory


@pytest.fixture()
def write_assembly() -> Callable[..., Path]:
    def factory(path: Path, managed: bool = True, with_assembly_row: bool = True) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(build_pe_image(managed=managed, with_assembly_row=with_assembly_row))
        return path

    return factory
