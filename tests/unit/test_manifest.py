"""Tests for import manifest generation and assembly detection."""

from __future__ import annotations

from pathlib import Path, PureWindowsPath

from script_scaffold.provision.assembly import is_assembly
from script_scaffold.provision.manifest import create_import_manifest, sdk_directory


def _aspnet_dir(runtime_root: Path) -> Path:
    return runtime_root.parent.parent / "Microsoft.AspNetCore.App" / runtime_root.name


def test_sdk_directory_substitutes_runtime_name(runtime_root: Path) -> None:
    assert sdk_directory("Microsoft.AspNetCore.App", runtime_root) == _aspnet_dir(runtime_root)


def test_manifest_lists_valid_assemblies_only(runtime_root: Path, write_assembly) -> None:
    aspnet = _aspnet_dir(runtime_root)
    write_assembly(aspnet / "Beta.dll")
    write_assembly(aspnet / "Alpha.dll")
    write_assembly(aspnet / "native.dll", managed=False)
    write_assembly(aspnet / "module.dll", with_assembly_row=False)
    (aspnet / "garbage.dll").write_bytes(b"not a PE file")
    write_assembly(aspnet / "readme.txt")

    manifest = create_import_manifest("Microsoft.AspNetCore.App", runtime_root, line_ending="\n")

    prefix = str(aspnet).replace("\\", "/")
    assert manifest == (
        f'#r "{prefix}/Alpha.dll"\n'
        f'#r "{prefix}/Beta.dll"\n'
    )


def test_manifest_empty_when_sdk_directory_missing(runtime_root: Path) -> None:
    assert create_import_manifest("Microsoft.WindowsDesktop.App", runtime_root) == ""


def test_manifest_empty_when_runtime_unknown() -> None:
    assert create_import_manifest("Microsoft.AspNetCore.App", None) == ""


def test_manifest_empty_when_no_valid_assemblies(runtime_root: Path, write_assembly) -> None:
    aspnet = _aspnet_dir(runtime_root)
    write_assembly(aspnet / "native.dll", managed=False)
    assert create_import_manifest("Microsoft.AspNetCore.App", runtime_root) == ""


def test_manifest_paths_use_forward_slashes(monkeypatch) -> None:
    runtime = PureWindowsPath(r"C:\Program Files\dotnet\shared\Microsoft.NETCore.App\8.0.1")
    found = [PureWindowsPath(r"C:\Program Files\dotnet\shared\Microsoft.AspNetCore.App\8.0.1\A.dll")]

    class FakeDirectory:
        def __init__(self, value):
            self.value = value

        def is_dir(self) -> bool:
            return True

        def glob(self, pattern: str):
            return iter(found)

    monkeypatch.setattr("script_scaffold.provision.manifest.Path", FakeDirectory)
    monkeypatch.setattr("script_scaffold.provision.manifest.is_assembly", lambda path: True)

    manifest = create_import_manifest("Microsoft.AspNetCore.App", runtime, line_ending="\n")

    assert manifest == '#r "C:/Program Files/dotnet/shared/Microsoft.AspNetCore.App/8.0.1/A.dll"\n'
    assert "\\" not in manifest


def test_is_assembly_accepts_managed_image(tmp_path: Path, write_assembly) -> None:
    assert is_assembly(write_assembly(tmp_path / "a.dll")) is True


def test_is_assembly_rejects_native_and_modules(tmp_path: Path, write_assembly) -> None:
    assert is_assembly(write_assembly(tmp_path / "native.dll", managed=False)) is False
    assert is_assembly(write_assembly(tmp_path / "module.dll", with_assembly_row=False)) is False


def test_is_assembly_rejects_truncated_and_missing_files(tmp_path: Path) -> None:
    truncated = tmp_path / "truncated.dll"
    truncated.write_bytes(b"MZ" + b"\x00" * 10)
    assert is_assembly(truncated) is False
    assert is_assembly(tmp_path / "missing.dll") is False
