"""Default file names and markers used when scaffolding a script folder."""

from __future__ import annotations

from dataclasses import dataclass

SCRIPT_EXTENSION = ".csx"
TOOL_ENTRY_MODULE = "dotnet-script.dll"
GLOBAL_TOOL_MARKER = ".dotnet/tools"
NETCORE_RUNTIME_NAME = "Microsoft.NETCore.App"
ASPNETCORE_SDK_NAME = "Microsoft.AspNetCore.App"
WINDOWS_DESKTOP_SDK_NAME = "Microsoft.WindowsDesktop.App"
DEFAULT_TARGET_FRAMEWORK = "net8.0"
SHEBANG = "#!/usr/bin/env dotnet-script"


@dataclass(frozen=True)
class ScaffoldSettings:
    """Names of everything ``init`` lays down in a folder.

    Tests substitute their own instance to exercise orchestration with
    different paths.
    """

    default_script_file: str = "main.csx"
    aspnet_script_file: str = "httpserver.csx"
    import_dir: str = "base"
    aspnet_import_file: str = "aspnet.csx"
    winui_import_file: str = "winui.csx"
    vscode_dir: str = ".vscode"
    launch_file: str = "launch.json"
    omnisharp_file: str = "omnisharp.json"
    script_extension: str = SCRIPT_EXTENSION
    tool_entry_module: str = TOOL_ENTRY_MODULE
    global_tool_marker: str = GLOBAL_TOOL_MARKER


DEFAULT_SETTINGS = ScaffoldSettings()

__all__ = [
    "ASPNETCORE_SDK_NAME",
    "DEFAULT_SETTINGS",
    "DEFAULT_TARGET_FRAMEWORK",
    "GLOBAL_TOOL_MARKER",
    "NETCORE_RUNTIME_NAME",
    "SCRIPT_EXTENSION",
    "SHEBANG",
    "ScaffoldSettings",
    "TOOL_ENTRY_MODULE",
    "WINDOWS_DESKTOP_SDK_NAME",
]
