"""Folder initialization for C# script projects.

``Scaffolder.initialize_folder`` lays down, in order:

- ``.vscode/launch.json``: debugger configuration (patched on re-runs)
- ``omnisharp.json``: editor configuration pinned to the probed target framework
- ``main.csx`` (or a caller-chosen script)
- ``httpserver.csx``: a minimal ASP.NET Core script
- ``base/aspnet.csx`` and ``base/winui.csx``: import manifests

Every step is idempotent; running it again over an initialized folder leaves
all file contents as they are.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path, PurePath
from typing import Optional

from script_scaffold.cli.console import ScriptConsole
from script_scaffold.core.constants import (
    ASPNETCORE_SDK_NAME,
    DEFAULT_SETTINGS,
    WINDOWS_DESKTOP_SDK_NAME,
    ScaffoldSettings,
)
from script_scaffold.core.environment import ScriptEnvironment, detect_environment
from script_scaffold.core.process import CommandRunner
from script_scaffold.provision.manifest import manifest_generator
from script_scaffold.provision.patcher import LaunchConfigPatcher, PatchOutcome
from script_scaffold.provision.platform import PlatformAdapter, select_platform_adapter
from script_scaffold.provision.provisioner import FileProvisioner, ProvisionStatus, TemplateSource
from script_scaffold.template.loader import read_template

logger = logging.getLogger(__name__)

HELLO_WORLD_TEMPLATE = "helloworld.csx.template"
ASPNET_TEMPLATE = "aspnet.csx.template"
OMNISHARP_TEMPLATE = "omnisharp.json.template"


class Scaffolder:
    def __init__(
        self,
        console: Optional[ScriptConsole] = None,
        environment: Optional[ScriptEnvironment] = None,
        runner: Optional[CommandRunner] = None,
        platform: Optional[PlatformAdapter] = None,
        settings: ScaffoldSettings = DEFAULT_SETTINGS,
    ):
        self.runner = runner or CommandRunner()
        self.console = console or ScriptConsole()
        self.environment = environment or detect_environment(self.runner)
        self.platform = platform or select_platform_adapter(self.environment, self.runner)
        self.settings = settings
        self.provisioner = FileProvisioner(self.platform, self.console)

    def initialize_folder(self, file_name: Optional[str], current_directory: Path) -> None:
        current_directory = Path(current_directory)
        logger.info("Initializing %s", current_directory)
        self.create_launch_configuration(current_directory)
        self.create_omnisharp_configuration(current_directory)
        self.create_script_file(file_name, current_directory)
        self.create_default_aspnet_script_file(current_directory)
        self.create_import_script_file(current_directory, self.settings.aspnet_import_file, ASPNETCORE_SDK_NAME)
        self.create_import_script_file(
            current_directory, self.settings.winui_import_file, WINDOWS_DESKTOP_SDK_NAME
        )

    def create_new_script_file(self, file_name: str, directory: Path, template_name: str) -> ProvisionStatus:
        """Create a script from a template, adding the script extension when missing."""
        self.console.write_normal(f"Creating '{file_name}'")
        if not PurePath(file_name).suffix:
            file_name = f"{file_name}{self.settings.script_extension}"
        path = Path(directory) / file_name
        return self.provisioner.provision(path, TemplateSource(template_name), decorate=True)

    def register_file_handler(self) -> None:
        """Associate script files with the runner (Windows only)."""
        self.platform.register_file_handler()
        self.console.write_success("...[Registered]")

    def create_launch_configuration(self, current_directory: Path) -> PatchOutcome:
        self.console.write_normal("Creating VS Code launch configuration file")
        path = current_directory / self.settings.vscode_dir / self.settings.launch_file
        patcher = LaunchConfigPatcher(self.environment, self.console, self.settings)
        return patcher.apply(path)

    def create_omnisharp_configuration(self, current_directory: Path) -> ProvisionStatus:
        self.console.write_normal("Creating OmniSharp configuration file")
        path = current_directory / self.settings.omnisharp_file
        return self.provisioner.provision(path, self._render_omnisharp_configuration)

    def _render_omnisharp_configuration(self) -> str:
        settings = json.loads(read_template(OMNISHARP_TEMPLATE))
        settings.setdefault("script", {})["defaultTargetFramework"] = self.environment.target_framework
        return json.dumps(settings, indent=2)

    def create_script_file(self, file_name: Optional[str], current_directory: Path) -> ProvisionStatus:
        if file_name is None or not file_name.strip():
            return self.create_default_script_file(current_directory)
        return self.create_new_script_file(file_name, current_directory, HELLO_WORLD_TEMPLATE)

    def create_default_script_file(self, current_directory: Path) -> ProvisionStatus:
        self.console.out.write_line(f"Creating default script file '{self.settings.default_script_file}'")
        if any(current_directory.glob(f"*{self.settings.script_extension}")):
            self.console.write_highlighted("...Folder already contains one or more script files [Skipping]")
            return ProvisionStatus.SKIPPED
        path = current_directory / self.settings.default_script_file
        return self.provisioner.provision(path, TemplateSource(HELLO_WORLD_TEMPLATE), decorate=True)

    def create_default_aspnet_script_file(self, current_directory: Path) -> ProvisionStatus:
        name = self.settings.aspnet_script_file
        self.console.out.write_line(f"Creating default aspnet script file '{name}'")
        if (current_directory / name).exists():
            self.console.write_highlighted("...Folder already contains one or more aspnet script files [Skipping]")
            return ProvisionStatus.SKIPPED
        return self.provisioner.provision(current_directory / name, TemplateSource(ASPNET_TEMPLATE), decorate=True)

    def create_import_script_file(self, current_directory: Path, file_name: str, sdk_name: str) -> ProvisionStatus:
        self.console.out.write_line(f"Creating import script file '{file_name}'")
        import_dir = current_directory / self.settings.import_dir
        import_dir.mkdir(parents=True, exist_ok=True)
        path = import_dir / file_name
        if path.exists():
            self.console.write_highlighted(f"...Folder already contains {file_name} [Skipping]")
            return ProvisionStatus.SKIPPED
        return self.provisioner.provision(
            path, manifest_generator(sdk_name, self.environment.runtime_assembly_dir)
        )
