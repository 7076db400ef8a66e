"""Idempotent provisioning primitives."""

from .manifest import create_import_manifest
from .patcher import LaunchConfigPatcher, PatchOutcome, PatchRule, tool_path_pattern
from .platform import (
    PlatformAdapter,
    UnixPlatformAdapter,
    WindowsPlatformAdapter,
    normalize_path,
    select_platform_adapter,
)
from .provisioner import FileProvisioner, ProvisionStatus, ProvisionTarget, TemplateSource

__all__ = [
    "FileProvisioner",
    "LaunchConfigPatcher",
    "PatchOutcome",
    "PatchRule",
    "PlatformAdapter",
    "ProvisionStatus",
    "ProvisionTarget",
    "TemplateSource",
    "UnixPlatformAdapter",
    "WindowsPlatformAdapter",
    "create_import_manifest",
    "normalize_path",
    "select_platform_adapter",
    "tool_path_pattern",
]
