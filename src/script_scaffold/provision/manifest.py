"""Import manifests exposing shared-framework assemblies to scripts."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, Optional

from script_scaffold.core.constants import NETCORE_RUNTIME_NAME
from script_scaffold.provision.assembly import is_assembly
from script_scaffold.provision.platform import normalize_path

logger = logging.getLogger(__name__)


def sdk_directory(sdk_name: str, runtime_dir: Path) -> Path:
    """Map the running runtime's directory onto the sibling SDK directory.

    ``.../shared/Microsoft.NETCore.App/8.0.1`` becomes
    ``.../shared/Microsoft.AspNetCore.App/8.0.1`` for the ASP.NET Core SDK.
    """
    return Path(str(runtime_dir).replace(NETCORE_RUNTIME_NAME, sdk_name))


def create_import_manifest(
    sdk_name: str,
    runtime_dir: Optional[Path],
    line_ending: str = os.linesep,
) -> str:
    """Return one ``#r`` directive per assembly of ``sdk_name``.

    The manifest is empty when the runtime directory is unknown, when the
    SDK directory is missing, or when it holds no assemblies.
    """
    if runtime_dir is None:
        logger.debug("No runtime directory known; %s manifest is empty", sdk_name)
        return ""
    directory = sdk_directory(sdk_name, runtime_dir)
    if not directory.is_dir():
        logger.debug("SDK directory %s does not exist", directory)
        return ""

    lines = [
        f'#r "{normalize_path(candidate)}"{line_ending}'
        for candidate in sorted(directory.glob("*.dll"))
        if is_assembly(candidate)
    ]
    return "".join(lines)


def manifest_generator(sdk_name: str, runtime_dir: Optional[Path]) -> Callable[[], str]:
    """Bind a manifest to a content source the provisioner can call lazily."""
    return lambda: create_import_manifest(sdk_name, runtime_dir)
