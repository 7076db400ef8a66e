"""Lookup of bundled template text by identifier."""

from __future__ import annotations

from importlib.resources import files

from script_scaffold.exceptions import TemplateNotFoundError

TEMPLATE_PACKAGE = "script_scaffold"
TEMPLATE_DIR = "templates"


def _template_root():
    return files(TEMPLATE_PACKAGE).joinpath(TEMPLATE_DIR)


def available_templates() -> list[str]:
    return sorted(child.name for child in _template_root().iterdir() if child.name.endswith(".template"))


def read_template(identifier: str) -> str:
    """Return the raw text of a bundled template.

    Args:
        identifier: Template file name, e.g. ``"launch.json.template"``

    Raises:
        TemplateNotFoundError: If no template with that name is bundled.
    """
    resource = _template_root().joinpath(identifier)
    if not resource.is_file():
        raise TemplateNotFoundError(identifier)
    with resource.open("r", encoding="utf-8", newline="") as handle:
        return handle.read()
