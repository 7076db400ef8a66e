"""Template management for script-scaffold."""

from .loader import available_templates, read_template

__all__ = ["available_templates", "read_template"]
