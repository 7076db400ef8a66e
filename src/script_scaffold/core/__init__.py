"""Core utilities and configuration exports."""

from .constants import DEFAULT_SETTINGS, ScaffoldSettings
from .environment import ScriptEnvironment, detect_environment
from .process import CommandRunner

__all__ = [
    "CommandRunner",
    "DEFAULT_SETTINGS",
    "ScaffoldSettings",
    "ScriptEnvironment",
    "detect_environment",
]
