"""Blocking execution of external commands (chmod, reg, dotnet)."""

from __future__ import annotations

import logging
import subprocess
from typing import Optional, Sequence

logger = logging.getLogger(__name__)

COMMAND_NOT_FOUND = 127


class CommandRunner:
    """Run external programs synchronously with no timeout.

    ``execute`` is used for best-effort conveniences whose outcome the caller
    does not inspect, so it reports failures through the exit status only.
    """

    def execute(self, program: str, arguments: Sequence[str]) -> int:
        cmd = [program, *arguments]
        logger.debug("Executing %s", " ".join(cmd))
        try:
            completed = subprocess.run(cmd, check=False, capture_output=True, text=True)
        except OSError as exc:
            logger.debug("Could not start %s: %s", program, exc)
            return COMMAND_NOT_FOUND
        if completed.returncode != 0:
            logger.debug(
                "%s exited with %s: %s", program, completed.returncode, completed.stderr.strip()
            )
        return completed.returncode

    def capture(self, program: str, arguments: Sequence[str]) -> Optional[str]:
        """Return stdout of a successful run, or None when the program fails or is missing."""
        cmd = [program, *arguments]
        logger.debug("Capturing output of %s", " ".join(cmd))
        try:
            result = subprocess.run(cmd, check=True, capture_output=True, text=True)
        except (OSError, subprocess.CalledProcessError) as exc:
            logger.debug("Command %s failed: %s", program, exc)
            return None
        return result.stdout.strip()
