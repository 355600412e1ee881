"""Hand playback requests to an external program."""

from __future__ import annotations

import logging
import os
import subprocess
import sys
from typing import List, Optional, Sequence


logger = logging.getLogger(__name__)


def default_open_command(platform: str | None = None) -> List[str]:
    """Return the argv prefix of the desktop opener for ``platform``.

    Windows has no opener executable; an empty list means ``os.startfile``.
    """

    platform = platform or sys.platform
    if platform.startswith("win"):
        return []
    if platform == "darwin":
        return ["open"]
    return ["xdg-open"]


class SystemPlayer:
    """Launch an external player per request without waiting for it."""

    def __init__(self, command: Optional[Sequence[str]] = None) -> None:
        self._command = list(command) if command else default_open_command()

    @property
    def command(self) -> List[str]:
        return list(self._command)

    def request_playback(self, source_path: str) -> None:
        if not source_path:
            logger.warning("Song has no file path; nothing to play")
            return
        if not self._command:
            logger.debug("Opening %s with os.startfile", source_path)
            os.startfile(source_path)  # type: ignore[attr-defined]  # pylint: disable=no-member
            return
        cmd = [*self._command, source_path]
        logger.debug("Launching player: %s", cmd)
        subprocess.Popen(  # pylint: disable=consider-using-with
            cmd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
