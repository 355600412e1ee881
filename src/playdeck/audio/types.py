"""Player type definitions.

The playlist engine never decodes audio; it hands a file path to whatever
implements :class:`Player` and does not wait for the result.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class BackendType(Enum):
    SYSTEM = "system"
    MOCK = "mock"


class Player(Protocol):
    def request_playback(self, source_path: str) -> None: ...
