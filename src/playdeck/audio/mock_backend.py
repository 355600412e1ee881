"""Mock player used by tests and e2e runs."""

from __future__ import annotations

import logging
from typing import List


logger = logging.getLogger(__name__)


class MockPlayer:
    """Records playback requests instead of launching anything."""

    def __init__(self) -> None:
        self.requests: List[str] = []

    def request_playback(self, source_path: str) -> None:
        self.requests.append(source_path)
        logger.info("[MOCK] Playing %s", source_path)

    @property
    def last_request(self) -> str | None:
        return self.requests[-1] if self.requests else None
