"""Result types returned by playlist operations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from playdeck.core.song import Song


class OperationStatus(Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    EMPTY = "empty"
    IO_FAILURE = "io_failure"

    @property
    def ok(self) -> bool:
        return self is OperationStatus.OK


@dataclass(frozen=True)
class PlaybackOutcome:
    """What a play/next/prev call did.

    ``advanced`` is False when navigation hit a boundary and the same song was
    replayed.
    """

    status: OperationStatus
    song: Optional[Song] = None
    advanced: bool = False
