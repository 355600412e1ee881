"""Bounded record of recently played songs."""

from __future__ import annotations

from collections import deque
from dataclasses import replace
from typing import Deque, Iterator, List

from playdeck.core.song import Song

DEFAULT_HISTORY_CAPACITY = 10


class HistoryBuffer:
    """Oldest-first FIFO; the oldest entry is evicted once capacity is reached."""

    def __init__(self, capacity: int = DEFAULT_HISTORY_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("History capacity must be positive")
        self._entries: Deque[Song] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._entries.maxlen or 0

    def record(self, song: Song) -> None:
        # snapshot, later edits to the playlist must not rewrite history
        self._entries.append(replace(song))

    def entries(self) -> List[Song]:
        return list(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Song]:
        return iter(list(self._entries))
