"""Shuffled traversal order over collection handles."""

from __future__ import annotations

import random
from typing import Iterable, List, Optional


class ShuffleView:
    """Random permutation of song handles with its own cursor.

    A view is built once from a snapshot of the linear order and never
    extended afterwards; enabling shuffle again builds a new one.
    """

    def __init__(self, handles: Iterable[int], rng: Optional[random.Random] = None) -> None:
        self._handles: List[int] = list(handles)
        (rng or random).shuffle(self._handles)
        self._index = 0

    def __len__(self) -> int:
        return len(self._handles)

    def __contains__(self, handle: object) -> bool:
        return handle in self._handles

    @property
    def index(self) -> int:
        return self._index

    def handles(self) -> List[int]:
        return list(self._handles)

    @property
    def current_handle(self) -> Optional[int]:
        if 0 <= self._index < len(self._handles):
            return self._handles[self._index]
        return None

    def advance(self) -> bool:
        if self._index + 1 < len(self._handles):
            self._index += 1
            return True
        return False

    def retreat(self) -> bool:
        if self._index > 0 and self._handles:
            self._index -= 1
            return True
        return False

    def rewind(self) -> bool:
        if not self._handles:
            return False
        self._index = 0
        return True

    def to_end(self) -> bool:
        if not self._handles:
            return False
        self._index = len(self._handles) - 1
        return True

    def move_to(self, handle: int) -> bool:
        try:
            self._index = self._handles.index(handle)
        except ValueError:
            return False
        return True

    def discard(self, handle: int) -> bool:
        """Drop ``handle`` from the permutation.

        Returns True when the cursor was on the removed handle. The cursor then
        lands on the successor, or the predecessor when the tail was removed.
        """
        try:
            position = self._handles.index(handle)
        except ValueError:
            return False
        del self._handles[position]
        was_current = position == self._index
        if position < self._index:
            self._index -= 1
        elif was_current and self._index >= len(self._handles):
            self._index = max(0, len(self._handles) - 1)
        return was_current
