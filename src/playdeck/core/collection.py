"""Ordered song storage with a current-song cursor."""

from __future__ import annotations

import itertools
import logging
import random
from typing import Dict, Iterable, Iterator, List, NamedTuple, Optional

from playdeck.core.shuffle import ShuffleView
from playdeck.core.song import Song
from playdeck.core.status import OperationStatus


logger = logging.getLogger(__name__)

DEFAULT_PLAYLIST_NAME = "My Playlist"


class ListedSong(NamedTuple):
    position: int
    song: Song
    is_current: bool


class SongCollection:
    """Songs in insertion order, addressed internally by stable handles.

    Titles act as lookup keys but are not unique; every title-based operation
    acts on the first match in linear order.
    """

    def __init__(self, name: str = DEFAULT_PLAYLIST_NAME, songs: Iterable[Song] = ()) -> None:
        self.name = name
        self._songs: Dict[int, Song] = {}
        self._order: List[int] = []
        self._cursor: Optional[int] = None
        self._shuffle: Optional[ShuffleView] = None
        self._handles = itertools.count(1)
        for song in songs:
            self.add(song)

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[Song]:
        return (self._songs[handle] for handle in list(self._order))

    @property
    def current(self) -> Optional[Song]:
        if self._cursor is None:
            return None
        return self._songs[self._order[self._cursor]]

    @property
    def current_position(self) -> Optional[int]:
        return self._cursor

    @property
    def shuffle_enabled(self) -> bool:
        return self._shuffle is not None

    @property
    def shuffle_view(self) -> Optional[ShuffleView]:
        return self._shuffle

    def add(self, song: Song) -> None:
        handle = next(self._handles)
        self._songs[handle] = song
        self._order.append(handle)
        if self._cursor is None:
            self._cursor = len(self._order) - 1

    def get(self, title: str) -> Optional[Song]:
        position = self._find(title)
        if position is None:
            return None
        return self._songs[self._order[position]]

    def remove(self, title: str) -> OperationStatus:
        position = self._find(title)
        if position is None:
            logger.debug("Remove: no song titled %r", title)
            return OperationStatus.NOT_FOUND

        handle = self._order.pop(position)
        del self._songs[handle]

        was_current = position == self._cursor
        if self._cursor is not None:
            if position < self._cursor:
                self._cursor -= 1
            elif was_current:
                if position < len(self._order):
                    self._cursor = position
                elif self._order:
                    self._cursor = len(self._order) - 1
                else:
                    self._cursor = None

        if self._shuffle is not None:
            self._shuffle.discard(handle)
            if was_current:
                self._follow_shuffle_cursor()

        logger.debug("Removed %r from position %d", title, position)
        return OperationStatus.OK

    def modify(self, title: str, song: Song) -> OperationStatus:
        position = self._find(title)
        if position is None:
            logger.debug("Modify: no song titled %r", title)
            return OperationStatus.NOT_FOUND
        self._songs[self._order[position]] = song
        return OperationStatus.OK

    def toggle_favorite(self, title: str) -> OperationStatus:
        song = self.get(title)
        if song is None:
            return OperationStatus.NOT_FOUND
        song.favorite = not song.favorite
        return OperationStatus.OK

    def search(self, query: str) -> Iterator[Song]:
        for handle in self._order:
            song = self._songs[handle]
            if song.matches(query):
                yield song

    def all(self) -> Iterator[ListedSong]:
        for position, handle in enumerate(self._order):
            yield ListedSong(position, self._songs[handle], position == self._cursor)

    def shuffled(self) -> Iterator[Song]:
        """Songs in shuffle order; empty when shuffle is off."""
        if self._shuffle is None:
            return
        for handle in self._shuffle.handles():
            yield self._songs[handle]

    def total_duration(self) -> int:
        return sum(song.duration_seconds for song in self._songs.values())

    def sort_by_title(self) -> None:
        # list.sort is stable, equal titles keep their relative order
        self._order.sort(key=lambda handle: self._songs[handle].title)
        self._cursor = 0 if self._order else None
        if self._shuffle is not None and self._order:
            self._shuffle.move_to(self._order[0])

    def clear(self) -> None:
        self._songs.clear()
        self._order.clear()
        self._cursor = None
        self._shuffle = None

    def enable_shuffle(self, rng: Optional[random.Random] = None) -> None:
        self._shuffle = ShuffleView(self._order, rng)
        self._follow_shuffle_cursor()

    def disable_shuffle(self) -> None:
        self._shuffle = None
        self._cursor = 0 if self._order else None

    def step_forward(self) -> bool:
        if self._cursor is None:
            return False
        if self._shuffle is not None:
            if self._shuffle.advance():
                self._follow_shuffle_cursor()
                return True
            return False
        if self._cursor + 1 < len(self._order):
            self._cursor += 1
            return True
        return False

    def step_backward(self) -> bool:
        if self._cursor is None:
            return False
        if self._shuffle is not None:
            if self._shuffle.retreat():
                self._follow_shuffle_cursor()
                return True
            return False
        if self._cursor > 0:
            self._cursor -= 1
            return True
        return False

    def wrap_to_start(self) -> bool:
        if self._shuffle is not None:
            if self._shuffle.rewind():
                self._follow_shuffle_cursor()
                return True
            return False
        if not self._order:
            return False
        self._cursor = 0
        return True

    def wrap_to_end(self) -> bool:
        if self._shuffle is not None:
            if self._shuffle.to_end():
                self._follow_shuffle_cursor()
                return True
            return False
        if not self._order:
            return False
        self._cursor = len(self._order) - 1
        return True

    def _find(self, title: str) -> Optional[int]:
        for position, handle in enumerate(self._order):
            if self._songs[handle].title == title:
                return position
        return None

    def _follow_shuffle_cursor(self) -> None:
        if self._shuffle is None:
            return
        handle = self._shuffle.current_handle
        if handle is None:
            if not self._order:
                self._cursor = None
            return
        self._cursor = self._order.index(handle)
