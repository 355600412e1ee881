"""Playback state machine driving the playlist cursor."""

from __future__ import annotations

import logging
import random
from enum import Enum
from typing import Optional

from playdeck.audio.types import Player
from playdeck.core.collection import SongCollection
from playdeck.core.history import DEFAULT_HISTORY_CAPACITY, HistoryBuffer
from playdeck.core.song import Song
from playdeck.core.status import OperationStatus, PlaybackOutcome


logger = logging.getLogger(__name__)


class PlaybackState(Enum):
    STOPPED = "Stopped"
    PLAYING = "Playing"
    # Reserved: no operation transitions into it yet.
    PAUSED = "Paused"


class PlaybackController:
    """Decide what plays on play/next/prev and record it in history.

    ``next()`` and ``prev()`` always end with ``play()``, so hitting a
    boundary without repeat replays the same song and records it again.
    """

    def __init__(
        self,
        collection: Optional[SongCollection] = None,
        player: Optional[Player] = None,
        *,
        history_capacity: int = DEFAULT_HISTORY_CAPACITY,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.collection = collection if collection is not None else SongCollection()
        self.history = HistoryBuffer(history_capacity)
        self._player = player
        self._rng = rng
        self._state = PlaybackState.STOPPED
        self._repeat = False

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def repeat(self) -> bool:
        return self._repeat

    @property
    def shuffle_enabled(self) -> bool:
        return self.collection.shuffle_enabled

    @property
    def current(self) -> Optional[Song]:
        return self.collection.current

    def play(self) -> PlaybackOutcome:
        song = self.collection.current
        if song is None:
            logger.debug("Play ignored: playlist is empty")
            return PlaybackOutcome(OperationStatus.EMPTY)
        self._state = PlaybackState.PLAYING
        self.history.record(song)
        self._request_playback(song)
        return PlaybackOutcome(OperationStatus.OK, song)

    def next(self) -> PlaybackOutcome:
        if self.collection.current is None:
            return PlaybackOutcome(OperationStatus.EMPTY)
        moved = self.collection.step_forward()
        if not moved and self._repeat:
            moved = self.collection.wrap_to_start()
        if not moved:
            logger.debug("End of playlist reached, replaying current song")
        return self._play_after_navigation(moved)

    def prev(self) -> PlaybackOutcome:
        if self.collection.current is None:
            return PlaybackOutcome(OperationStatus.EMPTY)
        moved = self.collection.step_backward()
        if not moved and self._repeat:
            moved = self.collection.wrap_to_end()
        if not moved:
            logger.debug("Start of playlist reached, replaying current song")
        return self._play_after_navigation(moved)

    def toggle_repeat(self, enabled: bool) -> None:
        self._repeat = bool(enabled)
        logger.debug("Repeat %s", "on" if self._repeat else "off")

    def toggle_shuffle(self, enabled: bool) -> None:
        if enabled:
            self.collection.enable_shuffle(self._rng)
        else:
            self.collection.disable_shuffle()
        logger.debug("Shuffle %s", "on" if enabled else "off")

    def reset(self) -> None:
        """Forget playback state, e.g. after loading another playlist."""
        self._state = PlaybackState.STOPPED
        self.history.clear()

    def _play_after_navigation(self, moved: bool) -> PlaybackOutcome:
        outcome = self.play()
        return PlaybackOutcome(outcome.status, outcome.song, advanced=moved)

    def _request_playback(self, song: Song) -> None:
        if self._player is None:
            logger.info("No player attached; %s not sent", song.file_path)
            return
        logger.info("Playing %s by %s (%s)", song.title, song.artist, song.file_path)
        try:
            self._player.request_playback(song.file_path)
        except Exception as exc:  # pylint: disable=broad-except
            # fire-and-forget, state stays Playing
            logger.error("Player failed for %s: %s", song.file_path, exc)
