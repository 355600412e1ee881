"""Numbered text menu over the playback controller."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict, Optional

from playdeck.core import record_format
from playdeck.core.collection import SongCollection
from playdeck.core.i18n import gettext as _
from playdeck.core.media_metadata import extract_metadata, is_supported_audio_file
from playdeck.core.playback import PlaybackController
from playdeck.core.song import Song
from playdeck.core.status import OperationStatus
from playdeck.ui import render


logger = logging.getLogger(__name__)

EXIT_CHOICE = 0


class PlaylistMenu:
    """Read numbered choices, call the engine and print what happened.

    ``input_func`` and ``output`` default to the console; tests pass their own.
    """

    def __init__(
        self,
        controller: PlaybackController,
        *,
        playlist_file: Path = Path("playlist.txt"),
        input_func: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
    ) -> None:
        self.controller = controller
        self.playlist_file = Path(playlist_file)
        self._input = input_func
        self._output = output
        self._actions: Dict[int, Callable[[], None]] = {
            1: self.add_song,
            2: self.remove_song,
            3: self.modify_song,
            4: self.display_songs,
            5: self.search_songs,
            6: self.sort_songs,
            7: self.toggle_favorite,
            8: self.show_total_duration,
            9: self.play,
            10: self.next,
            11: self.previous,
            12: self.toggle_repeat,
            13: self.toggle_shuffle,
            14: self.show_history,
            15: self.save_playlist,
            16: self.load_playlist,
            17: self.add_song_from_file,
        }

    @property
    def collection(self) -> SongCollection:
        return self.controller.collection

    def run(self) -> None:
        while True:
            self._output("")
            self._output(render.format_header(self.controller))
            for line in render.format_menu():
                self._output(line)
            try:
                raw = self._input(_("Enter choice: "))
            except EOFError:
                break
            choice = self._parse_choice(raw)
            if choice == EXIT_CHOICE:
                self._output(_("Exiting..."))
                break
            self.dispatch(choice)

    def dispatch(self, choice: Optional[int]) -> None:
        action = self._actions.get(choice) if choice is not None else None
        if action is None:
            self._output(_("Invalid choice."))
            return
        logger.debug("Menu action %s", choice)
        action()

    def add_song(self) -> None:
        title = self._ask(_("Title: "))
        artist = self._ask(_("Artist: "))
        album = self._ask(_("Album: "))
        duration = self._ask_duration(_("Duration (sec): "))
        if duration is None:
            return
        path = self._ask(_("File Path (e.g. C:/Music/song.mp3): "))
        self.collection.add(Song(title, artist, album, duration, False, path))
        self._output(_("Added: {title}").format(title=title))

    def remove_song(self) -> None:
        title = self._ask(_("Title to remove: "))
        status = self.collection.remove(title)
        self._report(status, title)

    def modify_song(self) -> None:
        title = self._ask(_("Title to modify: "))
        existing = self.collection.get(title)
        if existing is None:
            self._report(OperationStatus.NOT_FOUND, title)
            return
        self._output(_("Leave a field blank to keep its current value."))
        new_title = self._ask(_("New Title: ")) or existing.title
        new_artist = self._ask(_("New Artist: ")) or existing.artist
        new_album = self._ask(_("New Album: ")) or existing.album
        duration = self._ask_duration(_("New Duration (sec): "), default=existing.duration_seconds)
        if duration is None:
            return
        new_path = self._ask(_("New File Path: ")) or existing.file_path
        replacement = Song(new_title, new_artist, new_album, duration, existing.favorite, new_path)
        self._report(self.collection.modify(title, replacement), title)

    def display_songs(self) -> None:
        for line in render.format_listing(self.collection.all()):
            self._output(line)

    def search_songs(self) -> None:
        query = self._ask(_("Search query: "))
        for line in render.format_search_results(self.collection.search(query)):
            self._output(line)

    def sort_songs(self) -> None:
        self.collection.sort_by_title()
        self._output(_("Songs sorted by title."))

    def toggle_favorite(self) -> None:
        title = self._ask(_("Title to toggle favorite: "))
        status = self.collection.toggle_favorite(title)
        if status.ok:
            song = self.collection.get(title)
            state = _("marked as favorite") if song and song.favorite else _("removed from favorites")
            self._output(f"{title}: {state}")
            return
        self._report(status, title)

    def show_total_duration(self) -> None:
        self._output(render.format_total_duration(self.collection.total_duration()))

    def play(self) -> None:
        self._output(render.format_outcome(self.controller.play()))

    def next(self) -> None:
        self._output(render.format_outcome(self.controller.next(), navigated=True))

    def previous(self) -> None:
        self._output(render.format_outcome(self.controller.prev(), navigated=True))

    def toggle_repeat(self) -> None:
        self.controller.toggle_repeat(not self.controller.repeat)
        self._output(render.format_toggle("Repeat", self.controller.repeat))

    def toggle_shuffle(self) -> None:
        self.controller.toggle_shuffle(not self.controller.shuffle_enabled)
        self._output(render.format_toggle("Shuffle", self.controller.shuffle_enabled))

    def show_history(self) -> None:
        for line in render.format_history(self.controller.history):
            self._output(line)

    def save_playlist(self) -> None:
        path = self._ask_path()
        status = record_format.save_playlist(self.collection, path)
        if status.ok:
            self._output(_("Playlist saved to {path}").format(path=path))
            return
        self._report(status, str(path))

    def load_playlist(self) -> None:
        path = self._ask_path()
        status = record_format.load_playlist(self.collection, path)
        if status.ok:
            self.controller.reset()
            self._output(_("Loaded {count} songs from {path}").format(count=len(self.collection), path=path))
            return
        self._report(status, str(path))

    def add_song_from_file(self) -> None:
        raw = self._ask(_("Audio file path: ")).strip()
        path = Path(raw)
        if not path.is_file():
            self._report(OperationStatus.IO_FAILURE, raw)
            return
        if not is_supported_audio_file(path):
            self._output(_("Unsupported audio file: {path}").format(path=raw))
            return
        metadata = extract_metadata(path)
        song = Song(
            title=metadata.title,
            artist=metadata.artist,
            album=metadata.album,
            duration_seconds=metadata.duration_seconds,
            file_path=str(path),
        )
        self.collection.add(song)
        self._output(_("Added: {song}").format(song=render.format_song(song)))

    def _ask(self, prompt: str) -> str:
        return self._input(prompt)

    def _ask_duration(self, prompt: str, default: Optional[int] = None) -> Optional[int]:
        raw = self._ask(prompt).strip()
        if not raw and default is not None:
            return default
        try:
            value = int(raw)
        except ValueError:
            self._output(_("Duration must be a whole number of seconds."))
            return None
        if value < 0:
            self._output(_("Duration cannot be negative."))
            return None
        return value

    def _ask_path(self) -> Path:
        raw = self._ask(_("File [{default}]: ").format(default=self.playlist_file)).strip()
        return Path(raw) if raw else self.playlist_file

    def _report(self, status: OperationStatus, subject: str = "") -> None:
        self._output(render.format_status(status, subject))

    @staticmethod
    def _parse_choice(raw: str) -> Optional[int]:
        try:
            return int(raw.strip())
        except (AttributeError, ValueError):
            return None
