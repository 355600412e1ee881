"""Text rendering of playlist state for the menu."""

from __future__ import annotations

from typing import Iterable, List, Tuple

from playdeck.core.collection import ListedSong
from playdeck.core.i18n import gettext as _
from playdeck.core.playback import PlaybackController
from playdeck.core.song import Song
from playdeck.core.status import OperationStatus, PlaybackOutcome


CURRENT_MARKER = "--> "
BLANK_MARKER = "    "

MENU_OPTIONS: Tuple[Tuple[int, str], ...] = (
    (1, "Add Song"),
    (2, "Remove Song"),
    (3, "Modify Song"),
    (4, "Display Songs"),
    (5, "Search Song"),
    (6, "Sort Songs by Title"),
    (7, "Toggle Favorite"),
    (8, "Show Total Duration"),
    (9, "Play"),
    (10, "Next"),
    (11, "Previous"),
    (12, "Toggle Repeat"),
    (13, "Toggle Shuffle"),
    (14, "Show History"),
    (15, "Save Playlist"),
    (16, "Load Playlist"),
    (17, "Add Song from File"),
    (0, "Exit"),
)


def _on_off(flag: bool) -> str:
    return _("on") if flag else _("off")


def format_song(song: Song) -> str:
    line = f"{song.title} | {song.artist} | {song.album} | {song.duration_seconds}s"
    if song.favorite:
        line += " " + _("[Favorite]")
    return line


def format_listing(rows: Iterable[ListedSong]) -> List[str]:
    lines = [(CURRENT_MARKER if row.is_current else BLANK_MARKER) + format_song(row.song) for row in rows]
    if not lines:
        return [_("Playlist is empty.")]
    return lines


def format_search_results(songs: Iterable[Song]) -> List[str]:
    lines = [_("Found: {title} by {artist}").format(title=song.title, artist=song.artist) for song in songs]
    if not lines:
        return [_("No matching songs.")]
    return lines


def format_history(songs: Iterable[Song]) -> List[str]:
    lines = [f"{index}. {song.title} - {song.artist}" for index, song in enumerate(songs, start=1)]
    if not lines:
        return [_("Nothing played yet.")]
    return lines


def format_total_duration(seconds: int) -> str:
    minutes, remainder = divmod(int(seconds), 60)
    return _("Total Duration: {seconds} seconds ({minutes:02d}:{remainder:02d})").format(
        seconds=seconds,
        minutes=minutes,
        remainder=remainder,
    )


def format_header(controller: PlaybackController) -> str:
    collection = controller.collection
    return _("--- {name} --- {state} | repeat: {repeat} | shuffle: {shuffle} | songs: {count}").format(
        name=collection.name,
        state=_(controller.state.value),
        repeat=_on_off(controller.repeat),
        shuffle=_on_off(controller.shuffle_enabled),
        count=len(collection),
    )


def format_menu() -> List[str]:
    return [f"{number}. {_(label)}" for number, label in MENU_OPTIONS]


def format_status(status: OperationStatus, title: str = "") -> str:
    if status is OperationStatus.NOT_FOUND:
        return _("Song not found: {title}").format(title=title)
    if status is OperationStatus.EMPTY:
        return _("Playlist is empty.")
    if status is OperationStatus.IO_FAILURE:
        return _("Unable to access file: {path}").format(path=title)
    return _("Done.")


def format_outcome(outcome: PlaybackOutcome, *, navigated: bool = False) -> str:
    if outcome.status is not OperationStatus.OK or outcome.song is None:
        return format_status(outcome.status)
    text = _("Playing: {title} by {artist}").format(title=outcome.song.title, artist=outcome.song.artist)
    if navigated and not outcome.advanced:
        text = _("Reached a playlist boundary.") + " " + text
    return text


def format_toggle(label: str, enabled: bool) -> str:
    return _("{label} {state}").format(label=_(label), state=_on_off(enabled))
