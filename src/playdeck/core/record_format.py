"""Flat record persistence: one comma-separated song per line.

Field order is ``title,artist,album,duration,favorite,filePath`` with the
favorite flag written as ``0``/``1``. Commas are not escaped; only the last
field (the path) may contain them.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from playdeck.core.collection import SongCollection
from playdeck.core.song import Song
from playdeck.core.status import OperationStatus


logger = logging.getLogger(__name__)

FIELD_COUNT = 6


def format_record(song: Song) -> str:
    return ",".join(
        [
            song.title,
            song.artist,
            song.album,
            str(int(song.duration_seconds)),
            "1" if song.favorite else "0",
            song.file_path,
        ]
    )


def serialize_records(songs: Iterable[Song]) -> str:
    return "".join(f"{format_record(song)}\n" for song in songs)


def parse_record(line: str) -> Optional[Song]:
    """Parse one record line; return None for blank or malformed lines."""

    stripped = line.rstrip("\r\n")
    if not stripped.strip():
        return None
    fields = stripped.split(",", FIELD_COUNT - 1)
    if len(fields) != FIELD_COUNT:
        return None
    title, artist, album, duration_text, favorite_text, file_path = fields
    favorite_text = favorite_text.strip()
    if favorite_text not in ("0", "1"):
        return None
    try:
        duration = int(duration_text.strip())
        return Song(
            title=title,
            artist=artist,
            album=album,
            duration_seconds=duration,
            favorite=favorite_text == "1",
            file_path=file_path,
        )
    except ValueError:
        return None


def parse_record_lines(lines: Iterable[str]) -> List[Song]:
    songs: List[Song] = []
    for number, line in enumerate(lines, start=1):
        song = parse_record(line)
        if song is None:
            if line.strip():
                logger.warning("Skipping malformed record on line %d: %r", number, line.rstrip("\r\n"))
            continue
        songs.append(song)
    return songs


def save_playlist(collection: SongCollection, path: Path) -> OperationStatus:
    try:
        with Path(path).open("w", encoding="utf-8", newline="\n") as file:
            file.write(serialize_records(collection))
    except OSError as exc:
        logger.error("Unable to write playlist %s: %s", path, exc)
        return OperationStatus.IO_FAILURE
    logger.info("Playlist saved to %s", path)
    return OperationStatus.OK


def read_playlist(path: Path) -> Tuple[OperationStatus, List[Song]]:
    try:
        with Path(path).open("r", encoding="utf-8") as file:
            songs = parse_record_lines(file)
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Unable to read playlist %s: %s", path, exc)
        return OperationStatus.IO_FAILURE, []
    return OperationStatus.OK, songs


def load_playlist(collection: SongCollection, path: Path) -> OperationStatus:
    """Replace the contents of ``collection`` with the records in ``path``.

    The collection is left untouched when the file cannot be read.
    """

    status, songs = read_playlist(path)
    if not status.ok:
        return status
    collection.clear()
    for song in songs:
        collection.add(song)
    logger.info("Loaded %d songs from %s", len(songs), path)
    return OperationStatus.OK
