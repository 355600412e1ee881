"""Metadata extraction helpers."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, Optional

from mutagen import File as MutagenFile

from playdeck.core.media_metadata.constants import ALBUM_TAGS, ARTIST_TAGS, TITLE_TAGS
from playdeck.core.media_metadata.models import AudioMetadata


logger = logging.getLogger(__name__)


def _tag_text(tags: Any, keys: Iterable[str]) -> Optional[str]:
    for key in keys:
        try:
            tag = tags.get(key)
        except (KeyError, ValueError):
            continue
        if not tag:
            continue
        # mutagen returns frames with .text, or plain lists of strings
        text = getattr(tag, "text", tag)
        if isinstance(text, (list, tuple)):
            if not text:
                continue
            text = text[0]
        value = str(text).strip()
        if value:
            return value
    return None


def extract_metadata(path: Path) -> AudioMetadata:
    """Return title, artist, album and whole-second duration of ``path``.

    If reading metadata fails, fall back to the file name and duration 0.
    """

    title = path.stem
    artist = ""
    album = ""
    duration = 0

    try:
        audio = MutagenFile(path)
    except Exception as exc:  # pylint: disable=broad-except
        logger.warning("Failed to read metadata %s: %s", path, exc)
        return AudioMetadata(title=title, duration_seconds=duration)

    if audio is None:
        return AudioMetadata(title=title, duration_seconds=duration)

    if audio.tags:
        title = _tag_text(audio.tags, TITLE_TAGS) or title
        artist = _tag_text(audio.tags, ARTIST_TAGS) or ""
        album = _tag_text(audio.tags, ALBUM_TAGS) or ""
    length = getattr(getattr(audio, "info", None), "length", None)
    if length:
        duration = max(0, int(round(float(length))))

    return AudioMetadata(title=title, duration_seconds=duration, artist=artist, album=album)
