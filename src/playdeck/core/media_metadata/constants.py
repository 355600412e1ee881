from __future__ import annotations

SUPPORTED_AUDIO_EXTENSIONS = {
    ".mp3",
    ".wav",
    ".flac",
    ".ogg",
    ".oga",
    ".opus",
    ".m4a",
    ".aac",
    ".aiff",
    ".aif",
    ".wma",
    ".wv",
    ".mp4",
}

TITLE_TAGS = ("TIT2", "title", "\xa9nam")
ARTIST_TAGS = ("TPE1", "artist", "\xa9ART")
ALBUM_TAGS = ("TALB", "album", "\xa9alb")
