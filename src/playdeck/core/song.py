"""Song record stored in the playlist."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Song:
    title: str
    artist: str = ""
    album: str = ""
    duration_seconds: int = 0
    favorite: bool = False
    file_path: str = ""

    def __post_init__(self) -> None:
        if self.duration_seconds < 0:
            raise ValueError("Duration cannot be negative")

    @property
    def duration_display(self) -> str:
        minutes, seconds = divmod(int(self.duration_seconds), 60)
        return f"{minutes:02d}:{seconds:02d}"

    def matches(self, query: str) -> bool:
        """Case-sensitive substring match on title or artist."""
        return query in self.title or query in self.artist
