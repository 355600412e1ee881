"""Shared data structures for media metadata."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class AudioMetadata:
    title: str
    duration_seconds: int
    artist: str = ""
    album: str = ""
