"""Reading song metadata from audio files."""

from __future__ import annotations

from playdeck.core.media_metadata.constants import SUPPORTED_AUDIO_EXTENSIONS
from playdeck.core.media_metadata.extract import extract_metadata
from playdeck.core.media_metadata.models import AudioMetadata
from playdeck.core.media_metadata.support import is_supported_audio_file

__all__ = [
    "AudioMetadata",
    "SUPPORTED_AUDIO_EXTENSIONS",
    "extract_metadata",
    "is_supported_audio_file",
]
