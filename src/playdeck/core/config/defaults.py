"""Default configuration values."""

from __future__ import annotations

from typing import Any, Dict

from playdeck.core.collection import DEFAULT_PLAYLIST_NAME
from playdeck.core.history import DEFAULT_HISTORY_CAPACITY

DEFAULT_CONFIG: Dict[str, Any] = {
    "general": {
        "language": "en",
    },
    "playlist": {
        "name": DEFAULT_PLAYLIST_NAME,
        "file": "playlist.txt",
        "autoload": False,
    },
    "history": {
        "capacity": DEFAULT_HISTORY_CAPACITY,
    },
    "player": {
        "backend": "system",
        "command": [],
    },
    "diagnostics": {
        "log_level": "WARNING",
    },
}
