"""Entry point for the playdeck text menu."""

from __future__ import annotations

import logging
import os
import sys
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Optional

if __package__ is None or __package__ == "":
    sys.path.append(str(Path(__file__).resolve().parents[1]))

from playdeck.audio.engine import create_player
from playdeck.core import record_format
from playdeck.core.collection import SongCollection
from playdeck.core.config import SettingsManager
from playdeck.core.env import is_e2e_mode
from playdeck.core.i18n import set_language
from playdeck.core.playback import PlaybackController
from playdeck.ui.menu import PlaylistMenu


def _configure_logging(level_override: Optional[str] = None) -> Optional[Path]:
    env_level = os.environ.get("LOGLEVEL")
    level_name = (env_level or level_override or "WARNING").upper()
    level = getattr(logging, level_name, logging.WARNING)

    primary_dir = Path.cwd() / "logs"
    if is_e2e_mode():
        primary_dir = Path(tempfile.gettempdir()) / "playdeck_e2e_logs"
    fallback_dir = Path(tempfile.gettempdir()) / "playdeck_logs"
    logs_dir = primary_dir
    log_path: Path | None = None

    try:
        logs_dir.mkdir(parents=True, exist_ok=True)
    except OSError:
        logs_dir = fallback_dir
        try:
            logs_dir.mkdir(parents=True, exist_ok=True)
        except OSError:
            logging.basicConfig(level=level)
            return None

    formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    try:
        timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
        log_path = logs_dir / f"playdeck-{timestamp}.log"
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        # console is the menu; keep it quiet unless something is wrong
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        stream_handler.setLevel(max(level, logging.WARNING))
        logging.basicConfig(level=level, handlers=[file_handler, stream_handler])
    except OSError:
        logging.basicConfig(level=level)
        log_path = None
    if log_path:
        logging.getLogger(__name__).info("Writing log to %s", log_path)
        if logs_dir is fallback_dir:
            logging.getLogger(__name__).warning("Using fallback log directory %s", logs_dir)
    return log_path


def build_controller(settings: SettingsManager) -> PlaybackController:
    collection = SongCollection(name=settings.get_playlist_name())
    if settings.get_playlist_autoload():
        playlist_file = settings.get_playlist_file()
        if playlist_file.exists():
            record_format.load_playlist(collection, playlist_file)
    return PlaybackController(
        collection,
        create_player(settings),
        history_capacity=settings.get_history_capacity(),
    )


def run() -> None:
    """Start the interactive playlist menu."""
    settings = SettingsManager()
    _configure_logging(settings.get_diagnostics_log_level())
    set_language(settings.get_language())
    controller = build_controller(settings)
    menu = PlaylistMenu(controller, playlist_file=settings.get_playlist_file())
    try:
        menu.run()
    except KeyboardInterrupt:
        logging.getLogger(__name__).info("Interrupted by user")


if __name__ == "__main__":
    run()
