"""Application configuration management module."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List

import yaml

from .defaults import DEFAULT_CONFIG
from .merge import _deep_merge
from playdeck.audio.types import BackendType
from playdeck.core.env import resolve_config_path


_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class SettingsManager:
    """YAML configuration layered over built-in defaults."""

    config_path: Path = Path("config/settings.yaml")

    def __post_init__(self) -> None:
        self.config_path = resolve_config_path(Path(self.config_path))
        self._data: Dict[str, Any] = {}
        self.load()

    def load(self) -> None:
        if self.config_path.exists():
            with self.config_path.open("r", encoding="utf-8") as file:
                user_config = yaml.safe_load(file) or {}
            if not isinstance(user_config, dict):
                user_config = {}
            self._data = _deep_merge(DEFAULT_CONFIG, user_config)
        else:
            self._data = copy.deepcopy(DEFAULT_CONFIG)

    def save(self) -> None:
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with self.config_path.open("w", encoding="utf-8") as file:
            yaml.safe_dump(self._data, file, allow_unicode=False, sort_keys=True)

    def get_raw(self) -> Dict[str, Any]:
        return copy.deepcopy(self._data)

    def get_language(self) -> str:
        general = self._data.get("general", {})
        return str(general.get("language", DEFAULT_CONFIG["general"]["language"]))

    def set_language(self, language: str) -> None:
        general = self._data.setdefault("general", {})
        general["language"] = language

    def get_playlist_name(self) -> str:
        playlist = self._data.get("playlist", {})
        name = str(playlist.get("name") or "").strip()
        return name or DEFAULT_CONFIG["playlist"]["name"]

    def set_playlist_name(self, name: str) -> None:
        playlist = self._data.setdefault("playlist", {})
        playlist["name"] = str(name)

    def get_playlist_file(self) -> Path:
        playlist = self._data.get("playlist", {})
        value = playlist.get("file") or DEFAULT_CONFIG["playlist"]["file"]
        return Path(str(value))

    def set_playlist_file(self, path: Path | str) -> None:
        playlist = self._data.setdefault("playlist", {})
        playlist["file"] = str(path)

    def get_playlist_autoload(self) -> bool:
        playlist = self._data.get("playlist", {})
        return bool(playlist.get("autoload", DEFAULT_CONFIG["playlist"]["autoload"]))

    def set_playlist_autoload(self, enabled: bool) -> None:
        playlist = self._data.setdefault("playlist", {})
        playlist["autoload"] = bool(enabled)

    def get_history_capacity(self) -> int:
        history = self._data.get("history", {})
        value = history.get("capacity", DEFAULT_CONFIG["history"]["capacity"])
        try:
            return max(1, int(value))
        except (TypeError, ValueError):
            return DEFAULT_CONFIG["history"]["capacity"]

    def set_history_capacity(self, capacity: int) -> None:
        history = self._data.setdefault("history", {})
        history["capacity"] = max(1, int(capacity))

    def get_player_backend(self) -> BackendType:
        player = self._data.get("player", {})
        value = str(player.get("backend", DEFAULT_CONFIG["player"]["backend"])).lower()
        try:
            return BackendType(value)
        except ValueError:
            return BackendType(DEFAULT_CONFIG["player"]["backend"])

    def set_player_backend(self, backend: BackendType) -> None:
        player = self._data.setdefault("player", {})
        player["backend"] = backend.value

    def get_player_command(self) -> List[str]:
        player = self._data.get("player", {})
        value = player.get("command", DEFAULT_CONFIG["player"]["command"])
        if isinstance(value, str):
            return value.split()
        if isinstance(value, list):
            return [str(part) for part in value if str(part)]
        return []

    def set_player_command(self, command: List[str]) -> None:
        player = self._data.setdefault("player", {})
        player["command"] = [str(part) for part in command]

    def get_diagnostics_log_level(self) -> str:
        diagnostics = self._data.get("diagnostics", {})
        level = str(diagnostics.get("log_level", DEFAULT_CONFIG["diagnostics"]["log_level"])).upper()
        return level if level in _LOG_LEVELS else DEFAULT_CONFIG["diagnostics"]["log_level"]

    def set_diagnostics_log_level(self, level: str) -> None:
        diagnostics = self._data.setdefault("diagnostics", {})
        diagnostics["log_level"] = str(level).upper()
