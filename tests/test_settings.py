from pathlib import Path

from playdeck.audio.types import BackendType
from playdeck.core.config import DEFAULT_CONFIG, SettingsManager


def test_defaults_when_file_missing(tmp_path: Path) -> None:
    manager = SettingsManager(config_path=tmp_path / "settings.yaml")

    assert manager.get_playlist_name() == DEFAULT_CONFIG["playlist"]["name"]
    assert manager.get_playlist_file() == Path("playlist.txt")
    assert manager.get_history_capacity() == 10
    assert manager.get_player_backend() is BackendType.SYSTEM
    assert manager.get_player_command() == []
    assert manager.get_diagnostics_log_level() == "WARNING"


def test_roundtrip_through_yaml(tmp_path: Path) -> None:
    config_path = tmp_path / "conf" / "settings.yaml"
    manager = SettingsManager(config_path=config_path)
    manager.set_playlist_name("Road Trip")
    manager.set_playlist_file(tmp_path / "trip.txt")
    manager.set_history_capacity(25)
    manager.set_player_backend(BackendType.MOCK)
    manager.set_player_command(["mpv", "--no-video"])
    manager.set_diagnostics_log_level("debug")
    manager.save()

    reloaded = SettingsManager(config_path=config_path)
    assert reloaded.get_playlist_name() == "Road Trip"
    assert reloaded.get_playlist_file() == tmp_path / "trip.txt"
    assert reloaded.get_history_capacity() == 25
    assert reloaded.get_player_backend() is BackendType.MOCK
    assert reloaded.get_player_command() == ["mpv", "--no-video"]
    assert reloaded.get_diagnostics_log_level() == "DEBUG"


def test_invalid_values_fall_back_to_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "settings.yaml"
    config_path.write_text(
        "history:\n  capacity: lots\n"
        "player:\n  backend: vinyl\n  command: vlc --intf dummy\n"
        "diagnostics:\n  log_level: loud\n",
        encoding="utf-8",
    )

    manager = SettingsManager(config_path=config_path)

    assert manager.get_history_capacity() == 10
    assert manager.get_player_backend() is BackendType.SYSTEM
    assert manager.get_player_command() == ["vlc", "--intf", "dummy"]
    assert manager.get_diagnostics_log_level() == "WARNING"
    # untouched sections keep defaults after the merge
    assert manager.get_language() == "en"


def test_config_path_env_override(tmp_path: Path, monkeypatch) -> None:
    override = tmp_path / "elsewhere.yaml"
    monkeypatch.setenv("PLAYDECK_CONFIG_PATH", str(override))

    manager = SettingsManager(config_path=tmp_path / "ignored.yaml")

    assert manager.config_path == override


def test_config_dir_env_override(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.delenv("PLAYDECK_CONFIG_PATH", raising=False)
    monkeypatch.setenv("PLAYDECK_CONFIG_DIR", str(tmp_path))

    manager = SettingsManager(config_path=Path("config/settings.yaml"))

    assert manager.config_path == tmp_path / "settings.yaml"
