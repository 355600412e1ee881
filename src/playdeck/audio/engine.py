"""Pick the player backend from settings."""

from __future__ import annotations

import logging

from playdeck.audio.mock_backend import MockPlayer
from playdeck.audio.system_player import SystemPlayer
from playdeck.audio.types import BackendType, Player
from playdeck.core.config import SettingsManager
from playdeck.core.env import is_e2e_mode

logger = logging.getLogger(__name__)


def create_player(settings: SettingsManager) -> Player:
    backend = settings.get_player_backend()
    if is_e2e_mode():
        backend = BackendType.MOCK
    if backend is BackendType.MOCK:
        logger.info("Using mock player")
        return MockPlayer()
    command = settings.get_player_command()
    player = SystemPlayer(command or None)
    logger.info("Using system player: %s", player.command or "os.startfile")
    return player
