"""Bridge definitions and per-platform bridge settings."""

from crossrelay.bridge.bridge import (
    DIRECTION_BOTH,
    DIRECTION_DISCORD_TO_TELEGRAM,
    DIRECTION_TELEGRAM_TO_DISCORD,
    DIRECTIONS,
    Bridge,
    BridgeMap,
)
from crossrelay.bridge.discord_settings import DiscordBridgeSettings
from crossrelay.bridge.errors import ValidationError
from crossrelay.bridge.telegram_settings import TelegramBridgeSettings

__all__ = [
    "Bridge",
    "BridgeMap",
    "DIRECTIONS",
    "DIRECTION_BOTH",
    "DIRECTION_DISCORD_TO_TELEGRAM",
    "DIRECTION_TELEGRAM_TO_DISCORD",
    "DiscordBridgeSettings",
    "TelegramBridgeSettings",
    "ValidationError",
]
