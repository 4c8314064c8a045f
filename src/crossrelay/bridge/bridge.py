"""Bridge definitions pairing one Discord channel with one Telegram chat."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator

from .checks import require_choice, require_mapping, require_non_empty_str
from .discord_settings import DiscordBridgeSettings
from .telegram_settings import TelegramBridgeSettings

DIRECTION_BOTH = "both"
DIRECTION_DISCORD_TO_TELEGRAM = "d2t"
DIRECTION_TELEGRAM_TO_DISCORD = "t2d"
DIRECTIONS: tuple[str, ...] = (
    DIRECTION_BOTH,
    DIRECTION_DISCORD_TO_TELEGRAM,
    DIRECTION_TELEGRAM_TO_DISCORD,
)


@dataclass(frozen=True)
class Bridge:
    name: str
    direction: str
    discord: DiscordBridgeSettings
    telegram: TelegramBridgeSettings

    def __post_init__(self) -> None:
        require_non_empty_str(self.name, "settings.name")
        require_choice(self.direction, "settings.direction", DIRECTIONS)

    @property
    def relays_to_telegram(self) -> bool:
        return self.direction in (DIRECTION_BOTH, DIRECTION_DISCORD_TO_TELEGRAM)

    @property
    def relays_to_discord(self) -> bool:
        return self.direction in (DIRECTION_BOTH, DIRECTION_TELEGRAM_TO_DISCORD)

    @classmethod
    def from_mapping(cls, settings: Any, *, path: str = "settings") -> "Bridge":
        cls.validate(settings, path=path)
        return cls(
            name=settings["name"],
            direction=settings["direction"],
            discord=DiscordBridgeSettings.from_mapping(
                settings["discord"], path=f"{path}.discord"
            ),
            telegram=TelegramBridgeSettings.from_mapping(
                settings["telegram"], path=f"{path}.telegram"
            ),
        )

    @staticmethod
    def validate(settings: Any, *, path: str = "settings") -> None:
        """Validate a raw bridge record, including both platform halves."""

        record = require_mapping(settings, path)
        require_non_empty_str(record.get("name"), f"{path}.name")
        require_choice(record.get("direction"), f"{path}.direction", DIRECTIONS)
        DiscordBridgeSettings.validate(record.get("discord"), path=f"{path}.discord")
        TelegramBridgeSettings.validate(record.get("telegram"), path=f"{path}.telegram")

    def to_mapping(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "direction": self.direction,
            "discord": self.discord.to_mapping(),
            "telegram": self.telegram.to_mapping(),
        }


class BridgeMap:
    """Read-only lookup of bridges by Discord channel and Telegram chat.

    IDs are compared in string form so snowflakes handed over as ``int`` by
    discord.py match the string IDs from config.
    """

    def __init__(self, bridges: Iterable[Bridge]) -> None:
        self._bridges = tuple(bridges)
        discord_index: dict[str, list[Bridge]] = {}
        telegram_index: dict[str, list[Bridge]] = {}
        for bridge in self._bridges:
            # A record without an ID is not reachable by lookup.
            if bridge.discord.channel_id is not None:
                discord_index.setdefault(str(bridge.discord.channel_id), []).append(bridge)
            if bridge.telegram.chat_id is not None:
                telegram_index.setdefault(str(bridge.telegram.chat_id), []).append(bridge)
        self._by_discord = {key: tuple(value) for key, value in discord_index.items()}
        self._by_telegram = {key: tuple(value) for key, value in telegram_index.items()}

    def __iter__(self) -> Iterator[Bridge]:
        return iter(self._bridges)

    def __len__(self) -> int:
        return len(self._bridges)

    @property
    def bridges(self) -> tuple[Bridge, ...]:
        return self._bridges

    def from_discord_channel(self, channel_id: Any) -> tuple[Bridge, ...]:
        if channel_id is None:
            return ()
        return self._by_discord.get(str(channel_id), ())

    def from_telegram_chat(self, chat_id: Any) -> tuple[Bridge, ...]:
        if chat_id is None:
            return ()
        return self._by_telegram.get(str(chat_id), ())
