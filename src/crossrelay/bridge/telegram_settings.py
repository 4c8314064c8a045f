"""Settings for the Telegram half of a bridge."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .checks import require_bool, require_mapping

_BOOLEAN_FIELDS: tuple[tuple[str, str], ...] = (
    ("relayJoinMessages", "relay_join_messages"),
    ("relayLeaveMessages", "relay_leave_messages"),
    ("sendUsernames", "send_usernames"),
    ("relayCommands", "relay_commands"),
    ("crossDeleteOnDiscord", "cross_delete_on_discord"),
)


@dataclass(frozen=True)
class TelegramBridgeSettings:
    """Validated, read-only settings for the Telegram side of one bridge."""

    chat_id: int
    send_usernames: bool
    relay_commands: bool
    relay_join_messages: bool
    relay_leave_messages: bool
    cross_delete_on_discord: bool

    def __post_init__(self) -> None:
        for key, attribute in _BOOLEAN_FIELDS:
            require_bool(getattr(self, attribute), f"settings.{key}")

    @classmethod
    def from_mapping(cls, settings: Any, *, path: str = "settings") -> "TelegramBridgeSettings":
        cls.validate(settings, path=path)
        return cls(
            chat_id=settings.get("chatId"),
            send_usernames=settings["sendUsernames"],
            relay_commands=settings["relayCommands"],
            relay_join_messages=settings["relayJoinMessages"],
            relay_leave_messages=settings["relayLeaveMessages"],
            cross_delete_on_discord=settings["crossDeleteOnDiscord"],
        )

    @staticmethod
    def validate(settings: Any, *, path: str = "settings") -> None:
        record = require_mapping(settings, path)
        for key, _attribute in _BOOLEAN_FIELDS:
            require_bool(record.get(key), f"{path}.{key}")

    def to_mapping(self) -> dict[str, Any]:
        return {
            "chatId": self.chat_id,
            "sendUsernames": self.send_usernames,
            "relayCommands": self.relay_commands,
            "relayJoinMessages": self.relay_join_messages,
            "relayLeaveMessages": self.relay_leave_messages,
            "crossDeleteOnDiscord": self.cross_delete_on_discord,
        }
