"""Settings for the Discord half of a bridge."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .checks import require_bool, require_mapping

# Checked in this order; the first failure is the one reported.
_BOOLEAN_FIELDS: tuple[tuple[str, str], ...] = (
    ("relayJoinMessages", "relay_join_messages"),
    ("relayLeaveMessages", "relay_leave_messages"),
    ("sendUsernames", "send_usernames"),
    ("crossDeleteOnTelegram", "cross_delete_on_telegram"),
)


@dataclass(frozen=True)
class DiscordBridgeSettings:
    """Validated, read-only settings for the Discord side of one bridge.

    Only the relay flags are type-checked. ``channel_id`` and ``server_id``
    are carried through exactly as they appear in the raw record, and an
    absent ``serverId`` stays ``None`` rather than becoming an empty string.
    Instances hash by value, so ``hash()`` raises ``TypeError`` when a
    carried-through ID is itself unhashable (a list, say).
    """

    channel_id: str
    send_usernames: bool
    relay_join_messages: bool
    relay_leave_messages: bool
    cross_delete_on_telegram: bool
    server_id: Optional[str] = None

    def __post_init__(self) -> None:
        for key, attribute in _BOOLEAN_FIELDS:
            require_bool(getattr(self, attribute), f"settings.{key}")

    @classmethod
    def from_mapping(cls, settings: Any, *, path: str = "settings") -> "DiscordBridgeSettings":
        """Validate a raw settings record and build the settings object from it.

        Raises ``ValidationError`` naming the first offending field. Nothing
        is built unless the whole record validates.
        """

        cls.validate(settings, path=path)
        return cls(
            channel_id=settings.get("channelId"),
            send_usernames=settings["sendUsernames"],
            relay_join_messages=settings["relayJoinMessages"],
            relay_leave_messages=settings["relayLeaveMessages"],
            cross_delete_on_telegram=settings["crossDeleteOnTelegram"],
            server_id=settings.get("serverId"),
        )

    @staticmethod
    def validate(settings: Any, *, path: str = "settings") -> None:
        """Check a raw settings record without building anything.

        Returns ``None`` when the record is usable, otherwise raises
        ``ValidationError`` for the first rule it breaks.
        """

        record = require_mapping(settings, path)
        for key, _attribute in _BOOLEAN_FIELDS:
            require_bool(record.get(key), f"{path}.{key}")

    def to_mapping(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "channelId": self.channel_id,
            "sendUsernames": self.send_usernames,
            "relayJoinMessages": self.relay_join_messages,
            "relayLeaveMessages": self.relay_leave_messages,
            "crossDeleteOnTelegram": self.cross_delete_on_telegram,
        }
        if self.server_id is not None:
            payload["serverId"] = self.server_id
        return payload
