"""Discord-facing relay decisions."""

from crossrelay.discord.relay import (
    format_for_telegram,
    handles_channel,
    join_notice,
    leave_notice,
    should_cross_delete,
    should_relay_join,
    should_relay_leave,
)

__all__ = [
    "format_for_telegram",
    "handles_channel",
    "join_notice",
    "leave_notice",
    "should_cross_delete",
    "should_relay_join",
    "should_relay_leave",
]
