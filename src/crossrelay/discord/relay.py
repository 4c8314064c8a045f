"""Relay decisions for events originating on Discord."""

from __future__ import annotations

from typing import Any, Optional

import discord

from crossrelay.bridge import Bridge, DiscordBridgeSettings


def handles_channel(settings: DiscordBridgeSettings, channel_id: Any) -> bool:
    if settings.channel_id is None or channel_id is None:
        return False
    return str(settings.channel_id) == str(channel_id)


def should_relay_join(bridge: Bridge) -> bool:
    return bridge.relays_to_telegram and bridge.discord.relay_join_messages


def should_relay_leave(bridge: Bridge) -> bool:
    return bridge.relays_to_telegram and bridge.discord.relay_leave_messages


def should_cross_delete(bridge: Bridge) -> bool:
    """Whether deleting a Discord message should delete its Telegram copy."""

    return bridge.relays_to_telegram and bridge.discord.cross_delete_on_telegram


def format_for_telegram(
    settings: DiscordBridgeSettings,
    author_name: str,
    content: Optional[str],
) -> Optional[str]:
    """Build the text sent to Telegram for a Discord message.

    Returns ``None`` when there is no text to send.
    """

    text = content or ""
    if not text:
        return None

    if not settings.send_usernames:
        return text

    # Telegram renders its own formatting, so Discord markdown in names is noise.
    name = discord.utils.remove_markdown(author_name).strip() or "Unknown"
    return f"{name}: {text}"


def join_notice(member_name: str) -> str:
    name = discord.utils.remove_markdown(member_name).strip() or "Unknown"
    return f"{name} joined the Discord side of the chat"


def leave_notice(member_name: str) -> str:
    name = discord.utils.remove_markdown(member_name).strip() or "Unknown"
    return f"{name} left the Discord side of the chat"
