"""Configuration layer for a Discord <-> Telegram relay bridge."""

__version__ = "0.1.0"
