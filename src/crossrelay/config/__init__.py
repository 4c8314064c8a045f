"""Configuration APIs."""

from crossrelay.config.settings import (
    AppSettings,
    RuntimeSettings,
    SettingsError,
    TokenSettings,
    load_settings,
    resolve_env_secret,
    settings_summary,
    token_status,
    validate_bridge_records,
)

__all__ = [
    "AppSettings",
    "RuntimeSettings",
    "SettingsError",
    "TokenSettings",
    "load_settings",
    "resolve_env_secret",
    "settings_summary",
    "token_status",
    "validate_bridge_records",
]
