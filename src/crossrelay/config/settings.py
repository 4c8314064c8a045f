"""Typed settings loader for crossrelay."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional
import json
import logging
import os

from crossrelay.bridge import Bridge, BridgeMap, ValidationError


_VALID_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}
CONFIG_PATH_ENV = "CROSSRELAY_CONFIG"
LOG_LEVEL_ENV = "CROSSRELAY_RUNTIME_LOG_LEVEL"

logger = logging.getLogger("crossrelay.config")


class SettingsError(ValueError):
    """Raised when settings cannot be loaded or validated."""


@dataclass(frozen=True)
class TokenSettings:
    discord_token_env: str = "DISCORD_BOT_TOKEN"
    telegram_token_env: str = "TELEGRAM_BOT_TOKEN"

    def __post_init__(self) -> None:
        discord_token_env = self.discord_token_env.strip()
        if not discord_token_env:
            raise SettingsError("tokens.discord_token_env cannot be empty.")

        telegram_token_env = self.telegram_token_env.strip()
        if not telegram_token_env:
            raise SettingsError("tokens.telegram_token_env cannot be empty.")

        object.__setattr__(self, "discord_token_env", discord_token_env)
        object.__setattr__(self, "telegram_token_env", telegram_token_env)


@dataclass(frozen=True)
class RuntimeSettings:
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        log_level = self.log_level.strip().upper()
        if log_level not in _VALID_LOG_LEVELS:
            raise SettingsError(
                "runtime.log_level must be one of: " + ", ".join(sorted(_VALID_LOG_LEVELS))
            )

        object.__setattr__(self, "log_level", log_level)


@dataclass(frozen=True)
class AppSettings:
    tokens: TokenSettings
    runtime: RuntimeSettings
    bridges: BridgeMap


def load_settings(
    config_path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> AppSettings:
    """Load validated settings from JSON config and environment overrides.

    Every bridge record is validated before any bridge is built, so a bad
    entry anywhere in the file fails the whole load.
    """

    env = dict(environ) if environ is not None else dict(os.environ)
    if config_path is None and env.get(CONFIG_PATH_ENV):
        config_path = Path(env[CONFIG_PATH_ENV])
    config = _load_config(config_path)

    tokens = TokenSettings(
        discord_token_env=_read_setting(
            config, env, "tokens.discord_token_env", default="DISCORD_BOT_TOKEN"
        ),
        telegram_token_env=_read_setting(
            config, env, "tokens.telegram_token_env", default="TELEGRAM_BOT_TOKEN"
        ),
    )

    runtime = RuntimeSettings(
        log_level=_read_setting(config, env, "runtime.log_level", default="INFO"),
    )

    raw_bridges = _read_bridge_records(config)
    validate_bridge_records(raw_bridges)
    bridges = BridgeMap(Bridge.from_mapping(raw) for raw in raw_bridges)

    logger.info("Loaded %d bridge(s) from %s.", len(bridges), config_path or "<no config file>")
    for bridge in bridges:
        logger.debug(
            "Bridge '%s' (%s): discord channel %s <-> telegram chat %s.",
            bridge.name,
            bridge.direction,
            bridge.discord.channel_id,
            bridge.telegram.chat_id,
        )

    return AppSettings(tokens=tokens, runtime=runtime, bridges=bridges)


def validate_bridge_records(records: Sequence[Any]) -> None:
    """Validate a batch of raw bridge records without building any of them."""

    for index, record in enumerate(records):
        try:
            Bridge.validate(record)
        except ValidationError as exc:
            raise SettingsError(f"bridges[{index}]: {exc}") from exc


def resolve_env_secret(env_name: str, environ: Optional[Mapping[str, str]] = None) -> str:
    """Resolve a bot token from the environment variable named by config."""

    env = environ if environ is not None else os.environ
    value = env.get(env_name)
    if value is None:
        raise SettingsError(f"Token environment variable '{env_name}' is not set.")

    if not value.strip():
        raise SettingsError(f"Token environment variable '{env_name}' cannot be empty.")

    return value


def token_status(
    settings: AppSettings,
    environ: Optional[Mapping[str, str]] = None,
) -> dict[str, Optional[str]]:
    """Report per platform whether its token resolves; ``None`` means it does."""

    status: dict[str, Optional[str]] = {}
    for platform, env_name in (
        ("discord", settings.tokens.discord_token_env),
        ("telegram", settings.tokens.telegram_token_env),
    ):
        try:
            resolve_env_secret(env_name, environ)
        except SettingsError as exc:
            status[platform] = str(exc)
        else:
            status[platform] = None
    return status


def settings_summary(settings: AppSettings) -> dict:
    """Render redacted settings for diagnostics."""

    return {
        "tokens": {
            "discord_token_env": settings.tokens.discord_token_env,
            "telegram_token_env": settings.tokens.telegram_token_env,
        },
        "runtime": {
            "log_level": settings.runtime.log_level,
        },
        "bridges": [bridge.to_mapping() for bridge in settings.bridges],
    }


def _load_config(config_path: Optional[Path]) -> Mapping[str, Any]:
    if config_path is None:
        logger.debug("No config file given; using environment and defaults only.")
        return {}

    resolved = config_path.expanduser()
    try:
        text = resolved.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise SettingsError(f"Config file does not exist: {resolved}") from exc

    try:
        loaded = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SettingsError(
            f"Config file {resolved} is not valid JSON (line {exc.lineno}): {exc.msg}"
        ) from exc

    if not isinstance(loaded, dict):
        raise SettingsError("Config root must be an object.")

    return loaded


def _read_bridge_records(config: Mapping[str, Any]) -> list[Any]:
    raw_bridges = config.get("bridges", [])
    if not isinstance(raw_bridges, list):
        raise SettingsError("Config section 'bridges' must be a list.")
    return raw_bridges


def _env_key(dotted_key: str) -> str:
    return "CROSSRELAY_" + dotted_key.replace(".", "_").upper()


def _read_setting(
    config: Mapping[str, Any],
    environ: Mapping[str, str],
    dotted_key: str,
    *,
    default: str,
) -> str:
    """Resolve ``section.key`` from the environment, then config, then default.

    ``tokens.discord_token_env`` is overridden by
    ``CROSSRELAY_TOKENS_DISCORD_TOKEN_ENV`` and so on.
    """

    section, key = dotted_key.split(".", 1)
    env_key = _env_key(dotted_key)

    value = environ.get(env_key)
    source = "environment"
    if value in (None, ""):
        section_map = config.get(section, {})
        if not isinstance(section_map, Mapping):
            raise SettingsError(f"Config section '{section}' must be an object.")
        value = section_map.get(key, default)
        source = "config" if key in section_map else "default"

    if not isinstance(value, str) or not value.strip():
        raise SettingsError(
            f"Invalid value for {dotted_key} from {source}: expected a non-empty string."
        )
    return value.strip()
