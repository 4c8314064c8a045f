"""CLI for validating crossrelay bridge configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence
import argparse
import json
import logging
import os
import sys

from crossrelay import __version__
from crossrelay.config.settings import (
    CONFIG_PATH_ENV,
    SettingsError,
    LOG_LEVEL_ENV,
    load_settings,
    settings_summary,
    token_status,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="crossrelay bridge configuration")
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to JSON config file. Defaults to $CROSSRELAY_CONFIG.",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Validate settings and print a redacted summary as JSON.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"crossrelay {__version__}",
    )
    return parser


def configure_logging(log_level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, log_level.strip().upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.config is None and not os.environ.get(CONFIG_PATH_ENV):
        print(f"Configuration error: pass --config or set {CONFIG_PATH_ENV}.", file=sys.stderr)
        return 2

    # Installed before loading so the loader's own log lines are emitted.
    configure_logging(os.environ.get(LOG_LEVEL_ENV) or "INFO")

    try:
        settings = load_settings(config_path=args.config)
    except SettingsError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    logging.getLogger().setLevel(settings.runtime.log_level)

    if args.check:
        summary = settings_summary(settings)
        summary["token_status"] = token_status(settings)
        print(json.dumps(summary, indent=2, sort_keys=True))
        return 0

    for bridge in settings.bridges:
        print(
            f"{bridge.name} [{bridge.direction}] "
            f"discord:{bridge.discord.channel_id} <-> telegram:{bridge.telegram.chat_id}"
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
