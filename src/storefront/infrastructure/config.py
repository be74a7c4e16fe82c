"""Runtime settings, read from ``STOREFRONT_*`` environment variables."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

LOG_FORMATS = ("console", "json")


class ConfigurationError(Exception):
    """An environment variable holds an unusable value."""


@dataclass(frozen=True)
class Settings:
    data_dir: Path = DEFAULT_DATA_DIR
    fallback_actor_id: int = 1
    log_level: str = "WARNING"
    log_format: str = "console"

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ

        data_dir = Path(env.get("STOREFRONT_DATA_DIR") or DEFAULT_DATA_DIR)

        raw_actor = env.get("STOREFRONT_FALLBACK_ACTOR_ID", "1")
        try:
            fallback_actor_id = int(raw_actor)
        except ValueError as exc:
            raise ConfigurationError(
                f"STOREFRONT_FALLBACK_ACTOR_ID must be an integer, got {raw_actor!r}"
            ) from exc

        log_level = env.get("STOREFRONT_LOG_LEVEL", "WARNING").upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ConfigurationError(f"Unknown STOREFRONT_LOG_LEVEL {log_level!r}")

        log_format = env.get("STOREFRONT_LOG_FORMAT", "console").lower()
        if log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"STOREFRONT_LOG_FORMAT must be one of {', '.join(LOG_FORMATS)}, got {log_format!r}"
            )

        return Settings(
            data_dir=data_dir,
            fallback_actor_id=fallback_actor_id,
            log_level=log_level,
            log_format=log_format,
        )
