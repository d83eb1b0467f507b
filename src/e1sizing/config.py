# src/e1sizing/config.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from .sizing import CHANNELS_PER_E1, DEFAULT_CHANNELS_MAX

ENV_CHANNELS_MAX = "E1SIZING_CHANNELS_MAX"
ENV_CHANNELS_PER_TRUNK = "E1SIZING_CHANNELS_PER_TRUNK"
ENV_LOG_LEVEL = "E1SIZING_LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    channels_max: int = DEFAULT_CHANNELS_MAX
    channels_per_trunk: int = CHANNELS_PER_E1
    log_level: str = "WARNING"


def _positive_int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise RuntimeError(f"{name} must be > 0, got {value}")
    return value


def load_settings() -> Settings:
    """
    Reads settings from the environment (App Service configuration or a local shell).
    Unset variables fall back to the Settings defaults.
    """
    level = os.getenv(ENV_LOG_LEVEL, "").strip().upper() or Settings.log_level
    if not isinstance(logging.getLevelName(level), int):
        raise RuntimeError(f"{ENV_LOG_LEVEL} is not a logging level: {level!r}")

    return Settings(
        channels_max=_positive_int_from_env(ENV_CHANNELS_MAX, DEFAULT_CHANNELS_MAX),
        channels_per_trunk=_positive_int_from_env(ENV_CHANNELS_PER_TRUNK, CHANNELS_PER_E1),
        log_level=level,
    )


def configure_logging(settings: Optional[Settings] = None) -> None:
    """App entry points call this; the library itself never touches handlers."""
    s = settings or load_settings()
    logging.basicConfig(
        level=s.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


__all__ = [
    "ENV_CHANNELS_MAX",
    "ENV_CHANNELS_PER_TRUNK",
    "ENV_LOG_LEVEL",
    "Settings",
    "load_settings",
    "configure_logging",
]
