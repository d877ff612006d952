from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_LOG_LEVEL = "WARNING"


class SettingsError(RuntimeError):
    pass


@dataclass(frozen=True, slots=True)
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    # For reproducible computer moves; None means an unseeded generator.
    seed: int | None = None


def get_log_level() -> str:
    level = os.environ.get("RPS_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise SettingsError(f"Unknown log level: {level}")
    return level


def get_seed() -> int | None:
    raw = os.environ.get("RPS_SEED", "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise SettingsError(f"RPS_SEED must be an integer, got {raw!r}") from e


def load_settings(*, dotenv: bool = True) -> Settings:
    """Read settings from the environment.

    A `.env` file in the working directory is loaded first, without overriding variables
    that are already set.
    """

    if dotenv:
        env_path = Path.cwd() / ".env"
        if env_path.exists():
            load_dotenv(dotenv_path=env_path, override=False)
    return Settings(log_level=get_log_level(), seed=get_seed())
