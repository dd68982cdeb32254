"""Runtime settings read from the environment (and an optional .env file)."""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

_TRUE = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True, slots=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False
    log_level: str = "INFO"
    cors_origins: tuple[str, ...] = ("*",)


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


def _log_level_env(name: str, default: str) -> str:
    level = os.getenv(name, default).upper()
    if level not in logging.getLevelNamesMapping():
        raise ValueError(f"{name} must be a logging level name, got {level!r}")
    return level


def load_settings() -> Settings:
    """Build settings from KATSUYO_* environment variables."""
    load_dotenv()
    origins = os.getenv("KATSUYO_CORS_ORIGINS", "*")
    # blank means allow all
    cors_origins = tuple(o.strip() for o in origins.split(",") if o.strip()) or ("*",)
    return Settings(
        host=os.getenv("KATSUYO_HOST", "0.0.0.0"),
        port=_int_env("KATSUYO_PORT", 8000),
        reload=os.getenv("KATSUYO_RELOAD", "").lower() in _TRUE,
        log_level=_log_level_env("KATSUYO_LOG_LEVEL", "INFO"),
        cors_origins=cors_origins,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
