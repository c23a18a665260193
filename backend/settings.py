from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv


load_dotenv()


def _env_str(name: str, default: str = "") -> str:
    return str(os.getenv(name, default) or "").strip()


def _env_int(name: str, default: int) -> int:
    raw = _env_str(name, str(default))
    try:
        return int(raw)
    except ValueError:
        return default


def _env_csv(name: str) -> tuple[str, ...]:
    raw = _env_str(name)
    if not raw:
        return ()
    values = [item.strip() for item in raw.split(",")]
    return tuple(item for item in values if item)


@dataclass(frozen=True)
class Settings:
    log_level: str
    noisy_lib_log_level: str
    noisy_library_loggers: tuple[str, ...]

    app_title: str
    cors_origins: tuple[str, ...]

    host: str
    port: int


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings(
        log_level=_env_str("LOG_LEVEL", "INFO").upper(),
        noisy_lib_log_level=_env_str("NOISY_LIB_LOG_LEVEL", "WARNING").upper(),
        noisy_library_loggers=(
            "httpx",
            "httpcore",
            "uvicorn.access",
        ),
        app_title=_env_str("APP_TITLE", "Message Backend") or "Message Backend",
        cors_origins=_env_csv("CORS_ORIGINS"),
        host=_env_str("HOST", "127.0.0.1") or "127.0.0.1",
        port=_env_int("PORT", 8000),
    )


def _is_level_name(value: str) -> bool:
    return isinstance(logging.getLevelName(value), int)


def validate_settings(settings: Settings) -> None:
    if settings.port < 1 or settings.port > 65535:
        raise RuntimeError("PORT must be between 1 and 65535.")
    if not _is_level_name(settings.log_level):
        raise RuntimeError(f"LOG_LEVEL '{settings.log_level}' is not a valid logging level.")
    if not _is_level_name(settings.noisy_lib_log_level):
        raise RuntimeError(
            f"NOISY_LIB_LOG_LEVEL '{settings.noisy_lib_log_level}' is not a valid logging level."
        )
