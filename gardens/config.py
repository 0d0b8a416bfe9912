from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from gardens.db import BASE_DIR, DEFAULT_DATABASE_URL

DEFAULT_SEED_PATH = BASE_DIR / "data" / "gardens.json"
DEFAULT_API_PREFIX = "/api/v1/gardens"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    seed_path: Path = DEFAULT_SEED_PATH
    seed_on_startup: bool = True
    log_level: str = "INFO"
    api_prefix: str = DEFAULT_API_PREFIX


def load_settings() -> Settings:
    # .env is optional; real environment variables win
    load_dotenv(override=False)
    return Settings(
        database_url=os.getenv("GARDENS_DATABASE_URL") or DEFAULT_DATABASE_URL,
        seed_path=Path(os.getenv("GARDENS_SEED_PATH") or DEFAULT_SEED_PATH),
        seed_on_startup=_env_bool("GARDENS_SEED_ON_STARTUP", True),
        log_level=os.getenv("GARDENS_LOG_LEVEL") or "INFO",
        api_prefix=(os.getenv("GARDENS_API_PREFIX") or DEFAULT_API_PREFIX).rstrip("/"),
    )
