from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


POOL_SOURCES = {"static", "file", "http"}


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


@dataclass(frozen=True)
class Settings:
    apr_refresh_ms: int
    pool_source: str
    pools_file: str
    pools_url: str
    pools_timeout_seconds: float
    pools_max_retries: int
    log_level: str
    api_token: str


def get_settings() -> Settings:
    return Settings(
        apr_refresh_ms=int(_env("APR_REFRESH_MS", "15000")),
        pool_source=(_env("POOL_SOURCE", "static") or "static").strip().lower(),
        pools_file=_env("POOLS_FILE", ""),
        pools_url=_env("POOLS_URL", ""),
        pools_timeout_seconds=float(_env("POOLS_TIMEOUT_SECONDS", "10")),
        pools_max_retries=int(_env("POOLS_MAX_RETRIES", "3")),
        log_level=(_env("LOG_LEVEL", "INFO") or "INFO").upper(),
        api_token=(_env("API_TOKEN", "") or "").strip(),
    )
