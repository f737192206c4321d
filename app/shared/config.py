from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


def _csv(name: str, default: str) -> tuple[str, ...]:
    value = _env(name, default) or ""
    return tuple(item.strip() for item in value.split(",") if item.strip())


@dataclass(frozen=True)
class Settings:
    ston_api_base: str
    ston_api_timeout_seconds: float
    market_data_cache_ttl_seconds: float
    cors_allow_origins: tuple[str, ...]
    log_level: str
    host: str
    port: int


def get_settings() -> Settings:
    return Settings(
        ston_api_base=_env("STON_API_BASE", "https://api.ston.fi"),
        ston_api_timeout_seconds=float(_env("STON_API_TIMEOUT_SECONDS", "10")),
        market_data_cache_ttl_seconds=float(_env("MARKET_DATA_CACHE_TTL_SECONDS", "60")),
        cors_allow_origins=_csv("CORS_ALLOW_ORIGINS", "*"),
        log_level=_env("LOG_LEVEL", "INFO"),
        host=_env("HOST", "0.0.0.0"),
        port=int(_env("PORT", "3000")),
    )
