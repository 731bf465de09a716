"""Environment-driven settings."""

import os
from dataclasses import dataclass
from functools import lru_cache

# Token lifetime bounds for RTC channel access
DEFAULT_TOKEN_TTL_SECONDS = 3600
MAX_TOKEN_TTL_SECONDS = 86400


@dataclass(frozen=True)
class Settings:
    """Runtime settings loaded once from the environment."""

    token_ttl_seconds: int = DEFAULT_TOKEN_TTL_SECONDS
    max_token_ttl_seconds: int = MAX_TOKEN_TTL_SECONDS
    log_level: str = "INFO"
    app_timezone: str = "Asia/Seoul"


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "")
    if not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


@lru_cache
def get_settings() -> Settings:
    """Load settings from environment variables (cached)."""
    settings = Settings(
        token_ttl_seconds=_int_env("CALL_TOKEN_TTL_SECONDS", DEFAULT_TOKEN_TTL_SECONDS),
        max_token_ttl_seconds=_int_env("CALL_TOKEN_MAX_TTL_SECONDS", MAX_TOKEN_TTL_SECONDS),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        app_timezone=os.getenv("APP_TIMEZONE", "Asia/Seoul"),
    )

    if settings.token_ttl_seconds <= 0:
        raise ValueError("CALL_TOKEN_TTL_SECONDS must be positive")
    if settings.token_ttl_seconds > settings.max_token_ttl_seconds:
        raise ValueError("CALL_TOKEN_TTL_SECONDS cannot exceed CALL_TOKEN_MAX_TTL_SECONDS")

    return settings
