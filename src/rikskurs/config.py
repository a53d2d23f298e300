from __future__ import annotations

from datetime import date, datetime, timezone
from enum import StrEnum
from functools import cache

from pydantic_settings import BaseSettings, SettingsConfigDict

LEGACY_FALLBACK_DATE = date(2019, 1, 6)


class DefaultDatePolicy(StrEnum):
    TODAY = "today"
    FIXED = "fixed"


class AppSettings(BaseSettings):
    riksbank_base_url: str = "https://api.riksbank.se/swea/v1"
    riksbank_api_key: str | None = None
    request_timeout: float = 10.0
    retry_attempts: int = 3
    retry_backoff_seconds: float = 1.0

    default_date_policy: DefaultDatePolicy = DefaultDatePolicy.TODAY
    fallback_date: date = LEGACY_FALLBACK_DATE

    host: str = "0.0.0.0"
    port: int = 8080
    ssl_certfile: str | None = None
    ssl_keyfile: str | None = None

    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


@cache
def config() -> AppSettings:
    return AppSettings()


def default_as_of(settings: AppSettings, today: date | None = None) -> date:
    """As-of date for requests that carry no date of their own."""
    if settings.default_date_policy is DefaultDatePolicy.FIXED:
        return settings.fallback_date
    return today or datetime.now(timezone.utc).date()


__all__ = ["AppSettings", "DefaultDatePolicy", "LEGACY_FALLBACK_DATE", "config", "default_as_of"]
