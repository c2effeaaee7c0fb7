"""Configuration loading for recency-cache."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CacheSettings(BaseSettings):
    """Runtime configuration derived from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="RECENCY_CACHE_",
        env_file=".env",
        extra="ignore",
    )

    default_capacity: int = Field(
        128,
        ge=1,
        description="Capacity used by LRUCache.from_settings",
    )
    log_level: str = Field("INFO", description="Root log level")
    log_format: Literal["json", "console"] = Field(
        "json",
        description="structlog renderer: JSON lines or human readable console output",
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> CacheSettings:
    """Return cached settings instance."""

    return CacheSettings()  # type: ignore[call-arg]
