"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AnyHttpUrl, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://www.themealdb.com/api/json/v1/1/"


class FinderSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="RECIPE_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    environment: Literal["dev", "staging", "prod"] = "dev"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    base_url: AnyHttpUrl = Field(
        default=DEFAULT_BASE_URL,
        description="TheMealDB API root; search.php is resolved against it.",
    )
    request_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        le=600,
        description="Per-request timeout. None keeps the httpx default.",
    )
    log_http_traffic: bool = False

    preview_length: int = Field(default=100, ge=1)
    ignore_stale_results: bool = Field(
        default=False,
        description="Discard completions of searches superseded by a newer call.",
    )

    @field_validator("request_timeout_seconds", mode="before")
    @classmethod
    def _empty_str_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @property
    def api_root(self) -> str:
        return str(self.base_url).rstrip("/") + "/"


@lru_cache
def get_settings() -> FinderSettings:
    """Return cached settings instance."""

    return FinderSettings()


__all__ = ["DEFAULT_BASE_URL", "FinderSettings", "get_settings"]
