"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import AnyHttpUrl, BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from search_console.domain.models import SearchSettings


class BackendSettings(BaseModel):
    base_url: AnyHttpUrl = Field(
        default="http://localhost:8080",
        description="Root URL of the search backend.",
    )
    search_path: str = "/search"
    click_tracker_path: str = "/click-tracker"
    remove_link_path: str = "/remove-link"
    request_timeout_seconds: float = Field(default=10, gt=0, le=120)

    @field_validator("search_path", "click_tracker_path", "remove_link_path")
    @classmethod
    def _leading_slash(cls, value: str) -> str:
        value = value.strip()
        return value if value.startswith("/") else f"/{value}"

    def url_for(self, path: str) -> str:
        return f"{str(self.base_url).rstrip('/')}{path}"


class SuggestionSettings(BaseModel):
    corpus_path: Path | None = Field(
        default=None,
        description="Optional JSON file mapping prefixes to descriptions.",
    )
    min_length: int = Field(default=2, ge=1)

    @field_validator("corpus_path", mode="before")
    @classmethod
    def _empty_str_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class ConsoleSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SEARCH_CONSOLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    environment: Literal["dev", "staging", "prod"] = "dev"
    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "json"

    backend: BackendSettings = Field(default_factory=BackendSettings)
    suggestions: SuggestionSettings = Field(default_factory=SuggestionSettings)
    defaults: SearchSettings = Field(default_factory=SearchSettings)


@lru_cache
def get_settings() -> ConsoleSettings:
    """Return cached settings instance."""

    return ConsoleSettings()


__all__ = [
    "BackendSettings",
    "ConsoleSettings",
    "SuggestionSettings",
    "get_settings",
]
