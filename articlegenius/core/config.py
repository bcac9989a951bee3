"""Runtime configuration via environment variables."""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ENDPOINT = "https://artgenbackend.worksbeyondworks.workers.dev/generate-article"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Typed settings, read from ARTICLEGENIUS_* variables or a .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="ARTICLEGENIUS_",
        case_sensitive=False,
        extra="ignore",
    )

    api_endpoint: str = DEFAULT_ENDPOINT
    request_timeout: float = Field(60.0, gt=0)
    output_dir: Path = Field(default_factory=lambda: Path("outputs"))
    log_level: LogLevel = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
