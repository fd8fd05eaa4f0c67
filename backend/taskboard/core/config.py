"""Application configuration and settings management."""
from __future__ import annotations

import re
from datetime import timedelta
from functools import lru_cache
from pathlib import Path
from typing import Annotated, List

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

_DURATION_RE = re.compile(r"^\s*(\d+)\s*([smhd]?)\s*$")
_DURATION_UNITS = {"": "seconds", "s": "seconds", "m": "minutes", "h": "hours", "d": "days"}


class Settings(BaseSettings):
    """Global application settings loaded from environment variables or .env."""

    model_config = SettingsConfigDict(
        env_file=(Path(__file__).resolve().parent.parent / ".." / ".env"),
        env_file_encoding="utf-8",
        env_prefix="TASKBOARD_",
        extra="ignore",
    )

    app_name: str = "Taskboard API"
    version: str = "1.0.0"
    environment: str = "development"

    # Security
    secret_key: str | None = None
    token_lifetime: timedelta = timedelta(days=7)

    # Database
    database_url: str = "sqlite+aiosqlite:///./taskboard.db"
    database_echo: bool = False

    # HTTP
    host: str = "0.0.0.0"
    port: int = 3000
    allowed_origins: Annotated[List[str], NoDecode] = ["*"]

    log_level: str = "INFO"

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: List[str] | str) -> List[str]:
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value

    @field_validator("token_lifetime", mode="before")
    @classmethod
    def _parse_lifetime(cls, value: timedelta | int | str) -> timedelta | int | str:
        """Accept shorthand durations such as ``30s``, ``15m``, ``12h`` or ``7d``."""
        if isinstance(value, str):
            match = _DURATION_RE.match(value)
            if match:
                amount, unit = match.groups()
                return timedelta(**{_DURATION_UNITS[unit]: int(amount)})
        return value


@lru_cache
def get_settings() -> Settings:
    """Return memoized settings instance."""

    return Settings()
