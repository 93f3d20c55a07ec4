"""
Configuration module for the Fetch Legends backend.

The Settings object centralizes environment-driven configuration with strict
typing and validation rules so that the rest of the codebase can rely on a
single source of truth.
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, ValidationInfo, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=(".env", "../.env"),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    project_name: str = Field(default="Fetch Legends", alias="PROJECT_NAME")
    environment: Literal["local", "test", "staging", "production"] = Field(
        default="local",
        alias="APP_ENV",
    )
    debug: bool = Field(default=False, alias="DEBUG")
    api_prefix: str = Field(default="/api", alias="API_PREFIX")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    database_url: str = Field(
        default="sqlite+aiosqlite:///:memory:",
        alias="DATABASE_URL",
        description="World store; the in-memory default is rebuilt on every start.",
    )
    seed_world: bool = Field(
        default=True,
        alias="SEED_WORLD",
        description="Create tables and load the starting world during start-up.",
    )
    challenges_file: Path | None = Field(
        default=None,
        alias="CHALLENGES_FILE",
        description="Alternate level data document; the packaged one is used when unset.",
    )

    raw_backend_cors_origins: str | None = Field(
        default=None,
        alias="BACKEND_CORS_ORIGINS",
        description="Comma-separated list or JSON array of allowed origins.",
    )
    max_request_bytes: int = Field(
        default=65_536,
        alias="MAX_REQUEST_BYTES",
        description="Upper bound for request bodies in bytes (default 64 KiB).",
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def _strip_string(cls, value: str | None, info: ValidationInfo) -> str:
        if value is None:
            field = (info.field_name or "value").upper()
            raise ValueError(f"{field} must be provided.")
        trimmed = value.strip()
        if not trimmed:
            field = (info.field_name or "value").upper()
            raise ValueError(f"{field} must not be empty.")
        return trimmed

    @field_validator("api_prefix")
    @classmethod
    def _validate_api_prefix(cls, value: str) -> str:
        normalized = value.strip().rstrip("/")
        if normalized and not normalized.startswith("/"):
            raise ValueError("API_PREFIX must start with '/' or be empty.")
        return normalized

    @field_validator("max_request_bytes")
    @classmethod
    def _validate_request_size(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("MAX_REQUEST_BYTES must be a positive integer.")
        return value

    @field_validator("challenges_file")
    @classmethod
    def _validate_challenges_file(cls, value: Path | None) -> Path | None:
        if value is not None and not value.is_file():
            raise ValueError(f"CHALLENGES_FILE does not point to a file: {value}")
        return value

    @computed_field(return_type=list[str])
    def cors_origins(self) -> list[str]:
        """Return the normalized list of origins allowed to call the API."""
        return self.parse_cors_origins(self.raw_backend_cors_origins)

    @staticmethod
    def parse_cors_origins(origins: str | list[str] | None) -> list[str]:
        """
        Normalize the BACKEND_CORS_ORIGINS value into a list of origins.

        Accepts either a comma-separated string, a JSON array string, or an
        explicit list of strings. Any other type raises ValueError to make
        misconfiguration obvious.
        """
        if origins is None:
            return []
        if isinstance(origins, list):
            cleaned: list[str] = []
            for origin in origins:
                if not isinstance(origin, str):
                    raise ValueError("CORS origin list entries must be strings.")
                stripped = origin.strip()
                if not stripped:
                    raise ValueError("CORS origin list entries must be non-empty strings.")
                cleaned.append(stripped.rstrip("/"))
            return cleaned
        if isinstance(origins, str):
            return Settings._parse_backend_cors_origins(origins)
        raise ValueError("CORS origins must be provided as a string or list of strings.")

    @staticmethod
    def _parse_backend_cors_origins(value: str) -> list[str]:
        normalized = value.strip()
        if not normalized:
            return []
        if normalized.startswith("["):
            try:
                parsed = json.loads(normalized)
                if isinstance(parsed, list):
                    return [
                        str(origin).strip().rstrip("/") for origin in parsed if str(origin).strip()
                    ]
            except json.JSONDecodeError:
                pass
        return [origin.strip().rstrip("/") for origin in normalized.split(",") if origin.strip()]

    @property
    def is_memory_database(self) -> bool:
        return ":memory:" in self.database_url or self.database_url.endswith("sqlite://")


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance so configuration is evaluated once."""
    return Settings()  # type: ignore[call-arg]


settings = get_settings()

__all__ = ["Settings", "get_settings", "settings"]
