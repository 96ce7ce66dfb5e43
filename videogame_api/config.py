"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - environment decides how much failure detail reaches clients (is_development)

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - Defaults provided for every setting: in-memory SQLite store works out-of-the-box
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database — volatile in-memory store by default
    database_url: str = "sqlite+aiosqlite:///:memory:"
    database_pool_size: int = 20
    database_max_overflow: int = 10
    seed_sample_games: bool = True

    # Runtime
    environment: Literal["development", "production"] = "production"

    @field_validator("environment", mode="before")
    @classmethod
    def normalize_environment(cls, v: str) -> str:
        """Accept Development / PRODUCTION / dev / prod."""
        if not isinstance(v, str):
            return v
        v = v.strip().lower()
        return {"dev": "development", "prod": "production"}.get(v, v)

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
