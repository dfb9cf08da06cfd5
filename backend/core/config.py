"""core/config.py — Application configuration via Pydantic BaseSettings.

Loads environment variables from .env (and the OS environment).
Import `settings` from this module wherever configuration is needed.

Usage:
    from core.config import settings

    db_url = settings.database_url
    if settings.is_production:
        ...
"""

from __future__ import annotations

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# .env lives in the project root (one level above backend/)
_ENV_FILE = Path(__file__).parent.parent.parent / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Event Service API"
    app_version: str = "1.0.0"
    environment: str = "development"
    log_level: str = "DEBUG"
    log_to_file: bool = True

    # Database — any SQLAlchemy URL; SQLite file by default
    database_url: str = "sqlite:///./events.db"
    db_pool_size: int = 10
    db_max_overflow: int = 20

    # Paging defaults for the list endpoints
    default_page_size: int = 10
    max_page_size: int = 2000

    # CORS — list of allowed origins for browser clients
    allowed_origins: list[str] = [
        "http://localhost:5173",   # Vite dev server
        "http://localhost:3000",   # CRA fallback
    ]

    @field_validator("log_level", mode="before")
    @classmethod
    def _uppercase_log_level(cls, v: str) -> str:
        return v.upper()

    @field_validator("database_url", mode="after")
    @classmethod
    def _normalise_postgres_scheme(cls, v: str) -> str:
        # SQLAlchemy requires "postgresql://" not "postgres://"
        if v.startswith("postgres://"):
            return v.replace("postgres://", "postgresql://", 1)
        return v

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


# Singleton — import this everywhere
settings = Settings()
