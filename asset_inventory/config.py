"""Application configuration using Pydantic Settings."""

import json
from pathlib import Path
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


# config.py lives in asset_inventory/, so the project root is one level up
_CONFIG_DIR = Path(__file__).resolve().parent
_PROJECT_ROOT = _CONFIG_DIR.parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=str(_PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="Asset Inventory", description="Application name")
    app_env: str = Field(default="development", description="Application environment")
    log_level: str = Field(default="INFO", description="Root logging level", alias="LOG_LEVEL")
    host: str = Field(default="0.0.0.0", description="Bind address for the development server")
    port: int = Field(default=4000, description="Port for the development server")

    # Database
    database_url: str = Field(
        default=f"sqlite:///{_PROJECT_ROOT / 'asset_inventory.db'}",
        description="SQLAlchemy database URL (PostgreSQL in production)",
        alias="DATABASE_URL",
    )
    db_pool_size: int = Field(default=10, description="Number of pooled connections to keep")
    db_max_overflow: int = Field(default=20, description="Connections allowed beyond pool_size")

    # CORS
    cors_origins: Annotated[list[str], NoDecode] = Field(
        default=[
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "http://localhost:5174",
            "http://127.0.0.1:5174",
        ],
        description="Origins allowed to call the API from a browser",
        alias="CORS_ORIGINS",
    )

    # Behaviour
    strict_status: bool = Field(
        default=False,
        description="If True, reject statuses outside the known set. If False, store them as given",
        alias="STRICT_STATUS",
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def validate_database_url(cls, v: str | None) -> str:
        """Validate and normalize database URL."""
        if v is None or v == "":
            raise ValueError("DATABASE_URL is required")
        v = v.strip()
        # Hosted Postgres providers still hand out the deprecated scheme.
        # A bare scheme is pinned to psycopg2, the driver this project installs.
        for scheme in ("postgres://", "postgresql://"):
            if v.startswith(scheme):
                v = "postgresql+psycopg2://" + v[len(scheme) :]
        return v

    @field_validator("app_env", mode="before")
    @classmethod
    def normalize_app_env(cls, v: str) -> str:
        """Normalize app environment to lowercase."""
        if isinstance(v, str):
            return v.lower().strip()
        return v

    @field_validator("app_name", mode="before")
    @classmethod
    def normalize_app_name(cls, v: str) -> str:
        """Normalize app name by stripping whitespace."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Normalize log level to the upper-case names used by logging."""
        if isinstance(v, str):
            return v.upper().strip()
        return v

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_cors_origins(cls, v: str | list[str]) -> list[str]:
        """Accept a comma-separated string as well as a JSON list."""
        if isinstance(v, str):
            if v.strip().startswith("["):
                return json.loads(v)
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @property
    def is_sqlite(self) -> bool:
        """Whether the configured database is SQLite."""
        return self.database_url.startswith("sqlite")


def get_settings() -> Settings:
    """Get application settings instance.

    Returns:
        Settings: Application settings instance

    Example:
        ```python
        from asset_inventory.config import get_settings

        settings = get_settings()
        print(settings.database_url)
        ```
    """
    return Settings()


# Global settings instance
settings = get_settings()
