"""
Configuration and settings for the breeders backend.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-backed settings for the FastAPI service."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    api_prefix: str = Field(default="/api")
    log_level: str = Field(default="INFO")

    # Breed database (MariaDB/MySQL in production, SQLite for local runs)
    database_url: Optional[str] = Field(default=None)
    db_pool_size: int = Field(default=25)
    db_max_lifetime_seconds: int = Field(default=300)

    # Remote cat-breed service
    cat_service_url: str = Field(default="http://localhost:8081/api/cat-breeds")
    cat_service_format: Literal["json", "xml", "memory"] = Field(default="json")
    remote_timeout_seconds: float = Field(default=5.0)

    # Development toggles
    use_in_memory_backends: bool = Field(default=False)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
