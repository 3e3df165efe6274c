"""
Application configuration helpers.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Annotated, Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

MEMORY_DATABASE_URL = "memory://"


class Settings(BaseSettings):
    """Configuration loaded from environment variables."""

    database_url: str = Field("postgresql://localhost:5432/ecourts", alias="DATABASE_URL")
    db_pool_min_size: int = Field(1, alias="DB_POOL_MIN_SIZE")
    db_pool_max_size: int = Field(10, alias="DB_POOL_MAX_SIZE")
    static_dir: Path = Field(Path("static"), alias="STATIC_DIR")
    cors_origins: Annotated[list[str], NoDecode] = Field(default_factory=lambda: ["*"], alias="CORS_ORIGINS")
    seed_by_key: bool = Field(False, alias="SEED_BY_KEY")
    strict_courts: bool = Field(False, alias="STRICT_COURTS")
    recent_cases_limit: int = Field(50, alias="RECENT_CASES_LIMIT")
    host: str = Field("127.0.0.1", alias="HOST")
    port: int = Field(3001, alias="PORT")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_origins(cls, value: Any) -> Any:
        """Accept a JSON list or a comma-separated string."""
        if not isinstance(value, str):
            return value
        if value.lstrip().startswith("["):
            return json.loads(value)
        return [origin.strip() for origin in value.split(",") if origin.strip()]

    @property
    def uses_memory_store(self) -> bool:
        return self.database_url == MEMORY_DATABASE_URL


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
