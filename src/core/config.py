"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="Task Tracker")
    app_env: str = Field(default="development")
    debug: bool = Field(default=False)

    # Logging
    log_level: str = Field(default="INFO")
    log_json: bool | None = Field(
        default=None,
        description="Render logs as JSON. Unset means JSON in production only",
    )

    # Storage
    storage_backend: Literal["sqlite", "memory"] = Field(
        default="sqlite",
        description="Key/value store backing the task collection",
    )
    database_url: str = Field(
        default="sqlite:///./tasks.db",
        description="SQLAlchemy URL of the durable key/value store",
    )
    storage_key: str = Field(
        default="todo.tasks.v1",
        description="Versioned key the task collection is stored under",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env == "production"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def use_json_logs(self) -> bool:
        """Whether log output should be JSON rather than console text."""
        if self.log_json is not None:
            return self.log_json
        return self.is_production


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
