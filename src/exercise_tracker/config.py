"""Configuration settings for the Exercise Tracker service."""

from pathlib import Path
from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# __file__ = src/exercise_tracker/config.py
# .parent.parent.parent = repository root
PACKAGE_ROOT = Path(__file__).parent
PROJECT_ROOT = PACKAGE_ROOT.parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=str(PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = Field(default=3000, validation_alias=AliasChoices("api_port", "port"))
    log_level: str = "INFO"

    # CORS (open by default, like the public API it replaces)
    cors_origins: list[str] = ["*"]

    # Database
    database_path: Path | None = Field(
        default=None,
        validation_alias=AliasChoices("database_path", "exercise_db_path"),
    )

    def model_post_init(self, __context) -> None:
        """Set default database path after initialization."""
        if self.database_path is None:
            self.database_path = PROJECT_ROOT / "exercise_tracker.db"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
