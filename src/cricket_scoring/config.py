"""Configuration management for the cricket scoring engine."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ScoringSettings(BaseSettings):
    """Scoring rule settings."""

    model_config = SettingsConfigDict(env_prefix="CRICKET_", env_file=".env", extra="ignore")

    # 10 for an eleven-a-side innings; reduced sides lose fewer wickets
    wickets_per_innings: int = Field(default=10, ge=1, le=10)


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    model_config = SettingsConfigDict(env_prefix="CRICKET_LOG_", env_file=".env", extra="ignore")

    level: str = Field(default="INFO")
    file: Optional[str] = Field(default=None)


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    scoring: ScoringSettings = Field(default_factory=ScoringSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# Global settings instance
settings = Settings()
