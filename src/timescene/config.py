"""Configuration management using Pydantic settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="TIMESCENE_",
        case_sensitive=False,
        extra="ignore",
    )

    # Clock derivation: a finite scene plays back in roughly this many
    # wall-clock seconds when no document clock is declared.
    playback_target_seconds: float = Field(120.0, gt=0)

    # Fetching documents by URL
    fetch_timeout: float = Field(30.0, gt=0)
    user_agent: str = "timescene/0.1"


settings = Settings()
