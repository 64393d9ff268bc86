"""Editor configuration using pydantic-settings.

Values come from ``SLIDEEDIT_*`` environment variables or a ``.env`` file.
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Editor settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SLIDEEDIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False

    # Step used by increase_indent / decrease_indent, in points
    indent_increment_pt: float = 18.0

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept any casing for the level name."""
        return v.upper()

    @field_validator("indent_increment_pt")
    @classmethod
    def validate_indent_increment(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("indent_increment_pt must be positive")
        return v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
