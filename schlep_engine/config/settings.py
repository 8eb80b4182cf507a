"""
Pydantic-based configuration settings for the Schlep-engine SDK.

Author: Yobie Benjamin
Date: 2026-10-19
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.schlep-engine.com/v1"


class SchlepSettings(BaseSettings):
    """
    Client configuration.

    Configuration can be provided via:
    - Environment variables with SCHLEP_ prefix (``SCHLEP_API_KEY``,
      ``SCHLEP_BASE_URL``, ``SCHLEP_TIMEOUT_SECONDS``)
    - .env file in current directory
    - Direct instantiation with kwargs

    Example:
        ```python
        # From environment
        settings = SchlepSettings()

        # Direct configuration
        settings = SchlepSettings(api_key="sk_test", timeout_seconds=10)
        ```
    """

    model_config = SettingsConfigDict(
        env_prefix="SCHLEP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = None
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = Field(default=30.0, gt=0)

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Paths always start with '/', so the base URL must not end with one."""
        return v.rstrip("/")

    def has_api_key(self) -> bool:
        return bool(self.api_key)


@lru_cache
def get_settings(env_file: str | None = None) -> SchlepSettings:
    """
    Get cached settings instance.

    To reload settings, clear the cache with `get_settings.cache_clear()`.

    Args:
        env_file: Optional path to .env file

    Returns:
        Settings instance
    """
    if env_file:
        return SchlepSettings(_env_file=env_file)

    if Path(".env").exists():
        return SchlepSettings(_env_file=".env")

    return SchlepSettings()
