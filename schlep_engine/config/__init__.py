"""
Configuration management for the Schlep-engine SDK.

Uses Pydantic BaseSettings for validated configuration from keyword
arguments, ``SCHLEP_*`` environment variables and .env files.
"""

from schlep_engine.config.settings import DEFAULT_BASE_URL, SchlepSettings, get_settings

__all__ = [
    "DEFAULT_BASE_URL",
    "SchlepSettings",
    "get_settings",
]
