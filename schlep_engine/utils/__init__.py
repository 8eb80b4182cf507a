"""Utility functions for the Schlep-engine SDK."""

from schlep_engine.utils.logging import disable_logging, enable_logging

__all__ = [
    "enable_logging",
    "disable_logging",
]
