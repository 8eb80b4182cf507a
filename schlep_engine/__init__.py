"""
Schlep-engine: Python client for the Schlep-engine data and ML platform.

Typed async access to data processing, ML pipelines, analytics, document
extraction, data quality, storage, monitoring, users and admin endpoints,
plus the real-time event stream. Response models live in
``schlep_engine.client.models``.

Author: Yobie Benjamin
Date: 2026-10-19
"""

__version__ = "0.1.0"
__author__ = "Yobie Benjamin"
__license__ = "Apache-2.0"

from loguru import logger

from schlep_engine.client import (
    APIError,
    AuthenticationError,
    ConfigurationError,
    ErrorKind,
    InvalidResponseError,
    InvalidURLError,
    ListParams,
    RateLimitError,
    RequestTimeoutError,
    ResourceNotFoundError,
    RetryConfig,
    SchlepClient,
    SchlepError,
    StreamConfig,
    StreamError,
    StreamEvent,
    TrainConfig,
    TransportError,
    retry_async,
)
from schlep_engine.config import DEFAULT_BASE_URL, SchlepSettings, get_settings

logger.disable("schlep_engine")

__all__ = [
    "SchlepClient",
    "DEFAULT_BASE_URL",
    "SchlepSettings",
    "get_settings",
    "ListParams",
    "TrainConfig",
    "StreamConfig",
    "StreamEvent",
    "RetryConfig",
    "retry_async",
    "ErrorKind",
    "SchlepError",
    "ConfigurationError",
    "InvalidURLError",
    "TransportError",
    "RequestTimeoutError",
    "InvalidResponseError",
    "APIError",
    "AuthenticationError",
    "ResourceNotFoundError",
    "RateLimitError",
    "StreamError",
]
