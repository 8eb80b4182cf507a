"""
Main client for the Schlep-engine API.

Author: Yobie Benjamin
Date: 2026-10-19
"""

from typing import Any
from urllib.parse import urlsplit

import aiohttp
from loguru import logger
from pydantic import ValidationError

from schlep_engine import __version__
from schlep_engine.client.dispatcher import Dispatcher
from schlep_engine.client.exceptions import ConfigurationError, InvalidURLError, StreamError
from schlep_engine.client.models import (
    DeployResponse,
    StatusResponse,
    StreamConfig,
    TrainConfig,
    TrainResponse,
    UploadResponse,
)
from schlep_engine.client.resources import (
    AdminResource,
    AnalyticsResource,
    DataResource,
    DocumentResource,
    MLResource,
    MonitoringResource,
    QualityResource,
    StorageResource,
    UsersResource,
)
from schlep_engine.client.transport.base import Transport
from schlep_engine.client.transport.http import HTTPTransport
from schlep_engine.config.settings import SchlepSettings


def _load_settings() -> SchlepSettings:
    try:
        return SchlepSettings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid SCHLEP_* configuration: {e}") from e


def _validate_base_url(base_url: str) -> str:
    parts = urlsplit(base_url)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise InvalidURLError(f"Invalid base URL: {base_url!r}")
    return base_url.rstrip("/")


class SchlepClient:
    """
    Client for the Schlep-engine API.

    The client is immutable once built and safe to share between concurrent
    tasks. Endpoint groups are exposed as facades: ``data``, ``ml``,
    ``analytics``, ``document``, ``quality``, ``storage``, ``monitoring``,
    ``users`` and ``admin``.

    Authentication:
        Pass ``api_key`` explicitly, or leave it out to read ``SCHLEP_API_KEY``
        from the environment (or a .env file). An empty key is rejected
        before any network call.

    Example:
        ```python
        async with SchlepClient(api_key="sk_live_...") as client:
            job = await client.upload("sample data")
            status = await client.status(job.job_id)

            pipeline = await client.ml.create_pipeline(
                {"name": "churn", "task_type": "classification"}
            )
        ```
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: Transport | None = None,
    ):
        """
        Initialize the client.

        Args:
            api_key: API key (defaults to SCHLEP_API_KEY)
            base_url: API base URL (defaults to SCHLEP_BASE_URL or the platform endpoint)
            timeout: Request timeout in seconds (defaults to SCHLEP_TIMEOUT_SECONDS or 30)
            transport: Custom transport (defaults to an aiohttp transport)

        Raises:
            ConfigurationError: If the API key is empty or malformed
            InvalidURLError: If the base URL is not an http(s) URL
        """
        if api_key is None or base_url is None or (timeout is None and transport is None):
            settings = _load_settings()
            api_key = settings.api_key if api_key is None else api_key
            base_url = settings.base_url if base_url is None else base_url
            timeout = settings.timeout_seconds if timeout is None else timeout

        if not api_key:
            raise ConfigurationError("API key cannot be empty")
        if any(c in api_key for c in "\r\n"):
            raise ConfigurationError("Invalid API key format: line breaks are not allowed")

        self._api_key = api_key
        self._base_url = _validate_base_url(base_url)
        self._transport = transport or HTTPTransport(timeout=timeout)
        self._dispatcher = Dispatcher(
            self._transport,
            self._base_url,
            api_key,
            user_agent=f"schlep-engine-python/{__version__}",
        )

        self.data = DataResource(self._dispatcher)
        self.ml = MLResource(self._dispatcher)
        self.analytics = AnalyticsResource(self._dispatcher)
        self.document = DocumentResource(self._dispatcher)
        self.quality = QualityResource(self._dispatcher)
        self.storage = StorageResource(self._dispatcher)
        self.monitoring = MonitoringResource(self._dispatcher)
        self.users = UsersResource(self._dispatcher)
        self.admin = AdminResource(self._dispatcher)

    @classmethod
    def from_env(cls, **kwargs: Any) -> "SchlepClient":
        """
        Create a client using the API key from ``SCHLEP_API_KEY``.

        Raises:
            ConfigurationError: If the variable is not set or empty
        """
        settings = _load_settings()
        if settings.api_key is None:
            raise ConfigurationError("SCHLEP_API_KEY environment variable not set")
        return cls(api_key=settings.api_key, **kwargs)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def dispatcher(self) -> Dispatcher:
        return self._dispatcher

    def __repr__(self) -> str:
        return f"SchlepClient(base_url={self._base_url!r})"

    async def __aenter__(self) -> "SchlepClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        """Release the transport's connections."""
        await self._transport.close()

    # Jobs

    async def upload(self, data: str) -> UploadResponse:
        """
        Upload data (text, JSON, ...) for processing.

        Returns:
            The upload job ID and status
        """
        return await self._dispatcher.dispatch("POST", "/upload", {"data": data}, UploadResponse)

    async def train(self, config: TrainConfig | dict[str, Any]) -> TrainResponse:
        """
        Train a model.

        Args:
            config: Training configuration (model type, dataset, parameters)
        """
        return await self._dispatcher.dispatch("POST", "/train", config, TrainResponse)

    async def deploy(self, model_id: str) -> DeployResponse:
        """Deploy a trained model to a production endpoint."""
        return await self._dispatcher.dispatch(
            "POST", "/deploy", {"model_id": model_id}, DeployResponse
        )

    async def status(self, job_id: str) -> StatusResponse:
        """Check the status of an upload, training or deployment job."""
        return await self._dispatcher.dispatch("GET", f"/status/{job_id}", None, StatusResponse)

    # Streaming

    def stream_url(self) -> str:
        """
        WebSocket URL of the event stream, derived from the base URL.

        Raises:
            InvalidURLError: If no valid ws/wss URL can be derived
        """
        if self._base_url.startswith("https://"):
            ws_base = "wss://" + self._base_url[len("https://"):]
        elif self._base_url.startswith("http://"):
            ws_base = "ws://" + self._base_url[len("http://"):]
        else:
            ws_base = self._base_url

        url = f"{ws_base}/stream"
        parts = urlsplit(url)
        if parts.scheme not in ("ws", "wss") or not parts.netloc:
            raise InvalidURLError(f"Invalid stream URL: {url!r}")
        return url

    async def stream(
        self,
        config: StreamConfig | dict[str, Any]
    ) -> aiohttp.ClientWebSocketResponse:
        """
        Open the event stream and send the subscription message.

        The open WebSocket is handed back as-is: reading events (see
        ``StreamEvent``), reconnecting and closing are up to the caller.

        Args:
            config: Event types to subscribe to, plus optional filters

        Raises:
            InvalidURLError: If the stream URL cannot be derived
            StreamError: If the connection or subscription fails
        """
        if not isinstance(config, StreamConfig):
            config = StreamConfig.model_validate(config)

        url = self.stream_url()
        ws = await self._transport.open_websocket(url, self._dispatcher.auth_headers())
        logger.debug(f"WebSocket connection established: {url}")

        subscription = {
            "action": "subscribe",
            "events": config.model_dump(mode="json"),
            "auth": {"api_key": self._api_key},
        }
        try:
            await ws.send_json(subscription)
        except (aiohttp.ClientError, ConnectionError) as e:
            await ws.close()
            raise StreamError(f"Failed to send subscription: {str(e)}") from e

        logger.debug(f"Subscribed to {config.event_types}")
        return ws
