"""
HTTP transport for remote Schlep-engine API calls.

Author: Yobie Benjamin
Date: 2026-10-19
"""

import asyncio
from typing import Mapping

import aiohttp

from schlep_engine.client.exceptions import (
    RequestTimeoutError,
    StreamError,
    TransportError,
)
from schlep_engine.client.transport.base import (
    MultipartForm,
    RequestDescriptor,
    ResponseEnvelope,
)


class HTTPTransport:
    """
    Transport for HTTP calls to the Schlep-engine API, backed by aiohttp.

    The aiohttp session (and its connection pool) is created lazily on the
    first request, so the transport can be constructed outside a running
    event loop. It is shared by every call made through the same client.
    """

    def __init__(self, timeout: float = 30.0):
        """
        Initialize HTTP transport.

        Args:
            timeout: Total per-request timeout in seconds
        """
        self.timeout = timeout
        self._session: aiohttp.ClientSession | None = None
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout)
            )
        return self._session

    @staticmethod
    def _build_form(form: MultipartForm) -> aiohttp.FormData:
        data = aiohttp.FormData()
        data.add_field(
            form.file.name,
            form.file.content,
            filename=form.file.filename,
            content_type=form.file.content_type,
        )
        for name, value in form.fields.items():
            data.add_field(name, value)
        return data

    async def send(self, request: RequestDescriptor) -> ResponseEnvelope:
        """
        Send an HTTP request and read the full response body.

        Raises:
            TransportError: If communication fails
            RequestTimeoutError: If request times out
        """
        if self._closed:
            raise TransportError("Transport is closed")

        session = await self._get_session()

        kwargs = {"headers": dict(request.headers)}
        if request.form is not None:
            kwargs["data"] = self._build_form(request.form)
        elif request.json is not None:
            kwargs["json"] = request.json

        try:
            async with session.request(request.method, request.url, **kwargs) as response:
                body = await response.read()
                return ResponseEnvelope(
                    status=response.status,
                    body=body,
                    headers=dict(response.headers),
                )

        except asyncio.TimeoutError as e:
            raise RequestTimeoutError(
                f"Request timed out after {self.timeout}s: {request.method} {request.url}"
            ) from e
        except aiohttp.ClientError as e:
            raise TransportError(f"HTTP request failed: {str(e)}") from e

    async def open_websocket(
        self,
        url: str,
        headers: Mapping[str, str]
    ) -> aiohttp.ClientWebSocketResponse:
        """
        Open a WebSocket connection on the shared session.

        Raises:
            StreamError: If the handshake fails or times out
        """
        if self._closed:
            raise StreamError("Transport is closed")

        session = await self._get_session()

        try:
            return await session.ws_connect(url, headers=dict(headers))
        except asyncio.TimeoutError as e:
            raise StreamError(f"WebSocket connection timed out: {url}") from e
        except aiohttp.ClientError as e:
            raise StreamError(f"WebSocket connection failed: {str(e)}") from e

    async def close(self) -> None:
        """Close transport and cleanup resources."""
        self._closed = True

        if self._session and not self._session.closed:
            await self._session.close()
