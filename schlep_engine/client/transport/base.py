"""
Transport protocol for the Schlep-engine SDK.

Author: Yobie Benjamin
Date: 2026-10-19
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Protocol

import aiohttp


@dataclass(frozen=True)
class FilePart:
    """Binary file part of a multipart form."""
    content: bytes
    filename: str
    name: str = "file"
    content_type: str = "application/octet-stream"


@dataclass(frozen=True)
class MultipartForm:
    """A file part plus optional text fields."""
    file: FilePart
    fields: dict[str, str] = field(default_factory=dict)

    def with_field(self, name: str, value: str) -> "MultipartForm":
        """Return a copy with an extra text field."""
        return MultipartForm(file=self.file, fields={**self.fields, name: value})


@dataclass(frozen=True)
class RequestDescriptor:
    """A single outbound request. Exactly one of ``json``/``form`` may be set."""
    method: str
    url: str
    headers: Mapping[str, str]
    json: Any = None
    form: MultipartForm | None = None

    def __post_init__(self) -> None:
        if self.json is not None and self.form is not None:
            raise ValueError("A request carries either a JSON body or a multipart form, not both")


@dataclass(frozen=True)
class ResponseEnvelope:
    """Raw status, headers and body of a response."""
    status: int
    body: bytes
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class Transport(Protocol):
    """Protocol for the transport layer between SDK and API."""

    async def send(self, request: RequestDescriptor) -> ResponseEnvelope:
        """
        Send one request and return the raw response.

        Any status code is a valid response; classification happens in the
        dispatcher.

        Raises:
            TransportError: If the exchange could not be completed
            RequestTimeoutError: If the request times out
        """
        ...

    async def open_websocket(
        self,
        url: str,
        headers: Mapping[str, str]
    ) -> aiohttp.ClientWebSocketResponse:
        """
        Open a WebSocket connection.

        Raises:
            StreamError: If the connection cannot be established
        """
        ...

    async def close(self) -> None:
        """Close transport and cleanup resources."""
        ...
