"""
Shared fixtures for the Schlep-engine SDK tests.

``fake_api`` serves a real aiohttp application on localhost so requests go
through the actual transport; each route records what it received.
"""

import asyncio
import json
from dataclasses import dataclass, field
from typing import Any

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from schlep_engine import SchlepClient


@dataclass
class RecordedRequest:
    """What the fake API saw for one request."""
    method: str
    path: str
    raw_path: str
    query: dict[str, str]
    headers: Any
    body: bytes = b""
    form: dict[str, Any] = field(default_factory=dict)
    files: dict[str, dict[str, Any]] = field(default_factory=dict)

    @property
    def json(self) -> Any:
        return json.loads(self.body)

    @classmethod
    async def capture(cls, request: web.Request) -> "RecordedRequest":
        recorded = cls(
            method=request.method,
            path=request.path,
            raw_path=request.raw_path,
            query=dict(request.query),
            headers=request.headers.copy(),
        )
        if request.content_type.startswith("multipart/"):
            post = await request.post()
            for name, value in post.items():
                if isinstance(value, web.FileField):
                    recorded.files[name] = {
                        "filename": value.filename,
                        "content": value.file.read(),
                        "content_type": value.content_type,
                    }
                else:
                    recorded.form[name] = value
        else:
            recorded.body = await request.read()
        return recorded


class FakeAPI:
    """In-process stand-in for the platform API."""

    def __init__(self):
        self.app = web.Application()
        self.requests: list[RecordedRequest] = []
        self.subscriptions: list[Any] = []
        self.server: TestServer | None = None
        self._clients: list[SchlepClient] = []

    def route(
        self,
        method: str,
        path: str,
        *,
        status: int = 200,
        json: Any = None,
        text: str | None = None,
        body: bytes | None = None,
        headers: dict[str, str] | None = None,
        delay: float = 0,
    ) -> None:
        """Register a canned response for ``method path``."""
        async def handler(request: web.Request) -> web.Response:
            self.requests.append(await RecordedRequest.capture(request))
            if delay:
                await asyncio.sleep(delay)
            if json is not None:
                return web.json_response(json, status=status, headers=headers)
            if body is not None:
                return web.Response(
                    body=body,
                    status=status,
                    headers=headers,
                    content_type="application/octet-stream",
                )
            return web.Response(text=text or "", status=status, headers=headers)

        self.app.router.add_route(method, path, handler)

    def websocket(self, path: str = "/stream") -> None:
        """Accept a WebSocket, record the first message and acknowledge it."""
        async def handler(request: web.Request) -> web.WebSocketResponse:
            self.requests.append(await RecordedRequest.capture(request))
            ws = web.WebSocketResponse()
            await ws.prepare(request)
            message = await ws.receive_json()
            self.subscriptions.append(message)
            await ws.send_json({"event_type": "subscribed", "data": {}, "timestamp": "2026-01-01T00:00:00Z"})
            await ws.receive()
            return ws

        self.app.router.add_get(path, handler)

    async def start(self) -> str:
        if self.server is None:
            self.server = TestServer(self.app)
            await self.server.start_server()
        return self.url

    @property
    def url(self) -> str:
        return f"http://{self.server.host}:{self.server.port}"

    async def client(self, api_key: str = "test-api-key", **kwargs: Any) -> SchlepClient:
        """Start the server if needed and return a client pointed at it."""
        await self.start()
        client = SchlepClient(api_key=api_key, base_url=self.url, **kwargs)
        self._clients.append(client)
        return client

    async def close(self) -> None:
        for client in self._clients:
            await client.close()
        if self.server is not None:
            await self.server.close()


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep SCHLEP_* variables and stray .env files out of every test."""
    for name in ("SCHLEP_API_KEY", "SCHLEP_BASE_URL", "SCHLEP_TIMEOUT_SECONDS"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest_asyncio.fixture
async def fake_api():
    """Fresh fake API per test."""
    api = FakeAPI()
    yield api
    await api.close()
