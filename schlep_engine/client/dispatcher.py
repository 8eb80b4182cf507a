"""
Request dispatch and response normalization for the Schlep-engine SDK.

Every API call, whatever facade it comes from, goes through one
``Dispatcher``: it attaches authentication, sends the request through the
transport, classifies the response by HTTP status class and decodes the body
into the caller's type, or raises exactly one ``SchlepError``.

Author: Yobie Benjamin
Date: 2026-10-19
"""

from functools import lru_cache
from typing import Any

from loguru import logger
from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic_core import from_json, to_jsonable_python

from schlep_engine.client.exceptions import (
    APIError,
    AuthenticationError,
    InvalidResponseError,
    InvalidURLError,
    RateLimitError,
    ResourceNotFoundError,
)
from schlep_engine.client.transport.base import (
    MultipartForm,
    RequestDescriptor,
    ResponseEnvelope,
    Transport,
)

UNKNOWN_API_ERROR = "Unknown API error"

HTTP_METHODS = frozenset({"GET", "POST", "PUT", "DELETE"})


def _parse_json(text: str) -> Any:
    """JSON value of ``text``, or ``None`` when it is not (bounded-depth) JSON."""
    try:
        return from_json(text)
    except ValueError:
        return None


def _message_from(text: str, payload: Any) -> str:
    if isinstance(payload, dict) and isinstance(payload.get("message"), str):
        return payload["message"]

    return text if text else UNKNOWN_API_ERROR


def extract_error_message(text: str) -> str:
    """
    Best-effort message for a non-2xx response body.

    Uses the JSON object's ``message`` string when present, else the raw body
    text, else ``"Unknown API error"``.
    """
    return _message_from(text, _parse_json(text))


def _parse_retry_after(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def raise_for_status(response: ResponseEnvelope) -> None:
    """
    Raise the ``APIError`` matching a non-2xx response; return on 2xx.

    The literal status code is always preserved on the error.
    """
    if response.ok:
        return

    text = response.text
    payload = _parse_json(text)
    message = _message_from(text, payload)

    if isinstance(payload, dict):
        details = payload
    else:
        details = {"body": text} if text else {}

    status = response.status
    if status in (401, 403):
        raise AuthenticationError(message, status_code=status, details=details)
    if status == 404:
        raise ResourceNotFoundError(message, status_code=status, details=details)
    if status == 429:
        raise RateLimitError(
            message,
            status_code=status,
            retry_after=_parse_retry_after(response.headers.get("Retry-After")),
            details=details,
        )
    raise APIError(message, status_code=status, details=details)


def decode(text: str, response_type: Any) -> Any:
    """
    Decode a successful response body into ``response_type``.

    ``response_type=None`` discards the body: any JSON (or an empty body) is
    accepted and ``None`` is returned.

    Raises:
        InvalidResponseError: If the body is not valid JSON for the type
    """
    discard = response_type is None
    if discard:
        if not text.strip():
            return None
        response_type = Any

    try:
        value = _adapter(response_type).validate_json(text)
    except ValidationError as e:
        raise InvalidResponseError(f"Failed to parse response: {e}") from e

    return None if discard else value


@lru_cache(maxsize=None)
def _adapter(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


class Dispatcher:
    """
    Sends one request and turns one response into a value or an error.

    Stateless apart from the immutable base URL, API key and transport, so a
    single instance is safely shared by concurrent callers.
    """

    def __init__(self, transport: Transport, base_url: str, api_key: str, user_agent: str):
        self._transport = transport
        self._base_url = base_url
        self._api_key = api_key
        self._user_agent = user_agent

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def transport(self) -> Transport:
        return self._transport

    def auth_headers(self) -> dict[str, str]:
        """Headers carried by every request."""
        return {
            "Authorization": f"Bearer {self._api_key}",
            "User-Agent": self._user_agent,
        }

    def json_headers(self) -> dict[str, str]:
        return {**self.auth_headers(), "Content-Type": "application/json"}

    def url_for(self, path: str) -> str:
        if not path:
            raise InvalidURLError("Request path cannot be empty")
        return f"{self._base_url}{path}"

    async def _send(self, request: RequestDescriptor) -> ResponseEnvelope:
        logger.debug(f"{request.method} {request.url}")
        response = await self._transport.send(request)
        logger.debug(f"{request.method} {request.url} -> {response.status}")
        return response

    async def dispatch(
        self,
        method: str,
        path: str,
        body: Any = None,
        response_type: Any = Any,
    ) -> Any:
        """
        Send a JSON request and decode the response.

        Args:
            method: GET, POST, PUT or DELETE
            path: Server-relative path, appended verbatim to the base URL
            body: JSON-serializable value; pydantic models may appear anywhere in it
            response_type: Type to decode into (``None`` discards the body)

        Raises:
            TransportError: If communication fails
            APIError: If the API answers with a non-2xx status
            InvalidResponseError: If a 2xx body cannot be decoded
        """
        method = method.upper()
        if method not in HTTP_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        if isinstance(body, BaseModel):
            body = body.model_dump(mode="json", exclude_none=True)
        elif body is not None:
            body = to_jsonable_python(body)

        request = RequestDescriptor(
            method=method,
            url=self.url_for(path),
            headers=self.json_headers(),
            json=body,
        )
        response = await self._send(request)
        raise_for_status(response)
        return decode(response.text, response_type)

    async def dispatch_multipart(
        self,
        path: str,
        form: MultipartForm,
        response_type: Any = Any,
    ) -> Any:
        """
        POST a multipart form and decode the response.

        Content-Type is left to the transport so the boundary matches the body.
        """
        request = RequestDescriptor(
            method="POST",
            url=self.url_for(path),
            headers=self.auth_headers(),
            form=form,
        )
        response = await self._send(request)
        raise_for_status(response)
        return decode(response.text, response_type)

    async def download_raw(self, path: str) -> bytes:
        """GET ``path`` and return the raw response bytes."""
        request = RequestDescriptor(
            method="GET",
            url=self.url_for(path),
            headers=self.json_headers(),
        )
        response = await self._send(request)
        raise_for_status(response)
        return response.body
