"""
Schlep-engine transport layer.

Author: Yobie Benjamin
Date: 2026-10-19
"""

from schlep_engine.client.transport.base import (
    FilePart,
    MultipartForm,
    RequestDescriptor,
    ResponseEnvelope,
    Transport,
)
from schlep_engine.client.transport.http import HTTPTransport

__all__ = [
    "Transport",
    "HTTPTransport",
    "FilePart",
    "MultipartForm",
    "RequestDescriptor",
    "ResponseEnvelope",
]
