"""Client library for Forgettable distribution-tracking servers."""

from forgettable.client import ForgettableClient
from forgettable.config import ClientConfig
from forgettable.errors import (
    APIError,
    DecodeError,
    ForgettableError,
    HTTPStatusError,
    TransportError,
)
from forgettable.transport import HTTPTransport, MockTransport, Transport
from forgettable.types import DatabaseSizeResponse, Distribution, Response, Value

__all__ = [
    "APIError",
    "ClientConfig",
    "DatabaseSizeResponse",
    "DecodeError",
    "Distribution",
    "ForgettableClient",
    "ForgettableError",
    "HTTPStatusError",
    "HTTPTransport",
    "MockTransport",
    "Response",
    "Transport",
    "TransportError",
    "Value",
]
