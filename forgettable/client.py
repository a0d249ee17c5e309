"""HTTP client for Forgettable servers.

Every call is a blocking GET against one of a handful of endpoints.
Read endpoints answer with a JSON envelope; increments answer with the
literal body ``OK`` on success and an error envelope otherwise.
"""

from __future__ import annotations

import json
import logging
from typing import Any
from urllib.parse import urlencode

import httpx

from forgettable.config import ClientConfig
from forgettable.errors import (
    APIError,
    DecodeError,
    HTTPStatusError,
    TransportError,
)
from forgettable.transport import HTTPTransport, Transport
from forgettable.types import DatabaseSizeResponse, Response

logger = logging.getLogger(__name__)

STATUS_OK = 200
INCREMENT_OK = b"OK"


class ForgettableClient:
    """Makes requests to a Forgettable server.

    The client holds no per-call state, so one instance can be shared by
    several threads as long as its transport can (``HTTPTransport`` can).
    """

    def __init__(self, root_url: str, transport: Transport | None = None) -> None:
        self.root_url = root_url.rstrip("/")
        self.transport = transport if transport is not None else HTTPTransport()

    @classmethod
    def from_config(cls, config: ClientConfig | None = None) -> ForgettableClient:
        config = config or ClientConfig()
        return cls(config.root_url, HTTPTransport(timeout=config.timeout))

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> ForgettableClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # -- reads --

    def distribution(self, distribution: str) -> Response:
        """Return every field of the given distribution."""
        return self._send("dist", {"distribution": distribution})

    def most_probable(self, distribution: str, n: int) -> Response:
        """Return the n most probable fields, ranked by the server."""
        return self._send("nmostprobable", {"distribution": distribution, "N": n})

    def field(self, distribution: str, field: str) -> Response:
        """Return a single field of the given distribution."""
        return self._send("get", {"distribution": distribution, "field": field})

    def database_size(self) -> int:
        """Return the number of distributions stored on the server."""
        body = self._request("dbsize")
        res = _decode(body, DatabaseSizeResponse.from_dict)
        if not res.ok:
            raise APIError(res.status_txt, res.status_code)
        return res.size

    # -- writes --

    def increment(self, distribution: str, field: str) -> None:
        """Increment a field by a single point. Raises on failure."""
        body = self._request("incr", {"distribution": distribution, "field": field})
        _check_increment(body)

    def increment_by_n(self, distribution: str, field: str, n: int) -> None:
        """Increment a field by n. Raises on failure."""
        body = self._request(
            "incr", {"distribution": distribution, "field": field, "N": n}
        )
        _check_increment(body)

    # -- plumbing --

    def _send(self, endpoint: str, params: dict[str, Any]) -> Response:
        body = self._request(endpoint, params)
        res = _decode(body, Response.from_dict)
        if not res.ok:
            raise APIError(res.status_txt, res.status_code)
        return res

    def _request(self, endpoint: str, params: dict[str, Any] | None = None) -> bytes:
        """Send a GET to the endpoint and return the raw response body.

        httpx errors, OS-level errors and URLs httpx cannot parse become
        TransportError. Any other exception raised by the transport
        propagates as is.
        """
        url = self.build_url(endpoint, params)
        logger.debug("GET %s", url)
        try:
            response = self.transport.send(httpx.Request("GET", url))
        except (httpx.HTTPError, httpx.InvalidURL, OSError) as e:
            raise TransportError(str(e) or type(e).__name__) from e

        try:
            if response.status_code != STATUS_OK:
                raise HTTPStatusError(response.status_code)
            return response.read()
        finally:
            response.close()

    def build_url(self, endpoint: str, params: dict[str, Any] | None = None) -> str:
        """Return ``{root_url}/{endpoint}`` plus the encoded query, if any."""
        url = f"{self.root_url}/{endpoint}"
        if params:
            query = urlencode(sorted((k, str(v)) for k, v in params.items()))
            url = f"{url}?{query}"
        return url


def _decode(body: bytes, from_dict: Any) -> Any:
    """Parse a JSON envelope with the given constructor."""
    try:
        payload = json.loads(body)
        if not isinstance(payload, dict):
            raise TypeError(f"expected a JSON object, got {type(payload).__name__}")
        return from_dict(payload)
    except (ValueError, TypeError, OverflowError) as e:
        raise DecodeError(f"Invalid response body: {e}") from e


def _check_increment(body: bytes) -> None:
    if body == INCREMENT_OK:
        return
    res = _decode(body, Response.from_dict)
    raise APIError(res.status_txt, res.status_code)
