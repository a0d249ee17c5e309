"""Transport layer: the capability the client uses to send HTTP requests.

The client only needs "send a request, get a response or an exception".
HTTPTransport goes to the network through httpx; MockTransport answers
from memory and is what the tests use.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import httpx


@runtime_checkable
class Transport(Protocol):
    """Interface that both HTTPTransport and MockTransport implement."""

    def send(self, request: httpx.Request) -> httpx.Response: ...
    def close(self) -> None: ...


class HTTPTransport:
    """Production transport backed by a synchronous ``httpx.Client``.

    Pass ``client`` to reuse an existing httpx client (its lifetime then
    stays with the caller); otherwise one is created and owned here.
    """

    def __init__(
        self, timeout: float = 5.0, client: httpx.Client | None = None
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout)

    def send(self, request: httpx.Request) -> httpx.Response:
        return self._client.send(request)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()


class MockTransport:
    """Transport returning a fixed body and status without any I/O.

    When ``error`` is set, ``send`` raises it instead of building a
    response. The client wraps httpx and OS errors in TransportError;
    other exception types reach the caller unchanged. Requests are
    recorded in ``requests`` for inspection.
    """

    def __init__(
        self,
        body: str | bytes = b"",
        status_code: int = 200,
        error: Exception | None = None,
    ) -> None:
        self.body = body.encode("utf-8") if isinstance(body, str) else body
        self.status_code = status_code
        self.error = error
        self.requests: list[httpx.Request] = []

    def send(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(
            self.status_code, content=self.body, request=request
        )

    def close(self) -> None:
        pass
