"""Exceptions raised by the Forgettable client."""

from __future__ import annotations


class ForgettableError(RuntimeError):
    """Base class for every failure surfaced by the client."""


class TransportError(ForgettableError):
    """The transport could not complete the request."""


class HTTPStatusError(ForgettableError):
    """The server answered with an HTTP status other than 200."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Got response status code {status_code}.")
        self.status_code = status_code


class DecodeError(ForgettableError):
    """The response body did not match the expected JSON schema."""


class APIError(ForgettableError):
    """The server returned an envelope reporting an application error.

    The server may answer HTTP 200 while the envelope carries its own
    non-200 ``status_code``; ``status_txt`` holds the server's error code,
    e.g. ``MISSING_ARG_DISTRIBUTION``.
    """

    def __init__(self, status_txt: str, status_code: int | None = None) -> None:
        super().__init__(status_txt)
        self.status_txt = status_txt
        self.status_code = status_code
