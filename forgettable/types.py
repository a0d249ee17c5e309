"""Core Forgettable types: distribution values and response envelopes.

Decoding follows the server's JSON schema strictly: a missing or null key
decodes to the zero value, a value of the wrong JSON type raises
TypeError.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any


def _int(d: dict[str, Any], key: str) -> int:
    value = d.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{key!r}: expected an integer, got {value!r}")
    return value


def _float(d: dict[str, Any], key: str) -> float:
    value = d.get(key)
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{key!r}: expected a number, got {value!r}")
    if not math.isfinite(value):
        raise ValueError(f"{key!r}: number out of range")
    return float(value)


def _str(d: dict[str, Any], key: str) -> str:
    value = d.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"{key!r}: expected a string, got {value!r}")
    return value


def _bool(d: dict[str, Any], key: str) -> bool:
    value = d.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise TypeError(f"{key!r}: expected a boolean, got {value!r}")
    return value


def _object(value: Any, what: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise TypeError(f"{what}: expected a JSON object, got {value!r}")
    return value


@dataclass(frozen=True)
class Value:
    """Observed count and probability of one field (bin) in a distribution."""

    field: str
    count: int = 0
    probability: float = 0.0

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Value:
        """Deserialize a value from its wire representation."""
        d = _object(d, "value")
        return cls(
            field=_str(d, "bin"),
            count=_int(d, "count"),
            probability=_float(d, "p"),
        )


@dataclass
class Distribution:
    """Snapshot of a named distribution as reported by the server.

    Ordering of ``values`` is whatever the server returned. For
    most-probable queries the server ranks them; otherwise no order
    is guaranteed.
    """

    name: str = ""
    values: list[Value] = field(default_factory=list)
    z: int = 0  # normalization constant
    time: int = 0  # server clock at snapshot time
    rate: float = 0.0
    prune: bool = False

    @classmethod
    def from_dict(cls, d: dict[str, Any] | None) -> Distribution:
        """Deserialize a distribution. A null payload yields an empty one."""
        if d is None:
            return cls()
        d = _object(d, "distribution")
        values = d.get("data") or []
        if not isinstance(values, list):
            raise TypeError(f"'data': expected a list, got {values!r}")
        return cls(
            name=_str(d, "distribution"),
            values=[Value.from_dict(v) for v in values],
            z=_int(d, "Z"),
            time=_int(d, "T"),
            rate=_float(d, "rate"),
            prune=_bool(d, "prune"),
        )


@dataclass
class Response:
    """Envelope returned by the distribution endpoints.

    ``distribution`` is only meaningful when ``status_code`` is 200.
    """

    status_code: int
    status_txt: str = ""
    distribution: Distribution = field(default_factory=Distribution)

    @property
    def ok(self) -> bool:
        return self.status_code == 200

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Response:
        """Deserialize an envelope carrying a distribution payload."""
        d = _object(d, "envelope")
        return cls(
            status_code=_int(d, "status_code"),
            status_txt=_str(d, "status_txt"),
            distribution=Distribution.from_dict(d.get("data")),
        )


@dataclass
class DatabaseSizeResponse:
    """Envelope returned by the ``dbsize`` endpoint."""

    status_code: int
    status_txt: str = ""
    size: int = 0

    @property
    def ok(self) -> bool:
        return self.status_code == 200

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> DatabaseSizeResponse:
        """Deserialize an envelope carrying an integer payload."""
        d = _object(d, "envelope")
        return cls(
            status_code=_int(d, "status_code"),
            status_txt=_str(d, "status_txt"),
            size=_int(d, "data"),
        )
