"""Error types raised while generating identifiers."""

from __future__ import annotations

from typing import Any

from .serialization import json_encode


class MicroUIDError(Exception):
    """Base error type."""

    def to_dict(self) -> dict[str, Any]:
        return {"error": {"type": type(self).__name__, "detail": str(self)}}

    def to_json(self) -> bytes:
        return json_encode(self.to_dict())


class InvalidLength(MicroUIDError, ValueError):
    """Requested identifier length cannot hold a timestamp, checksum and randomness."""

    def __init__(self, length: int, minimum: int) -> None:
        super().__init__(f"UID length must be at least {minimum}, got {length}")
        self.length = length
        self.minimum = minimum


class OutOfRange(MicroUIDError, ValueError):
    """The current time does not fit in the timestamp segment."""

    def __init__(self, elapsed: int) -> None:
        super().__init__(f"{elapsed} seconds since epoch is outside the representable range")
        self.elapsed = elapsed


class ConfigurationError(MicroUIDError, ValueError):
    """A setting such as the display timezone cannot be used."""
