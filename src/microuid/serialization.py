"""JSON helpers backed by msgspec."""

from __future__ import annotations

from typing import Any

import msgspec

_encoder = msgspec.json.Encoder()
_decoder = msgspec.json.Decoder()


def json_encode(value: Any) -> bytes:
    """Serialize ``value`` to JSON bytes; aware datetimes become RFC 3339 strings."""

    return _encoder.encode(value)


def json_decode(data: bytes | str) -> Any:
    return _decoder.decode(data)


def json_line(value: Any) -> str:
    """Render ``value`` as a single line of JSON text for terminal output."""

    return json_encode(value).decode()
