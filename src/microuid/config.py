"""Codec configuration objects."""

from __future__ import annotations

import os
from typing import Annotated, Any, Mapping

import msgspec
from msgspec import Meta, Struct

from .codec import DEFAULT_LENGTH, DISPLAY_TIMEZONE, MIN_LENGTH, resolve_timezone

ENV_PREFIX = "MICROUID_"
_ENV_FIELDS: tuple[tuple[str, str], ...] = (
    ("LENGTH", "length"),
    ("SEPARATOR", "with_separator"),
    ("TIMEZONE", "display_timezone"),
)


class CodecConfig(Struct, frozen=True):
    """Defaults applied when generating and displaying identifiers."""

    length: Annotated[int, Meta(ge=MIN_LENGTH)] = DEFAULT_LENGTH
    with_separator: bool = True
    display_timezone: str = DISPLAY_TIMEZONE

    def __post_init__(self) -> None:
        resolve_timezone(self.display_timezone)


def load_config(environ: Mapping[str, str] | None = None) -> CodecConfig:
    """Build a :class:`CodecConfig` from ``MICROUID_*`` environment variables.

    Values are converted leniently (``"12"`` becomes ``12``, ``"false"`` becomes
    ``False``). Invalid values, including unknown timezone names, raise
    :class:`msgspec.ValidationError`.
    """

    source = os.environ if environ is None else environ
    data: dict[str, Any] = {}
    for suffix, field in _ENV_FIELDS:
        value = source.get(ENV_PREFIX + suffix)
        if value:
            data[field] = value
    return msgspec.convert(data, CodecConfig, strict=False)
