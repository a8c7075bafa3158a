"""Generate and validate short identifiers that carry a checksummed timestamp.

A raw identifier is laid out as::

    prefix | obfuscated timestamp (6) | suffix | checksum (1)

The prefix and suffix are the two halves of ``length - 7`` random symbols. The
timestamp counts seconds since :data:`EPOCH` in big-endian base 32. Every
timestamp symbol is shifted by the symbol sum of the plaintext body, and that
same sum (mod 32) is stored as the trailing checksum, so the checksum doubles as
the key that reverses the shift.

This is an obfuscation scheme, not a signature. Identifiers are unpredictable
only because of the random symbols drawn from :func:`secrets.randbelow`.
"""

from __future__ import annotations

import datetime as dt
import logging
import secrets
from typing import Callable, Iterable
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .exceptions import ConfigurationError, InvalidLength, OutOfRange
from .formatting import format_with_separator, strip_separators

__all__ = [
    "ALPHABET",
    "DEFAULT_LENGTH",
    "DISPLAY_TIMEZONE",
    "EPOCH",
    "MIN_LENGTH",
    "TIMESTAMP_WIDTH",
    "decode_timestamp",
    "encode_timestamp",
    "generate",
    "is_valid",
    "resolve_timezone",
    "validate",
]

logger = logging.getLogger(__name__)

# Digits and lowercase letters without ``0``, ``i``, ``l`` and ``o``.
ALPHABET = "123456789abcdefghjkmnpqrstuvwxyz"
_BASE = len(ALPHABET)
_VALUES = {char: value for value, char in enumerate(ALPHABET)}

EPOCH = 1_735_689_600  # 2025-01-01T00:00:00Z
TIMESTAMP_WIDTH = 6
MIN_LENGTH = TIMESTAMP_WIDTH + 2
DEFAULT_LENGTH = 10
DISPLAY_TIMEZONE = "America/Manaus"

_MAX_ELAPSED = _BASE**TIMESTAMP_WIDTH
_MIN_RAW_LENGTH = TIMESTAMP_WIDTH + 1


def encode_timestamp(elapsed: int) -> str:
    """Encode ``elapsed`` seconds as :data:`TIMESTAMP_WIDTH` symbols."""

    if not 0 <= elapsed < _MAX_ELAPSED:
        raise OutOfRange(elapsed)
    digits: list[str] = []
    number = elapsed
    for _ in range(TIMESTAMP_WIDTH):
        number, remainder = divmod(number, _BASE)
        digits.append(ALPHABET[remainder])
    return "".join(reversed(digits))


def decode_timestamp(segment: str) -> int:
    """Decode a big-endian base-32 segment back into seconds since the epoch."""

    number = 0
    for char in segment:
        number = number * _BASE + _VALUES[char]
    return number


def _symbol_sum(symbols: Iterable[str]) -> int:
    return sum(_VALUES[char] for char in symbols)


def _shift(segment: str, offset: int) -> str:
    return "".join(ALPHABET[(_VALUES[char] + offset) % _BASE] for char in segment)


def _segment_start(body_length: int) -> int:
    # Shared by generate() and validate(); with ``n`` random symbols the body is
    # ``n + 6`` long and this yields ``n // 2``, the end of the prefix.
    return body_length // 2 - TIMESTAMP_WIDTH // 2


def _resolve_now(now: dt.datetime | None) -> dt.datetime:
    if now is None:
        return dt.datetime.now(dt.UTC)
    # Naive datetimes are read as UTC, never as local time.
    return now if now.tzinfo is not None else now.replace(tzinfo=dt.UTC)


def resolve_timezone(timezone: str | dt.tzinfo | None = None) -> dt.tzinfo:
    """Return the tzinfo for ``timezone``, defaulting to :data:`DISPLAY_TIMEZONE`."""

    if isinstance(timezone, dt.tzinfo):
        return timezone
    name = timezone or DISPLAY_TIMEZONE
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ConfigurationError(f"Unknown timezone {name!r}") from exc


def generate(
    length: int = DEFAULT_LENGTH,
    with_separator: bool = True,
    *,
    now: dt.datetime | None = None,
    random_source: Callable[[int], int] | None = None,
) -> str:
    """Generate a new identifier of ``length`` symbols.

    ``now`` and ``random_source`` replace the system clock and
    :func:`secrets.randbelow`; ``random_source(n)`` must return an integer in
    ``[0, n)``.
    """

    if length < MIN_LENGTH:
        raise InvalidLength(length, MIN_LENGTH)
    moment = _resolve_now(now)
    stamp = encode_timestamp(int(moment.timestamp()) - EPOCH)
    draw = random_source or secrets.randbelow
    randoms = "".join(ALPHABET[draw(_BASE)] for _ in range(length - _MIN_RAW_LENGTH))

    total = _symbol_sum(stamp) + _symbol_sum(randoms)
    start = _segment_start(len(randoms) + TIMESTAMP_WIDTH)
    uid = randoms[:start] + _shift(stamp, total) + randoms[start:] + ALPHABET[total % _BASE]
    logger.debug("Generated UID of length %d at %s", length, moment.isoformat())
    return format_with_separator(uid) if with_separator else uid


def _reject(uid: str, reason: str) -> None:
    logger.debug("Rejected UID %r: %s", uid, reason)
    return None


def validate(
    uid: str,
    *,
    now: dt.datetime | None = None,
    timezone: str | dt.tzinfo | None = None,
) -> dt.datetime | None:
    """Return the creation time embedded in ``uid`` or ``None`` if it is invalid.

    Separators are ignored. The result is expressed in ``timezone`` (default
    :data:`DISPLAY_TIMEZONE`). Every kind of failure yields ``None``; the reason
    is only written to the debug log. An unknown ``timezone`` raises
    :class:`~microuid.exceptions.ConfigurationError` whatever ``uid`` holds.
    """

    zone = resolve_timezone(timezone)
    raw = strip_separators(uid)
    if len(raw) < _MIN_RAW_LENGTH:
        return _reject(uid, "too short")
    if any(char not in _VALUES for char in raw):
        return _reject(uid, "unexpected character")

    body, checksum = raw[:-1], raw[-1]
    start = _segment_start(len(body))
    end = start + TIMESTAMP_WIDTH
    stamp = _shift(body[start:end], -_VALUES[checksum])
    if ALPHABET[_symbol_sum(body[:start] + stamp + body[end:]) % _BASE] != checksum:
        return _reject(uid, "checksum mismatch")

    created = dt.datetime.fromtimestamp(decode_timestamp(stamp) + EPOCH, tz=zone)
    if created >= _resolve_now(now):
        return _reject(uid, "timestamp in the future")
    return created


def is_valid(
    uid: str,
    *,
    now: dt.datetime | None = None,
    timezone: str | dt.tzinfo | None = None,
) -> bool:
    return validate(uid, now=now, timezone=timezone) is not None
