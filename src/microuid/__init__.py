"""Short, typeable identifiers with an embedded, checksummed timestamp."""

from .codec import (
    ALPHABET,
    DEFAULT_LENGTH,
    DISPLAY_TIMEZONE,
    EPOCH,
    MIN_LENGTH,
    TIMESTAMP_WIDTH,
    decode_timestamp,
    encode_timestamp,
    generate,
    is_valid,
    resolve_timezone,
    validate,
)
from .config import CodecConfig, load_config
from .exceptions import ConfigurationError, InvalidLength, MicroUIDError, OutOfRange
from .formatting import format_with_separator, group_sizes, strip_separators
from .metadata import __version__

__all__ = [
    "ALPHABET",
    "DEFAULT_LENGTH",
    "DISPLAY_TIMEZONE",
    "EPOCH",
    "MIN_LENGTH",
    "TIMESTAMP_WIDTH",
    "CodecConfig",
    "ConfigurationError",
    "InvalidLength",
    "MicroUIDError",
    "OutOfRange",
    "__version__",
    "decode_timestamp",
    "encode_timestamp",
    "format_with_separator",
    "generate",
    "group_sizes",
    "is_valid",
    "load_config",
    "resolve_timezone",
    "strip_separators",
    "validate",
]
