"""Base60 codec for fixed-width binary identifiers.

Byte strings, 64-bit integers, UUIDs and ULIDs are rendered as URL-safe text
over a 60-symbol alphabet. Fixed-width outputs are zero-padded so that equal
length strings compare lexicographically in numeric order.
"""

from .errors import (
    Base60Error,
    DomainError,
    FormatError,
    InvalidCharacterError,
    LengthExceededError,
    LengthMismatchError,
)
from .identifiers import (
    CROCKFORD_ALPHABET,
    ID_BYTES,
    ID_LENGTH,
    INT64_BYTES,
    INT64_LENGTH,
    ULID_LENGTH,
    decode_int64,
    decode_ulid,
    decode_uuid,
    encode_int64,
    encode_ulid,
    encode_uuid,
    is_base60_id,
    new_ulid,
    new_uuid4,
    new_uuid7,
)
from .numeral import (
    ALPHABET,
    BASE,
    ZERO_SYMBOL,
    Base60String,
    bytes_to_integer,
    compare_as_bigint,
    decode_to_bytes,
    decode_to_integer,
    encode_bytes,
    encode_integer,
    ensure_base60,
    integer_to_bytes,
    is_valid_base60,
)

__all__ = [
    "__version__",
    "ALPHABET",
    "BASE",
    "CROCKFORD_ALPHABET",
    "ID_BYTES",
    "ID_LENGTH",
    "INT64_BYTES",
    "INT64_LENGTH",
    "ULID_LENGTH",
    "ZERO_SYMBOL",
    "Base60Error",
    "Base60String",
    "DomainError",
    "FormatError",
    "InvalidCharacterError",
    "LengthExceededError",
    "LengthMismatchError",
    "bytes_to_integer",
    "compare_as_bigint",
    "decode_int64",
    "decode_to_bytes",
    "decode_to_integer",
    "decode_ulid",
    "decode_uuid",
    "encode_bytes",
    "encode_int64",
    "encode_integer",
    "encode_ulid",
    "encode_uuid",
    "ensure_base60",
    "integer_to_bytes",
    "is_base60_id",
    "is_valid_base60",
    "new_ulid",
    "new_uuid4",
    "new_uuid7",
]

__version__ = "0.1.0"
