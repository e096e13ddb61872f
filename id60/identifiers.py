from __future__ import annotations

import operator
import re
import secrets
import struct
import time
import uuid

from .errors import DomainError, FormatError, LengthMismatchError
from .numeral import (
    Base60String,
    bytes_to_integer,
    decode_to_integer,
    encode_integer,
    integer_to_bytes,
    is_valid_base60,
)

INT64_BYTES = 8
INT64_LENGTH = 11
ID_BYTES = 16
ID_LENGTH = 22
ULID_LENGTH = 26

CROCKFORD_ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
_CROCKFORD_DIGITS: dict[str, int] = {ch: i for i, ch in enumerate(CROCKFORD_ALPHABET)}
_ULID_RE = re.compile(r"[0-9A-HJKMNP-TV-Z]{26}", re.IGNORECASE | re.ASCII)

_HEX = frozenset("0123456789abcdefABCDEF")
_INT64_LIMIT = 1 << (8 * INT64_BYTES)
_TIMESTAMP_LIMIT = 1 << 48


def _require_width(text: str, width: int, label: str) -> str:
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    if len(text) != width:
        raise LengthMismatchError(label, expected=width, actual=len(text))
    return text


def encode_int64(value: int) -> Base60String:
    if isinstance(value, bool):
        raise TypeError("value must be an int, got bool")
    # Fixed-size integer scalars (e.g. numpy.uint64) widen through __index__.
    value = operator.index(value)
    if value >= _INT64_LIMIT:
        raise DomainError(f"value does not fit in 64 bits: {value}")
    return encode_integer(value, INT64_LENGTH)


def decode_int64(text: str) -> int:
    value = decode_to_integer(_require_width(text, INT64_LENGTH, "base60 int64"))
    if value >= _INT64_LIMIT:
        raise DomainError(f"decoded value does not fit in 64 bits: {text!r}")
    return value


def encode_uuid(value: str | uuid.UUID) -> Base60String:
    if isinstance(value, uuid.UUID):
        value = str(value)
    if not isinstance(value, str):
        raise TypeError(f"expected UUID text, got {type(value).__name__}")
    hex_text = value.replace("-", "")
    if len(hex_text) != 32 or not all(ch in _HEX for ch in hex_text):
        raise FormatError(f"invalid UUID: {value!r}")
    return encode_integer(bytes_to_integer(bytes.fromhex(hex_text)), ID_LENGTH)


def decode_uuid(text: str) -> str:
    value = decode_to_integer(_require_width(text, ID_LENGTH, "base60 UUID"))
    # Fixed 16-byte expansion keeps leading zero bytes of the UUID.
    return str(uuid.UUID(bytes=integer_to_bytes(value, ID_BYTES)))


def encode_ulid(value: str) -> Base60String:
    if not isinstance(value, str) or not _ULID_RE.fullmatch(value):
        raise FormatError(f"invalid ULID format: {value!r}")
    canonical = value.upper()
    if canonical[0] > "7":
        raise FormatError(f"ULID exceeds 128 bits: {value!r}")
    n = 0
    for ch in canonical:
        digit = _CROCKFORD_DIGITS.get(ch)
        if digit is None:
            raise FormatError(f"invalid ULID character {ch!r}: {value!r}")
        n = (n << 5) | digit
    return encode_integer(n, ID_LENGTH)


def decode_ulid(text: str) -> str:
    value = decode_to_integer(_require_width(text, ID_LENGTH, "base60 ULID"))
    n = bytes_to_integer(integer_to_bytes(value, ID_BYTES))
    # 26 groups of 5 bits; the top 2 of the 130 bits are always zero.
    chars: list[str] = []
    for _ in range(ULID_LENGTH):
        n, rem = divmod(n, 32)
        chars.append(CROCKFORD_ALPHABET[rem])
    return "".join(reversed(chars))


def _timestamp_ms(ts_ms: int | None) -> int:
    if ts_ms is None:
        return int(time.time() * 1000)
    if isinstance(ts_ms, bool) or not isinstance(ts_ms, int):
        raise TypeError(f"ts_ms must be an int, got {type(ts_ms).__name__}")
    if ts_ms < 0 or ts_ms >= _TIMESTAMP_LIMIT:
        raise DomainError(f"timestamp out of 48-bit range: {ts_ms}")
    return ts_ms


def new_uuid4() -> Base60String:
    return encode_integer(uuid.uuid4().int, ID_LENGTH)


def new_uuid7(ts_ms: int | None = None) -> Base60String:
    ts_bytes = struct.pack(">Q", _timestamp_ms(ts_ms))[2:]  # last 6 bytes
    raw = bytearray(ts_bytes + secrets.token_bytes(10))
    raw[6] = (raw[6] & 0x0F) | 0x70
    raw[8] = (raw[8] & 0x3F) | 0x80
    return encode_integer(bytes_to_integer(bytes(raw)), ID_LENGTH)


def new_ulid(ts_ms: int | None = None) -> Base60String:
    entropy = int.from_bytes(secrets.token_bytes(10), "big")
    return encode_integer((_timestamp_ms(ts_ms) << 80) | entropy, ID_LENGTH)


def is_base60_id(value: object) -> bool:
    if not isinstance(value, str) or len(value) != ID_LENGTH:
        return False
    return is_valid_base60(value)
