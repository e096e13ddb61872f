"""Base60 positional numeral conversion.

Every value passes through a non-negative ``int``: bytes are read big-endian,
text is read most-significant digit first. Leading zero bytes of an arbitrary
byte string are therefore not recoverable from its encoding; callers that need
exact byte round-trips must decode to a declared fixed length (see
``integer_to_bytes(..., fixed_length=...)``).
"""

from __future__ import annotations

from typing import NewType

from .errors import DomainError, InvalidCharacterError, LengthExceededError

# O and l are excluded so they cannot be mistaken for 0 and 1.
ALPHABET = "0123456789ABCDEFGHIJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
BASE = len(ALPHABET)
ZERO_SYMBOL = ALPHABET[0]

_DIGITS: dict[str, int] = {ch: i for i, ch in enumerate(ALPHABET)}

Base60String = NewType("Base60String", str)


def _require_int(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise DomainError(f"{name} must be non-negative, got {value}")
    return value


def _require_bytes(raw: object) -> bytes:
    if not isinstance(raw, (bytes, bytearray, memoryview)):
        raise TypeError(f"expected bytes, got {type(raw).__name__}")
    return bytes(raw)


def left_pad(text: str, width: int) -> Base60String:
    if len(text) > width:
        raise LengthExceededError(
            f"encoded value length ({len(text)}) exceeds fixed length {width}"
        )
    return Base60String(ZERO_SYMBOL * (width - len(text)) + text)


def encode_integer(value: int, pad_length: int | None = None) -> Base60String:
    n = _require_int(value, "value")
    chars: list[str] = []
    while n > 0:
        n, rem = divmod(n, BASE)
        chars.append(ALPHABET[rem])
    encoded = "".join(reversed(chars)) if chars else ZERO_SYMBOL
    if pad_length is not None:
        return left_pad(encoded, _require_int(pad_length, "pad_length"))
    return Base60String(encoded)


def decode_to_integer(text: str) -> int:
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    n = 0
    for pos, ch in enumerate(text):
        digit = _DIGITS.get(ch)
        if digit is None:
            raise InvalidCharacterError(ch, pos)
        n = n * BASE + digit
    return n


def bytes_to_integer(raw: bytes) -> int:
    return int.from_bytes(_require_bytes(raw), "big")


def integer_to_bytes(value: int, fixed_length: int | None = None) -> bytes:
    """Return the minimal big-endian bytes for ``value``.

    Zero is a single zero byte. With ``fixed_length`` the result is left-padded
    with zero bytes; a value that needs more bytes raises LengthExceededError.
    """
    n = _require_int(value, "value")
    size = max(1, (n.bit_length() + 7) // 8)
    if fixed_length is None:
        return n.to_bytes(size, "big")
    if size > fixed_length:
        raise LengthExceededError(
            f"decoded value needs {size} bytes, exceeds fixed length {fixed_length}"
        )
    return n.to_bytes(fixed_length, "big")


def encode_bytes(raw: bytes) -> Base60String:
    return encode_integer(bytes_to_integer(raw))


def decode_to_bytes(text: str) -> bytes:
    # Leading zero bytes of the original input are dropped.
    return integer_to_bytes(decode_to_integer(text))


def is_valid_base60(text: object) -> bool:
    if not isinstance(text, str):
        return False
    return all(ch in _DIGITS for ch in text)


def ensure_base60(text: str) -> Base60String:
    """Check ``text`` against the alphabet and return it as a Base60String."""
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    for pos, ch in enumerate(text):
        if ch not in _DIGITS:
            raise InvalidCharacterError(ch, pos)
    return Base60String(text)


def compare_as_bigint(a: str, b: str) -> int:
    ai = decode_to_integer(a)
    bi = decode_to_integer(b)
    if ai < bi:
        return -1
    if ai > bi:
        return 1
    return 0
