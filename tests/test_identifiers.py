from __future__ import annotations

import uuid

import pytest

import id60


SAMPLE_UUID = "550e8400-e29b-41d4-a716-446655440000"
SAMPLE_ULID = "01H8J5N3Z9V8XK8E2X5PWSQ4M0"
MAX_ULID = "7" + "Z" * 25


class _Uint64:
    """Stand-in for a fixed-size integer scalar such as numpy.uint64."""

    def __init__(self, value: int) -> None:
        self.value = value

    def __index__(self) -> int:
        return self.value


@pytest.mark.parametrize("value", [0, 1, 123456789, 2**32, 2**63, 2**64 - 1])
def test_int64_round_trip_fixed_width(value: int) -> None:
    encoded = id60.encode_int64(value)
    assert len(encoded) == id60.INT64_LENGTH == 11
    assert id60.decode_int64(encoded) == value


def test_int64_zero_is_all_zero_symbols() -> None:
    encoded = id60.encode_int64(0)
    assert encoded == "0" * 11
    assert id60.is_valid_base60(encoded)
    assert id60.decode_int64(encoded) == 0


def test_int64_accepts_index_types() -> None:
    assert id60.encode_int64(_Uint64(999)) == "000000000Ge"  # type: ignore[arg-type]


def test_int64_rejects_out_of_range() -> None:
    with pytest.raises(id60.DomainError):
        id60.encode_int64(2**64)
    with pytest.raises(id60.DomainError):
        id60.encode_int64(-1)
    with pytest.raises(TypeError):
        id60.encode_int64(True)


@pytest.mark.parametrize("text", ["", "123", "0" * 10, "0" * 12])
def test_decode_int64_requires_exact_width(text: str) -> None:
    with pytest.raises(id60.LengthMismatchError) as exc:
        id60.decode_int64(text)
    assert exc.value.expected == 11
    assert exc.value.actual == len(text)


def test_decode_int64_rejects_values_above_64_bits() -> None:
    with pytest.raises(id60.DomainError):
        id60.decode_int64("z" * 11)


def test_decode_int64_rejects_invalid_chars() -> None:
    with pytest.raises(id60.InvalidCharacterError):
        id60.decode_int64("0000000000O")


def test_int64_text_sorts_numerically() -> None:
    values = [0, 7, 60, 2**20, 2**40, 2**63, 2**64 - 1]
    assert sorted(id60.encode_int64(v) for v in values) == [id60.encode_int64(v) for v in values]


def test_uuid_round_trip() -> None:
    encoded = id60.encode_uuid(SAMPLE_UUID)
    assert len(encoded) == id60.ID_LENGTH == 22
    assert id60.is_valid_base60(encoded)
    assert id60.decode_uuid(encoded) == SAMPLE_UUID


def test_uuid_round_trip_normalizes_case() -> None:
    encoded = id60.encode_uuid(SAMPLE_UUID.upper())
    assert id60.decode_uuid(encoded) == SAMPLE_UUID


def test_uuid_round_trip_random() -> None:
    for _ in range(50):
        raw = uuid.uuid4()
        encoded = id60.encode_uuid(str(raw))
        assert encoded == id60.encode_uuid(raw)
        assert id60.decode_uuid(encoded) == str(raw)


def test_uuid_leading_zero_bytes_survive() -> None:
    value = "00000000-0000-0000-0000-000000000001"
    encoded = id60.encode_uuid(value)
    assert encoded == "0" * 21 + "1"
    assert id60.decode_uuid(encoded) == value


def test_nil_and_max_uuid() -> None:
    nil = "00000000-0000-0000-0000-000000000000"
    assert id60.encode_uuid(nil) == "0" * 22
    assert id60.decode_uuid("0" * 22) == nil
    max_uuid = "ffffffff-ffff-ffff-ffff-ffffffffffff"
    assert id60.decode_uuid(id60.encode_uuid(max_uuid)) == max_uuid


@pytest.mark.parametrize(
    "bad",
    [
        "not-a-uuid",
        "",
        "550e8400-e29b-41d4-a716-44665544000g",
        "550e8400-e29b-41d4-a716-4466554400",
        "550e8400-e29b-41d4-a716-4466554400000",
    ],
)
def test_encode_uuid_rejects_malformed(bad: str) -> None:
    with pytest.raises(id60.FormatError):
        id60.encode_uuid(bad)


def test_decode_uuid_requires_exact_width() -> None:
    with pytest.raises(id60.LengthMismatchError):
        id60.decode_uuid("0" * 21)


def test_decode_uuid_rejects_values_above_128_bits() -> None:
    with pytest.raises(id60.LengthExceededError):
        id60.decode_uuid("z" * 22)


def test_ulid_round_trip() -> None:
    encoded = id60.encode_ulid(SAMPLE_ULID)
    assert len(encoded) == 22
    assert id60.is_valid_base60(encoded)
    assert id60.decode_ulid(encoded) == SAMPLE_ULID


def test_ulid_input_is_case_insensitive() -> None:
    encoded = id60.encode_ulid(SAMPLE_ULID.lower())
    assert encoded == id60.encode_ulid(SAMPLE_ULID)
    assert id60.decode_ulid(encoded) == SAMPLE_ULID


def test_ulid_and_uuid_share_the_128_bit_value() -> None:
    assert id60.encode_ulid(MAX_ULID) == id60.encode_uuid("ffffffff-ffff-ffff-ffff-ffffffffffff")
    assert id60.encode_ulid("0" * 25 + "1") == id60.encode_uuid("00000000-0000-0000-0000-000000000001")
    assert id60.decode_ulid(id60.encode_ulid(MAX_ULID)) == MAX_ULID
    assert id60.decode_ulid("0" * 22) == "0" * 26


@pytest.mark.parametrize(
    "bad",
    [
        "too-short",
        "",
        SAMPLE_ULID[:-1],
        SAMPLE_ULID + "0",
        SAMPLE_ULID + "\n",
        "01H8J5N3Z9V8XK8E2X5PWSQ4MI",
        "01H8J5N3Z9V8XK8E2X5PWSQ4ML",
        "01H8J5N3Z9V8XK8E2X5PWSQ4MO",
        "01H8J5N3Z9V8XK8E2X5PWSQ4MU",
        "8" + "0" * 25,
        "01H8J5N3Z9V8X\u212a8E2X5PWSQ4M0",
    ],
)
def test_encode_ulid_rejects_malformed(bad: str) -> None:
    with pytest.raises(id60.FormatError):
        id60.encode_ulid(bad)


def test_decode_ulid_requires_exact_width() -> None:
    with pytest.raises(id60.LengthMismatchError):
        id60.decode_ulid(id60.encode_ulid(SAMPLE_ULID) + "0")


def test_new_uuid4_shape() -> None:
    value = id60.new_uuid4()
    assert id60.is_base60_id(value)
    assert uuid.UUID(id60.decode_uuid(value)).version == 4


def test_new_uuid7_shape_and_order() -> None:
    early = id60.new_uuid7(1_000)
    late = id60.new_uuid7(2_000)
    assert id60.is_base60_id(early)
    parsed = uuid.UUID(id60.decode_uuid(early))
    assert parsed.version == 7
    assert parsed.variant == uuid.RFC_4122
    assert early < late


def test_new_ulid_embeds_timestamp() -> None:
    value = id60.new_ulid(1)
    assert id60.is_base60_id(value)
    assert id60.decode_ulid(value).startswith("0000000001")
    assert id60.new_ulid(1) < id60.new_ulid(2)


@pytest.mark.parametrize("ts", [-1, 1 << 48])
def test_generators_reject_out_of_range_timestamps(ts: int) -> None:
    with pytest.raises(id60.DomainError):
        id60.new_ulid(ts)
    with pytest.raises(id60.DomainError):
        id60.new_uuid7(ts)


def test_is_base60_id() -> None:
    assert id60.is_base60_id("0" * 22)
    assert not id60.is_base60_id("0" * 21)
    assert not id60.is_base60_id("0" * 21 + "!")
    assert not id60.is_base60_id(None)
