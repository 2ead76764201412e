from dataclasses import dataclass
from functools import reduce

import pytest
from hypothesis import given
from hypothesis import strategies as st

from scalekit.compact import decode_compact, encode_compact
from scalekit.encode_append import append_or_new
from scalekit.error import CodecError
from scalekit.inputs import BytesInput, read_uint

TEST_VALUE = 1000
U32_MAX = (1 << 32) - 1


def encode_u32(value):
    return value.to_bytes(4, "little")


def decode_u32_vec(data):
    src = BytesInput(data)
    items = [read_uint(src, 4) for _ in range(decode_compact(src, 32))]
    assert src.remaining_len() == 0
    return items


def test_vec_encode_append_works():
    encoded = reduce(
        lambda enc, v: append_or_new(enc, [v], encode_u32), range(TEST_VALUE), b""
    )
    assert decode_u32_vec(encoded) == list(range(TEST_VALUE))


def test_vec_encode_append_multiple_items_works():
    encoded = reduce(
        lambda enc, v: append_or_new(enc, [v, v, v, v], encode_u32), range(TEST_VALUE), b""
    )
    expected = [i for i in range(TEST_VALUE) for _ in range(4)]
    assert decode_u32_vec(encoded) == expected


def test_append_accepts_iterators():
    encoded = append_or_new(b"", iter([7, 8]), encode_u32)
    encoded = append_or_new(bytearray(encoded), (v for v in [9]), encode_u32)
    assert decode_u32_vec(encoded) == [7, 8, 9]


def test_append_new_empty_list():
    assert append_or_new(b"", [], encode_u32) == b"\x00"


@dataclass
class NoCopy:
    data: int


def test_append_non_copyable():
    item = NoCopy(100)
    encoded = append_or_new(b"", [item], lambda x: encode_u32(x.data))
    assert [NoCopy(v) for v in decode_u32_vec(encoded)] == [item]


def test_append_crossing_two_byte_length_boundary():
    existing = list(range(16383))
    encoded = encode_compact(len(existing), 32) + b"".join(map(encode_u32, existing))
    appended = append_or_new(encoded, [16383], encode_u32)
    assert appended[:4] == b"\x02\x00\x01\x00"
    assert decode_u32_vec(appended) == list(range(16384))


def test_append_overflowing_length_fails():
    encoded = encode_compact(U32_MAX, 32)
    with pytest.raises(CodecError) as info:
        append_or_new(encoded, [1], encode_u32)
    assert str(info.value) == "New vec length greater than `u32::TEST_VALUE()`."


def test_append_to_invalid_encoding_fails():
    with pytest.raises(CodecError):
        append_or_new(b"\x01", [1], encode_u32)


@given(st.lists(st.lists(st.integers(0, U32_MAX), max_size=20), max_size=20))
def test_chunked_append_matches_single_encoding(chunks):
    encoded = reduce(lambda enc, chunk: append_or_new(enc, chunk, encode_u32), chunks, b"")
    flat = [v for chunk in chunks for v in chunk]
    if encoded:
        assert decode_u32_vec(encoded) == flat
    else:
        assert flat == []