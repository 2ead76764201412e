import pytest

from scalekit.error import CodecError
from scalekit.inputs import BytesInput, Input, as_input, read_uint


class _OneShot(Input):
    def __init__(self, data):
        self.data = data

    def read(self, length):
        out, self.data = self.data[:length], self.data[length:]
        if len(out) != length:
            raise CodecError("Not enough data to fill buffer")
        return out


def test_bytes_input_reads_in_order():
    src = BytesInput(b"\x01\x02\x03\x04")
    assert src.read(2) == b"\x01\x02"
    assert src.read_byte() == 3
    assert src.rest() == b"\x04"
    assert src.remaining_len() == 1


def test_bytes_input_not_enough_data():
    src = BytesInput(b"\x08")
    with pytest.raises(CodecError) as info:
        src.read(4)
    assert str(info.value) == "Not enough data to fill buffer"
    # A failed read consumes nothing.
    assert src.rest() == b"\x08"


def test_read_byte_on_empty_raises():
    with pytest.raises(CodecError):
        BytesInput(b"").read_byte()


def test_read_zero_bytes():
    src = BytesInput(b"ab")
    assert src.read(0) == b""
    assert src.remaining_len() == 2


def test_negative_length_rejected():
    with pytest.raises(ValueError):
        BytesInput(b"ab").read(-1)


def test_base_input_defaults():
    src = _OneShot(b"\x07\x09")
    assert Input.read_byte(src) == 7
    assert Input.remaining_len(src) is None
    Input.descend_ref(src)
    Input.ascend_ref(src)
    assert src.read(1) == b"\x09"
    with pytest.raises(CodecError):
        Input.read_byte(src)


def test_as_input_passes_inputs_through():
    src = BytesInput(b"xyz")
    assert as_input(src) is src


@pytest.mark.parametrize("data", [b"xyz", bytearray(b"xyz"), memoryview(b"xyz")])
def test_as_input_wraps_bytes_like(data):
    src = as_input(data)
    assert isinstance(src, BytesInput)
    assert src.rest() == b"xyz"


def test_as_input_rejects_other_types():
    with pytest.raises(TypeError):
        as_input("text")


def test_read_uint_little_endian():
    assert read_uint(b"\x01\x00\x00\x00", 4) == 1


@pytest.mark.parametrize("size", [1, 2, 4, 8, 16])
def test_read_uint_round_trip(size):
    value = (1 << (size * 8)) - 1 - size
    assert read_uint(value.to_bytes(size, "little"), size) == value


def test_read_uint_advances_shared_input():
    src = BytesInput(b"\x01\x00\x02\x00")
    first = read_uint(src, 2)
    second = read_uint(src, 2)
    assert (first, second) == (1, 2)
    assert src.remaining_len() == 0


def test_read_uint_short_input():
    with pytest.raises(CodecError):
        read_uint(b"\x00\x00\x00\x00\x01", 8)