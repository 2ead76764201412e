"""Compact (variable-length) encoding of unsigned integers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, TypeVar, Union

from .error import CodecError
from .inputs import Input, as_input, read_uint

__all__ = [
    "UIntType",
    "Compact",
    "encode_compact",
    "decode_compact",
    "decode_compact_as",
    "compact_len",
]

T = TypeVar("T")

Source = Union[Input, bytes, bytearray, memoryview]

_SINGLE_BYTE_MAX = (1 << 6) - 1
_TWO_BYTE_MAX = (1 << 14) - 1
_FOUR_BYTE_MAX = (1 << 30) - 1


class UIntType(Enum):
    """Unsigned integer widths that compact values are decoded into."""

    U8 = 8
    U16 = 16
    U32 = 32
    U64 = 64
    U128 = 128

    @property
    def bits(self) -> int:
        return self.value

    @property
    def byte_size(self) -> int:
        return self.value // 8

    @property
    def max_value(self) -> int:
        return (1 << self.value) - 1

    @property
    def type_name(self) -> str:
        return f"u{self.value}"


def _as_width(width: Union[UIntType, int]) -> UIntType:
    if isinstance(width, UIntType):
        return width
    return UIntType(width)


def _check_value(value: int, width: UIntType) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"compact value must be an int, not {type(value).__name__}")
    if not 0 <= value <= width.max_value:
        raise ValueError(f"{value} does not fit in {width.type_name}")


def compact_len(value: int, width: Union[UIntType, int] = UIntType.U128) -> int:
    """Number of bytes the compact encoding of ``value`` takes."""
    width = _as_width(width)
    _check_value(value, width)
    if value <= _SINGLE_BYTE_MAX:
        return 1
    if value <= _TWO_BYTE_MAX:
        return 2
    if value <= _FOUR_BYTE_MAX:
        return 4
    return (value.bit_length() + 7) // 8 + 1


def encode_compact(value: int, width: Union[UIntType, int] = UIntType.U128) -> bytes:
    """Compact-encode ``value``, which must fit in ``width``."""
    width = _as_width(width)
    _check_value(value, width)
    if value <= _SINGLE_BYTE_MAX:
        return bytes([value << 2])
    if value <= _TWO_BYTE_MAX:
        return ((value << 2) | 0b01).to_bytes(2, "little")
    if value <= _FOUR_BYTE_MAX:
        return ((value << 2) | 0b10).to_bytes(4, "little")
    bytes_needed = (value.bit_length() + 7) // 8
    prefix = 0b11 + ((bytes_needed - 4) << 2)
    return bytes([prefix]) + value.to_bytes(bytes_needed, "little")


def _read_with_prefix(src: Input, prefix: int, size: int) -> int:
    """Read a ``size``-byte little-endian integer whose first byte is ``prefix``."""
    return int.from_bytes(bytes([prefix]) + src.read(size - 1), "little")


def decode_compact(source: Source, width: Union[UIntType, int] = UIntType.U128) -> int:
    """Decode a compact value that must fit in ``width``, advancing ``source``."""
    width = _as_width(width)
    src = as_input(source)
    out_of_range = f"out of range decoding Compact<{width.type_name}>"
    unexpected = f"unexpected prefix decoding Compact<{width.type_name}>"

    prefix = src.read_byte()
    mode = prefix & 0b11

    if mode == 0:
        return prefix >> 2

    if mode == 1:
        x = _read_with_prefix(src, prefix, 2) >> 2
        if _SINGLE_BYTE_MAX < x <= min(width.max_value, _TWO_BYTE_MAX):
            return x
        raise CodecError(out_of_range)

    if width is UIntType.U8:
        raise CodecError(unexpected)

    if mode == 2:
        x = _read_with_prefix(src, prefix, 4) >> 2
        if _TWO_BYTE_MAX < x <= min(width.max_value, _FOUR_BYTE_MAX):
            return x
        raise CodecError(out_of_range)

    if width is UIntType.U16:
        raise CodecError(unexpected)

    bytes_needed = (prefix >> 2) + 4
    if width is UIntType.U32:
        if bytes_needed != 4:
            raise CodecError(out_of_range)
    elif bytes_needed > width.byte_size:
        raise CodecError(unexpected)

    x = read_uint(src, bytes_needed)
    if bytes_needed == 4:
        threshold = _FOUR_BYTE_MAX
    else:
        threshold = (1 << (8 * (bytes_needed - 1))) - 1
    if x > threshold:
        return x
    raise CodecError(out_of_range)


def decode_compact_as(
    source: Source,
    width: Union[UIntType, int],
    decode_from: Callable[[int], T],
) -> T:
    """Decode a compact integer and turn it into another value with ``decode_from``."""
    return decode_from(decode_compact(source, width))


@dataclass(frozen=True, order=True)
class Compact:
    """An unsigned integer that is encoded in compact form."""

    value: int
    width: UIntType = field(default=UIntType.U128, compare=False)

    def __post_init__(self) -> None:
        width = _as_width(self.width)
        object.__setattr__(self, "width", width)
        _check_value(self.value, width)

    def encode(self) -> bytes:
        """The compact encoding of the value."""
        return encode_compact(self.value, self.width)

    def __bytes__(self) -> bytes:
        return self.encode()

    def __int__(self) -> int:
        return self.value

    def size_hint(self) -> int:
        """Exact length of the encoding."""
        return compact_len(self.value, self.width)

    @classmethod
    def decode(cls, source: Source, width: Union[UIntType, int] = UIntType.U128) -> "Compact":
        """Decode a compact value of the given width from ``source``."""
        width = _as_width(width)
        return cls(decode_compact(source, width), width)