"""Upper bounds on the encoded size of values of fixed shape."""

from __future__ import annotations

from typing import Union

from .compact import UIntType

__all__ = [
    "USIZE_MAX",
    "primitive_max_len",
    "compact_max_len",
    "tuple_max_len",
    "array_max_len",
    "option_max_len",
    "result_max_len",
    "duration_max_len",
    "range_max_len",
]

USIZE_MAX = (1 << 64) - 1

_PRIMITIVES = {
    "u8": 1,
    "u16": 2,
    "u32": 4,
    "u64": 8,
    "u128": 16,
    "i8": 1,
    "i16": 2,
    "i32": 4,
    "i64": 8,
    "i128": 16,
    "bool": 1,
}

_COMPACT = {
    UIntType.U8: 2,
    UIntType.U16: 4,
    UIntType.U32: 5,
    UIntType.U64: 9,
    UIntType.U128: 17,
}


def _saturate(value: int) -> int:
    return min(value, USIZE_MAX)


def primitive_max_len(name: str) -> int:
    """Encoded size of a primitive such as ``"u32"``, ``"bool"`` or ``"NonZeroI64"``."""
    key = name.lower()
    if key.startswith("nonzero"):
        key = key[len("nonzero"):].lstrip("_")
        if key == "bool":
            raise ValueError(f"unknown primitive type: {name}")
    try:
        return _PRIMITIVES[key]
    except KeyError:
        raise ValueError(f"unknown primitive type: {name}") from None


def compact_max_len(width: Union[UIntType, int]) -> int:
    """Longest compact encoding of an unsigned integer of ``width``."""
    return _COMPACT[width if isinstance(width, UIntType) else UIntType(width)]


def tuple_max_len(*args: int) -> int:
    """Bound for a tuple or struct: the saturating sum of its fields' bounds."""
    total = 0
    for length in args:
        total = _saturate(total + length)
    return total


def array_max_len(item_len: int, count: int) -> int:
    """Bound for a fixed-length array of ``count`` items."""
    return _saturate(item_len * count)


def option_max_len(item_len: int) -> int:
    """Bound for an optional value: one tag byte plus the item."""
    return _saturate(item_len + 1)


def result_max_len(ok_len: int, err_len: int) -> int:
    """Bound for a result: one tag byte plus the larger of the two variants."""
    return _saturate(max(ok_len, err_len) + 1)


def duration_max_len() -> int:
    """Bound for a duration: seconds as u64 and nanoseconds as u32."""
    return primitive_max_len("u64") + primitive_max_len("u32")


def range_max_len(item_len: int) -> int:
    """Bound for a range, which stores both ends."""
    return _saturate(item_len * 2)