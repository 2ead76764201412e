"""Appending items to an already encoded sequence without decoding it."""

from __future__ import annotations

from typing import Callable, Iterable, TypeVar, Union

from .compact import UIntType, compact_len, decode_compact, encode_compact
from .error import CodecError

__all__ = ["append_or_new"]

T = TypeVar("T")

_U32_MAX = UIntType.U32.max_value


def append_or_new(
    self_encoded: Union[bytes, bytearray, memoryview],
    items: Iterable[T],
    encode_item: Callable[[T], bytes],
) -> bytes:
    """Append ``items`` to an encoded sequence, or encode a new one if it is empty.

    The items must encode the same way as the elements already present.
    """
    items = list(items)
    encoded_items = b"".join(encode_item(item) for item in items)

    if not self_encoded:
        if len(items) > _U32_MAX:
            raise CodecError("Attempted to serialize a collection with too many elements.")
        return encode_compact(len(items), UIntType.U32) + encoded_items

    data = bytes(self_encoded)
    length = decode_compact(data, UIntType.U32)
    new_len = length + len(items)
    if new_len > _U32_MAX:
        raise CodecError("New vec length greater than `u32::TEST_VALUE()`.")

    old_prefix_len = compact_len(length, UIntType.U32)
    return encode_compact(new_len, UIntType.U32) + data[old_prefix_len:] + encoded_items