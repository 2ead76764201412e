"""Fixed-length arrays: items encoded back to back with no length prefix."""

from __future__ import annotations

from typing import Callable, Iterable, List, TypeVar, Union

from .error import CodecError
from .inputs import Input, as_input

__all__ = ["encode_array", "decode_array"]

T = TypeVar("T")


def encode_array(items: Iterable[T], encode_item: Callable[[T], bytes]) -> bytes:
    """Concatenate the encodings of ``items``."""
    return b"".join(encode_item(item) for item in items)


def decode_array(
    source: Union[Input, bytes, bytearray, memoryview],
    length: int,
    decode_item: Callable[[Input], T],
) -> List[T]:
    """Decode exactly ``length`` items from ``source``."""
    if length < 0:
        raise CodecError("array length does not match definition")
    src = as_input(source)
    return [decode_item(src) for _ in range(length)]