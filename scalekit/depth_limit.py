"""Decoding with a bound on how deeply nested structures may go."""

from __future__ import annotations

from typing import Callable, Optional, TypeVar, Union

from .decode_all import DECODE_ALL_ERR_MSG
from .error import CodecError
from .inputs import BytesInput, Input, as_input

__all__ = [
    "DECODE_MAX_DEPTH_MSG",
    "DepthTrackingInput",
    "decode_with_depth_limit",
    "decode_all_with_depth_limit",
]

T = TypeVar("T")

DECODE_MAX_DEPTH_MSG = "Maximum recursion depth reached when decoding"


class DepthTrackingInput(Input):
    """An input that counts nesting and fails once ``max_depth`` is exceeded."""

    def __init__(self, inner: Input, max_depth: int) -> None:
        self.inner = inner
        self.max_depth = max_depth
        self.depth = 0

    def read(self, length: int) -> bytes:
        return self.inner.read(length)

    def read_byte(self) -> int:
        return self.inner.read_byte()

    def remaining_len(self) -> Optional[int]:
        return self.inner.remaining_len()

    def descend_ref(self) -> None:
        self.inner.descend_ref()
        self.depth += 1
        if self.depth > self.max_depth:
            raise CodecError(DECODE_MAX_DEPTH_MSG)

    def ascend_ref(self) -> None:
        self.inner.ascend_ref()
        self.depth -= 1


def decode_with_depth_limit(
    decode: Callable[[Input], T],
    limit: int,
    source: Union[Input, bytes, bytearray, memoryview],
) -> T:
    """Decode with at most ``limit`` levels of nesting, advancing ``source``."""
    return decode(DepthTrackingInput(as_input(source), limit))


def decode_all_with_depth_limit(
    decode: Callable[[Input], T],
    limit: int,
    data: Union[BytesInput, bytes, bytearray, memoryview],
) -> T:
    """Decode with a nesting limit and require that all of ``data`` is consumed."""
    src = data if isinstance(data, BytesInput) else BytesInput(data)
    result = decode_with_depth_limit(decode, limit, src)
    if src.remaining_len():
        raise CodecError(DECODE_ALL_ERR_MSG)
    return result