"""Decoding that insists on consuming the whole input."""

from __future__ import annotations

from typing import Callable, TypeVar, Union

from .error import CodecError
from .inputs import BytesInput, Input

__all__ = ["DECODE_ALL_ERR_MSG", "decode_all"]

T = TypeVar("T")

DECODE_ALL_ERR_MSG = "Input buffer has still data left after decoding!"


def _bytes_input(data: Union[BytesInput, bytes, bytearray, memoryview]) -> BytesInput:
    if isinstance(data, BytesInput):
        return data
    if isinstance(data, (bytes, bytearray, memoryview)):
        return BytesInput(data)
    raise TypeError(f"cannot decode all of {type(data).__name__}")


def decode_all(
    decode: Callable[[Input], T],
    data: Union[BytesInput, bytes, bytearray, memoryview],
) -> T:
    """Decode a value with ``decode`` and require that no bytes are left over."""
    src = _bytes_input(data)
    result = decode(src)
    if src.remaining_len():
        raise CodecError(DECODE_ALL_ERR_MSG)
    return result