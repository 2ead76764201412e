"""Byte sources that decoders read from."""

from __future__ import annotations

from typing import Optional, Union

from .error import CodecError

__all__ = ["Input", "BytesInput", "as_input", "read_uint"]

NOT_ENOUGH_DATA = "Not enough data to fill buffer"


class Input:
    """A source of bytes for decoding.

    Subclasses implement :meth:`read`; the other methods have sensible defaults.
    """

    def read(self, length: int) -> bytes:
        """Read exactly ``length`` bytes or raise :class:`CodecError`."""
        raise NotImplementedError

    def read_byte(self) -> int:
        """Read a single byte."""
        return self.read(1)[0]

    def remaining_len(self) -> Optional[int]:
        """Number of bytes left, or ``None`` when unknown."""
        return None

    def descend_ref(self) -> None:
        """Called when decoding enters a nested structure."""

    def ascend_ref(self) -> None:
        """Called when decoding leaves a nested structure."""


class BytesInput(Input):
    """An input reading from an in-memory byte string, advancing as it goes."""

    def __init__(self, data: Union[bytes, bytearray, memoryview]) -> None:
        self._data = bytes(data)
        self._pos = 0

    def read(self, length: int) -> bytes:
        if length < 0:
            raise ValueError("length must not be negative")
        end = self._pos + length
        if end > len(self._data):
            raise CodecError(NOT_ENOUGH_DATA)
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    def remaining_len(self) -> int:
        return len(self._data) - self._pos

    def rest(self) -> bytes:
        """The bytes not yet consumed."""
        return self._data[self._pos:]


def as_input(data: Union[Input, bytes, bytearray, memoryview]) -> Input:
    """Return ``data`` itself if it is an :class:`Input`, else wrap the bytes."""
    if isinstance(data, Input):
        return data
    if isinstance(data, (bytes, bytearray, memoryview)):
        return BytesInput(data)
    raise TypeError(f"cannot read from {type(data).__name__}")


def read_uint(source: Union[Input, bytes, bytearray, memoryview], size: int) -> int:
    """Read a little-endian unsigned integer of ``size`` bytes."""
    return int.from_bytes(as_input(source).read(size), "little")