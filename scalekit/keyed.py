"""Helpers that combine an encoding with surrounding bytes."""

from __future__ import annotations

from typing import Callable, TypeVar, Union

__all__ = ["to_keyed_vec", "join"]

T = TypeVar("T")

BytesLike = Union[bytes, bytearray, memoryview]


def to_keyed_vec(value: T, prepend_key: BytesLike, encode: Callable[[T], bytes]) -> bytes:
    """The encoding of ``value`` with ``prepend_key`` in front of it."""
    return bytes(prepend_key) + encode(value)


def join(dest: BytesLike, value: T, encode: Callable[[T], bytes]) -> Union[bytes, bytearray]:
    """Append the encoding of ``value`` to ``dest`` and return the result.

    A ``bytearray`` is extended in place and returned; other byte strings
    produce a new ``bytes`` value, so calls can be chained.
    """
    encoded = encode(value)
    if isinstance(dest, bytearray):
        dest.extend(encoded)
        return dest
    return bytes(dest) + encoded