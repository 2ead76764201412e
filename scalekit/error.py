"""Error type raised by encoding and decoding operations."""

from __future__ import annotations

from typing import Optional

__all__ = ["CodecError"]


class CodecError(Exception):
    """A codec failure with a description and an optional chained cause."""

    def __init__(self, desc: str, cause: Optional["CodecError"] = None) -> None:
        super().__init__(desc)
        self.desc = desc
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def chain(self, desc: str) -> "CodecError":
        """Return a new error described by ``desc`` whose cause is this error."""
        return CodecError(desc, self)

    def _format(self, indent: int) -> str:
        text = "\t" * indent + self.desc
        if self.cause is not None:
            return text + ":\n" + self.cause._format(indent + 1)
        # Only end with a newline when this error is shown as someone's cause.
        return text + "\n" if indent else text

    def __str__(self) -> str:
        return self._format(0)

    def __repr__(self) -> str:
        return f"CodecError({self.desc!r}, {self.cause!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CodecError):
            return NotImplemented
        return self.desc == other.desc and self.cause == other.cause

    def __hash__(self) -> int:
        return hash((self.desc, self.cause))