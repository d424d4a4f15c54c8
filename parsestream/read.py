"""A single-pass byte stream over any readable binary file object."""

from __future__ import annotations

import enum
from typing import Any


class ReadErrorKind(enum.Enum):
    """Why reading from the stream failed."""

    UNEXPECTED = "unexpected"
    END_OF_INPUT = "end_of_input"
    IO = "io"


class ReadError(Exception):
    """Minimal error of a read stream; I/O failures carry the original error."""

    def __init__(self, kind: ReadErrorKind, cause: BaseException | None = None) -> None:
        super().__init__(kind, cause)
        self.kind = kind
        self.cause = cause

    def is_unexpected_end_of_input(self) -> bool:
        return self.kind is ReadErrorKind.END_OF_INPUT

    def add(self, other: ReadError) -> ReadError:
        """Combine with ``other``: end of input is kept, anything else is replaced."""
        if self.kind is ReadErrorKind.END_OF_INPUT:
            return ReadError(ReadErrorKind.END_OF_INPUT)
        return other

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReadError):
            return NotImplemented
        if self.kind is ReadErrorKind.IO or other.kind is ReadErrorKind.IO:
            return False
        return self.kind is other.kind

    __hash__ = Exception.__hash__

    def __str__(self) -> str:
        if self.kind is ReadErrorKind.UNEXPECTED:
            return "unexpected parse"
        if self.kind is ReadErrorKind.END_OF_INPUT:
            return "unexpected end of input"
        return str(self.cause)

    def __repr__(self) -> str:
        return f"ReadError({self.kind.name}, {self.cause!r})"


class Stream:
    """Yields one byte (as an ``int``) at a time from ``reader``.

    It has no position and cannot be reset; wrap it to get those.
    """

    def __init__(self, reader: Any) -> None:
        self.reader = reader

    def uncons(self) -> int:
        try:
            chunk = self.reader.read(1)
        except OSError as exc:
            raise ReadError(ReadErrorKind.IO, exc) from exc
        if not chunk:
            raise ReadError(ReadErrorKind.END_OF_INPUT)
        return chunk[0]

    def is_partial(self) -> bool:
        return False