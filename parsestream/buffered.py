"""A ring buffer that lets a single-pass stream be reset a limited distance."""

from __future__ import annotations

from collections import deque
from typing import Any

from parsestream.easy import Errors
from parsestream.easy_error import Error

BACKTRACK_MESSAGE = "Backtracked to far"


class BacktrackError(Errors):
    """Raised when resetting or reading further back than the buffer reaches."""

    def __init__(self, position: Any) -> None:
        super().__init__(position, [Error.message(BACKTRACK_MESSAGE)])


class Stream:
    """Remembers the last ``lookahead`` tokens of ``iter`` so they can be replayed.

    ``iter`` must provide ``uncons``, ``position`` and ``is_partial``. Going
    back further than the buffer holds raises :class:`BacktrackError`.
    """

    def __init__(self, iter: Any, lookahead: int) -> None:
        if lookahead < 0:
            raise ValueError("lookahead must not be negative")
        self.iter = iter
        self.offset = 0
        self.buffer_offset = 0
        self.buffer: deque[tuple[Any, Any]] = deque(maxlen=lookahead)

    def _oldest_offset(self) -> int:
        return self.buffer_offset - len(self.buffer)

    def _buffered(self) -> tuple[Any, Any]:
        return self.buffer[len(self.buffer) - (self.buffer_offset - self.offset)]

    def checkpoint(self) -> int:
        return self.offset

    def reset(self, checkpoint: int) -> None:
        if checkpoint < self._oldest_offset():
            raise BacktrackError(self.position())
        self.offset = checkpoint

    def position(self) -> Any:
        if self.offset >= self.buffer_offset:
            return self.iter.position()
        if self.offset < self._oldest_offset():
            return self.buffer[0][1]
        return self._buffered()[1]

    def uncons(self) -> Any:
        if self.offset >= self.buffer_offset:
            position = self.iter.position()
            token = self.iter.uncons()
            self.buffer_offset += 1
            self.buffer.append((token, position))
            self.offset += 1
            return token
        if self.offset < self._oldest_offset():
            raise BacktrackError(self.position())
        token = self._buffered()[0]
        self.offset += 1
        return token

    def is_partial(self) -> bool:
        return self.iter.is_partial()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stream):
            return NotImplemented
        return (
            self.offset == other.offset
            and self.buffer_offset == other.buffer_offset
            and self.iter == other.iter
            and list(self.buffer) == list(other.buffer)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Stream(offset={self.offset}, buffer_offset={self.buffer_offset}, "
            f"buffer={list(self.buffer)!r}, iter={self.iter!r})"
        )