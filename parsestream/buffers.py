"""Buffer strategies used by the decoder: an owned buffer or a reader's buffer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from parsestream.buf_reader import BufReader, GrowableBuffer, extend_buf_sync


@dataclass
class Buffer:
    """Keeps decoded input in a buffer of its own; any readable object will do."""

    buf: GrowableBuffer = field(default_factory=GrowableBuffer)

    def buffer(self, reader: Any = None) -> bytes:
        """The bytes held so far; ``reader`` is not consulted."""
        return bytes(self.buf)

    def advance(self, reader: Any, count: int) -> None:
        """Drop ``count`` bytes that have been parsed."""
        self.buf.advance(count)

    def extend_buf_sync(self, reader: Any) -> int:
        """Read once from ``reader`` into the buffer and return the number of bytes read."""
        return extend_buf_sync(self.buf, reader)


@dataclass
class Bufferless:
    """Uses the buffer of a :class:`BufReader` instead of holding one itself."""

    def buffer(self, reader: BufReader) -> bytes:
        """The bytes buffered inside ``reader``."""
        return reader.buffer()

    def advance(self, reader: BufReader, count: int) -> None:
        """Drop ``count`` parsed bytes from the reader's buffer."""
        reader.buf.advance(count)

    def extend_buf_sync(self, reader: BufReader) -> int:
        """Read once from the reader's inner source into its buffer."""
        return extend_buf_sync(reader.buf, reader.inner)