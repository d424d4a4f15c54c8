"""A byte buffer that grows on demand and a buffered reader built on it."""

from __future__ import annotations

from typing import Any

DEFAULT_CAPACITY = 8096
RESERVE_SIZE = 8 * 1024


class GrowableBuffer:
    """Bytes held in front of a fixed amount of spare capacity.

    Advancing past bytes gives up their capacity too; once no spare room is
    left the next fill reserves another block.
    """

    def __init__(self, capacity: int = 0, data: bytes = b"") -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.data = bytearray(data)
        self.capacity = max(capacity, len(self.data))

    @property
    def spare(self) -> int:
        """Room left before the buffer has to grow."""
        return self.capacity - len(self.data)

    def advance(self, count: int) -> None:
        """Drop ``count`` bytes from the front of the buffer."""
        if count < 0 or count > len(self.data):
            raise ValueError(
                f"cannot advance past the end of the buffer: {count} > {len(self.data)}"
            )
        del self.data[:count]
        self.capacity -= count

    def clear(self) -> None:
        """Drop every buffered byte, keeping the capacity."""
        self.data.clear()

    def _reserve(self, additional: int) -> None:
        if self.spare < additional:
            self.capacity = len(self.data) + additional

    def __len__(self) -> int:
        return len(self.data)

    def __bytes__(self) -> bytes:
        return bytes(self.data)

    def __repr__(self) -> str:
        return f"GrowableBuffer(capacity={self.capacity}, data={bytes(self.data)!r})"


def extend_buf_sync(buf: GrowableBuffer, reader: Any) -> int:
    """Read once from ``reader`` into the spare room of ``buf``.

    Returns the number of bytes appended; zero means the reader is exhausted.
    """
    if buf.spare == 0:
        buf._reserve(RESERVE_SIZE)
    room = buf.spare
    chunk = reader.read(room)
    if chunk is None:
        chunk = b""
    if len(chunk) > room:
        raise ValueError(
            "reader returned more bytes than the buffer had room for"
        )
    buf.data += chunk
    return len(chunk)


class BufReader:
    """Buffers reads from ``inner``; the buffered bytes can be inspected directly."""

    def __init__(self, inner: Any, capacity: int = DEFAULT_CAPACITY) -> None:
        self.inner = inner
        self.buf = GrowableBuffer(capacity)

    def buffer(self) -> bytes:
        """The bytes currently buffered, without reading more."""
        return bytes(self.buf)

    def read(self, size: int) -> bytes:
        """Return at most ``size`` bytes, filling the buffer first if it is empty."""
        if size < 0:
            raise ValueError("size must not be negative")
        available = self.fill_buf()
        taken = available[:size]
        self.consume(len(taken))
        return taken

    def fill_buf(self) -> bytes:
        """Return the buffered bytes, reading from ``inner`` if there are none."""
        if not len(self.buf):
            extend_buf_sync(self.buf, self.inner)
        return bytes(self.buf)

    def consume(self, amount: int) -> None:
        """Mark ``amount`` buffered bytes as used."""
        self.buf.advance(amount)

    def discard_buffer(self) -> None:
        """Throw away all buffered bytes."""
        self.buf.clear()