"""Incremental decoding state: parser state, position and buffered input."""

from __future__ import annotations

from typing import Any

from parsestream.buffers import Buffer, Bufferless
from parsestream.easy import Errors
from parsestream.easy_error import Error


class DecoderError(Exception):
    """Failure while decoding from a reader."""


class DecoderParseError(DecoderError):
    """The parser rejected the input."""

    def __init__(self, error: Any) -> None:
        super().__init__(error)
        self.error = error

    def __str__(self) -> str:
        return str(self.error)


class DecoderIoError(DecoderError):
    """Reading the input failed at ``position``."""

    def __init__(self, position: Any, error: BaseException) -> None:
        super().__init__(position, error)
        self.position = position
        self.error = error

    def to_errors(self) -> Errors:
        """Describe the failure as parse errors at the same position."""
        return Errors.from_error(self.position, Error.other(self.error))

    def __str__(self) -> str:
        return str(self.error)


class Decoder:
    """Holds what a decoder keeps between reads.

    ``storage`` decides where the input is buffered: in the decoder itself
    (:class:`Buffer`) or in a :class:`~parsestream.buf_reader.BufReader`
    passed as the reader (:class:`Bufferless`).
    """

    def __init__(
        self,
        state: Any = None,
        position: Any = 0,
        storage: Buffer | Bufferless | None = None,
    ) -> None:
        self.state = state
        self.position = position
        self.storage = storage if storage is not None else Buffer()
        self.end_of_input = False

    @classmethod
    def new_buffer(cls) -> Decoder:
        """A decoder with its own buffer; any readable object may be used."""
        return cls(storage=Buffer())

    @classmethod
    def new_bufferless(cls) -> Decoder:
        """A decoder that reads through the buffer of a ``BufReader``."""
        return cls(storage=Bufferless())

    def buffer(self, reader: Any = None) -> bytes:
        """The input buffered and not yet advanced past."""
        return self.storage.buffer(reader)

    def advance(self, reader: Any, removed: int) -> None:
        """Drop ``removed`` bytes that the parser has committed."""
        self.storage.advance(reader, removed)

    def before_parse(self, reader: Any) -> None:
        """Read more input; a read of nothing marks the end of the input."""
        if self.storage.extend_buf_sync(reader) == 0:
            self.end_of_input = True