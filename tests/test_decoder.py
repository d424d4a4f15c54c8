import io

import pytest

from parsestream.buf_reader import BufReader
from parsestream.buffers import Buffer, Bufferless
from parsestream.decoder import (
    Decoder,
    DecoderError,
    DecoderIoError,
    DecoderParseError,
)
from parsestream.easy import Errors
from parsestream.easy_error import Error, ErrorKind

DATA = bytes([1, 2, 3, 4, 5, 6, 7, 8, 9, 0])


class _FailingReader:
    def __init__(self, exc):
        self.exc = exc

    def read(self, size):
        raise self.exc


def test_new_buffer_reads_and_marks_end_of_input():
    decoder = Decoder.new_buffer()
    reader = io.BytesIO(b"hello")
    decoder.before_parse(reader)
    assert decoder.buffer() == b"hello"
    assert decoder.end_of_input is False
    decoder.before_parse(reader)
    assert decoder.end_of_input is True
    assert decoder.buffer() == b"hello"


def test_new_buffer_advance():
    decoder = Decoder.new_buffer()
    reader = io.BytesIO(b"hello")
    decoder.before_parse(reader)
    decoder.advance(reader, 2)
    assert decoder.buffer(reader) == b"llo"


def test_new_bufferless_uses_reader_buffer():
    decoder = Decoder.new_bufferless()
    reader = BufReader(io.BytesIO(DATA), capacity=3)
    decoder.before_parse(reader)
    assert decoder.buffer(reader) == DATA[:3]
    assert reader.buffer() == DATA[:3]
    decoder.before_parse(reader)
    assert decoder.buffer(reader) == DATA
    decoder.advance(reader, 5)
    assert reader.buffer() == DATA[5:]
    assert decoder.end_of_input is False


def test_bufferless_end_of_input():
    decoder = Decoder.new_bufferless()
    reader = BufReader(io.BytesIO(b""), capacity=3)
    decoder.before_parse(reader)
    assert decoder.end_of_input is True


def test_constructors_choose_storage():
    assert isinstance(Decoder.new_buffer().storage, Buffer)
    assert isinstance(Decoder.new_bufferless().storage, Bufferless)
    assert Decoder.new_buffer().position == 0


def test_before_parse_propagates_io_error():
    decoder = Decoder.new_buffer()
    failure = OSError("broken pipe")
    with pytest.raises(OSError) as info:
        decoder.before_parse(_FailingReader(failure))
    assert info.value is failure
    assert decoder.end_of_input is False


def test_io_error_to_errors():
    cause = OSError("broken pipe")
    err = DecoderIoError(7, cause)
    errors = err.to_errors()
    assert isinstance(errors, Errors)
    assert errors.position == 7
    assert len(errors.errors) == 1
    assert errors.errors[0].kind is ErrorKind.OTHER
    assert errors.errors[0].exc is cause


def test_io_error_display_is_cause():
    err = DecoderIoError(3, OSError("broken pipe"))
    assert str(err) == "broken pipe"
    assert isinstance(err, DecoderError)


def test_parse_error_display_is_inner_error():
    inner = Errors.from_error(0, Error.expected("combine"))
    err = DecoderParseError(inner)
    assert err.error is inner
    assert str(err) == str(inner)
    with pytest.raises(DecoderError):
        raise err