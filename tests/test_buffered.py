import io

import pytest

from parsestream import position, read
from parsestream.buffered import BACKTRACK_MESSAGE, BacktrackError, Stream
from parsestream.read import ReadError


def make(data: bytes, lookahead: int) -> Stream:
    return Stream(position.Stream(read.Stream(io.BytesIO(data))), lookahead)


def test_reads_tokens_in_order():
    stream = make(b"123,", 1)
    assert [stream.uncons() for _ in range(4)] == list(b"123,")


def test_reset_within_lookahead_replays_tokens():
    stream = make(b"abcd", 2)
    stream.uncons()
    checkpoint = stream.checkpoint()
    first = stream.uncons()
    second = stream.uncons()
    stream.reset(checkpoint)
    assert stream.uncons() == first
    assert stream.uncons() == second
    assert stream.uncons() == ord("d")


def test_position_is_restored_after_reset():
    stream = make(b"xyz", 3)
    checkpoint = stream.checkpoint()
    before = stream.position()
    stream.uncons()
    stream.uncons()
    after = stream.position()
    stream.reset(checkpoint)
    assert stream.position() == before
    stream.uncons()
    stream.uncons()
    assert stream.position() == after


def test_reset_too_far_raises():
    stream = make(b"abcd", 1)
    checkpoint = stream.checkpoint()
    stream.uncons()
    stream.uncons()
    with pytest.raises(BacktrackError) as info:
        stream.reset(checkpoint)
    assert str(info.value.errors[0]) == BACKTRACK_MESSAGE


def test_failed_reset_keeps_offset():
    stream = make(b"abcd", 1)
    checkpoint = stream.checkpoint()
    stream.uncons()
    stream.uncons()
    with pytest.raises(BacktrackError):
        stream.reset(checkpoint)
    assert stream.uncons() == ord("c")


def test_end_of_input_propagates():
    stream = make(b"a", 2)
    stream.uncons()
    with pytest.raises(ReadError) as info:
        stream.uncons()
    assert info.value.is_unexpected_end_of_input()


def test_is_partial_delegates():
    assert make(b"a", 1).is_partial() is False


def test_negative_lookahead_rejected():
    with pytest.raises(ValueError):
        make(b"a", -1)