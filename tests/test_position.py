import pytest

from parsestream.easy import Errors
from parsestream.position import (
    IndexPositioner,
    SourcePosition,
    Stream,
    default_positioner,
)


def test_positioner():
    stream = Stream(["a", "b"])
    assert stream.uncons() == "a"
    assert stream == Stream.with_positioner(["b"], IndexPositioner(1))


def test_range_positioner():
    stream = Stream(["a", "b", "c"])
    assert stream.uncons_range(2) == ["a", "b"]
    assert stream == Stream.with_positioner(["c"], IndexPositioner(2))


def test_default_positioner_for_text_and_sequences():
    assert default_positioner("abc") == SourcePosition(1, 1)
    assert default_positioner([1, 2]) == IndexPositioner(0)


def test_source_position_display():
    assert str(SourcePosition()) == "line: 1, column: 1"


def test_source_position_tracks_lines():
    stream = Stream("ab\nc")
    for _ in range(4):
        stream.uncons()
    assert stream.position() == SourcePosition(2, 2)


def test_source_position_tracks_byte_newlines():
    stream = Stream.with_positioner(b"a\nb", SourcePosition())
    assert stream.uncons() == ord("a")
    assert stream.uncons() == ord("\n")
    assert stream.position() == SourcePosition(2, 1)


def test_source_position_ordering():
    assert SourcePosition(1, 5) < SourcePosition(2, 1)


def test_update_range_on_text():
    stream = Stream("ab\ncd")
    assert stream.uncons_range(4) == "ab\nc"
    assert stream.position() == SourcePosition(2, 2)
    assert stream.range() == "d"


def test_checkpoint_and_reset_restore_position():
    stream = Stream("hello")
    stream.uncons()
    checkpoint = stream.checkpoint()
    before = stream.position()
    stream.uncons_range(3)
    assert stream.distance(checkpoint) == 3
    stream.reset(checkpoint)
    assert stream.position() == before
    assert stream.uncons() == "e"


def test_uncons_while_updates_position():
    stream = Stream("aab")
    assert stream.uncons_while(lambda c: c == "a") == "aa"
    assert stream.position() == SourcePosition(1, 3)
    assert stream.uncons() == "b"


def test_uncons_while1_requires_a_match():
    stream = Stream("xyz")
    with pytest.raises(Errors) as info:
        stream.uncons_while1(lambda c: c == "a")
    assert info.value.position == SourcePosition(1, 1)
    assert stream.uncons_while1(lambda c: c != "z") == "xy"


def test_end_of_input_error_uses_positioner_position():
    stream = Stream("a")
    stream.uncons()
    with pytest.raises(Errors) as info:
        stream.uncons()
    assert info.value.is_unexpected_end_of_input()
    assert info.value.position == SourcePosition(1, 2)


def test_uncons_range_past_end_raises():
    stream = Stream([1, 2])
    with pytest.raises(Errors) as info:
        stream.uncons_range(3)
    assert info.value.is_unexpected_end_of_input()
    assert stream.position() == 0


def test_index_positioner_checkpoint_is_independent():
    positioner = IndexPositioner()
    checkpoint = positioner.checkpoint()
    positioner.update("x")
    positioner.update_range(["y", "z"])
    assert positioner.position() == 3
    positioner.reset(checkpoint)
    assert positioner.position() == 0


def test_is_partial_delegates():
    assert Stream("abc").is_partial() is False