"""Streams that track their position with a pluggable positioner."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Iterator, NamedTuple, Sequence

from parsestream.easy import Errors
from parsestream.easy_error import Error, Info

_NEWLINES = ("\n", 10, b"\n")


@dataclass(order=True)
class IndexPositioner:
    """Counts the tokens taken so far, starting at ``value``."""

    value: int = 0

    def position(self) -> int:
        return self.value

    def update(self, token: Any) -> None:
        self.value += 1

    def update_range(self, tokens: Sequence[Any]) -> None:
        self.value += len(tokens)

    def checkpoint(self) -> IndexPositioner:
        return replace(self)

    def reset(self, checkpoint: IndexPositioner) -> None:
        self.value = checkpoint.value


@dataclass(order=True)
class SourcePosition:
    """A line and column in source text, both starting at 1."""

    line: int = 1
    column: int = 1

    def position(self) -> SourcePosition:
        return replace(self)

    def update(self, token: Any) -> None:
        """Advance past ``token``; a newline (character or byte) starts a new line."""
        self.column += 1
        if token in _NEWLINES:
            self.column = 1
            self.line += 1

    def update_range(self, tokens: Sequence[Any]) -> None:
        for token in tokens:
            self.update(token)

    def checkpoint(self) -> SourcePosition:
        return replace(self)

    def reset(self, checkpoint: SourcePosition) -> None:
        self.line = checkpoint.line
        self.column = checkpoint.column

    def __str__(self) -> str:
        return f"line: {self.line}, column: {self.column}"


def default_positioner(input: Any) -> IndexPositioner | SourcePosition:
    """Text is tracked by line and column; everything else by index."""
    if isinstance(input, _SequenceInput):
        input = input.items
    if isinstance(input, str):
        return SourcePosition()
    return IndexPositioner()


class _SequenceInput:
    """A resettable stream over an in-memory sequence such as ``str`` or ``list``."""

    def __init__(self, items: Sequence[Any], offset: int = 0) -> None:
        self.items = items
        self.offset = offset

    def _remaining(self) -> Sequence[Any]:
        return self.items[self.offset:]

    def uncons(self) -> Any:
        if self.offset >= len(self.items):
            raise Errors.end_of_input(self.offset)
        token = self.items[self.offset]
        self.offset += 1
        return token

    def is_partial(self) -> bool:
        return False

    def checkpoint(self) -> int:
        return self.offset

    def reset(self, checkpoint: int) -> None:
        self.offset = checkpoint

    def uncons_range(self, size: int) -> Sequence[Any]:
        if self.offset + size > len(self.items):
            raise Errors.end_of_input(self.offset)
        taken = self.items[self.offset:self.offset + size]
        self.offset += size
        return taken

    def _take_while(self, predicate: Callable[[Any], bool]) -> int:
        start = self.offset
        while self.offset < len(self.items) and predicate(self.items[self.offset]):
            self.offset += 1
        return start

    def uncons_while(self, predicate: Callable[[Any], bool]) -> Sequence[Any]:
        start = self._take_while(predicate)
        return self.items[start:self.offset]

    def uncons_while1(self, predicate: Callable[[Any], bool]) -> Sequence[Any]:
        start = self._take_while(predicate)
        if self.offset == start:
            if start >= len(self.items):
                raise Errors.end_of_input(start)
            raise Errors.from_error(start, Error.unexpected(Info.token(self.items[start])))
        return self.items[start:self.offset]

    def distance(self, end: int) -> int:
        return self.offset - end

    def range(self) -> Sequence[Any]:
        return self._remaining()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _SequenceInput):
            return NotImplemented
        return self._remaining() == other._remaining()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"_SequenceInput({self._remaining()!r})"


class _Checkpoint(NamedTuple):
    input: Any
    positioner: Any


@dataclass
class Stream:
    """Keeps ``positioner`` up to date with every token taken from ``input``.

    ``input`` may be a stream or a plain sequence (``str``, ``bytes``,
    ``list``...); without a positioner the default for the input is used.
    """

    input: Any
    positioner: Any = field(default=None)

    def __post_init__(self) -> None:
        if self.positioner is None:
            self.positioner = default_positioner(self.input)
        if not hasattr(self.input, "uncons"):
            self.input = _SequenceInput(self.input)

    @classmethod
    def with_positioner(cls, input: Any, positioner: Any) -> Stream:
        return cls(input, positioner)

    @contextmanager
    def _converted(self) -> Iterator[None]:
        try:
            yield
        except Errors as exc:
            position = self.position()
            raise exc.map_position(lambda _: position) from exc

    def position(self) -> Any:
        return self.positioner.position()

    def uncons(self) -> Any:
        with self._converted():
            token = self.input.uncons()
        self.positioner.update(token)
        return token

    def is_partial(self) -> bool:
        return self.input.is_partial()

    def uncons_range(self, size: int) -> Any:
        with self._converted():
            tokens = self.input.uncons_range(size)
        self.positioner.update_range(tokens)
        return tokens

    def _tracking(self, predicate: Callable[[Any], bool]) -> Callable[[Any], bool]:
        def step(token: Any) -> bool:
            if predicate(token):
                self.positioner.update(token)
                return True
            return False

        return step

    def uncons_while(self, predicate: Callable[[Any], bool]) -> Any:
        with self._converted():
            return self.input.uncons_while(self._tracking(predicate))

    def uncons_while1(self, predicate: Callable[[Any], bool]) -> Any:
        with self._converted():
            return self.input.uncons_while1(self._tracking(predicate))

    def distance(self, end: _Checkpoint) -> int:
        return self.input.distance(end.input)

    def range(self) -> Any:
        return self.input.range()

    def checkpoint(self) -> _Checkpoint:
        return _Checkpoint(self.input.checkpoint(), self.positioner.checkpoint())

    def reset(self, checkpoint: _Checkpoint) -> None:
        with self._converted():
            self.input.reset(checkpoint.input)
        self.positioner.reset(checkpoint.positioner)