"""Streams whose positions are spans with a start and an end."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from parsestream.easy import Errors


@dataclass(frozen=True, order=True)
class Span:
    """A region of input from ``start`` to ``end``."""

    start: Any
    end: Any

    @classmethod
    def at(cls, position: Any) -> Span:
        """An empty span starting and ending at ``position``."""
        return cls(position, position)

    def map(self, f: Callable[[Any], Any]) -> Span:
        return Span(f(self.start), f(self.end))


def _to_span(position: Any) -> Span:
    return position if isinstance(position, Span) else Span.at(position)


@dataclass
class Stream:
    """Wraps a positioned stream and reports its positions as spans."""

    stream: Any

    def _call(self, method: Callable[..., Any], *args: Any) -> Any:
        try:
            return method(*args)
        except Errors as exc:
            raise exc.map_position(_to_span) from exc

    def checkpoint(self) -> Any:
        return self.stream.checkpoint()

    def reset(self, checkpoint: Any) -> None:
        self._call(self.stream.reset, checkpoint)

    def uncons(self) -> Any:
        return self._call(self.stream.uncons)

    def is_partial(self) -> bool:
        return self.stream.is_partial()

    def uncons_range(self, size: int) -> Any:
        return self._call(self.stream.uncons_range, size)

    def uncons_while(self, predicate: Callable[[Any], bool]) -> Any:
        return self._call(self.stream.uncons_while, predicate)

    def uncons_while1(self, predicate: Callable[[Any], bool]) -> Any:
        return self._call(self.stream.uncons_while1, predicate)

    def distance(self, end: Any) -> int:
        return self.stream.distance(end)

    def range(self) -> Any:
        return self.stream.range()

    def position(self) -> Span:
        return Span.at(self.stream.position())