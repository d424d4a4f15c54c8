"""Parse errors that collect every reason for a failure at one position."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator

from parsestream.easy_error import Error, ErrorKind, Info, fmt_errors


class Errors(Exception):
    """All errors that occurred at a single ``position``.

    Usually there is one ``UNEXPECTED`` error and one or more ``EXPECTED``
    errors; ``MESSAGE`` and ``OTHER`` errors may also appear.
    """

    def __init__(self, position: Any, errors: Iterable[Error] = ()) -> None:
        super().__init__(position)
        self.position = position
        self.errors: list[Error] = list(errors)

    @classmethod
    def empty(cls, position: Any) -> Errors:
        """An error carrying nothing but its position."""
        return cls(position)

    @classmethod
    def from_error(cls, position: Any, error: Error) -> Errors:
        return cls(position, [error])

    @classmethod
    def end_of_input(cls, position: Any) -> Errors:
        return cls.from_error(position, Error.end_of_input())

    def add_error(self, error: Error) -> None:
        """Add ``error`` unless an equal error is already present."""
        if all(existing != error for existing in self.errors):
            self.errors.append(error)

    def set_expected(self, info: Any) -> None:
        """Replace every expected error with a single one built from ``info``."""
        self.clear_expected()
        self.errors.append(Error.expected(info))

    def clear_expected(self) -> None:
        self.errors = [e for e in self.errors if e.kind is not ErrorKind.EXPECTED]

    def merge(self, other: Errors) -> Errors:
        """Keep the error furthest ahead; combine both when positions are equal."""
        if self.position < other.position:
            return other
        if self.position > other.position:
            return self
        for error in other.errors:
            self.add_error(error)
        return self

    def is_unexpected_end_of_input(self) -> bool:
        return any(error.is_unexpected_end_of_input() for error in self.errors)

    def map_position(self, f: Callable[[Any], Any]) -> Errors:
        return Errors(f(self.position), self.errors)

    def map_token(self, f: Callable[[Any], Any]) -> Errors:
        return Errors(self.position, [error.map_token(f) for error in self.errors])

    def map_range(self, f: Callable[[Any], Any]) -> Errors:
        return Errors(self.position, [error.map_range(f) for error in self.errors])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Errors):
            return NotImplemented
        return self.position == other.position and self.errors == other.errors

    __hash__ = Exception.__hash__

    def __repr__(self) -> str:
        return f"Errors(position={self.position!r}, errors={self.errors!r})"

    def __str__(self) -> str:
        return f"Parse error at {self.position}\n{fmt_errors(self.errors)}"


@dataclass
class Stream:
    """Wraps a positioned stream so that its failures are raised as :class:`Errors`."""

    stream: Any

    def _to_errors(self, exc: Exception) -> Errors:
        check = getattr(exc, "is_unexpected_end_of_input", None)
        if callable(check) and check():
            error = Error.end_of_input()
        else:
            error = Error.other(exc)
        return Errors.from_error(self.stream.position(), error)

    @contextmanager
    def _converted(self) -> Iterator[None]:
        try:
            yield
        except Errors:
            raise
        except Exception as exc:
            raise self._to_errors(exc) from exc

    def uncons(self) -> Any:
        with self._converted():
            return self.stream.uncons()

    def is_partial(self) -> bool:
        return self.stream.is_partial()

    def position(self) -> Any:
        return self.stream.position()

    def checkpoint(self) -> Any:
        return self.stream.checkpoint()

    def reset(self, checkpoint: Any) -> None:
        with self._converted():
            self.stream.reset(checkpoint)

    def uncons_range(self, size: int) -> Any:
        with self._converted():
            return self.stream.uncons_range(size)

    def uncons_while(self, predicate: Callable[[Any], bool]) -> Any:
        with self._converted():
            return self.stream.uncons_while(predicate)

    def uncons_while1(self, predicate: Callable[[Any], bool]) -> Any:
        with self._converted():
            return self.stream.uncons_while1(predicate)

    def distance(self, end: Any) -> int:
        return self.stream.distance(end)

    def range(self) -> Any:
        return self.stream.range()


__all__ = ["Errors", "Stream", "Error", "ErrorKind", "Info"]