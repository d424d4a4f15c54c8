"""Descriptive parse error values and their human readable formatting."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Callable, Iterable


class InfoKind(enum.Enum):
    """What an :class:`Info` value carries."""

    TOKEN = "token"
    RANGE = "range"
    MESSAGE = "message"


@dataclass(frozen=True)
class Info:
    """A token, a range of tokens or a text message describing part of an error."""

    kind: InfoKind
    value: Any

    @classmethod
    def token(cls, value: Any) -> Info:
        return cls(InfoKind.TOKEN, value)

    @classmethod
    def range(cls, value: Any) -> Info:
        return cls(InfoKind.RANGE, value)

    @classmethod
    def message(cls, text: Any) -> Info:
        return cls(InfoKind.MESSAGE, str(text))

    def map_token(self, f: Callable[[Any], Any]) -> Info:
        """Apply ``f`` to the value if this is a token, otherwise return ``self``."""
        if self.kind is InfoKind.TOKEN:
            return Info(self.kind, f(self.value))
        return self

    def map_range(self, f: Callable[[Any], Any]) -> Info:
        """Apply ``f`` to the value if this is a range, otherwise return ``self``."""
        if self.kind is InfoKind.RANGE:
            return Info(self.kind, f(self.value))
        return self

    def __str__(self) -> str:
        return str(self.value)


def _to_info(value: Any) -> Info:
    """Accept an :class:`Info`, a text message (``str``) or a bare token."""
    if isinstance(value, Info):
        return value
    if isinstance(value, str):
        return Info.message(value)
    return Info.token(value)


class ErrorKind(enum.Enum):
    """The category of a single parse error."""

    UNEXPECTED = "unexpected"
    EXPECTED = "expected"
    MESSAGE = "message"
    OTHER = "other"


@dataclass(frozen=True, eq=False)
class Error:
    """One piece of information about a parse failure.

    Errors of kind ``OTHER`` wrap an arbitrary exception and never compare
    equal to anything, themselves included.
    """

    kind: ErrorKind
    info: Info | None = None
    exc: BaseException | None = None

    @classmethod
    def unexpected(cls, info: Any) -> Error:
        return cls(ErrorKind.UNEXPECTED, _to_info(info))

    @classmethod
    def expected(cls, info: Any) -> Error:
        return cls(ErrorKind.EXPECTED, _to_info(info))

    @classmethod
    def message(cls, info: Any) -> Error:
        return cls(ErrorKind.MESSAGE, _to_info(info))

    @classmethod
    def other(cls, exc: BaseException) -> Error:
        return cls(ErrorKind.OTHER, None, exc)

    @classmethod
    def end_of_input(cls) -> Error:
        return cls.unexpected(Info.message("end of input"))

    def is_unexpected_end_of_input(self) -> bool:
        return self == Error.end_of_input()

    def map_token(self, f: Callable[[Any], Any]) -> Error:
        if self.info is None:
            return self
        return Error(self.kind, self.info.map_token(f), self.exc)

    def map_range(self, f: Callable[[Any], Any]) -> Error:
        if self.info is None:
            return self
        return Error(self.kind, self.info.map_range(f), self.exc)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Error):
            return NotImplemented
        if self.kind is ErrorKind.OTHER or other.kind is ErrorKind.OTHER:
            return False
        return self.kind is other.kind and self.info == other.info

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        if self.kind is ErrorKind.UNEXPECTED:
            return f"Unexpected `{self.info}`"
        if self.kind is ErrorKind.EXPECTED:
            return f"Expected `{self.info}`"
        if self.kind is ErrorKind.MESSAGE:
            return str(self.info)
        return str(self.exc)


def fmt_errors(errors: Iterable[Error]) -> str:
    """Render errors: unexpected lines, then one expected list, then messages."""
    errors = list(errors)
    lines = [
        f"{error}\n" for error in errors if error.kind is ErrorKind.UNEXPECTED
    ]

    expected = [error.info for error in errors if error.kind is ErrorKind.EXPECTED]
    if expected:
        parts = []
        last = len(expected) - 1
        for i, info in enumerate(expected):
            if i == 0:
                prefix = "Expected"
            elif i < last:
                prefix = ","
            else:
                prefix = " or"
            parts.append(f"{prefix} `{info}`")
        lines.append("".join(parts) + "\n")

    lines.extend(
        f"{error}\n"
        for error in errors
        if error.kind in (ErrorKind.MESSAGE, ErrorKind.OTHER)
    )
    return "".join(lines)