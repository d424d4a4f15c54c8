"""A stream wrapper that carries user state alongside an inner stream."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable


@dataclass
class Stream:
    """Delegates every stream operation to ``stream`` while holding ``state``."""

    stream: Any
    state: Any = None

    def position(self) -> Any:
        return self.stream.position()

    def checkpoint(self) -> Any:
        return self.stream.checkpoint()

    def reset(self, checkpoint: Any) -> None:
        self.stream.reset(checkpoint)

    def uncons(self) -> Any:
        return self.stream.uncons()

    def is_partial(self) -> bool:
        return self.stream.is_partial()

    def uncons_range(self, size: int) -> Any:
        return self.stream.uncons_range(size)

    def uncons_while(self, predicate: Callable[[Any], bool]) -> Any:
        return self.stream.uncons_while(predicate)

    def uncons_while1(self, predicate: Callable[[Any], bool]) -> Any:
        return self.stream.uncons_while1(predicate)

    def distance(self, end: Any) -> int:
        return self.stream.distance(end)

    def range(self) -> Any:
        return self.stream.range()