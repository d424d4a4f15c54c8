"""Input streams for parsers: positions, backtracking buffers, spans, byte readers and parse errors."""

__version__ = "0.1.0"

__all__ = [
    "buf_reader",
    "buffered",
    "buffers",
    "decoder",
    "easy",
    "easy_error",
    "position",
    "read",
    "span",
    "state",
]