# parsestream

Building blocks for the input side of a parser: streams that hand out tokens
one at a time, know where they are, can be rewound to a checkpoint, and
report failures as structured errors.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The stream protocol

Every stream offers `uncons()` (take the next token) and `is_partial()`.
Streams that can be rewound add `checkpoint()` and `reset(checkpoint)`;
streams that track where they are add `position()`. Streams over in-memory
sequences also offer `uncons_range(size)`, `uncons_while(predicate)`,
`uncons_while1(predicate)`, `distance(checkpoint)` and `range()`. The
wrappers below pass these calls through to the stream they wrap.

## Modules

- `parsestream.position` – `Stream(input, positioner=None)` keeps a
  positioner up to date with every token taken. `input` may be another
  stream or a plain sequence (`str`, `bytes`, `list`, ...).
  `IndexPositioner` counts tokens; `SourcePosition` tracks line and column,
  both starting at 1, and starts a new line on `"\n"` or the byte `10`.
  `default_positioner(input)` picks `SourcePosition` for text and
  `IndexPositioner` for anything else. `Stream.with_positioner` sets the
  positioner explicitly.
- `parsestream.buffered` – `Stream(iter, lookahead)` remembers the last
  `lookahead` tokens of a single-pass stream so it can be checkpointed and
  reset. Going back further than the buffer holds raises `BacktrackError`
  (an `Errors` carrying the message `"Backtracked to far"`).
- `parsestream.read` – `Stream(reader)` yields one byte (as an `int`) at a
  time from a binary file object. Failures raise `ReadError`, whose `kind`
  is a `ReadErrorKind`: `END_OF_INPUT`, `UNEXPECTED` or `IO` (with the
  `OSError` as `cause`). It has no position and cannot be reset on its own.
- `parsestream.state` – `Stream(stream, state)` carries arbitrary user state
  alongside another stream.
- `parsestream.span` – `Stream(stream)` reports positions as `Span(start,
  end)`; `Errors` raised by the inner stream get their position turned into a
  span. `Span.at(p)` is the empty span at `p`; `Span.map(f)` maps both ends.
- `parsestream.easy_error` – `Info` (a token, a range or a message, see
  `InfoKind`) and `Error` (`unexpected`, `expected`, `message`, `other`,
  see `ErrorKind`), plus `fmt_errors(errors)` to render a list of errors.
- `parsestream.easy` – `Errors`, an exception holding every `Error` at one
  position, with `add_error` (skips duplicates), `set_expected`,
  `clear_expected`, `merge`, `map_position`, `map_token` and `map_range`.
  `Stream(stream)` wraps a positioned stream so that any other exception it
  raises becomes `Errors` at the current position.
- `parsestream.buf_reader` – `BufReader(inner, capacity=8096)`, a buffered
  reader whose buffer can be inspected (`buffer()`, `fill_buf()`) and
  advanced (`consume()`), built on `GrowableBuffer` and
  `extend_buf_sync(buf, reader)`.
- `parsestream.buffers` – the two buffering strategies: `Buffer` holds the
  input itself, `Bufferless` uses the buffer of a `BufReader`.
- `parsestream.decoder` – `Decoder`, which keeps parser state, position and
  buffered input between reads. `before_parse(reader)` reads once more and
  sets `end_of_input` when a read returns nothing; `advance(reader, n)`
  drops parsed bytes. `DecoderParseError` and `DecoderIoError` are provided
  for reporting failures; `DecoderIoError.to_errors()` turns an I/O failure
  into `Errors`.

## Examples

Replaying a byte stream:

```python
import io

from parsestream import buffered, position, read

stream = buffered.Stream(position.Stream(read.Stream(io.BytesIO(b"123,"))), 1)

checkpoint = stream.checkpoint()
assert stream.uncons() == ord("1")
stream.reset(checkpoint)
assert stream.uncons() == ord("1")
assert stream.position() == 1
```

Errors at the same position merge; an error further ahead wins:

```python
from parsestream.easy import Errors
from parsestream.easy_error import Error, Info

a = Errors.from_error(0, Error.expected(Info.token("a")))
b = Errors.from_error(0, Error.expected(Info.token("b")))
print(a.merge(b))
# Parse error at 0
# Expected `a` or `b`
```

## What it does not do

The package provides streams and error values only. It contains no parser
combinators, and all reading is synchronous: there are no asynchronous
readers or decoders. `Decoder` does not run a parser itself and does not
raise its own error types; callers use them to wrap failures.