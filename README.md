# diagspan

Extract a span of source text, plus a chosen number of context lines before
and after it, so that a diagnostic can show where something went wrong.

Offsets and lengths are in bytes. Text sources (`str`) are encoded as UTF-8;
`bytes`, `bytearray` and `memoryview` sources are used as they are. `\n`,
`\r` and `\r\n` all end a line.

## Installation

```
pip install .
```

The package has no runtime dependencies.

## Usage

Everything lives in the `diagspan.source` module.

```python
from diagspan.source import OutOfBoundsError, SourceSpan, read_span

src = "xxx\nfoo\nbar\nbaz\n\nyyy\n"
contents = read_span(src, SourceSpan(8, 3), 1, 1)

contents.text()     # 'foo\nbar\nbaz\n'
contents.line       # 1 (zero-based line where the returned data starts)
contents.column     # 0
contents.span       # SourceSpan(offset=4, length=12)
```

### `SourceSpan`

A frozen dataclass holding a byte `offset` and a `length`. Negative values
raise `ValueError`. `end()` gives the offset just past the span, and
`is_empty()` tells whether its length is zero.

### `read_span(source, span, context_lines_before=0, context_lines_after=0)`

`span` may be a `SourceSpan` or an `(offset, length)` tuple. Both context
line counts default to zero; negative counts raise `ValueError`, and a source
of any other type raises `TypeError`.

It returns a `SpanContents`, a frozen dataclass with these fields:

- `data`: the bytes that were read, including the context lines;
- `span`: a `SourceSpan` giving where `data` starts in the source and how long it is;
- `line`: the zero-based line on which `data` starts;
- `column`: the zero-based column of the span's start when no context lines
  before were asked for, otherwise `0`;
- `line_count`: the number of line endings passed while reading.

`text()` decodes `data` as UTF-8.

If a span reaches past the end of the source, `read_span` raises
`OutOfBoundsError`:

```python
try:
    read_span("abc", SourceSpan(10, 5))
except OutOfBoundsError:
    ...
```

## What it does not do

The package only locates and extracts source text. It does not format or
render diagnostic reports, draw labels or underlines, or colour output; that
is left to the code that uses it.

## Running the tests

```
pip install .[test]
pytest
```