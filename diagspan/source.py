"""Reading spans of source text together with surrounding context lines."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Tuple, Union

_CR = 0x0D
_LF = 0x0A


class OutOfBoundsError(Exception):
    """Raised when a requested span lies outside the source."""

    def __init__(self, message: str = "the requested span is outside the source") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class SourceSpan:
    """A byte range in some source: a starting offset and a length."""

    offset: int
    length: int

    def __post_init__(self) -> None:
        if self.offset < 0:
            raise ValueError(f"span offset must not be negative, got {self.offset}")
        if self.length < 0:
            raise ValueError(f"span length must not be negative, got {self.length}")

    def end(self) -> int:
        """Offset one past the last byte of the span."""
        return self.offset + self.length

    def is_empty(self) -> bool:
        """True when the span covers no bytes."""
        return self.length == 0


@dataclass(frozen=True)
class SpanContents:
    """The bytes read for a span, with where they start in the source."""

    data: bytes
    span: SourceSpan
    line: int
    column: int
    line_count: int

    def text(self) -> str:
        """The contents decoded as UTF-8."""
        return self.data.decode("utf-8")


SourceLike = Union[str, bytes, bytearray, memoryview]
SpanLike = Union[SourceSpan, Tuple[int, int]]


def _as_bytes(source: SourceLike) -> bytes:
    if isinstance(source, str):
        return source.encode("utf-8")
    if isinstance(source, (bytes, bytearray, memoryview)):
        return bytes(source)
    raise TypeError(f"unsupported source type: {type(source).__name__}")


def _as_span(span: SpanLike) -> SourceSpan:
    if isinstance(span, SourceSpan):
        return span
    offset, length = span
    return SourceSpan(offset, length)


def read_span(
    source: SourceLike,
    span: SpanLike,
    context_lines_before: int = 0,
    context_lines_after: int = 0,
) -> SpanContents:
    """Read ``span`` from ``source``, widened by whole context lines.

    Lines end at ``\\n``, ``\\r`` or ``\\r\\n``. Offsets are byte offsets into
    the UTF-8 encoding when ``source`` is a string. Raises
    :class:`OutOfBoundsError` when the span does not fit in the source.
    """
    if context_lines_before < 0 or context_lines_after < 0:
        raise ValueError("context line counts must not be negative")
    data = _as_bytes(source)
    span = _as_span(span)

    span_last = span.offset + max(span.length - 1, 0)
    span_end_last = max(span.offset + span.length - 1, 0)
    size = len(data)

    offset = 0
    line_count = 0
    start_line = 0
    start_column = 0
    before_line_starts: deque[int] = deque()
    current_line_start = 0
    end_lines = 0
    post_span = False
    post_span_got_newline = False

    while offset < size:
        byte = data[offset]
        if byte in (_CR, _LF):
            line_count += 1
            if byte == _CR and offset + 1 < size and data[offset + 1] == _LF:
                offset += 1
            if offset < span.offset:
                # Still before the span: remember this line as possible context.
                start_column = 0
                before_line_starts.append(current_line_start)
                if len(before_line_starts) > context_lines_before:
                    start_line += 1
                    before_line_starts.popleft()
            elif offset >= span_last and post_span:
                start_column = 0
                if post_span_got_newline:
                    end_lines += 1
                else:
                    post_span_got_newline = True
                if end_lines >= context_lines_after:
                    offset += 1
                    break
            current_line_start = offset + 1
        elif offset < span.offset:
            start_column += 1

        if offset >= span_end_last:
            post_span = True
            if end_lines >= context_lines_after:
                offset += 1
                break

        offset += 1

    if offset < span_end_last:
        raise OutOfBoundsError()

    if before_line_starts:
        starting_offset = before_line_starts[0]
    elif context_lines_before == 0:
        starting_offset = span.offset
    else:
        starting_offset = 0

    if starting_offset > offset:
        raise OutOfBoundsError()

    return SpanContents(
        data=data[starting_offset:offset],
        span=SourceSpan(starting_offset, offset - starting_offset),
        line=start_line,
        column=start_column if context_lines_before == 0 else 0,
        line_count=line_count,
    )