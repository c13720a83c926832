"""Partition raw bytes into lines on a single line-break pattern."""

from __future__ import annotations

from typing import Iterator, List, Tuple

from .errors import LineSplitError
from .linebreak import LineBreakKind

Span = Tuple[int, int]  # (start, end) byte offsets, end exclusive


def iter_line_breaks(data: bytes, kind: LineBreakKind) -> Iterator[Span]:
    """Yield the ``(start, end)`` offsets of every ``kind`` separator in order."""

    if not kind.is_known:
        raise LineSplitError("Line break for content not set")

    pattern = kind.pattern
    position = data.find(pattern)
    while position != -1:
        end = position + len(pattern)
        yield (position, end)
        position = data.find(pattern, end)


def line_spans(data: bytes, kind: LineBreakKind) -> List[Span]:
    """Return the byte span of every line, separators excluded.

    N separators always give N + 1 spans; empty input gives none.
    """

    if not data:
        if not kind.is_known:
            raise LineSplitError("Line break for content not set")
        return []

    spans: List[Span] = []
    line_start = 0
    for break_start, break_end in iter_line_breaks(data, kind):
        spans.append((line_start, break_start))
        line_start = break_end
    spans.append((line_start, len(data)))
    return spans


def split_lines(data: bytes, kind: LineBreakKind) -> Tuple[bytes, ...]:
    """Split ``data`` into lines; a trailing separator yields a trailing empty line."""

    return tuple(bytes(data[start:end]) for start, end in line_spans(data, kind))
