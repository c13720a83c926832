"""Byte-exact text buffer stored as a list of lines plus one line break."""

from __future__ import annotations

from typing import List, Optional, Sequence

from .errors import IndexOutOfRangeError, InvalidArgumentError
from .line_range import LineRange
from .linebreak import LineBreakKind, detect_line_break
from .splitter import split_lines


class TextBuffer:
    """Lines of a document and the line break used to join them.

    ``to_bytes()`` reproduces the bytes the buffer was built from until
    either the lines are replaced through ``set_line_range`` or the line
    break is overridden.
    """

    def __init__(
        self, data: bytes, *, default_line_break: Optional[LineBreakKind] = None
    ) -> None:
        if data is None:
            raise InvalidArgumentError(
                "Cannot initialize a text buffer with absent bytes"
            )
        raw = bytes(data)
        self._line_break = detect_line_break(raw, default=default_line_break)
        self._lines: List[bytes] = list(split_lines(raw, self._line_break))
        self.version = 0
        self.dirty = False

    @classmethod
    def from_bytes(
        cls, data: bytes, *, default_line_break: Optional[LineBreakKind] = None
    ) -> "TextBuffer":
        return cls(data, default_line_break=default_line_break)

    def to_bytes(self) -> bytes:
        return self._line_break.pattern.join(self._lines)

    @property
    def lines(self) -> Sequence[bytes]:
        """Return the current lines without exposing internal mutability."""

        return tuple(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def line_break(self) -> LineBreakKind:
        return self._line_break

    def set_line_break(self, kind: LineBreakKind) -> None:
        """Use ``kind`` for future serialization; the lines stay as they are."""

        if not isinstance(kind, LineBreakKind) or not kind.is_known:
            raise InvalidArgumentError(f"Cannot set line break to {kind!r}")
        if kind is not self._line_break:
            self._line_break = kind
            self._touch()

    def get_line_range(self, start: int, end: int) -> LineRange:
        count = len(self._lines)
        if start < 0:
            raise IndexOutOfRangeError(
                f"Range start {start} is below 0", index=start, bound=count
            )
        if end > count:
            raise IndexOutOfRangeError(
                f"Range end {end} exceeds line count {count}", index=end, bound=count
            )
        if end < start:
            raise InvalidArgumentError(f"Range end {end} precedes start {start}")
        return LineRange(tuple(self._lines[start:end]), start, end)

    def get_line_range_all(self) -> LineRange:
        return self.get_line_range(0, len(self._lines))

    def set_line_range(self, line_range: LineRange) -> None:
        """Splice ``line_range.lines`` over ``[start_index, end_index)``."""

        if line_range is None or line_range.lines is None:
            raise InvalidArgumentError("Cannot set a line range without lines")
        count = len(self._lines)
        start, end = line_range.start_index, line_range.end_index
        if end > count:
            raise IndexOutOfRangeError(
                f"Range end {end} exceeds line count {count}", index=end, bound=count
            )
        if end < start:
            raise InvalidArgumentError(f"Range end {end} precedes start {start}")
        self._lines[start:end] = list(line_range.lines)
        self._touch()

    def _touch(self) -> None:
        self.version += 1
        self.dirty = True

    def __len__(self) -> int:
        return len(self._lines)

    def __repr__(self) -> str:
        return (
            f"TextBuffer(lines={len(self._lines)}, "
            f"line_break={self._line_break.name}, version={self.version})"
        )
