"""Stateful line editor over an opened text buffer."""

from __future__ import annotations

from typing import List, Optional

from linebuf.buffer import (
    IndexOutOfRangeError,
    InvalidArgumentError,
    LineRange,
    NoContentOpenError,
    TextBuffer,
)

DEFAULT_ENCODING = "utf-8"
DECODE_ERRORS = "surrogateescape"


class LineEditor:
    """Edits a "current" line range cut from one opened ``TextBuffer``.

    The editor starts closed. ``open_content`` attaches a buffer and selects
    all of its lines; every edit then replaces ``current_range`` with a new
    ``LineRange`` holding the edited lines and the original index pair.
    Edits stay in the current range until ``commit`` writes them back.
    """

    def __init__(self, *, encoding: str = DEFAULT_ENCODING) -> None:
        self.encoding = encoding
        self._buffer: Optional[TextBuffer] = None
        self._current: Optional[LineRange] = None

    @property
    def is_open(self) -> bool:
        return self._buffer is not None

    @property
    def buffer(self) -> TextBuffer:
        return self._require_open()[0]

    @property
    def current_range(self) -> LineRange:
        return self._require_open()[1]

    def open_content(self, text_buffer: TextBuffer) -> None:
        if text_buffer is None:
            raise InvalidArgumentError("The provided content cannot be absent")
        current = text_buffer.get_line_range_all()
        self._buffer = text_buffer
        self._current = current

    def close(self) -> None:
        self._buffer = None
        self._current = None

    def get_current_line_range(self) -> LineRange:
        return self.current_range

    def read_line(self, index: int) -> str:
        """Narrow the current range to line ``index`` of the buffer and return it.

        The bound check runs against the whole buffer, not the current range.
        """

        buffer, _ = self._require_open()
        if index < 0:
            raise InvalidArgumentError("Line number cannot be smaller than 0")
        if index > buffer.line_count:
            raise InvalidArgumentError("Line number is bigger than content size")
        current = buffer.get_line_range(index, index + 1)
        self._current = current
        return self._decode(current.lines[0])

    def read_all_lines(self) -> List[str]:
        _, current = self._require_open()
        return [self._decode(line) for line in current.lines]

    def update_line(self, index: int, new_line_text: str | bytes) -> None:
        _, current = self._require_open()
        if new_line_text is None:
            raise InvalidArgumentError("New line text cannot be absent")
        if index < 0 or index >= current.size:
            raise IndexOutOfRangeError(
                f"Line {index} is outside the current range of {current.size} lines",
                index=index,
                bound=current.size,
            )
        lines = list(current.lines)
        lines[index] = self._encode(new_line_text)
        self._current = current.with_lines(lines)

    def add_line_at_index(self, index: int, new_line_text: str | bytes) -> None:
        """Insert a line before ``index``, padding with empty lines past the end."""

        _, current = self._require_open()
        if index < 0:
            raise InvalidArgumentError("Line number cannot be smaller than 0")
        if new_line_text is None:
            raise InvalidArgumentError("New line text cannot be absent")
        lines = list(current.lines)
        if index > len(lines):
            lines.extend(b"" for _ in range(index - len(lines)))
        lines.insert(index, self._encode(new_line_text))
        self._current = current.with_lines(lines)

    def delete_line_at_index(self, index: int) -> None:
        _, current = self._require_open()
        if index < 0 or index >= current.size:
            raise InvalidArgumentError(
                f"Cannot delete line {index} from a range of {current.size} lines"
            )
        lines = list(current.lines)
        del lines[index]
        self._current = current.with_lines(lines)

    def delete_lines_of_range(self, start: int, end: int) -> None:
        _, current = self._require_open()
        if start < 0 or start > end or end > current.size:
            raise InvalidArgumentError(
                f"Cannot delete [{start}, {end}) from a range of {current.size} lines"
            )
        lines = list(current.lines)
        del lines[start:end]
        self._current = current.with_lines(lines)

    def commit(self) -> LineRange:
        """Write the current range back into the buffer and re-cut it.

        The range replaces the slice named by its recorded index pair; the
        returned range spans the same start over the new number of lines.
        """

        buffer, current = self._require_open()
        buffer.set_line_range(current)
        start = current.start_index
        self._current = buffer.get_line_range(start, start + current.size)
        return self._current

    def _require_open(self) -> tuple[TextBuffer, LineRange]:
        if self._buffer is None or self._current is None:
            raise NoContentOpenError("No content is open in the editor")
        return self._buffer, self._current

    def _decode(self, line: bytes) -> str:
        return line.decode(self.encoding, DECODE_ERRORS)

    def _encode(self, text: str | bytes) -> bytes:
        if isinstance(text, str):
            return text.encode(self.encoding, DECODE_ERRORS)
        if isinstance(text, (bytes, bytearray, memoryview)):
            return bytes(text)
        raise InvalidArgumentError(
            f"Line text must be str or bytes, not {type(text).__name__}"
        )
