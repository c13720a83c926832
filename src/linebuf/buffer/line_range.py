"""Immutable slice of lines tagged with the interval it was cut from."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

from .errors import InvalidArgumentError

# Values that iterate but are a single line, not a sequence of lines.
_SCALARS = (str, bytes, bytearray, memoryview)


def _as_line(line: object) -> bytes:
    if not isinstance(line, (bytes, bytearray, memoryview)):
        raise InvalidArgumentError(f"Line must be bytes, not {type(line).__name__}")
    return bytes(line)


@dataclass(frozen=True, slots=True)
class LineRange:
    """Ordered lines plus the ``[start_index, end_index)`` they came from.

    The index pair records where the lines were taken from in the source
    buffer. Edits that change the number of lines keep the original pair, so
    ``size`` and ``end_index - start_index`` may differ afterwards. Callers
    writing the range back rely on that pair naming the replaced slice.
    """

    lines: Tuple[bytes, ...]
    start_index: int
    end_index: int

    def __post_init__(self) -> None:
        if self.lines is None or isinstance(self.lines, _SCALARS):
            raise InvalidArgumentError("Line range requires a sequence of lines")
        if self.start_index < 0 or self.end_index < 0:
            raise InvalidArgumentError(
                f"Line range indexes cannot be negative: "
                f"[{self.start_index}, {self.end_index})"
            )
        object.__setattr__(self, "lines", tuple(_as_line(line) for line in self.lines))

    @classmethod
    def of(cls, lines: Iterable[bytes], start_index: int, end_index: int) -> "LineRange":
        if lines is None or isinstance(lines, _SCALARS):
            raise InvalidArgumentError("Line range requires a sequence of lines")
        return cls(tuple(lines), start_index, end_index)

    @property
    def size(self) -> int:
        return len(self.lines)

    def with_lines(self, lines: Iterable[bytes]) -> "LineRange":
        """Return a range over ``lines`` that keeps this range's index pair."""

        return LineRange(tuple(lines), self.start_index, self.end_index)

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[bytes]:
        return iter(self.lines)
