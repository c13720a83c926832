"""Error hierarchy shared by the buffer and editor layers."""

from __future__ import annotations


class LineBufferError(RuntimeError):
    """Base class for every failure raised by the line buffer core."""


class InvalidArgumentError(LineBufferError, ValueError):
    """Raised when a required input is absent or outside its valid set."""


class IndexOutOfRangeError(LineBufferError, IndexError):
    """Raised when an index or range falls outside the target collection."""

    def __init__(
        self, message: str, *, index: int | None = None, bound: int | None = None
    ) -> None:
        super().__init__(message)
        self.index = index
        self.bound = bound


class NoContentOpenError(LineBufferError):
    """Raised when an editing operation runs before any content is opened."""


class LineSplitError(LineBufferError):
    """Raised when the splitter is handed a line break it cannot split on."""
