"""Line-break detection, line splitting, and the byte-exact text buffer."""

from .errors import (
    IndexOutOfRangeError,
    InvalidArgumentError,
    LineBufferError,
    LineSplitError,
    NoContentOpenError,
)
from .line_range import LineRange
from .linebreak import LineBreakKind, detect_line_break, platform_default
from .splitter import iter_line_breaks, line_spans, split_lines
from .text_buffer import TextBuffer

__all__ = [
    "LineBreakKind",
    "detect_line_break",
    "platform_default",
    "iter_line_breaks",
    "line_spans",
    "split_lines",
    "LineRange",
    "TextBuffer",
    "LineBufferError",
    "InvalidArgumentError",
    "IndexOutOfRangeError",
    "NoContentOpenError",
    "LineSplitError",
]
