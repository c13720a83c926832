"""Line-break conventions and detection of the one a byte sequence uses."""

from __future__ import annotations

import enum
import os
from typing import Optional

from .errors import InvalidArgumentError

CARRIAGE_RETURN = 0x0D
LINE_FEED = 0x0A


class LineBreakKind(enum.Enum):
    """The recognized line-break conventions, each carrying its byte pattern."""

    CRLF = b"\r\n"
    LF = b"\n"
    CR = b"\r"
    UNRECOGNIZED = b""

    @property
    def pattern(self) -> bytes:
        return self.value

    @property
    def is_known(self) -> bool:
        return self is not LineBreakKind.UNRECOGNIZED

    @classmethod
    def parse(cls, name: str) -> "LineBreakKind":
        """Look up a known kind by case-insensitive name (``crlf``, ``lf``, ``cr``)."""

        try:
            kind = cls[name.strip().upper()]
        except KeyError as exc:
            raise InvalidArgumentError(f"Unknown line break '{name}'") from exc
        if not kind.is_known:
            raise InvalidArgumentError(f"Unknown line break '{name}'")
        return kind


def _from_pattern(pattern: bytes) -> LineBreakKind:
    for kind in LineBreakKind:
        if kind.is_known and kind.pattern == pattern:
            return kind
    return LineBreakKind.UNRECOGNIZED


def platform_default() -> LineBreakKind:
    """Return the kind matching ``os.linesep``, falling back to LF."""

    kind = _from_pattern(os.linesep.encode("ascii"))
    return kind if kind.is_known else LineBreakKind.LF


def detect_line_break(
    data: bytes, *, default: Optional[LineBreakKind] = None
) -> LineBreakKind:
    """Return the line break used by ``data``.

    Only the first CR or LF decides. When no separator shows up before the
    last byte, the last byte alone is checked, and a separator-free input
    resolves to ``default`` (or the platform default when not given).
    """

    fallback = default if default is not None else platform_default()
    if not isinstance(fallback, LineBreakKind) or not fallback.is_known:
        raise InvalidArgumentError("Default line break must be a known kind")

    last = len(data) - 1
    for index in range(last):
        byte = data[index]
        if byte == CARRIAGE_RETURN:
            if data[index + 1] == LINE_FEED:
                return LineBreakKind.CRLF
            return LineBreakKind.CR
        if byte == LINE_FEED:
            return LineBreakKind.LF

    if last >= 0:
        if data[last] == LINE_FEED:
            return LineBreakKind.LF
        if data[last] == CARRIAGE_RETURN:
            return LineBreakKind.CR
    return fallback
