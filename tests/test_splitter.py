import pytest

from linebuf.buffer import (
    LineBreakKind,
    LineSplitError,
    iter_line_breaks,
    line_spans,
    split_lines,
)


@pytest.mark.parametrize(
    ("data", "kind", "expected"),
    [
        (b"", LineBreakKind.LF, ()),
        (b"\n", LineBreakKind.LF, (b"", b"")),
        (b"a", LineBreakKind.LF, (b"a",)),
        (b"\n\ntext\n", LineBreakKind.LF, (b"", b"", b"text", b"")),
        (b"a\r\nb\r\n", LineBreakKind.CRLF, (b"a", b"b", b"")),
        (b"a\rb\rc", LineBreakKind.CR, (b"a", b"b", b"c")),
    ],
)
def test_split_examples(
    data: bytes, kind: LineBreakKind, expected: tuple[bytes, ...]
) -> None:
    assert split_lines(data, kind) == expected


def test_other_separators_stay_inside_lines() -> None:
    assert split_lines(b"a\rb\r\nc\n", LineBreakKind.CRLF) == (b"a\rb", b"c\n")
    assert split_lines(b"a\r\nb", LineBreakKind.LF) == (b"a\r", b"b")


def test_line_count_is_separator_count_plus_one() -> None:
    data = b"x\r\n\r\ny\r\nz\r\n"
    separators = list(iter_line_breaks(data, LineBreakKind.CRLF))

    assert len(separators) == 4
    assert len(split_lines(data, LineBreakKind.CRLF)) == len(separators) + 1


def test_spans_exclude_separators() -> None:
    assert line_spans(b"ab\r\ncd", LineBreakKind.CRLF) == [(0, 2), (4, 6)]
    assert list(iter_line_breaks(b"ab\r\ncd", LineBreakKind.CRLF)) == [(2, 4)]


def test_unrecognized_kind_fails() -> None:
    with pytest.raises(LineSplitError):
        split_lines(b"a\nb", LineBreakKind.UNRECOGNIZED)
    with pytest.raises(LineSplitError):
        split_lines(b"", LineBreakKind.UNRECOGNIZED)
