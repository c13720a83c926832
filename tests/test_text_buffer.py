import pytest

from linebuf.buffer import (
    IndexOutOfRangeError,
    InvalidArgumentError,
    LineBreakKind,
    LineRange,
    TextBuffer,
)

SAMPLES = [
    b"",
    b"\n",
    b"a",
    b"\n\ntext\n",
    b"First line\r\nThe second line\r\nThird line",
    b"old\rmac\r",
    b"mixed\r\nand\nmore\r",
    bytes(range(256)),
]


def make_buffer(data: bytes = b"one\ntwo\nthree") -> TextBuffer:
    return TextBuffer(data)


@pytest.mark.parametrize("data", SAMPLES)
def test_round_trip(data: bytes) -> None:
    buffer = TextBuffer(data)

    assert buffer.to_bytes() == data
    assert buffer.to_bytes() == buffer.to_bytes()
    assert buffer.line_count == len(buffer.lines)


def test_absent_bytes_rejected() -> None:
    with pytest.raises(InvalidArgumentError):
        TextBuffer(None)  # type: ignore[arg-type]


def test_empty_buffer_has_no_lines() -> None:
    buffer = TextBuffer(b"", default_line_break=LineBreakKind.CRLF)

    assert buffer.line_count == 0
    assert buffer.lines == ()
    assert buffer.line_break is LineBreakKind.CRLF


def test_line_count_follows_separators() -> None:
    buffer = TextBuffer.from_bytes(b"a\r\nb\r\n\r\nc")

    assert buffer.line_break is LineBreakKind.CRLF
    assert buffer.line_count == 4


def test_lines_view_is_detached() -> None:
    buffer = make_buffer()
    lines = buffer.lines

    assert isinstance(lines, tuple)
    assert lines == (b"one", b"two", b"three")


def test_set_line_break_changes_serialization_only() -> None:
    buffer = make_buffer()
    buffer.set_line_break(LineBreakKind.CRLF)

    assert buffer.line_break is LineBreakKind.CRLF
    assert buffer.lines == (b"one", b"two", b"three")
    assert buffer.to_bytes() == b"one\r\ntwo\r\nthree"
    assert buffer.dirty


@pytest.mark.parametrize("kind", [LineBreakKind.UNRECOGNIZED, None, b"\n"])
def test_set_line_break_rejects_invalid(kind: object) -> None:
    buffer = make_buffer()

    with pytest.raises(InvalidArgumentError):
        buffer.set_line_break(kind)  # type: ignore[arg-type]
    assert buffer.line_break is LineBreakKind.LF
    assert not buffer.dirty


def test_get_line_range() -> None:
    buffer = make_buffer()
    line_range = buffer.get_line_range(1, 3)

    assert line_range.lines == (b"two", b"three")
    assert (line_range.start_index, line_range.end_index) == (1, 3)
    assert buffer.get_line_range(2, 2).size == 0


def test_get_line_range_all() -> None:
    buffer = make_buffer()
    line_range = buffer.get_line_range_all()

    assert line_range == LineRange((b"one", b"two", b"three"), 0, 3)
    assert TextBuffer(b"").get_line_range_all() == LineRange((), 0, 0)


@pytest.mark.parametrize(("start", "end"), [(-1, 1), (0, 4)])
def test_get_line_range_out_of_bounds(start: int, end: int) -> None:
    with pytest.raises(IndexOutOfRangeError):
        make_buffer().get_line_range(start, end)


def test_get_line_range_reversed() -> None:
    with pytest.raises(InvalidArgumentError):
        make_buffer().get_line_range(2, 1)


def test_set_line_range_splices_and_grows() -> None:
    buffer = make_buffer()
    buffer.set_line_range(LineRange((b"2a", b"2b", b"2c"), 1, 2))

    assert buffer.lines == (b"one", b"2a", b"2b", b"2c", b"three")
    assert buffer.to_bytes() == b"one\n2a\n2b\n2c\nthree"
    assert buffer.version == 1


def test_set_line_range_shrinks() -> None:
    buffer = make_buffer()
    buffer.set_line_range(LineRange((), 0, 2))

    assert buffer.lines == (b"three",)


def test_set_line_range_inserts_at_empty_slice() -> None:
    buffer = make_buffer()
    buffer.set_line_range(LineRange((b"zero",), 0, 0))

    assert buffer.lines == (b"zero", b"one", b"two", b"three")


def test_set_line_range_past_end_rejected() -> None:
    buffer = make_buffer()

    with pytest.raises(IndexOutOfRangeError):
        buffer.set_line_range(LineRange((b"x",), 2, 5))
    assert buffer.lines == (b"one", b"two", b"three")


def test_set_line_range_reversed_rejected() -> None:
    buffer = make_buffer()

    with pytest.raises(InvalidArgumentError):
        buffer.set_line_range(LineRange((), 3, 1))
    assert buffer.lines == (b"one", b"two", b"three")
    assert buffer.version == 0


def test_set_line_range_absent_rejected() -> None:
    with pytest.raises(InvalidArgumentError):
        make_buffer().set_line_range(None)  # type: ignore[arg-type]


def test_ranges_do_not_alias_buffer() -> None:
    buffer = make_buffer()
    line_range = buffer.get_line_range_all()
    buffer.set_line_range(LineRange((b"replaced",), 0, 3))

    assert line_range.lines == (b"one", b"two", b"three")
    assert buffer.lines == (b"replaced",)


def test_non_bytes_line_never_reaches_buffer() -> None:
    buffer = TextBuffer(b"x\ny")

    with pytest.raises(InvalidArgumentError):
        buffer.set_line_range(LineRange([3], 0, 1))  # type: ignore[list-item]
    assert buffer.to_bytes() == b"x\ny"
