import pytest

from linebuf.buffer import InvalidArgumentError, LineRange


def test_accessors() -> None:
    line_range = LineRange((b"a", b"b"), 2, 4)

    assert line_range.lines == (b"a", b"b")
    assert line_range.start_index == 2
    assert line_range.end_index == 4
    assert line_range.size == 2
    assert len(line_range) == 2
    assert list(line_range) == [b"a", b"b"]


def test_list_input_is_copied() -> None:
    source = [b"a", b"b"]
    line_range = LineRange.of(source, 0, 2)
    source.append(b"c")

    assert line_range.lines == (b"a", b"b")


def test_absent_lines_rejected() -> None:
    with pytest.raises(InvalidArgumentError):
        LineRange(None, 0, 0)  # type: ignore[arg-type]


@pytest.mark.parametrize(("start", "end"), [(-1, 0), (0, -1), (-2, -1)])
def test_negative_indexes_rejected(start: int, end: int) -> None:
    with pytest.raises(InvalidArgumentError):
        LineRange((), start, end)


def test_index_order_not_enforced() -> None:
    line_range = LineRange((), 5, 1)

    assert (line_range.start_index, line_range.end_index) == (5, 1)


def test_with_lines_keeps_index_pair() -> None:
    line_range = LineRange((b"a",), 3, 4).with_lines([b"a", b"b", b"c"])

    assert line_range.size == 3
    assert (line_range.start_index, line_range.end_index) == (3, 4)


@pytest.mark.parametrize("line", [3, None, "text", [b"a"]])
def test_non_bytes_lines_rejected(line: object) -> None:
    with pytest.raises(InvalidArgumentError):
        LineRange((b"ok", line), 0, 2)  # type: ignore[arg-type]


@pytest.mark.parametrize("lines", [b"ab", bytearray(b"ab"), "ab", memoryview(b"ab")])
def test_single_value_as_lines_rejected(lines: object) -> None:
    with pytest.raises(InvalidArgumentError):
        LineRange(lines, 0, 1)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError):
        LineRange.of(lines, 0, 1)  # type: ignore[arg-type]


def test_bytes_like_lines_normalized() -> None:
    line_range = LineRange((bytearray(b"a"), memoryview(b"b")), 0, 2)

    assert line_range.lines == (b"a", b"b")
    assert all(type(line) is bytes for line in line_range.lines)
