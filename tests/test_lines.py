import io

import pytest

from pixelkit.lines import LineReader

TEXT = "first line\nsecond\n\nlast without newline"


@pytest.mark.parametrize("size", [1, 3, 10, 100])
def test_lines_join_back_to_text(size):
    lines = list(LineReader(io.StringIO(TEXT), size))
    assert "".join(lines) == TEXT
    assert all(line.endswith("\n") for line in lines[:-1])
    assert lines[-1] == "last without newline"


@pytest.mark.parametrize("size", [1, 4, 64])
def test_line_count(size):
    lines = list(LineReader(io.StringIO(TEXT), size))
    assert len(lines) == len(TEXT.splitlines())


def test_empty_line_kept():
    lines = list(LineReader(io.StringIO(TEXT), 5))
    assert lines[2] == "\n"


def test_bytes_stream():
    data = b"ab\ncd\n"
    lines = list(LineReader(io.BytesIO(data), 2))
    assert lines == [b"ab\n", b"cd\n"]


def test_read_line_then_none():
    reader = LineReader(io.StringIO("only\n"))
    assert reader.read_line() == "only\n"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_empty_stream():
    assert LineReader(io.StringIO("")).read_line() is None


@pytest.mark.parametrize("size", [0, -3])
def test_bad_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), size)