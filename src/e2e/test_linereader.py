import io
import pytest
from nextword.DB.linereader import read_line, iter_lines

DATA = b"alpha\tone\nbeta\ttwo\ngamma"


@pytest.mark.parametrize("bufsize", [1, 2, 3, 7, 10_000])
def test_read_line_across_chunks(bufsize):
    f = io.BytesIO(DATA)
    line = read_line(f, 0, bufsize)
    assert line.data == b"alpha\tone"
    assert line.next_offset == 10
    assert line.at_eof is False

    line = read_line(f, 10, bufsize)
    assert line.data == b"beta\ttwo"
    assert line.next_offset == 19


@pytest.mark.parametrize("bufsize", [1, 4, 10_000])
def test_last_line_without_newline_is_returned(bufsize):
    f = io.BytesIO(DATA)
    line = read_line(f, 19, bufsize)
    assert line.data == b"gamma"
    assert line.at_eof is True
    assert line.next_offset == len(DATA)


def test_offset_at_or_past_end_is_no_line():
    f = io.BytesIO(DATA)
    assert read_line(f, len(DATA)) is None
    assert read_line(f, len(DATA) + 5) is None
    assert read_line(io.BytesIO(b""), 0) is None


def test_mid_line_offset_reads_to_newline():
    f = io.BytesIO(DATA)
    assert read_line(f, 3).data == b"ha\tone"


def test_empty_line():
    f = io.BytesIO(b"\nx\n")
    line = read_line(f, 0)
    assert line.data == b""
    assert line.next_offset == 1


def test_iter_lines_from_offset():
    f = io.BytesIO(DATA)
    got = [ln.text() for ln in iter_lines(f, 10, 2)]
    assert got == ["beta\ttwo", "gamma"]


def test_read_errors_propagate():
    class Broken(io.BytesIO):
        def read(self, n=-1):
            raise OSError(5, "I/O error")

    with pytest.raises(OSError):
        read_line(Broken(DATA), 0)
