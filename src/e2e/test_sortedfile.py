import io
import pytest
from nextword.DB.linereader import read_line
from nextword.DB.sortedfile import binary_search, file_size

WORDS = sorted([
    "a", "able", "about", "and", "apple", "be", "bee", "cat", "catalog",
    "dog", "door", "east", "the cat", "the dog", "zebra", "zoo",
])
LINES = sorted(f"{w}\t{i}" for i, w in enumerate(WORDS))
DATA = "".join(f"{ln}\n" for ln in LINES).encode()


def _line_at(data: bytes, off):
    return read_line(io.BytesIO(data), off).data


@pytest.mark.parametrize("bufsize", [1, 5, 10_000])
def test_every_existing_key_is_found(bufsize):
    f = io.BytesIO(DATA)
    for w in WORDS:
        key = f"{w}\t".encode()
        off = binary_search(f, len(DATA), key, bufsize)
        assert off is not None
        assert _line_at(DATA, off).startswith(key)


@pytest.mark.parametrize("bufsize", [1, 10_000])
def test_missing_key_lands_on_first_greater_line(bufsize):
    f = io.BytesIO(DATA)
    for key in (b"ab\t", b"bz\t", b"cats\t", b"the\t", b"0\t"):
        off = binary_search(f, len(DATA), key, bufsize)
        assert off is not None
        line = _line_at(DATA, off)
        assert not line.startswith(key)
        assert line > key
        # nothing before it is >= key
        before = [ln.encode() for ln in LINES if ln.encode() < line]
        assert all(b < key for b in before)


def test_key_past_last_line_is_not_found():
    f = io.BytesIO(DATA)
    assert binary_search(f, len(DATA), b"zzz\t") is None


def test_empty_source_is_not_found():
    assert binary_search(io.BytesIO(b""), 0, b"a\t") is None


def test_exact_line_hit():
    f = io.BytesIO(DATA)
    target = LINES[5].encode()
    off = binary_search(f, len(DATA), target)
    assert _line_at(DATA, off) == target


def test_single_line_file():
    data = b"the cat\tsat ran jumped\n"
    assert binary_search(io.BytesIO(data), len(data), b"the cat\t") == 0


def test_last_line_without_trailing_newline():
    data = b"a\t1\nb\t2\nc\t3"
    off = binary_search(io.BytesIO(data), len(data), b"c\t", 1)
    assert _line_at(data, off) == b"c\t3"


def test_file_size(tmp_path):
    p = tmp_path / "x.txt"
    p.write_bytes(DATA)
    with open(p, "rb") as f:
        assert file_size(f) == len(DATA)
