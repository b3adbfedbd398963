# nextword/DB/linereader.py
from __future__ import annotations
from typing import BinaryIO, Iterator, List, Optional

from ..config import READ_LINE_BUF_SIZE
from ..models import Line

_NL = b"\n"


def _read_at(f: BinaryIO, offset: int, n: int) -> bytes:
    f.seek(offset)
    return f.read(n)


def read_line(f: BinaryIO, offset: int, buf_size: int = READ_LINE_BUF_SIZE) -> Optional[Line]:
    """
    Read the line that starts at ``offset``, in ``buf_size`` chunks.

    Returns None when ``offset`` is at or past the end of ``f``. A last line
    without a trailing newline is still returned, flagged ``at_eof``.
    OSError from the underlying reads propagates unchanged.
    """
    chunks: List[bytes] = []
    pos = offset
    while True:
        buf = _read_at(f, pos, buf_size)
        if not buf:
            if not chunks:
                return None
            data = b"".join(chunks)
            return Line(data=data, offset=offset, next_offset=offset + len(data), at_eof=True)

        i = buf.find(_NL)
        if i != -1:
            chunks.append(buf[:i])
            data = b"".join(chunks)
            return Line(data=data, offset=offset, next_offset=offset + len(data) + 1)

        chunks.append(buf)
        pos += len(buf)


def iter_lines(f: BinaryIO, offset: int, buf_size: int = READ_LINE_BUF_SIZE) -> Iterator[Line]:
    """Yield consecutive lines starting at ``offset`` until end of data."""
    while True:
        line = read_line(f, offset, buf_size)
        if line is None:
            return
        yield line
        if line.at_eof:
            return
        offset = line.next_offset
