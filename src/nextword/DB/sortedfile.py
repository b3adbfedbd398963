# nextword/DB/sortedfile.py
from __future__ import annotations
import os
from typing import BinaryIO, Optional

from ..config import READ_LINE_BUF_SIZE
from .linereader import read_line

# Binary search over a byte-sorted, newline-delimited file using only
# random-access reads. There is no line index: a probe at a raw byte
# position is snapped forward to the next line start before comparing.


def file_size(f: BinaryIO) -> int:
    return os.fstat(f.fileno()).st_size


def _line_start(f: BinaryIO, pos: int, buf_size: int) -> int:
    """First line start reached from raw position ``pos`` (0 stays 0)."""
    if pos == 0:
        return 0
    skipped = read_line(f, pos, buf_size)
    if skipped is None:
        return pos
    return skipped.next_offset


def binary_search(
    f: BinaryIO,
    size: int,
    query: bytes,
    buf_size: int = READ_LINE_BUF_SIZE,
) -> Optional[int]:
    """
    Return the offset of the first line whose content is >= ``query``.

    An exact line match returns as soon as it is probed. The line at the
    returned offset is only guaranteed to be >= query; callers check
    whether it actually starts with their key. Returns None when no such
    line exists (empty file, or every line sorts before ``query``).
    """
    left, right = 0, size
    while left < right:
        mid = left + (right - left) // 2
        offset = _line_start(f, mid, buf_size)
        line = read_line(f, offset, buf_size)

        # end of data sorts after every key
        if line is None or query < line.data:
            right = mid
        elif query == line.data:
            return offset
        else:
            left = mid + 1

    offset = _line_start(f, left, buf_size)
    if offset >= size:
        return None
    return offset
