# src/nextword/models.py
"""
Data models for the nextword engine.

Three small immutable containers:

- NextwordParams: engine configuration, fixed at construction.
- ParsedInput: the (context, prefix) pair extracted from one input line.
- Line: one line read from a sorted data file, with its position.

They hold no logic beyond trivial accessors, so the search layers can pass
them around freely and share one params object between threads.
"""

from dataclasses import dataclass
from typing import Tuple

from . import config as CFG


@dataclass(frozen=True)
class NextwordParams:
    """
    Engine configuration.

    Attributes
    ----------
    data_path : str
        Directory holding ``<order>gram-<letter>.txt`` and ``dict.txt``.
    candidate_num : int
        Maximum number of candidates returned by one suggest() call.
    greedy : bool
        When True, every n-gram order is consulted instead of stopping at
        the first (longest-context) order that produced candidates.
    read_line_buf_size : int
        Chunk size used by the line reader. Affects speed only.
    """
    data_path: str
    candidate_num: int = CFG.CANDIDATE_NUM
    greedy: bool = CFG.GREEDY
    read_line_buf_size: int = CFG.READ_LINE_BUF_SIZE


@dataclass(frozen=True)
class ParsedInput:
    """
    context : tuple of 0..4 words, oldest first, none containing a space.
    prefix  : the partially typed last word ("" when input ends with a space).
    """
    context: Tuple[str, ...]
    prefix: str


@dataclass(frozen=True)
class Line:
    """
    A line read at a byte offset.

    Attributes
    ----------
    data : bytes
        Line content without the terminating newline.
    offset : int
        Byte offset where the read started.
    next_offset : int
        Offset of the byte after the newline; equals the source size when
        the line was cut short by end of data.
    at_eof : bool
        True when end of data, not a newline, terminated the line.
    """
    data: bytes
    offset: int
    next_offset: int
    at_eof: bool = False

    def text(self) -> str:
        return self.data.decode(CFG.ENCODING, errors="replace")
