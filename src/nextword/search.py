from __future__ import annotations
import logging
from typing import Iterable, List, Sequence

from . import config as CFG
from .errors import StorageError
from .models import NextwordParams, ParsedInput
from .DB.linereader import read_line, iter_lines
from .DB.sortedfile import binary_search, file_size
from .DB.ngramfiles import ngram_path, dict_path

log = logging.getLogger(__name__)

_FIELD = CFG.FIELD_SEP.encode(CFG.ENCODING)
_WORD = CFG.WORD_SEP.encode(CFG.ENCODING)


def _decode(b: bytes) -> str:
    return b.decode(CFG.ENCODING, errors="replace")


# ---------- list helpers (no I/O) ----------

def merge_candidates(a: Sequence[str], b: Iterable[str]) -> List[str]:
    """All of ``a`` in order, then each word of ``b`` not seen yet, in ``b``'s order."""
    out = list(a)
    seen = set(out)
    for w in b:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def filter_candidates(cand: Iterable[str], prefix: str) -> List[str]:
    """Keep only the words that begin with ``prefix``."""
    return [w for w in cand if w.startswith(prefix)]


# ---------- file lookups ----------

def search_ngram(params: NextwordParams, context: Sequence[str]) -> List[str]:
    """
    Continuations stored for exactly ``context``.

    Missing file, unpartitioned initial, or absent key all give [].
    Other OSErrors propagate.
    """
    path = ngram_path(params.data_path, context)
    if path is None:
        log.debug("no n-gram file for context %r", list(context))
        return []

    try:
        f = open(path, "rb")
    except FileNotFoundError:
        log.debug("n-gram file missing: %s", path)
        return []

    with f:
        key = (CFG.WORD_SEP.join(context) + CFG.FIELD_SEP).encode(CFG.ENCODING)
        bufsize = params.read_line_buf_size
        offset = binary_search(f, file_size(f), key, bufsize)
        if offset is None:
            return []
        line = read_line(f, offset, bufsize)

    if line is None or not line.data.startswith(key):
        return []

    payload = line.data[len(key):].split(_FIELD, 1)[0]
    return [_decode(w) for w in payload.split(_WORD) if w]


def search_dictionary(params: NextwordParams, prefix: str) -> List[str]:
    """
    Dictionary words beginning with ``prefix``, in file order.

    Seeks to the first line >= prefix, then reads forward while the word
    field still starts with it.
    """
    if not prefix:
        return []

    path = dict_path(params.data_path)
    try:
        f = open(path, "rb")
    except FileNotFoundError:
        log.debug("dictionary missing: %s", path)
        return []

    want = prefix.encode(CFG.ENCODING)
    words: List[str] = []
    with f:
        bufsize = params.read_line_buf_size
        offset = binary_search(f, file_size(f), want, bufsize)
        if offset is None:
            return []
        for line in iter_lines(f, offset, bufsize):
            word = line.data.split(_FIELD, 1)[0]
            if not word.startswith(want):
                break
            words.append(_decode(word))
    return words


# ---------- cascade ----------

def cascade(params: NextwordParams, parsed: ParsedInput) -> List[str]:
    """
    Run the suggestion pipeline for one parsed input.

    Rounds go from the full context down to its last word (orders 5..2).
    Without greedy, the first round that leaves any candidates ends the
    n-gram phase. A non-empty prefix always adds dictionary completions
    afterwards. Read failures raise StorageError carrying the candidates
    merged so far.
    """
    cap = params.candidate_num
    context, prefix = parsed.context, parsed.prefix
    candidates: List[str] = []

    try:
        for i in range(len(context)):
            cand = search_ngram(params, context[i:])
            if prefix:
                cand = filter_candidates(cand, prefix)
            candidates = merge_candidates(candidates, cand)[:cap]
            log.debug("round order=%d hits=%d total=%d",
                      len(context) - i + 1, len(cand), len(candidates))

            if not params.greedy and candidates:
                log.debug("stopping at order=%d", len(context) - i + 1)
                break

        if prefix:
            cand = search_dictionary(params, prefix)
            candidates = merge_candidates(candidates, cand)[:cap]
            log.debug("dictionary hits=%d total=%d", len(cand), len(candidates))
    except OSError as exc:
        raise StorageError(f"failed to read n-gram data: {exc}", candidates) from exc

    return candidates
