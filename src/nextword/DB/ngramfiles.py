from __future__ import annotations
import os
from typing import Optional, Sequence

from ..config import DICT_FILE, NGRAM_FILE_FORMAT


def ngram_file_name(context: Sequence[str]) -> Optional[str]:
    """
    Name of the file holding continuations of ``context`` (1..4 words).

    The order in the name counts the predicted word too, so a two-word
    context lives in ``3gram-<letter>.txt``. Only a-z initials are
    partitioned; anything else has no file.
    """
    if not context or not context[0]:
        return None
    initial = context[0][0].lower()
    if len(initial) != 1 or not ("a" <= initial <= "z"):
        return None
    return NGRAM_FILE_FORMAT.format(order=len(context) + 1, initial=initial)


def ngram_path(data_path: str, context: Sequence[str]) -> Optional[str]:
    fname = ngram_file_name(context)
    if fname is None:
        return None
    return os.path.join(data_path, fname)


def dict_path(data_path: str) -> str:
    return os.path.join(data_path, DICT_FILE)
