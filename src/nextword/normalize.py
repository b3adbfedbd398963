from __future__ import annotations
from typing import List

from .config import MAX_CONTEXT_WORDS, WORD_SEP
from .models import ParsedInput


def parse_input(text: str) -> ParsedInput:
    """
    Split raw input into the trailing context and the word being typed.

    Rules:
      * split on single spaces only (tabs etc. stay inside words)
      * if the input does not end with a space, its last token is the prefix
      * empty tokens from runs of spaces are skipped
      * only the last MAX_CONTEXT_WORDS words are kept, oldest first
    """
    elems = text.split(WORD_SEP)

    prefix = ""
    if elems[-1] != "":
        prefix = elems.pop()

    words: List[str] = []
    for tok in reversed(elems):
        if not tok:
            continue
        words.append(tok)
        if len(words) >= MAX_CONTEXT_WORDS:
            break
    words.reverse()

    return ParsedInput(context=tuple(words), prefix=prefix)
