from __future__ import annotations
import os
from typing import Mapping, Optional

# where the data directory is looked up when not given explicitly
DATA_PATH_ENV: str = "NEXTWORD_DATA_PATH"

# engine defaults
CANDIDATE_NUM: int = 10
GREEDY: bool = False

# chunk size for line reads; 10_000 balances read calls against memory
READ_LINE_BUF_SIZE: int = 10_000

# /* ~~~ n-gram layout: up to 4 context words, orders 2..5 ~~~ */
MAX_CONTEXT_WORDS: int = 4
MIN_NGRAM_ORDER: int = 2
MAX_NGRAM_ORDER: int = MAX_CONTEXT_WORDS + 1

# file names inside the data directory
NGRAM_FILE_FORMAT: str = "{order}gram-{initial}.txt"
DICT_FILE: str = "dict.txt"

# line layout: "<key>\t<payload>\n"
FIELD_SEP: str = "\t"
WORD_SEP: str = " "
ENCODING: str = "utf-8"


def data_path_from_env(environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Return the data directory named by NEXTWORD_DATA_PATH, or None if unset/empty."""
    env = os.environ if environ is None else environ
    return env.get(DATA_PATH_ENV) or None
