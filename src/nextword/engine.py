# nextword/engine.py
from __future__ import annotations

import os
import stat
import logging
from typing import List, Optional

from .errors import ConfigurationError, StorageError
from .models import NextwordParams
from .normalize import parse_input
from .search import cascade
from .config import DATA_PATH_ENV

log = logging.getLogger(__name__)


def _positive_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class Nextword:
    """
    Next-word suggestion engine over a directory of sorted n-gram files.

    Public API (used by CLI/Flask):
      * Nextword(params): validate configuration (raises ConfigurationError)
      * suggest(text):    return candidate words for the text typed so far

    Nothing is cached between calls: each suggest() opens, searches and
    closes its own files, so one instance can serve several threads.
    """

    # ------------- lifecycle -------------

    def __init__(self, params: Optional[NextwordParams]) -> None:
        if params is None:
            raise ConfigurationError("invalid params")

        try:
            st = os.stat(params.data_path)
        except (OSError, TypeError, ValueError) as exc:
            raise ConfigurationError(
                f"data path {params.data_path!r} is not accessible "
                f"(is {DATA_PATH_ENV} set?)"
            ) from exc
        if not stat.S_ISDIR(st.st_mode):
            raise ConfigurationError(f"data path {params.data_path!r} is not a directory")

        if not _positive_int(params.candidate_num):
            raise ConfigurationError("candidate-num must be a positive integer")
        if not _positive_int(params.read_line_buf_size):
            raise ConfigurationError("read-line buffer size must be a positive integer")

        self._params = params
        log.info("Nextword ready: data=%s candidates=%d greedy=%s",
                 params.data_path, params.candidate_num, params.greedy)

    @property
    def params(self) -> NextwordParams:
        return self._params

    # ------------- query -------------

    # /* ~~~ Suggest next words (or completions of the last word) for the input ~~~ */
    def suggest(self, text: str) -> List[str]:
        """
        If ``text`` ends with a space, return likely next words. Otherwise
        return words that begin with the last (partial) word of ``text``.

        Raises StorageError (with ``.candidates`` set to the partial result)
        when a data file cannot be read.
        """
        parsed = parse_input(text)
        log.debug("suggest: context=%r prefix=%r", list(parsed.context), parsed.prefix)
        try:
            candidates = cascade(self._params, parsed)
        except StorageError as exc:
            log.error("suggest failed for %r: %s", text, exc)
            raise
        log.debug("suggest: %d candidates", len(candidates))
        return candidates
