"""Module-level API over one process-wide engine (used by the CLI and web front ends)."""
from __future__ import annotations
import logging
from typing import List, Optional

from nextword import Nextword, NextwordParams
from nextword.config import CANDIDATE_NUM, GREEDY, data_path_from_env
from nextword.errors import ConfigurationError


_engine: Nextword | None = None


def initialize(data_path: Optional[str] = None,
               candidate_num: int = CANDIDATE_NUM,
               greedy: bool = GREEDY,
               verbose: bool = False) -> Nextword:
    """
    Build the shared engine. ``data_path`` defaults to $NEXTWORD_DATA_PATH.
    Raises ConfigurationError if the resulting configuration is invalid.
    """
    global _engine
    if verbose:
        logging.basicConfig(level=logging.INFO)

    path = data_path or data_path_from_env()
    if not path:
        raise ConfigurationError('"NEXTWORD_DATA_PATH" environment variable is not set')

    _engine = Nextword(NextwordParams(data_path=path, candidate_num=candidate_num, greedy=greedy))
    return _engine


def suggest(text: str) -> List[str]:
    """Suggestions for ``text`` from the shared engine."""
    if _engine is None:
        raise RuntimeError("Engine not initialized. Call initialize(...) first.")
    return _engine.suggest(text)
