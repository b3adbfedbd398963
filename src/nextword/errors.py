from __future__ import annotations
from typing import List, Optional


class NextwordError(Exception):
    """Base class for everything raised by the nextword package."""


class ConfigurationError(NextwordError, ValueError):
    """Invalid engine parameters. Raised only while constructing an engine."""


class StorageError(NextwordError):
    """
    A read failed for a reason other than a missing file or end of data.

    ``candidates`` holds whatever had already been merged (and truncated)
    before the failure; the original OSError is chained as ``__cause__``.
    """

    def __init__(self, message: str, candidates: Optional[List[str]] = None) -> None:
        super().__init__(message)
        self.candidates: List[str] = list(candidates or [])
