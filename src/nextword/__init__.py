"""
Nextword Engine Module

Suggests the next English word (or completes the word being typed) from
precomputed, lexicographically sorted n-gram tables kept on disk. Files
are searched with random-access binary search; nothing is loaded or
cached in memory.

Data directory layout:
    <order>gram-<letter>.txt   "<context words>\\t<candidate words>" (orders 2..5)
    dict.txt                   "<word>\\t<metadata>"

Example Usage:
    from nextword import Nextword, NextwordParams

    nw = Nextword(NextwordParams(data_path="/path/to/data", candidate_num=10))
    nw.suggest("the cat ")   # next words after "the cat"
    nw.suggest("the ca")     # words after "the" beginning with "ca"
"""

# src/nextword/__init__.py
from .engine import Nextword  # re-export
from .models import NextwordParams, ParsedInput
from .errors import NextwordError, ConfigurationError, StorageError

__version__ = "1.0.0"
__all__ = [
    "Nextword",
    "NextwordParams",
    "ParsedInput",
    "NextwordError",
    "ConfigurationError",
    "StorageError",
]
