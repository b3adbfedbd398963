"""Random-access readers for the sorted, line-delimited data files."""
from .linereader import read_line, iter_lines
from .sortedfile import binary_search, file_size
from .ngramfiles import ngram_file_name, ngram_path, dict_path

__all__ = [
    "read_line",
    "iter_lines",
    "binary_search",
    "file_size",
    "ngram_file_name",
    "ngram_path",
    "dict_path",
]
