"""File comparison.

This module exports the per-pair comparator and the binary and text
comparison results it produces.
"""

from pyfc.compare.binary import (
    BinaryCompareResult,
    ByteDifference,
    DifferenceSink,
    compare_binary,
    iter_differences,
)
from pyfc.compare.engine import (
    BINARY_EXTENSIONS,
    CompareMode,
    FileComparator,
    FileCompareResult,
    is_binary_extension,
)
from pyfc.compare.streams import CannotOpenError, CannotReadError, CompareError
from pyfc.compare.text import DiffBlock, NumberedLine, TextCompareResult, compare_lines

__all__ = [
    "BINARY_EXTENSIONS",
    "BinaryCompareResult",
    "ByteDifference",
    "CannotOpenError",
    "CannotReadError",
    "CompareError",
    "CompareMode",
    "DifferenceSink",
    "DiffBlock",
    "FileCompareResult",
    "FileComparator",
    "NumberedLine",
    "TextCompareResult",
    "compare_binary",
    "compare_lines",
    "is_binary_extension",
    "iter_differences",
]
