"""Per-pair file comparison.

This module provides the FileComparator class, which decides between
binary and text mode for a pair of files, runs the comparison, and
returns the result as data for the CLI to render.
"""

import logging
from contextlib import ExitStack
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import BinaryIO

from pyfc.compare.binary import (
    DEFAULT_CHUNK_SIZE,
    BinaryCompareResult,
    DifferenceSink,
    compare_binary,
)
from pyfc.compare.streams import CannotOpenError, CannotReadError, open_for_input
from pyfc.compare.text import TextCompareResult, compare_text
from pyfc.models.options import CompareOptions
from pyfc.models.outcome import MatchOutcome
from pyfc.pathing.host import to_native

logger = logging.getLogger(__name__)

# Extensions always compared in binary mode.
BINARY_EXTENSIONS: tuple[str, ...] = ("EXE", "COM", "SYS", "OBJ", "LIB", "BIN")


class CompareMode(str, Enum):
    """How a pair of files is compared."""

    BINARY = "binary"
    TEXT = "text"


def is_binary_extension(filename: str, extensions: tuple[str, ...] = BINARY_EXTENSIONS) -> bool:
    """Check whether a file name has one of the binary extensions.

    The extension is whatever follows the last dot after the last ``\\``
    or ``/``; the check is case-insensitive.

    Args:
        filename: Path or file name.
        extensions: Extensions without the dot.

    Returns:
        True if the file should be compared in binary mode.
    """
    name = filename[max(filename.rfind("\\"), filename.rfind("/")) + 1 :]
    dot = name.rfind(".")
    if dot < 0:
        return False
    ext = name[dot + 1 :].casefold()
    return any(ext == candidate.casefold() for candidate in extensions)


@dataclass(frozen=True, slots=True)
class FileCompareResult:
    """Result of comparing one pair of files.

    Attributes:
        left: First path, as given to the comparator.
        right: Second path, as given to the comparator.
        mode: Binary or text comparison.
        outcome: Outcome for this pair.
        same_file: True if both paths name the same file.
        binary: Binary comparison details, if mode is binary.
        text: Text comparison details, if mode is text.
        error: Path that could not be opened or read, if any.
    """

    left: str
    right: str
    mode: CompareMode
    outcome: MatchOutcome
    same_file: bool = False
    binary: BinaryCompareResult | None = None
    text: TextCompareResult | None = None
    error: CannotOpenError | CannotReadError | None = None


class FileComparator:
    """Compares pairs of files according to a set of options.

    Example:
        >>> comparator = FileComparator(CompareOptions(line_numbers=True))
        >>> result = comparator.compare("a.txt", "b.txt")
        >>> result.outcome
        <MatchOutcome.IDENTICAL: 0>

    Args:
        options: Comparison options.
        binary_extensions: Extensions forcing binary mode.
        chunk_size: Bytes read per step in binary mode.
        on_difference: Receives each differing byte in binary mode while
            the files are being read; the result only carries the count.
    """

    def __init__(
        self,
        options: CompareOptions,
        *,
        binary_extensions: tuple[str, ...] = BINARY_EXTENSIONS,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        on_difference: DifferenceSink | None = None,
    ) -> None:
        self.options = options
        self.binary_extensions = binary_extensions
        self.chunk_size = chunk_size
        self.on_difference = on_difference

    def choose_mode(self, left: str, right: str) -> CompareMode:
        """Pick binary mode for /B or binary extensions, unless /L is set."""
        if self.options.text:
            return CompareMode.TEXT
        if (
            self.options.binary
            or is_binary_extension(left, self.binary_extensions)
            or is_binary_extension(right, self.binary_extensions)
        ):
            return CompareMode.BINARY
        return CompareMode.TEXT

    def compare(self, left: str, right: str) -> FileCompareResult:
        """Compare two files named by DOS-style paths.

        Two paths that are equal ignoring case name the same file; that
        pair is Identical without either file being opened.

        Args:
            left: First file.
            right: Second file.

        Returns:
            FileCompareResult; open failures give CANNOT_FIND and read
            failures give INVALID.
        """
        mode = self.choose_mode(left, right)
        if left.casefold() == right.casefold():
            logger.debug("Skipping %s: both paths name the same file", left)
            return FileCompareResult(left, right, mode, MatchOutcome.IDENTICAL, same_file=True)

        logger.debug("Comparing %s and %s in %s mode", left, right, mode.value)
        with ExitStack() as stack:
            try:
                left_stream = _enter(stack, left)
                right_stream = _enter(stack, right)
            except CannotOpenError as e:
                return FileCompareResult(left, right, mode, MatchOutcome.CANNOT_FIND, error=e)

            try:
                if mode == CompareMode.BINARY:
                    binary = compare_binary(
                        left_stream,
                        right_stream,
                        chunk_size=self.chunk_size,
                        on_difference=self.on_difference,
                    )
                    return FileCompareResult(left, right, mode, binary.outcome, binary=binary)
                text = compare_text(left_stream, right_stream, self.options)
                return FileCompareResult(left, right, mode, text.outcome, text=text)
            except CannotReadError as e:
                logger.warning("Read failed: %s", e)
                failed = left if e.path == str(left_stream.name) else right
                return FileCompareResult(
                    left, right, mode, MatchOutcome.INVALID, error=CannotReadError(failed)
                )


def _enter(stack: ExitStack, path: str) -> BinaryIO:
    """Open a DOS-style path on the host and register it with the stack."""
    try:
        return stack.enter_context(open_for_input(Path(to_native(path))))
    except CannotOpenError as e:
        logger.debug("Open failed: %s", e)
        raise CannotOpenError(path) from e
