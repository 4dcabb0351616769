"""Line-oriented text comparison.

Lines are normalized according to the comparison options and matched
with difflib. Differences are grouped into blocks; a block only ends once
enough consecutive lines match again (the resync threshold), and a block
that grows beyond the line buffer aborts the comparison.
"""

from __future__ import annotations

import difflib
import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, BinaryIO

from pyfc.compare.streams import read_chunk
from pyfc.models.outcome import MatchOutcome

if TYPE_CHECKING:
    from pyfc.models.options import CompareOptions

logger = logging.getLogger(__name__)

_WHITESPACE_RUN = re.compile(r"[ \t]+")

ANSI_ENCODING = "latin-1"
UNICODE_ENCODING = "utf-16"


@dataclass(frozen=True, slots=True)
class NumberedLine:
    """A line of text with its 1-based line number."""

    number: int
    text: str


@dataclass(frozen=True, slots=True)
class DiffBlock:
    """A group of differing lines, with one line of context on each side.

    Attributes:
        left: Lines from the first file, context included.
        right: Lines from the second file, context included.
    """

    left: tuple[NumberedLine, ...]
    right: tuple[NumberedLine, ...]


@dataclass(frozen=True, slots=True)
class TextCompareResult:
    """Result of a text comparison.

    Attributes:
        blocks: Difference blocks, in file order.
        resync_failed: True if a block outgrew the line buffer and the
            comparison stopped early.
    """

    blocks: tuple[DiffBlock, ...]
    resync_failed: bool = False

    @property
    def outcome(self) -> MatchOutcome:
        """Identical only if no block was found and resync never failed."""
        if self.blocks or self.resync_failed:
            return MatchOutcome.DIFFERENT
        return MatchOutcome.IDENTICAL


def decode_lines(data: bytes, options: CompareOptions) -> list[str]:
    """Decode file content into display lines.

    Args:
        data: Raw file content.
        options: Comparison options (/U selects UTF-16, /T keeps tabs).

    Returns:
        Lines without line terminators.
    """
    encoding = UNICODE_ENCODING if options.unicode else ANSI_ENCODING
    text = data.decode(encoding, errors="replace")
    lines = text.splitlines()
    if not options.no_tab_expand:
        lines = [line.expandtabs(options.tab_size) for line in lines]
    return lines


def comparison_key(line: str, options: CompareOptions) -> str:
    """Normalize a line for comparison (/W and /C)."""
    if options.compress_whitespace:
        line = _WHITESPACE_RUN.sub(" ", line).strip()
    if options.ignore_case:
        line = line.casefold()
    return line


def compare_lines(
    left: list[str],
    right: list[str],
    options: CompareOptions,
) -> TextCompareResult:
    """Compare two lists of lines.

    Args:
        left: Lines of the first file.
        right: Lines of the second file.
        options: Comparison options.

    Returns:
        TextCompareResult with the difference blocks.
    """
    left_keys = [comparison_key(line, options) for line in left]
    right_keys = [comparison_key(line, options) for line in right]
    matcher = difflib.SequenceMatcher(None, left_keys, right_keys, autojunk=False)

    # Spans of differing lines: [left_start, left_end, right_start, right_end)
    spans: list[list[int]] = []
    pending: list[int] | None = None
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            at_end = i2 == len(left) and j2 == len(right)
            if pending is not None and (i2 - i1 >= options.resync_lines or at_end):
                spans.append(pending)
                pending = None
            elif pending is not None:
                # Too few matching lines to resync: absorb them.
                pending[1], pending[3] = i2, j2
            continue
        if pending is None:
            pending = [i1, i2, j1, j2]
        else:
            pending[1], pending[3] = i2, j2
    if pending is not None:
        spans.append(pending)

    blocks: list[DiffBlock] = []
    for left_start, left_end, right_start, right_end in spans:
        if max(left_end - left_start, right_end - right_start) > options.buffer_lines:
            logger.debug("Difference block exceeds %d lines", options.buffer_lines)
            return TextCompareResult(blocks=tuple(blocks), resync_failed=True)
        blocks.append(
            DiffBlock(
                left=_with_context(left, left_start, left_end),
                right=_with_context(right, right_start, right_end),
            )
        )
    return TextCompareResult(blocks=tuple(blocks))


def _with_context(lines: list[str], start: int, end: int) -> tuple[NumberedLine, ...]:
    first = max(start - 1, 0)
    last = min(end + 1, len(lines))
    return tuple(NumberedLine(index + 1, lines[index]) for index in range(first, last))


def compare_text(left: BinaryIO, right: BinaryIO, options: CompareOptions) -> TextCompareResult:
    """Compare two opened files as text.

    Raises:
        CannotReadError: If either file cannot be read.
    """
    left_lines = decode_lines(read_chunk(left), options)
    right_lines = decode_lines(read_chunk(right), options)
    logger.debug("Text compare: %d/%d lines", len(left_lines), len(right_lines))
    return compare_lines(left_lines, right_lines, options)
