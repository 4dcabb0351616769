"""Byte-by-byte file comparison.

Both files are read in bounded chunks over their common length. Differing
bytes are handed to a sink as each chunk is scanned and only counted
here, so memory stays bounded by the chunk size however many bytes
differ. A size mismatch is reported after the common range has been
scanned.
"""

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import BinaryIO

from pyfc.compare.streams import read_chunk, stream_size
from pyfc.models.outcome import MatchOutcome

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 1024 * 1024

# Offsets above this no longer fit eight hex digits.
_MAX_DWORD = 0xFFFFFFFF


@dataclass(frozen=True, slots=True)
class ByteDifference:
    """A single differing byte.

    Attributes:
        offset: Offset from the start of both files.
        left: Byte value in the first file.
        right: Byte value in the second file.
    """

    offset: int
    left: int
    right: int


# Receives each differing byte and whether offsets need sixteen hex digits.
DifferenceSink = Callable[[ByteDifference, bool], None]


@dataclass(frozen=True, slots=True)
class BinaryCompareResult:
    """Result of a binary comparison.

    Attributes:
        left_size: Size of the first file in bytes.
        right_size: Size of the second file in bytes.
        difference_count: Number of differing bytes within the common length.
    """

    left_size: int
    right_size: int
    difference_count: int

    @property
    def common_size(self) -> int:
        """Number of bytes present in both files."""
        return min(self.left_size, self.right_size)

    @property
    def wide_offsets(self) -> bool:
        """Check if offsets need sixteen hex digits instead of eight."""
        return needs_wide_offsets(self.common_size)

    @property
    def left_is_longer(self) -> bool:
        """Check if the first file is longer than the second."""
        return self.left_size > self.right_size

    @property
    def right_is_longer(self) -> bool:
        """Check if the second file is longer than the first."""
        return self.right_size > self.left_size

    @property
    def outcome(self) -> MatchOutcome:
        """Identical only if sizes match and no byte differs."""
        if self.difference_count or self.left_size != self.right_size:
            return MatchOutcome.DIFFERENT
        return MatchOutcome.IDENTICAL


def needs_wide_offsets(common_size: int) -> bool:
    """Check if a common length of this many bytes needs 16-digit offsets."""
    return common_size > _MAX_DWORD


def iter_differences(
    left: BinaryIO,
    right: BinaryIO,
    length: int,
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> Iterator[ByteDifference]:
    """Yield the differing bytes among the next ``length`` bytes of both files.

    Only one chunk of each file is held at a time.

    Raises:
        CannotReadError: If either file cannot be read.
    """
    offset = 0
    while length > 0:
        size = min(length, chunk_size)
        left_chunk = read_chunk(left, size)
        right_chunk = read_chunk(right, size)
        common = min(len(left_chunk), len(right_chunk))
        if common == 0:
            # File shrank under us
            return
        if left_chunk[:common] != right_chunk[:common]:
            for i, (a, b) in enumerate(zip(left_chunk[:common], right_chunk[:common])):
                if a != b:
                    yield ByteDifference(offset + i, a, b)
        offset += common
        length -= common


def compare_binary(
    left: BinaryIO,
    right: BinaryIO,
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    on_difference: DifferenceSink | None = None,
) -> BinaryCompareResult:
    """Compare two opened files byte by byte.

    Args:
        left: First file, opened in binary mode.
        right: Second file, opened in binary mode.
        chunk_size: Bytes read from each file per step.
        on_difference: Called with each differing byte as soon as its
            chunk has been scanned.

    Returns:
        BinaryCompareResult with the sizes and the number of differences.

    Raises:
        CannotReadError: If either file cannot be read.
    """
    left_size = stream_size(left)
    right_size = stream_size(right)
    common_size = min(left_size, right_size)
    wide = needs_wide_offsets(common_size)

    count = 0
    for difference in iter_differences(left, right, common_size, chunk_size=chunk_size):
        count += 1
        if on_difference is not None:
            on_difference(difference, wide)

    logger.debug("Binary compare: %d/%d bytes, %d differences", left_size, right_size, count)
    return BinaryCompareResult(
        left_size=left_size,
        right_size=right_size,
        difference_count=count,
    )
