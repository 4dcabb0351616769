"""Opening and reading compared files.

Open failures and read failures are kept apart because they lead to
different outcomes: a file that cannot be opened is "not found", a file
that cannot be read makes the comparison invalid.
"""

from pathlib import Path
from typing import BinaryIO


class CompareError(Exception):
    """Base exception for file comparison errors."""


class CannotOpenError(CompareError):
    """Raised when a file to compare cannot be opened."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Cannot open {path}")


class CannotReadError(CompareError):
    """Raised when reading an opened file fails."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Cannot read from {path}")


def open_for_input(path: Path) -> BinaryIO:
    """Open a file for binary reading.

    Raises:
        CannotOpenError: If the file is missing, is a directory, or
            cannot be opened for any other reason.
    """
    try:
        return open(path, "rb")  # noqa: SIM115
    except OSError as e:
        raise CannotOpenError(str(path)) from e


def stream_size(stream: BinaryIO) -> int:
    """Size in bytes of an opened file."""
    try:
        return Path(stream.name).stat().st_size
    except OSError as e:
        raise CannotReadError(str(stream.name)) from e


def read_chunk(stream: BinaryIO, size: int = -1) -> bytes:
    """Read up to size bytes (everything for -1)."""
    try:
        return stream.read(size)
    except OSError as e:
        raise CannotReadError(str(stream.name)) from e
