"""Exceptions raised by path operations.

Every PathBuilder and canonicalization operation fails with one of these
instead of truncating or writing past the configured length limit.
"""

# Platform path limit, including room for the terminator.
MAX_PATH = 260


class PathError(Exception):
    """Base exception for path manipulation errors."""


class PathOverflowError(PathError):
    """Raised when a result would not fit within the maximum path length."""

    def __init__(self, path: str, max_path: int) -> None:
        self.path = path
        self.max_path = max_path
        super().__init__(f"Path exceeds {max_path - 1} characters: {path[:40]}...")


class MalformedPathError(PathError):
    """Raised when a path lacks the structure an operation requires."""


def ensure_fits(path: str, max_path: int) -> str:
    """Return path unchanged, or raise if it does not fit.

    Args:
        path: Candidate result.
        max_path: Maximum path length including the terminator.

    Returns:
        The same path.

    Raises:
        PathOverflowError: If len(path) >= max_path.
    """
    if len(path) >= max_path:
        raise PathOverflowError(path, max_path)
    return path
