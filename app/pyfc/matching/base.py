"""Directory cursor capability consumed by the wildcard matcher.

A cursor walks the entries of one directory listing that match a
wildcard pattern. It always points at a current entry; ``advance``
moves to the next one and reports whether there was one.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from types import TracebackType


class MatchError(Exception):
    """Base exception for wildcard matching errors."""


class PatternNotFoundError(MatchError):
    """Raised when a pattern matches no directory entries."""

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        super().__init__(f"No entries match: {pattern}")


class DirectoryCursor(ABC):
    """Abstract base class for directory listing cursors.

    Cursors are opened already positioned on their first entry; a pattern
    without entries is reported by the opener, not by the cursor.

    Example:
        >>> with ListingCursor(["a.txt", "b.txt"]) as cursor:
        ...     names = [cursor.current_name]
        ...     while cursor.advance():
        ...         names.append(cursor.current_name)
    """

    @property
    @abstractmethod
    def current_name(self) -> str:
        """Return the name of the entry the cursor points at."""

    @abstractmethod
    def advance(self) -> bool:
        """Move to the next entry.

        Returns:
            True if the cursor now points at a new entry, False if the
            listing is exhausted (the current entry is then unchanged).
        """

    def close(self) -> None:  # noqa: B027
        """Release the underlying listing handle."""

    def __enter__(self) -> "DirectoryCursor":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


# Opens a cursor for a pattern; raises PatternNotFoundError if nothing matches.
CursorOpener = Callable[[str], DirectoryCursor]
