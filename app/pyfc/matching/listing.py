"""In-memory directory cursor.

Serves a fixed list of entry names, in order. Used wherever a listing is
already known, and as the stand-in for a real directory in tests.
"""

from collections.abc import Iterable, Mapping

from pyfc.matching.base import DirectoryCursor, PatternNotFoundError


class ListingCursor(DirectoryCursor):
    """Cursor over a fixed sequence of names.

    Args:
        names: Entry names in listing order. Must not be empty.
    """

    def __init__(self, names: Iterable[str]) -> None:
        self._names = tuple(names)
        if not self._names:
            msg = "A listing cursor needs at least one entry"
            raise ValueError(msg)
        self._index = 0
        self.closed = False

    @property
    def current_name(self) -> str:
        return self._names[self._index]

    def advance(self) -> bool:
        if self._index + 1 >= len(self._names):
            return False
        self._index += 1
        return True

    def close(self) -> None:
        self.closed = True


class ListingOpener:
    """Cursor opener backed by a mapping of pattern to entry names.

    Patterns missing from the mapping, or mapped to no names, raise
    PatternNotFoundError like an empty directory match would.

    Args:
        listings: Mapping from pattern string to entry names.
    """

    def __init__(self, listings: Mapping[str, Iterable[str]]) -> None:
        self._listings = {pattern: tuple(names) for pattern, names in listings.items()}
        self.opened: list[ListingCursor] = []

    def __call__(self, pattern: str) -> ListingCursor:
        names = self._listings.get(pattern, ())
        if not names:
            raise PatternNotFoundError(pattern)
        cursor = ListingCursor(names)
        self.opened.append(cursor)
        return cursor
