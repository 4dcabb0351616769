"""Filesystem-backed directory cursor.

Lists the directory named by a DOS-style wildcard pattern and walks the
entries whose names match the pattern's final segment. Like a Windows
find handle, the listing includes the ``.`` and ``..`` entries when the
pattern matches them, and reports them first.
"""

import logging
import os

from pyfc.matching.base import DirectoryCursor, PatternNotFoundError
from pyfc.matching.listing import ListingCursor
from pyfc.matching.wildcard import DOT_ENTRIES, matches_pattern
from pyfc.pathing.builder import remove_last_segment
from pyfc.pathing.host import to_native
from pyfc.pathing.syntax import SEP

logger = logging.getLogger(__name__)


def split_pattern(pattern: str) -> tuple[str, str]:
    """Split a pattern into its directory part and its name pattern.

    Args:
        pattern: DOS-style path whose final segment may hold wildcards.

    Returns:
        Tuple of (directory, name pattern). The directory is empty for a
        bare name pattern.
    """
    directory, _ = remove_last_segment(pattern)
    name = pattern[len(directory) :].lstrip(SEP)
    return directory, name


def list_matches(directory: str, name_pattern: str) -> list[str]:
    """List the entries of a host directory matching a name pattern.

    Args:
        directory: Host directory path ("" for the working directory).
        name_pattern: Wildcard pattern for entry names.

    Returns:
        Matching names: dot entries first, then the rest sorted
        case-insensitively.

    Raises:
        PatternNotFoundError: If the directory cannot be listed.
    """
    try:
        with os.scandir(directory or os.curdir) as entries:
            names = [entry.name for entry in entries]
    except OSError as e:
        logger.warning("Cannot list directory %s: %s", directory or os.curdir, e)
        raise PatternNotFoundError(name_pattern) from e

    dots = [name for name in DOT_ENTRIES if matches_pattern(name, name_pattern)]
    found = sorted(
        (name for name in names if matches_pattern(name, name_pattern)),
        key=lambda name: (name.casefold(), name),
    )
    return dots + found


class FilesystemCursor(ListingCursor):
    """Cursor over the filesystem entries matching a pattern.

    The listing is read once when the cursor is opened.

    Args:
        pattern: DOS-style wildcard path.

    Raises:
        PatternNotFoundError: If nothing matches or the directory cannot
            be listed.
    """

    def __init__(self, pattern: str) -> None:
        directory, name_pattern = split_pattern(pattern)
        names = list_matches(to_native(directory), name_pattern)
        if not names:
            raise PatternNotFoundError(pattern)
        logger.debug("Pattern %s matched %d entries", pattern, len(names))
        self.pattern = pattern
        super().__init__(names)


def open_filesystem_cursor(pattern: str) -> DirectoryCursor:
    """Open a filesystem cursor; the default opener of the matcher."""
    return FilesystemCursor(pattern)
