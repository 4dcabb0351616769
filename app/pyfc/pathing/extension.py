"""File extension helpers.

The extension search restarts at every separator and at every space, so
``"my file.old name"`` has no extension. The binary-extension heuristic
and the wildcard matcher rely on this exact rule.
"""

from pyfc.pathing.errors import MAX_PATH, MalformedPathError, ensure_fits
from pyfc.pathing.syntax import SEP

_RESETS = (SEP, " ")


def find_extension(path: str) -> int:
    """Find where the extension of the final segment starts.

    Args:
        path: Path or file name.

    Returns:
        Index of the extension's dot, or ``len(path)`` if there is none.
    """
    last_dot: int | None = None
    for index, char in enumerate(path):
        if char in _RESETS:
            last_dot = None
        elif char == ".":
            last_dot = index
    return len(path) if last_dot is None else last_dot


def has_extension(path: str) -> bool:
    """Check whether the final segment has an extension."""
    return find_extension(path) < len(path)


def split_extension(path: str) -> tuple[str, str]:
    """Split a path into (stem, extension) at :func:`find_extension`."""
    index = find_extension(path)
    return path[:index], path[index:]


def add_extension(path: str, extension: str, *, max_path: int = MAX_PATH) -> str:
    """Append an extension to a path that has none.

    Raises:
        MalformedPathError: If the path already has an extension.
        PathOverflowError: If the result does not fit.
    """
    if has_extension(path):
        raise MalformedPathError(f"Path already has an extension: {path!r}")
    return ensure_fits(path + extension, max_path)


def replace_extension(path: str, extension: str, *, max_path: int = MAX_PATH) -> str:
    """Swap the extension of a path for another one.

    Only the last extension is replaced: ``"a.tar.gz"`` with ``".h"``
    becomes ``"a.tar.h"``.
    """
    stem, _ = split_extension(path)
    return ensure_fits(stem + extension, max_path)
