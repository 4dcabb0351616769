"""Structural path edits.

Each operation takes path strings and returns a new string; callers that
want in-place semantics simply rebind the result. Results that would not
fit within ``max_path`` raise instead of being truncated.
"""

import logging

from pyfc.pathing.canonical import canonicalize
from pyfc.pathing.errors import MAX_PATH, MalformedPathError, PathOverflowError, ensure_fits
from pyfc.pathing.syntax import SEP, is_relative, is_root, is_unc_root

logger = logging.getLogger(__name__)


def add_trailing_separator(path: str, *, max_path: int = MAX_PATH) -> str:
    """Append a separator unless the path is empty or already ends in one.

    Args:
        path: Path to extend.
        max_path: Maximum path length including the terminator.

    Returns:
        The path ending in a separator (or the empty path unchanged).

    Raises:
        PathOverflowError: If the path is already at the limit or the
            separator would push it over.
    """
    if len(path) >= max_path:
        raise PathOverflowError(path, max_path)
    if path and not path.endswith(SEP):
        path = ensure_fits(path + SEP, max_path)
    return path


def remove_last_segment(path: str) -> tuple[str, bool]:
    """Remove the final segment of a path.

    The scan keeps drive specs (``X:`` and ``X:\\``) and the leading
    separators of rooted and UNC paths.

    Args:
        path: Path to shorten.

    Returns:
        Tuple of (shortened path, changed). ``changed`` is False when the
        path was already just a root or drive.
    """
    cut = 0
    i = 0
    # Skip one or two leading separators
    if path[i : i + 1] == SEP:
        i += 1
        cut = i
    if path[i : i + 1] == SEP:
        i += 1
        cut = i

    while i < len(path):
        char = path[i]
        if char == SEP:
            cut = i
        elif char == ":":
            i += 1
            cut = i
            if path[i : i + 1] == SEP:
                cut += 1
        i += 1

    if cut < len(path):
        return path[:cut], True
    return path, False


def strip_to_root(path: str) -> str:
    """Remove segments until only the root remains.

    Raises:
        MalformedPathError: If a segment cannot be removed before a root
            is reached, e.g. for relative or drive-relative paths.
    """
    while not is_root(path):
        path, changed = remove_last_segment(path)
        if not changed:
            raise MalformedPathError(f"Path has no root to strip to: {path!r}")
    return path


def combine(directory: str | None, file: str | None, *, max_path: int = MAX_PATH) -> str:
    """Merge a directory and a file path into one canonical path.

    Precedence:
    1. An empty file yields the canonical directory.
    2. An empty directory, or a file that is not relative, yields the
       canonical file; except that a file starting with a single
       separator is rebased onto the directory's root.
    3. Otherwise the file is joined below the directory.

    Args:
        directory: Base directory (may be empty).
        file: File path, relative or absolute (may be empty).
        max_path: Maximum path length including the terminator.

    Returns:
        Canonical combined path.

    Raises:
        PathOverflowError: If an input or the result does not fit.
        MalformedPathError: If a rooted file must be rebased onto a
            directory that has no root.
    """
    directory = directory or ""
    file = file or ""
    for part in (directory, file):
        ensure_fits(part, max_path)

    if not file:
        return canonicalize(directory, max_path=max_path)

    if not directory or not is_relative(file):
        if not directory or not file.startswith(SEP) or is_unc_root(file):
            return canonicalize(file, max_path=max_path)
        logger.debug("Rebasing %r onto the root of %r", file, directory)
        base = strip_to_root(directory)
        file = file[1:]
    else:
        base = directory

    base = add_trailing_separator(base, max_path=max_path)
    if len(base) + len(file) >= max_path:
        raise PathOverflowError(base + file, max_path)
    return canonicalize(base + file, max_path=max_path)


def append(path: str, suffix: str, *, max_path: int = MAX_PATH) -> str:
    """Append a suffix below a path.

    Leading separators of the suffix are dropped unless it is a UNC path,
    so the suffix is always joined rather than replacing the path.

    Raises:
        PathError: Whatever :func:`combine` raises.
    """
    if not is_unc_root(suffix):
        suffix = suffix.lstrip(SEP)
    return combine(path, suffix, max_path=max_path)
