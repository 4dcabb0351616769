"""Canonical form of DOS-style paths.

A canonical path has no ``.`` segments apart from the drive guard below,
no ``..`` segment that could be collapsed, and no trailing separator
unless it is exactly a root. The result is computed lexically; symbolic
links are not consulted.

Rules for ``..``:
- it removes the previous segment when there is one to remove;
- it never removes a drive root, a ``\\`` root, the initial ``\\\\``,
  or a UNC server and share;
- on a relative or drive-relative path, a run of leading ``..`` is kept
  verbatim;
- when it consumes every segment before it, a relative path is re-rooted
  at ``\\`` and a drive-relative path at its drive root (``C:a\\..``
  becomes ``C:\\``).

Empty segments directly after a non-UNC root are dropped. A relative
result whose first segment looks like a drive (``C:x``) is written as
``.\\C:x`` so that it reads back as relative.
"""

from pyfc.pathing.errors import MAX_PATH, ensure_fits
from pyfc.pathing.syntax import SEP, UNC_PREFIX, PathRootKind, root_kind

CURRENT = "."
PARENT = ".."

# Segments after the UNC prefix that ".." may not remove (server, share).
_UNC_PROTECTED = 2

# Root kinds on which a leading ".." is kept.
_RELATIVE = (PathRootKind.NONE, PathRootKind.DRIVE_RELATIVE)


def split_root(path: str) -> tuple[PathRootKind, str, str]:
    """Split a path into its root kind, root prefix and remainder.

    Args:
        path: Path to split.

    Returns:
        Tuple of (kind, root, rest) with root + rest == path.
    """
    kind = root_kind(path)
    if kind == PathRootKind.UNC:
        size = len(UNC_PREFIX)
    elif kind == PathRootKind.UNIX_ABSOLUTE:
        size = 1
    elif kind == PathRootKind.DRIVE_ABSOLUTE:
        size = 3
    elif kind == PathRootKind.DRIVE_RELATIVE:
        size = 2
    else:
        size = 0
    return kind, path[:size], path[size:]


def _floor(kind: PathRootKind) -> int:
    """Number of leading segments that ".." may not remove."""
    return _UNC_PROTECTED if kind == PathRootKind.UNC else 0


def _reroot(kind: PathRootKind, root: str) -> tuple[PathRootKind, str]:
    """Root to continue from once ".." has consumed every segment."""
    if kind == PathRootKind.NONE:
        return PathRootKind.UNIX_ABSOLUTE, SEP
    if kind == PathRootKind.DRIVE_RELATIVE:
        return PathRootKind.DRIVE_ABSOLUTE, root + SEP
    return kind, root


def canonicalize(path: str, *, max_path: int = MAX_PATH) -> str:
    """Rewrite a path into canonical form.

    Canonicalizing a canonical path returns it unchanged.

    Args:
        path: Raw path string.
        max_path: Maximum path length including the terminator.

    Returns:
        Canonical path. An empty input yields the root ``\\``.

    Raises:
        PathOverflowError: If the result does not fit within max_path.
    """
    if not path:
        return SEP

    kind, root, rest = split_root(path)
    floor = _floor(kind)
    segments: list[str] = []

    for segment in rest.split(SEP) if rest else ():
        if segment == CURRENT:
            continue
        if segment != PARENT:
            if segment or segments or kind == PathRootKind.UNC:
                segments.append(segment)
            continue

        if segments and segments[-1] != PARENT and len(segments) > floor:
            segments.pop()
            if not segments:
                kind, root = _reroot(kind, root)
        elif kind in _RELATIVE and (not segments or segments[-1] == PARENT):
            segments.append(segment)
        # Otherwise ".." sits on a root and is dropped.

    while segments and not segments[-1]:
        segments.pop()

    if kind == PathRootKind.NONE and segments and segments[0][1:2] == ":":
        # Keep "X:..." from reading back as a drive.
        segments.insert(0, CURRENT)

    result = root + SEP.join(segments)
    if not result:
        result = SEP
    elif kind == PathRootKind.DRIVE_RELATIVE and not segments:
        # Naked drive spec
        result += SEP
    return ensure_fits(result, max_path)
