"""Classification predicates for DOS-style path strings.

All functions here are pure and treat the backslash as the only
separator. They never touch the filesystem.
"""

from enum import Enum

SEP = "\\"
UNC_PREFIX = SEP * 2


class PathRootKind(str, Enum):
    """Kind of prefix a path starts with.

    Attributes:
        NONE: Relative path ("dir\\file").
        DRIVE_ABSOLUTE: Drive letter with separator ("C:\\dir").
        DRIVE_RELATIVE: Drive letter without separator ("C:dir").
        UNIX_ABSOLUTE: Single leading separator ("\\dir").
        UNC: Network path ("\\\\server\\share\\dir").
    """

    NONE = "none"
    DRIVE_ABSOLUTE = "drive_absolute"
    DRIVE_RELATIVE = "drive_relative"
    UNIX_ABSOLUTE = "unix_absolute"
    UNC = "unc"


def has_drive(path: str) -> bool:
    """Check whether the second character is a drive colon."""
    return len(path) >= 2 and path[0] != SEP and path[1] == ":"


def root_kind(path: str) -> PathRootKind:
    """Classify the root prefix of a path.

    Args:
        path: Path to classify.

    Returns:
        PathRootKind recomputed from the string.
    """
    if is_unc_root(path):
        return PathRootKind.UNC
    if path.startswith(SEP):
        return PathRootKind.UNIX_ABSOLUTE
    if has_drive(path):
        if path[2:3] == SEP:
            return PathRootKind.DRIVE_ABSOLUTE
        return PathRootKind.DRIVE_RELATIVE
    return PathRootKind.NONE


def is_unc_root(path: str) -> bool:
    """Check whether a path begins with the UNC prefix ``\\\\``."""
    return path.startswith(UNC_PREFIX)


def is_relative(path: str) -> bool:
    """Check whether a path has neither a leading separator nor a drive.

    An empty path is relative. A path starting with a single separator
    is rooted and therefore not relative.
    """
    if not path:
        return True
    return not (path[0] == SEP or path[1:2] == ":")


def is_unc_server_share(path: str) -> bool:
    """Check for exactly ``\\\\server\\share`` with no subpath.

    After the UNC prefix, the remainder must contain exactly one
    separator: none means the share is missing, two or more mean
    there is a subpath.
    """
    if not is_unc_root(path):
        return False
    return path[2:].count(SEP) == 1


def is_root(path: str) -> bool:
    """Check whether a path is a root.

    Roots are ``\\``, ``X:\\``, and a UNC prefix followed by at most a
    server and a share.
    """
    if not path:
        return False
    if path == SEP:
        return True
    if is_unc_root(path):
        return path[2:].count(SEP) <= 1
    return len(path) == 3 and path[1] == ":" and path[2] == SEP and path[0] != SEP
