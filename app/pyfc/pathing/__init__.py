"""DOS path algebra.

This package exports the classification predicates, the canonicalizer,
the structural builders and the extension helpers.
"""

from pyfc.pathing.builder import (
    add_trailing_separator,
    append,
    combine,
    remove_last_segment,
    strip_to_root,
)
from pyfc.pathing.canonical import canonicalize, split_root
from pyfc.pathing.errors import MAX_PATH, MalformedPathError, PathError, PathOverflowError
from pyfc.pathing.extension import (
    add_extension,
    find_extension,
    has_extension,
    replace_extension,
    split_extension,
)
from pyfc.pathing.host import to_dos, to_native
from pyfc.pathing.syntax import (
    SEP,
    PathRootKind,
    is_relative,
    is_root,
    is_unc_root,
    is_unc_server_share,
    root_kind,
)

__all__ = [
    "MAX_PATH",
    "SEP",
    "MalformedPathError",
    "PathError",
    "PathOverflowError",
    "PathRootKind",
    "add_extension",
    "add_trailing_separator",
    "append",
    "canonicalize",
    "combine",
    "find_extension",
    "has_extension",
    "is_relative",
    "is_root",
    "is_unc_root",
    "is_unc_server_share",
    "remove_last_segment",
    "replace_extension",
    "root_kind",
    "split_extension",
    "split_root",
    "strip_to_root",
    "to_dos",
    "to_native",
]
