"""Wildcard predicates and DOS-style name matching.

Patterns use ``*`` (any run of characters) and ``?`` (any single
character). Matching is case-insensitive, ``[`` has no special meaning,
``*.*`` matches every name and a trailing ``.*`` also matches names
without an extension.
"""

import re
from functools import lru_cache

WILDCARDS = ("*", "?")
DOT_ENTRIES = (".", "..")


def has_wildcard(path: str) -> bool:
    """Check whether a path contains ``*`` or ``?``."""
    return any(char in path for char in WILDCARDS)


def is_extension_only(pattern: str) -> bool:
    """Check for the exact shape ``*.<ext>`` with a wildcard-free ext."""
    return pattern.startswith("*.") and not has_wildcard(pattern[2:])


def is_dots(name: str) -> bool:
    """Check whether a listing entry is ``.`` or ``..``."""
    return name in DOT_ENTRIES


@lru_cache(maxsize=256)
def _compile(pattern: str) -> re.Pattern[str]:
    if pattern == "*.*":
        pattern = "*"
    optional_ext = pattern.endswith(".*")
    if optional_ext:
        pattern = pattern[:-2]

    parts: list[str] = []
    for char in pattern:
        if char == "*":
            parts.append(".*")
        elif char == "?":
            parts.append(".")
        else:
            parts.append(re.escape(char))
    if optional_ext:
        parts.append(r"(?:\..*)?")
    return re.compile("".join(parts), re.IGNORECASE | re.DOTALL)


def matches_pattern(name: str, pattern: str) -> bool:
    """Check whether an entry name matches a DOS wildcard pattern.

    Args:
        name: Directory entry name.
        pattern: Final path segment of a wildcard pattern.

    Returns:
        True if the whole name matches.
    """
    return _compile(pattern).fullmatch(name) is not None
