"""Wildcard expansion and file pairing.

This module exports the directory cursor capability, its in-memory and
filesystem implementations, and the wildcard matcher.
"""

from pyfc.matching.base import CursorOpener, DirectoryCursor, MatchError, PatternNotFoundError
from pyfc.matching.filesystem import FilesystemCursor, open_filesystem_cursor
from pyfc.matching.listing import ListingCursor, ListingOpener
from pyfc.matching.matcher import Diagnostic, DiagnosticKind, WildcardMatcher
from pyfc.matching.wildcard import has_wildcard, is_dots, is_extension_only, matches_pattern

__all__ = [
    "CursorOpener",
    "Diagnostic",
    "DiagnosticKind",
    "DirectoryCursor",
    "FilesystemCursor",
    "ListingCursor",
    "ListingOpener",
    "MatchError",
    "PatternNotFoundError",
    "WildcardMatcher",
    "has_wildcard",
    "is_dots",
    "is_extension_only",
    "matches_pattern",
    "open_filesystem_cursor",
]
