"""Wildcard pairing of files for comparison.

This module provides the WildcardMatcher class, which expands one or two
wildcard patterns through directory cursors, pairs the resulting files,
hands each pair to a comparison callback and folds the per-pair outcomes
into one aggregate outcome.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from pyfc.matching.base import CursorOpener, DirectoryCursor, PatternNotFoundError
from pyfc.matching.filesystem import open_filesystem_cursor
from pyfc.matching.wildcard import has_wildcard, is_dots, is_extension_only
from pyfc.models.outcome import MatchOutcome, fold_outcome
from pyfc.pathing.builder import append, remove_last_segment
from pyfc.pathing.errors import MAX_PATH
from pyfc.pathing.extension import replace_extension, split_extension

logger = logging.getLogger(__name__)


class DiagnosticKind(str, Enum):
    """Kind of notice emitted while matching.

    Attributes:
        CANNOT_OPEN: A pattern could not be opened or matched nothing.
        MISSING_COUNTERPART: Dual extension-only patterns went out of step;
            the entry left over on one side has no counterpart.
    """

    CANNOT_OPEN = "cannot_open"
    MISSING_COUNTERPART = "missing_counterpart"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A notice for the user, carrying the data needed to word it.

    Attributes:
        kind: What went wrong.
        name: Offending pattern, or the unmatched entry name.
        extension: Extension substituted to form the counterpart.
        counterpart: Name of the file that could not be found.
    """

    kind: DiagnosticKind
    name: str
    extension: str | None = None
    counterpart: str | None = None

    @property
    def missing(self) -> str:
        """Name to report as not found."""
        return self.counterpart if self.counterpart is not None else self.name


Comparator = Callable[[str, str], MatchOutcome]
DiagnosticSink = Callable[[Diagnostic], None]


class WildcardMatcher:
    """Pairs files named by two path arguments and compares each pair.

    Depending on which arguments hold wildcards, the matcher compares a
    single pair, walks one pattern against a fixed file, or walks two
    patterns in lockstep.

    Example:
        >>> matcher = WildcardMatcher(compare_files)
        >>> outcome = matcher.run("*.cpp", "*.h")
        >>> for diagnostic in matcher.diagnostics:
        ...     print(diagnostic.missing)

    Args:
        compare: Callback comparing two DOS-style paths.
        opener: Opens a directory cursor for a pattern.
        sink: Optional callback receiving each diagnostic as it happens.
        max_path: Maximum path length including the terminator.
    """

    def __init__(
        self,
        compare: Comparator,
        *,
        opener: CursorOpener = open_filesystem_cursor,
        sink: DiagnosticSink | None = None,
        max_path: int = MAX_PATH,
    ) -> None:
        self._compare = compare
        self._opener = opener
        self._sink = sink
        self._max_path = max_path
        self.diagnostics: list[Diagnostic] = []

    def run(self, left: str, right: str) -> MatchOutcome:
        """Compare the files named by two path arguments.

        Args:
            left: First file or wildcard pattern.
            right: Second file or wildcard pattern.

        Returns:
            Aggregate outcome of the run; INVALID if either argument is empty.

        Raises:
            PathError: If a matched path cannot be rebuilt.
        """
        if not left or not right:
            return MatchOutcome.INVALID
        wild_left = has_wildcard(left)
        wild_right = has_wildcard(right)
        if wild_left and wild_right:
            return self.compare_both(left, right)
        if wild_left:
            return self.compare_one_side(left, right, wild_right=False)
        if wild_right:
            return self.compare_one_side(left, right, wild_right=True)
        return self._compare(left, right)

    def compare_one_side(self, left: str, right: str, *, wild_right: bool) -> MatchOutcome:
        """Compare every entry of one pattern against a fixed file.

        Args:
            left: First path argument.
            right: Second path argument.
            wild_right: True if right is the pattern, False if left is.

        Returns:
            Aggregate outcome, or CANNOT_FIND if the pattern cannot be opened.
        """
        pattern, fixed = (right, left) if wild_right else (left, right)
        cursor = self._open(pattern)
        if cursor is None:
            return MatchOutcome.CANNOT_FIND

        outcome = MatchOutcome.IDENTICAL
        path = pattern
        with cursor:
            while True:
                name = cursor.current_name
                if not is_dots(name):
                    path = self._rebuild(path, name)
                    pair = (fixed, path) if wild_right else (path, fixed)
                    outcome = fold_outcome(outcome, self._compare_pair(*pair))
                if not cursor.advance():
                    break
        return outcome

    def compare_both(self, left: str, right: str) -> MatchOutcome:
        """Walk two patterns in lockstep, comparing entries by position.

        Returns:
            Aggregate outcome; CANNOT_FIND if a pattern cannot be opened or
            two extension-only patterns run out of step.
        """
        left_cursor = self._open(left)
        if left_cursor is None:
            return MatchOutcome.CANNOT_FIND
        with left_cursor:
            right_cursor = self._open(right)
            if right_cursor is None:
                return MatchOutcome.CANNOT_FIND
            with right_cursor:
                return self._walk_both(left, right, left_cursor, right_cursor)

    def _walk_both(
        self,
        left: str,
        right: str,
        left_cursor: DirectoryCursor,
        right_cursor: DirectoryCursor,
    ) -> MatchOutcome:
        outcome = MatchOutcome.IDENTICAL
        left_path, right_path = left, right
        left_more = right_more = True

        while left_more and right_more:
            left_more = _skip_dots(left_cursor)
            if not left_more:
                break
            right_more = _skip_dots(right_cursor)
            if not right_more:
                break

            left_path = self._rebuild(left_path, left_cursor.current_name)
            right_path = self._rebuild(right_path, right_cursor.current_name)
            outcome = fold_outcome(outcome, self._compare_pair(left_path, right_path))

            left_more = left_cursor.advance()
            right_more = right_cursor.advance()

        if left_more == right_more:
            return outcome
        if not (is_extension_only(left) and is_extension_only(right)):
            logger.debug("Listings of %s and %s differ in length", left, right)
            return outcome

        # One side has entries left over; name the file it expected.
        if left_more:
            leftover, other_pattern = left_cursor, right
        else:
            leftover, other_pattern = right_cursor, left
        if not _skip_dots(leftover):
            return outcome

        name = leftover.current_name
        _, extension = split_extension(other_pattern)
        counterpart = replace_extension(name, extension, max_path=self._max_path)
        self._report(
            Diagnostic(
                kind=DiagnosticKind.MISSING_COUNTERPART,
                name=name,
                extension=extension,
                counterpart=counterpart,
            )
        )
        return MatchOutcome.CANNOT_FIND

    def _open(self, pattern: str) -> DirectoryCursor | None:
        try:
            return self._opener(pattern)
        except PatternNotFoundError:
            self._report(Diagnostic(kind=DiagnosticKind.CANNOT_OPEN, name=pattern))
            return None

    def _rebuild(self, path: str, name: str) -> str:
        directory, _ = remove_last_segment(path)
        return append(directory, name, max_path=self._max_path)

    def _compare_pair(self, left: str, right: str) -> MatchOutcome:
        outcome = self._compare(left, right)
        logger.debug("Compared %s with %s: %s", left, right, outcome.name)
        return outcome

    def _report(self, diagnostic: Diagnostic) -> None:
        logger.debug("Diagnostic %s for %s", diagnostic.kind.value, diagnostic.name)
        self.diagnostics.append(diagnostic)
        if self._sink is not None:
            self._sink(diagnostic)


def _skip_dots(cursor: DirectoryCursor) -> bool:
    """Advance past ``.`` and ``..``; False if the listing runs out."""
    while is_dots(cursor.current_name):
        if not cursor.advance():
            return False
    return True
