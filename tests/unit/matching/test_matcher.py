"""Unit tests for the wildcard matcher.

Directory listings come from ListingOpener, so no filesystem is touched.
"""

import pytest
from pyfc.matching.listing import ListingOpener
from pyfc.matching.matcher import Diagnostic, DiagnosticKind, WildcardMatcher
from pyfc.models.outcome import MatchOutcome
from pyfc.pathing.errors import PathOverflowError


class RecordingComparator:
    """Comparison callback that records pairs and returns canned outcomes."""

    def __init__(self, outcomes: dict[tuple[str, str], MatchOutcome] | None = None) -> None:
        self.outcomes = outcomes or {}
        self.pairs: list[tuple[str, str]] = []

    def __call__(self, left: str, right: str) -> MatchOutcome:
        self.pairs.append((left, right))
        return self.outcomes.get((left, right), MatchOutcome.IDENTICAL)


@pytest.fixture
def compare() -> RecordingComparator:
    """Comparator returning Identical for every pair."""
    return RecordingComparator()


class TestPlainFiles:
    """Tests for runs without wildcards."""

    def test_single_pair(self, compare: RecordingComparator) -> None:
        """Two plain files are compared once, without opening listings."""
        opener = ListingOpener({})
        compare.outcomes[("a.txt", "b.txt")] = MatchOutcome.DIFFERENT
        matcher = WildcardMatcher(compare, opener=opener)

        assert matcher.run("a.txt", "b.txt") == MatchOutcome.DIFFERENT
        assert compare.pairs == [("a.txt", "b.txt")]
        assert opener.opened == []

    def test_missing_specification(self, compare: RecordingComparator) -> None:
        """An empty argument makes the run invalid without comparing."""
        matcher = WildcardMatcher(compare, opener=ListingOpener({}))
        assert matcher.run("", "b.txt") == MatchOutcome.INVALID
        assert matcher.run("a.txt", "") == MatchOutcome.INVALID
        assert compare.pairs == []

    def test_outcome_passed_through(self, compare: RecordingComparator) -> None:
        """The single pair's outcome is the run's outcome, unfolded."""
        compare.outcomes[("a", "b")] = MatchOutcome.CANNOT_FIND
        matcher = WildcardMatcher(compare, opener=ListingOpener({}))
        assert matcher.run("a", "b") == MatchOutcome.CANNOT_FIND


class TestOneSide:
    """Tests for one wildcard argument against a fixed file."""

    def test_right_pattern(self, compare: RecordingComparator) -> None:
        """Each match of the right pattern is compared against the left file."""
        opener = ListingOpener({"*.txt": [".", "..", "x.txt", "y.txt"]})
        matcher = WildcardMatcher(compare, opener=opener)

        assert matcher.run("ref.txt", "*.txt") == MatchOutcome.IDENTICAL
        assert compare.pairs == [("ref.txt", "x.txt"), ("ref.txt", "y.txt")]

    def test_left_pattern_keeps_directory(self, compare: RecordingComparator) -> None:
        """Matched names are rebuilt inside the pattern's directory."""
        opener = ListingOpener({"dir\\*.txt": ["x.txt", "y.txt"]})
        matcher = WildcardMatcher(compare, opener=opener)

        matcher.run("dir\\*.txt", "ref.txt")
        assert compare.pairs == [("dir\\x.txt", "ref.txt"), ("dir\\y.txt", "ref.txt")]

    def test_pattern_under_parent_directories(self, compare: RecordingComparator) -> None:
        """Leading '..' segments of the pattern survive the rebuild."""
        opener = ListingOpener({"..\\..\\*.txt": ["x.txt", "y.txt"]})
        matcher = WildcardMatcher(compare, opener=opener)

        matcher.run("..\\..\\*.txt", "ref.txt")
        assert compare.pairs == [("..\\..\\x.txt", "ref.txt"), ("..\\..\\y.txt", "ref.txt")]

    def test_only_dot_entries(self, compare: RecordingComparator) -> None:
        """A listing of only '.' and '..' compares nothing."""
        opener = ListingOpener({"*": [".", ".."]})
        matcher = WildcardMatcher(compare, opener=opener)

        assert matcher.run("a", "*") == MatchOutcome.IDENTICAL
        assert compare.pairs == []

    def test_pattern_not_found(self, compare: RecordingComparator) -> None:
        """A pattern that cannot be opened is reported as not found."""
        matcher = WildcardMatcher(compare, opener=ListingOpener({}))

        assert matcher.run("a.txt", "*.txt") == MatchOutcome.CANNOT_FIND
        assert matcher.diagnostics == [Diagnostic(DiagnosticKind.CANNOT_OPEN, "*.txt")]
        assert compare.pairs == []

    def test_folds_outcomes(self) -> None:
        """A different pair and a missing pair fold to Invalid."""
        compare = RecordingComparator(
            {
                ("ref", "a.txt"): MatchOutcome.DIFFERENT,
                ("ref", "b.txt"): MatchOutcome.CANNOT_FIND,
            }
        )
        opener = ListingOpener({"*.txt": ["a.txt", "b.txt", "c.txt"]})
        matcher = WildcardMatcher(compare, opener=opener)

        assert matcher.run("ref", "*.txt") == MatchOutcome.INVALID
        assert len(compare.pairs) == 3

    def test_cursor_closed(self, compare: RecordingComparator) -> None:
        """The listing is closed once the walk is over."""
        opener = ListingOpener({"*.txt": ["a.txt"]})
        WildcardMatcher(compare, opener=opener).run("ref", "*.txt")
        assert opener.opened[0].closed


class TestBothSides:
    """Tests for two wildcard arguments walked in lockstep."""

    def test_pairs_by_position(self, compare: RecordingComparator) -> None:
        """Entries are paired in listing order, dots skipped."""
        opener = ListingOpener(
            {
                "*.cpp": [".", "..", "a.cpp", "b.cpp"],
                "*.h": [".", "..", "a.h", "b.h"],
            }
        )
        matcher = WildcardMatcher(compare, opener=opener)

        assert matcher.run("*.cpp", "*.h") == MatchOutcome.IDENTICAL
        assert compare.pairs == [("a.cpp", "a.h"), ("b.cpp", "b.h")]
        assert matcher.diagnostics == []

    def test_missing_counterpart(self, compare: RecordingComparator) -> None:
        """A left entry without a right partner names the missing file."""
        opener = ListingOpener(
            {
                "*.cpp": [".", "..", "a.cpp", "b.cpp"],
                "*.h": [".", "..", "a.h"],
            }
        )
        reported: list[Diagnostic] = []
        matcher = WildcardMatcher(compare, opener=opener, sink=reported.append)

        assert matcher.run("*.cpp", "*.h") == MatchOutcome.CANNOT_FIND
        assert compare.pairs == [("a.cpp", "a.h")]
        assert reported == matcher.diagnostics
        (diagnostic,) = reported
        assert diagnostic.kind == DiagnosticKind.MISSING_COUNTERPART
        assert diagnostic.name == "b.cpp"
        assert diagnostic.extension == ".h"
        assert diagnostic.missing == "b.h"

    def test_missing_counterpart_on_left(self, compare: RecordingComparator) -> None:
        """Leftover right entries name the missing left file."""
        opener = ListingOpener({"*.cpp": ["a.cpp"], "*.h": ["a.h", "b.h"]})
        matcher = WildcardMatcher(compare, opener=opener)

        assert matcher.run("*.cpp", "*.h") == MatchOutcome.CANNOT_FIND
        assert matcher.diagnostics[0].missing == "b.cpp"

    def test_leftover_dots_are_not_desync(self, compare: RecordingComparator) -> None:
        """Only dot entries left over on one side do not count."""
        opener = ListingOpener({"*.cpp": ["a.cpp"], "*.h": ["a.h", ".."]})
        matcher = WildcardMatcher(compare, opener=opener)

        assert matcher.run("*.cpp", "*.h") == MatchOutcome.IDENTICAL
        assert matcher.diagnostics == []

    def test_desync_ignored_for_general_patterns(self, compare: RecordingComparator) -> None:
        """Listings of different length are only reported for '*.<ext>' pairs."""
        opener = ListingOpener({"a*.c": ["a1.c", "a2.c"], "b*.c": ["b1.c"]})
        matcher = WildcardMatcher(compare, opener=opener)

        assert matcher.run("a*.c", "b*.c") == MatchOutcome.IDENTICAL
        assert compare.pairs == [("a1.c", "b1.c")]
        assert matcher.diagnostics == []

    def test_aggregate_precedence(self) -> None:
        """Invalid outranks Different across the walk."""
        compare = RecordingComparator(
            {
                ("a.cpp", "a.h"): MatchOutcome.DIFFERENT,
                ("b.cpp", "b.h"): MatchOutcome.INVALID,
                ("c.cpp", "c.h"): MatchOutcome.DIFFERENT,
            }
        )
        opener = ListingOpener(
            {"*.cpp": ["a.cpp", "b.cpp", "c.cpp"], "*.h": ["a.h", "b.h", "c.h"]}
        )
        matcher = WildcardMatcher(compare, opener=opener)
        assert matcher.run("*.cpp", "*.h") == MatchOutcome.INVALID

    def test_left_not_found(self, compare: RecordingComparator) -> None:
        """The right pattern is not opened when the left one fails."""
        opener = ListingOpener({"*.h": ["a.h"]})
        matcher = WildcardMatcher(compare, opener=opener)

        assert matcher.run("*.cpp", "*.h") == MatchOutcome.CANNOT_FIND
        assert matcher.diagnostics[0].name == "*.cpp"
        assert opener.opened == []

    def test_right_not_found_closes_left(self, compare: RecordingComparator) -> None:
        """The left listing is released when the right one fails."""
        opener = ListingOpener({"*.cpp": ["a.cpp"]})
        matcher = WildcardMatcher(compare, opener=opener)

        assert matcher.run("*.cpp", "*.h") == MatchOutcome.CANNOT_FIND
        assert matcher.diagnostics[0].name == "*.h"
        assert opener.opened[0].closed


class TestPathLimits:
    """Tests for path length handling while rebuilding names."""

    def test_rebuild_overflow_raises(self, compare: RecordingComparator) -> None:
        """A matched name too long for the limit raises instead of truncating."""
        opener = ListingOpener({"d\\*": ["x" * 40]})
        matcher = WildcardMatcher(compare, opener=opener, max_path=20)

        with pytest.raises(PathOverflowError):
            matcher.run("d\\*", "ref")
