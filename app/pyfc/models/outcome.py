"""Comparison outcome model.

This module defines the per-pair comparison result and the rule that
folds many per-pair results into one aggregate result for a wildcard run.
"""

from enum import Enum


class MatchOutcome(Enum):
    """Result of comparing one pair of files, or of a whole run.

    The values double as process exit codes.

    Attributes:
        IDENTICAL: No differences encountered.
        DIFFERENT: The files differ.
        CANNOT_FIND: A file or pattern could not be found or opened.
        INVALID: Bad arguments, unreadable input, or a failed pair in a run.
    """

    INVALID = -1
    IDENTICAL = 0
    DIFFERENT = 1
    CANNOT_FIND = 2

    @property
    def exit_code(self) -> int:
        """Process exit code for this outcome."""
        return self.value


def fold_outcome(aggregate: MatchOutcome, outcome: MatchOutcome) -> MatchOutcome:
    """Fold one pair's outcome into the running aggregate.

    Invalid dominates, then Different, then Identical. A pair that could
    not be found counts as Invalid for the aggregate.

    Args:
        aggregate: Aggregate so far (starts as IDENTICAL).
        outcome: Outcome of the pair just compared.

    Returns:
        The new aggregate.
    """
    if outcome == MatchOutcome.IDENTICAL:
        return aggregate
    if outcome == MatchOutcome.DIFFERENT:
        return aggregate if aggregate == MatchOutcome.INVALID else MatchOutcome.DIFFERENT
    return MatchOutcome.INVALID
