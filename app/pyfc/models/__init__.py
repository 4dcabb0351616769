"""Data models for pyfc.

This module exports the outcome and option structures shared by the
matcher, the comparators and the CLI.
"""

from pyfc.models.options import CompareOptions
from pyfc.models.outcome import MatchOutcome, fold_outcome

__all__ = ["CompareOptions", "MatchOutcome", "fold_outcome"]
