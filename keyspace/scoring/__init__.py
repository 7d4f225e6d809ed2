"""
Keyspace Scoring
=================

Per-pattern guess estimators and the optimal-sequence search that
combines them.
"""

from keyspace.scoring.guesses import REFERENCE_YEAR, estimate_guesses
from keyspace.scoring.search import (
    MIN_GUESSES_BEFORE_GROWING_SEQUENCE,
    most_guessable_match_sequence,
)

__all__ = [
    "MIN_GUESSES_BEFORE_GROWING_SEQUENCE",
    "REFERENCE_YEAR",
    "estimate_guesses",
    "most_guessable_match_sequence",
]
