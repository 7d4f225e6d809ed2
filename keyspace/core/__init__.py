"""
Keyspace Core Module
=====================

Data models for matches and estimation results. The estimation facade
lives in :mod:`keyspace.core.engine`.
"""

from keyspace.core.models import (
    AnyMatch,
    AttackTimes,
    BruteforceMatch,
    DateMatch,
    DictionaryMatch,
    Feedback,
    MatchSequence,
    PasswordEstimate,
    RegexMatch,
    RepeatMatch,
    SequenceMatch,
    SpatialMatch,
)

__all__ = [
    "AnyMatch",
    "AttackTimes",
    "BruteforceMatch",
    "DateMatch",
    "DictionaryMatch",
    "Feedback",
    "MatchSequence",
    "PasswordEstimate",
    "RegexMatch",
    "RepeatMatch",
    "SequenceMatch",
    "SpatialMatch",
]
