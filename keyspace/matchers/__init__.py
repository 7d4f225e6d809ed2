"""
Keyspace Matchers
==================

Pattern matchers that enumerate candidate substructures of a password.
Each matcher focuses on one pattern family; :func:`omnimatch` runs them
all against a shared :class:`MatchingContext`.
"""

from keyspace.matchers.context import (
    L33T_TABLE,
    REGEXEN,
    MatchingContext,
    get_default_context,
    set_user_input_dictionary,
)
from keyspace.matchers.date import date_match
from keyspace.matchers.dictionary import dictionary_match, l33t_match, reverse_dictionary_match
from keyspace.matchers.omnimatch import omnimatch
from keyspace.matchers.regex import regex_match
from keyspace.matchers.repeat import repeat_match
from keyspace.matchers.sequence import sequence_match
from keyspace.matchers.spatial import spatial_match

__all__ = [
    "L33T_TABLE",
    "REGEXEN",
    "MatchingContext",
    "date_match",
    "dictionary_match",
    "get_default_context",
    "l33t_match",
    "omnimatch",
    "regex_match",
    "repeat_match",
    "reverse_dictionary_match",
    "sequence_match",
    "set_user_input_dictionary",
    "spatial_match",
]
