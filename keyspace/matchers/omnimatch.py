"""
Omnimatch
==========

Runs every matcher over a password and returns the combined candidate
list, sorted by ``(i, j)``. Candidates overlap freely; choosing among
them is the job of :mod:`keyspace.scoring.search`.
"""

from __future__ import annotations

from typing import Optional

from keyspace.core.models import AnyMatch
from keyspace.matchers.context import MatchingContext, get_default_context, sort_matches
from keyspace.matchers.date import date_match
from keyspace.matchers.dictionary import dictionary_match, l33t_match, reverse_dictionary_match
from keyspace.matchers.regex import regex_match
from keyspace.matchers.repeat import repeat_match
from keyspace.matchers.sequence import sequence_match
from keyspace.matchers.spatial import spatial_match


def omnimatch(password: str, context: Optional[MatchingContext] = None) -> list[AnyMatch]:
    """Collect every candidate match for *password*.

    Args:
        password: Password to scan.
        context: Dictionaries, graphs and patterns to match against;
            defaults to the process-wide context.

    Returns:
        All matches from all matchers, stably sorted by ``(i, j)``.
    """
    if context is None:
        context = get_default_context()

    matches: list[AnyMatch] = []
    matches.extend(dictionary_match(password, context.ranked_dictionaries))
    matches.extend(reverse_dictionary_match(password, context.ranked_dictionaries))
    matches.extend(l33t_match(password, context.ranked_dictionaries, context.l33t_table))
    matches.extend(spatial_match(password, context.graphs))
    matches.extend(repeat_match(password, context))
    matches.extend(sequence_match(password))
    matches.extend(regex_match(password, context.regexen))
    matches.extend(date_match(password, context.reference_year))
    return sort_matches(matches)
