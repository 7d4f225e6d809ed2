"""
Repeat Matcher
===============

Finds runs made of one unit repeated (``aaaa``, ``abcabcabc``). The
repeated unit is itself analysed with a full matching pass and optimal
sequence search, so ``passwordpassword`` costs roughly what ``password``
costs, times two.
"""

from __future__ import annotations

import re
from typing import Optional

from keyspace.core.models import RepeatMatch
from keyspace.matchers.context import MatchingContext, get_default_context
from keyspace.scoring.search import most_guessable_match_sequence

GREEDY = re.compile(r"(.+)\1+")
LAZY = re.compile(r"(.+?)\1+")
LAZY_ANCHORED = re.compile(r"(.+?)\1+")


def repeat_match(password: str, context: Optional[MatchingContext] = None) -> list[RepeatMatch]:
    """Find repeated-unit runs, left to right, without overlap.

    Both a greedy and a lazy search run from the current position. The
    greedy result wins when it is longer (``aabaab``: greedy gives
    ``aab`` x2, lazy only ``a`` x2); its unit is then shrunk to the
    shortest one that still tiles it (``aabaabaabaab`` -> ``aab``).
    Otherwise the lazy result wins (``aaaaa`` -> ``a`` x5).

    Args:
        password: Password to scan.
        context: Matching context used for the recursive analysis of
            each unit; defaults to the process-wide context.

    Returns:
        Repeat matches in left-to-right order.
    """
    from keyspace.matchers.omnimatch import omnimatch

    if context is None:
        context = get_default_context()

    matches: list[RepeatMatch] = []
    last_index = 0
    while last_index < len(password):
        greedy_match = GREEDY.search(password, last_index)
        lazy_match = LAZY.search(password, last_index)
        if greedy_match is None or lazy_match is None:
            break

        if len(greedy_match.group(0)) > len(lazy_match.group(0)):
            match = greedy_match
            anchored = LAZY_ANCHORED.fullmatch(match.group(0))
            base_token = anchored.group(1) if anchored else ""
        else:
            match = lazy_match
            base_token = match.group(1)

        i = match.start()
        j = match.end() - 1
        token = match.group(0)
        base_analysis = most_guessable_match_sequence(
            base_token,
            omnimatch(base_token, context),
            reference_year=context.reference_year,
        )
        matches.append(RepeatMatch(
            i=i,
            j=j,
            token=token,
            base_token=base_token,
            base_guesses=base_analysis.guesses,
            base_matches=base_analysis.sequence,
            repeat_count=len(token) // len(base_token),
        ))
        last_index = j + 1
    return matches
