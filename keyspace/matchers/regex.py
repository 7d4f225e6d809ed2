"""
Regex-Class Matcher
====================

Applies each named pattern of the matching context (currently only
``recent_year``) across the password and reports every non-overlapping
occurrence.
"""

from __future__ import annotations

import re
from typing import Optional

from keyspace.core.models import RegexMatch
from keyspace.matchers.context import get_default_context, sort_matches


def regex_match(
    password: str,
    regexen: Optional[dict[str, re.Pattern[str]]] = None,
) -> list[RegexMatch]:
    """One :class:`RegexMatch` per occurrence of every named pattern."""
    if regexen is None:
        regexen = get_default_context().regexen
    matches: list[RegexMatch] = []
    for name, regex in regexen.items():
        for rx_match in regex.finditer(password):
            matches.append(RegexMatch(
                i=rx_match.start(),
                j=rx_match.end() - 1,
                token=rx_match.group(0),
                regex_name=name,
            ))
    return sort_matches(matches)
