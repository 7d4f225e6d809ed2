"""
Spatial Matcher
================

Finds keyboard walks: runs where every character sits next to the
previous one on some layout (``qwerty``, ``zxcvbn``, ``7896321``).

For each walk the matcher records how many times the direction changed
(``turns``) and how many keys needed shift (``shifted_count``); both feed
the spatial guess estimator.

References:
    - Wheeler, D. L. (2016). zxcvbn: Low-Budget Password Strength
      Estimation. USENIX Security, Section 3.
"""

from __future__ import annotations

import re
from typing import Optional

from keyspace.core.models import SpatialMatch
from keyspace.data.adjacency import KEYBOARD_GRAPHS, AdjacencyGraph
from keyspace.matchers.context import get_default_context, sort_matches

SHIFTED_RX = re.compile(r'[~!@#$%^&*()_+QWERTYUIOP{}|ASDFGHJKL:"ZXCVBNM<>?]')


def spatial_match(
    password: str,
    graphs: Optional[dict[str, AdjacencyGraph]] = None,
) -> list[SpatialMatch]:
    """Find walks of three or more adjacent keys on every graph.

    Args:
        password: Password to scan.
        graphs: Graphs to walk; defaults to the process-wide context's.

    Returns:
        Spatial matches from all graphs, sorted by ``(i, j)``.
    """
    if graphs is None:
        graphs = get_default_context().graphs
    matches: list[SpatialMatch] = []
    for graph_name, graph in graphs.items():
        matches.extend(_spatial_match_helper(password, graph, graph_name))
    return sort_matches(matches)


def _spatial_match_helper(
    password: str,
    graph: AdjacencyGraph,
    graph_name: str,
) -> list[SpatialMatch]:
    matches: list[SpatialMatch] = []
    length = len(password)
    i = 0
    while i < length - 1:
        j = i + 1
        last_direction: Optional[int] = None
        turns = 0
        if graph_name in KEYBOARD_GRAPHS and SHIFTED_RX.match(password[i]):
            shifted_count = 1
        else:
            shifted_count = 0

        while True:
            prev_char = password[j - 1]
            found = False
            adjacents = graph.get(prev_char, [])
            if j < length:
                cur_char = password[j]
                for direction, adj in enumerate(adjacents):
                    if not adj:
                        continue
                    position = adj.find(cur_char)
                    if position == -1:
                        continue
                    found = True
                    # slot index 1 is the shifted character: '@' in '2@'
                    if position == 1:
                        shifted_count += 1
                    # every walk starts with a turn
                    if last_direction != direction:
                        turns += 1
                        last_direction = direction
                    break

            if found:
                j += 1
                continue

            if j - i > 2:
                matches.append(SpatialMatch(
                    i=i,
                    j=j - 1,
                    token=password[i:j],
                    graph=graph_name,
                    turns=turns,
                    shifted_count=shifted_count,
                ))
            i = j
            break
    return matches
