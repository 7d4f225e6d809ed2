"""
Matching Context
=================

A :class:`MatchingContext` carries every piece of data the matchers
consult: ranked dictionaries (``user_inputs`` included), adjacency
graphs, the l33t table, the named regex patterns and the reference year
used to rank date interpretations.

Contexts are treated as immutable. A request that needs its own
``user_inputs`` derives a new context with :meth:`with_user_inputs`
instead of mutating shared state, so concurrent estimations never observe
each other's inputs.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from typing import Iterable, Optional, TypeVar

from keyspace.core.models import BaseMatch
from keyspace.data.adjacency import AdjacencyGraph, load_adjacency_graphs
from keyspace.data.frequency import RankedDictionary, build_ranked_dict, load_ranked_dictionaries
from keyspace.scoring.guesses import REFERENCE_YEAR

USER_INPUTS = "user_inputs"

L33T_TABLE: dict[str, list[str]] = {
    "a": ["4", "@"],
    "b": ["8"],
    "c": ["(", "{", "[", "<"],
    "e": ["3"],
    "g": ["6", "9"],
    "i": ["1", "!", "|"],
    "l": ["1", "|", "7"],
    "o": ["0"],
    "s": ["$", "5"],
    "t": ["+", "7"],
    "x": ["%"],
    "z": ["2"],
}

REGEXEN: dict[str, re.Pattern[str]] = {
    "recent_year": re.compile(r"19\d\d|200\d|201\d", re.ASCII),
}

M = TypeVar("M", bound=BaseMatch)


def sort_matches(matches: list[M]) -> list[M]:
    """Stable sort on ``i`` then ``j``."""
    return sorted(matches, key=lambda m: (m.i, m.j))


@dataclass(frozen=True, slots=True)
class MatchingContext:
    """Data threaded through every matcher call.

    Attributes:
        ranked_dictionaries: Dictionary name -> ranked dictionary.
        graphs: Graph name -> adjacency graph.
        l33t_table: Plain letter -> candidate l33t substitutes.
        regexen: Pattern name -> compiled regex.
        reference_year: Year that date and year guesses are measured from.
    """

    ranked_dictionaries: dict[str, RankedDictionary] = field(default_factory=dict)
    graphs: dict[str, AdjacencyGraph] = field(default_factory=dict)
    l33t_table: dict[str, list[str]] = field(default_factory=lambda: dict(L33T_TABLE))
    regexen: dict[str, re.Pattern[str]] = field(default_factory=lambda: dict(REGEXEN))
    reference_year: int = REFERENCE_YEAR

    @classmethod
    def load(
        cls,
        *,
        frequency_lists: Optional[str] = None,
        dictionaries: Optional[list[str]] = None,
        keyboard_layouts: Optional[list[str]] = None,
        reference_year: Optional[int] = None,
    ) -> MatchingContext:
        """Build a context from bundled (or configured) data.

        Args:
            frequency_lists: JSON file overriding the bundled lists.
            dictionaries: Frequency list names to use; empty means all.
            keyboard_layouts: Layout names to use; empty means all.
            reference_year: Override for the current year; falsy means
                the current year.
        """
        return cls(
            ranked_dictionaries=load_ranked_dictionaries(frequency_lists, dictionaries),
            graphs=load_adjacency_graphs(keyboard_layouts),
            reference_year=reference_year or REFERENCE_YEAR,
        )

    def with_user_inputs(self, words: Iterable[str]) -> MatchingContext:
        """Return a copy whose ``user_inputs`` dictionary ranks *words*.

        Words are lowercased; rank is the 1-based position in *words*.
        """
        dictionaries = dict(self.ranked_dictionaries)
        dictionaries[USER_INPUTS] = build_ranked_dict(word.lower() for word in words)
        return replace(self, ranked_dictionaries=dictionaries)


def get_default_context() -> MatchingContext:
    """Process-wide context built from the bundled data, cached."""
    if not hasattr(get_default_context, "_cached"):
        get_default_context._cached = MatchingContext.load()  # type: ignore[attr-defined]
    return get_default_context._cached  # type: ignore[attr-defined]


def set_user_input_dictionary(words: Iterable[str]) -> None:
    """Replace ``user_inputs`` on the process-wide default context.

    Callers sharing the default context must invoke this once per
    independent estimation, even with an empty list. Code that estimates
    concurrently should pass its own context from
    :meth:`MatchingContext.with_user_inputs` instead.
    """
    get_default_context._cached = get_default_context().with_user_inputs(words)  # type: ignore[attr-defined]
