"""
Keyspace Test Fixtures

Small, explicit dictionaries and graphs for matcher tests, plus helpers
for building matches with preset guesses.
"""

from __future__ import annotations

import pytest

from keyspace.core.models import RegexMatch
from keyspace.data.adjacency import load_adjacency_graphs
from keyspace.matchers.context import MatchingContext


@pytest.fixture
def test_dicts() -> dict[str, dict[str, int]]:
    """Two tiny ranked dictionaries."""
    return {
        "d1": {"motherboard": 1, "mother": 2, "board": 3, "abcd": 4, "cdef": 5},
        "d2": {"z": 1, "8": 2, "99": 3, "$": 4, "asdf1234&*": 5},
    }


@pytest.fixture
def small_context(test_dicts) -> MatchingContext:
    """Context over the tiny dictionaries and every bundled layout."""
    return MatchingContext(
        ranked_dictionaries=test_dicts,
        graphs=load_adjacency_graphs(),
        reference_year=2020,
    )


@pytest.fixture
def make_match():
    """Factory for placeholder matches with a preset guess count."""

    def factory(i: int, j: int, guesses: float, password: str = "0123456789") -> RegexMatch:
        return RegexMatch(
            i=i,
            j=j,
            token=password[i : j + 1],
            regex_name="placeholder",
            guesses=guesses,
        )

    return factory
