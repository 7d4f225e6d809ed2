"""
Tests for the spatial, sequence, repeat and regex matchers.
"""

import pytest

from keyspace.data.adjacency import LAYOUTS, build_graph, load_adjacency_graphs
from keyspace.matchers.regex import regex_match
from keyspace.matchers.repeat import repeat_match
from keyspace.matchers.sequence import sequence_match
from keyspace.matchers.spatial import spatial_match


# =============================================================================
# Adjacency Graphs
# =============================================================================


class TestAdjacencyGraphs:
    """Tests for graph construction."""

    def test_qwerty_neighbours_of_g(self):
        graph = build_graph(*LAYOUTS["qwerty"])

        assert graph["g"] == ["fF", "tT", "yY", "hH", "bB", "vV"]
        assert graph["G"] == graph["g"]

    def test_keypad_neighbours_of_7(self):
        graph = build_graph(*LAYOUTS["keypad"])

        assert graph["7"] == [None, None, None, "/", "8", "5", "4", None]

    def test_every_key_has_fixed_arity(self):
        graphs = load_adjacency_graphs()

        assert {len(n) for n in graphs["qwerty"].values()} == {6}
        assert {len(n) for n in graphs["dvorak"].values()} == {6}
        assert {len(n) for n in graphs["keypad"].values()} == {8}
        assert {len(n) for n in graphs["mac_keypad"].values()} == {8}

    def test_unknown_layout_is_rejected(self):
        with pytest.raises(ValueError):
            load_adjacency_graphs(["colemak"])


# =============================================================================
# Spatial Matching
# =============================================================================


class TestSpatialMatch:
    """Tests for spatial_match."""

    @pytest.mark.parametrize("password", ["", "/", "qw", "*/"])
    def test_does_not_match_short_patterns(self, password):
        assert spatial_match(password) == []

    def test_matches_pattern_surrounded_by_non_spatial_characters(self):
        graphs = {"qwerty": load_adjacency_graphs(["qwerty"])["qwerty"]}
        matches = spatial_match("rz!6tfGHJ%z", graphs)

        assert len(matches) == 1
        assert (matches[0].i, matches[0].j, matches[0].token) == (3, 8, "6tfGHJ")

    @pytest.mark.parametrize(
        "pattern,graph_name,turns,shifted_count",
        [
            ("12345", "qwerty", 1, 0),
            ("@WSX", "qwerty", 1, 4),
            ("6tfGHJ", "qwerty", 2, 3),
            ("hGFd", "qwerty", 1, 2),
            ("159-", "keypad", 1, 0),
            ("369", "keypad", 1, 0),
        ],
    )
    def test_matches_spatial_patterns(self, pattern, graph_name, turns, shifted_count):
        graphs = {graph_name: load_adjacency_graphs([graph_name])[graph_name]}
        matches = spatial_match(pattern, graphs)

        assert len(matches) == 1
        match = matches[0]
        assert (match.i, match.j) == (0, len(pattern) - 1)
        assert match.graph == graph_name
        assert match.turns == turns
        assert match.shifted_count == shifted_count

    def test_keypads_never_count_a_shifted_start(self):
        graphs = {"keypad": load_adjacency_graphs(["keypad"])["keypad"]}
        matches = spatial_match("*-+", graphs)

        assert matches and matches[0].shifted_count == 0


# =============================================================================
# Sequence Matching
# =============================================================================


class TestSequenceMatch:
    """Tests for sequence_match."""

    @pytest.mark.parametrize("password", ["", "a", "1"])
    def test_does_not_match_length_0_or_1(self, password):
        assert sequence_match(password) == []

    def test_matches_overlapping_patterns(self):
        matches = sequence_match("abcbabc")

        assert [(m.i, m.j, m.token, m.ascending) for m in matches] == [
            (0, 2, "abc", True),
            (2, 4, "cba", False),
            (4, 6, "abc", True),
        ]

    def test_matches_runs_from_the_docstring_example(self):
        matches = sequence_match("abcdb975zy")

        assert [(m.i, m.j) for m in matches] == [(0, 3), (5, 7), (8, 9)]

    @pytest.mark.parametrize(
        "pattern,name,ascending,space",
        [
            ("ABC", "upper", True, 26),
            ("CBA", "upper", False, 26),
            ("PQR", "upper", True, 26),
            ("RQP", "upper", False, 26),
            ("XYZ", "upper", True, 26),
            ("ZYX", "upper", False, 26),
            ("abcd", "lower", True, 26),
            ("dcba", "lower", False, 26),
            ("jihg", "lower", False, 26),
            ("wxyz", "lower", True, 26),
            ("zxvt", "lower", False, 26),
            ("0369", "digits", True, 10),
            ("97531", "digits", False, 10),
            ("αβγ", "unicode", True, 26),
        ],
    )
    def test_matches_sequences(self, pattern, name, ascending, space):
        matches = sequence_match(pattern)

        assert len(matches) == 1
        match = matches[0]
        assert (match.i, match.j) == (0, len(pattern) - 1)
        assert match.sequence_name == name
        assert match.ascending is ascending
        assert match.sequence_space == space

    @pytest.mark.parametrize("password", ["aaa", "a1b2", "a9"])
    def test_ignores_flat_runs_and_large_steps(self, password):
        assert sequence_match(password) == []


# =============================================================================
# Repeat Matching
# =============================================================================


class TestRepeatMatch:
    """Tests for repeat_match."""

    @pytest.mark.parametrize("password", ["", "#"])
    def test_does_not_match_short_strings(self, small_context, password):
        assert repeat_match(password, small_context) == []

    def test_matches_embedded_repeat(self, small_context):
        matches = repeat_match("y4@&&&&&u%7", small_context)

        assert len(matches) == 1
        assert (matches[0].i, matches[0].j, matches[0].token) == (3, 7, "&&&&&")
        assert matches[0].base_token == "&"
        assert matches[0].repeat_count == 5

    def test_prefers_greedy_when_longer(self, small_context):
        matches = repeat_match("aabaab", small_context)

        assert len(matches) == 1
        assert matches[0].base_token == "aab"
        assert matches[0].repeat_count == 2

    def test_prefers_lazy_for_single_character_runs(self, small_context):
        matches = repeat_match("aaaaa", small_context)

        assert matches[0].base_token == "a"
        assert matches[0].repeat_count == 5

    def test_finds_shortest_unit_of_greedy_run(self, small_context):
        matches = repeat_match("aabaabaabaab", small_context)

        assert matches[0].base_token == "aab"
        assert matches[0].repeat_count == 4

    def test_matches_multiple_adjacent_repeats(self, small_context):
        matches = repeat_match("BBB1111aaaaa@@@@@@", small_context)

        assert [(m.i, m.j, m.base_token) for m in matches] == [
            (0, 2, "B"),
            (3, 6, "1"),
            (7, 11, "a"),
            (12, 17, "@"),
        ]

    def test_scores_base_token_recursively(self, small_context):
        matches = repeat_match("boardboard", small_context)

        assert matches[0].base_token == "board"
        assert [m.pattern for m in matches[0].base_matches] == ["dictionary"]
        assert matches[0].base_matches[0].matched_word == "board"
        assert matches[0].base_guesses < 10 ** 5


# =============================================================================
# Regex Matching
# =============================================================================


class TestRegexMatch:
    """Tests for regex_match."""

    @pytest.mark.parametrize("password", ["1922", "2017", "2009"])
    def test_matches_recent_years(self, password):
        matches = regex_match(password)

        assert len(matches) == 1
        match = matches[0]
        assert (match.i, match.j, match.token) == (0, 3, password)
        assert match.regex_name == "recent_year"

    def test_reports_every_occurrence(self):
        matches = regex_match("x1999y2001")

        assert [(m.i, m.j) for m in matches] == [(1, 4), (6, 9)]

    def test_ignores_years_outside_pattern(self):
        assert regex_match("1899 2021") == []


class TestRepeatRecursion:
    """Nested scoring of repeat base tokens terminates."""

    @staticmethod
    def depth(match, limit):
        assert len(match.base_token) < len(match.token)
        nested = [m for m in match.base_matches if m.pattern == "repeat"]
        assert limit > 0
        return 1 + max((TestRepeatRecursion.depth(m, limit - 1) for m in nested), default=0)

    @pytest.mark.parametrize(
        "password",
        ["abababababababab", "aabaabaabaab", "xyzxyzxyzxyzxyzxyz", "11" * 20],
    )
    def test_base_tokens_strictly_shrink(self, small_context, password):
        matches = repeat_match(password, small_context)

        assert matches
        for match in matches:
            assert self.depth(match, limit=len(password).bit_length()) >= 1
