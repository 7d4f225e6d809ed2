"""
Tests for the dictionary, reverse-dictionary and l33t matchers.
"""

import pytest

from keyspace.matchers.dictionary import (
    dictionary_match,
    enumerate_l33t_subs,
    l33t_match,
    relevant_l33t_subtable,
    reverse_dictionary_match,
    translate,
)


# =============================================================================
# Dictionary Matching
# =============================================================================


class TestDictionaryMatch:
    """Tests for dictionary_match."""

    def test_matches_words_that_contain_other_words(self, test_dicts):
        matches = dictionary_match("motherboard", test_dicts)

        assert [(m.i, m.j, m.matched_word, m.rank) for m in matches] == [
            (0, 5, "mother", 2),
            (0, 10, "motherboard", 1),
            (6, 10, "board", 3),
        ]
        assert all(m.dictionary_name == "d1" for m in matches)
        assert all(not m.reversed and not m.l33t for m in matches)

    def test_matches_overlapping_words(self, test_dicts):
        matches = dictionary_match("abcdef", test_dicts)

        assert [(m.i, m.j, m.token) for m in matches] == [(0, 3, "abcd"), (2, 5, "cdef")]

    def test_ignores_uppercasing_but_keeps_token_case(self, test_dicts):
        matches = dictionary_match("BoaRdZ", test_dicts)

        assert [(m.token, m.matched_word, m.dictionary_name) for m in matches] == [
            ("BoaRd", "board", "d1"),
            ("Z", "z", "d2"),
        ]

    @pytest.mark.parametrize("prefix,suffix", [("", ""), ("q", "%%"), ("%%", "q")])
    def test_identifies_words_surrounded_by_non_words(self, test_dicts, prefix, suffix):
        password = prefix + "asdf1234&*" + suffix
        matches = dictionary_match(password, test_dicts)

        assert len(matches) == 1
        assert (matches[0].i, matches[0].j) == (len(prefix), len(prefix) + 9)
        assert matches[0].rank == 5

    def test_matches_against_all_words_in_provided_dictionaries(self, test_dicts):
        for name, ranked in test_dicts.items():
            for word, rank in ranked.items():
                if word == "motherboard":
                    continue  # contains other words
                matches = dictionary_match(word, test_dicts)
                assert any(
                    m.matched_word == word and m.rank == rank and m.dictionary_name == name
                    for m in matches
                )

    def test_empty_password_yields_nothing(self, test_dicts):
        assert dictionary_match("", test_dicts) == []


class TestReverseDictionaryMatch:
    """Tests for reverse_dictionary_match."""

    def test_matches_reversed_words(self):
        dicts = {"d1": {"123": 1, "321": 2, "456": 3, "654": 4}}
        matches = reverse_dictionary_match("0123456789", dicts)

        assert [(m.i, m.j, m.token, m.matched_word, m.rank) for m in matches] == [
            (1, 3, "123", "321", 2),
            (4, 6, "456", "654", 4),
        ]
        assert all(m.reversed for m in matches)


# =============================================================================
# L33t Matching
# =============================================================================


L33T_TEST_TABLE = {
    "a": ["4", "@"],
    "c": ["(", "{", "[", "<"],
    "g": ["6", "9"],
    "o": ["0"],
}

L33T_TEST_DICTS = {
    "words": {"aac": 1, "password": 3, "paassword": 4, "asdf0": 5},
    "words2": {"cgo": 1},
}


class TestL33tHelpers:
    """Tests for the l33t table helpers."""

    def test_translate(self):
        assert translate("p4ssw0rd", {"4": "a", "0": "o"}) == "password"

    def test_reduces_l33t_table_to_only_relevant_substitutions(self):
        assert relevant_l33t_subtable("", L33T_TEST_TABLE) == {}
        assert relevant_l33t_subtable("abcdefgo123578!#$&*)]}>", L33T_TEST_TABLE) == {}
        assert relevant_l33t_subtable("a", L33T_TEST_TABLE) == {}
        assert relevant_l33t_subtable("4", L33T_TEST_TABLE) == {"a": ["4"]}
        assert relevant_l33t_subtable("4@", L33T_TEST_TABLE) == {"a": ["4", "@"]}
        assert relevant_l33t_subtable("4({60", L33T_TEST_TABLE) == {
            "a": ["4"],
            "c": ["(", "{"],
            "g": ["6"],
            "o": ["0"],
        }

    @pytest.mark.parametrize(
        "table,expected",
        [
            ({}, [{}]),
            ({"a": ["@"]}, [{"@": "a"}]),
            ({"a": ["@", "4"]}, [{"@": "a"}, {"4": "a"}]),
            ({"a": ["@", "4"], "c": ["("]}, [{"@": "a", "(": "c"}, {"4": "a", "(": "c"}]),
        ],
    )
    def test_enumerates_sets_of_l33t_substitutions(self, table, expected):
        assert enumerate_l33t_subs(table) == expected

    def test_swaps_in_alternative_for_shared_l33t_character(self):
        subs = enumerate_l33t_subs({"i": ["1"], "l": ["1"]})

        assert subs == [{"1": "i"}, {"1": "l"}]


class TestL33tMatch:
    """Tests for l33t_match."""

    def test_empty_password(self):
        assert l33t_match("", L33T_TEST_DICTS, L33T_TEST_TABLE) == []

    def test_pure_dictionary_word_is_not_l33t(self):
        assert l33t_match("password", L33T_TEST_DICTS, L33T_TEST_TABLE) == []

    @pytest.mark.parametrize(
        "password,word,sub",
        [
            ("p4ssword", "password", {"4": "a"}),
            ("p@ssw0rd", "password", {"@": "a", "0": "o"}),
            ("aSdfO{G0asDfO", "cgo", {"{": "c", "0": "o"}),
        ],
    )
    def test_matches_common_l33t_substitutions(self, password, word, sub):
        matches = [m for m in l33t_match(password, L33T_TEST_DICTS, L33T_TEST_TABLE) if m.matched_word == word]

        assert len(matches) == 1
        match = matches[0]
        assert match.l33t
        assert match.sub == sub
        assert match.token.lower() != match.matched_word
        assert match.token == password[match.i : match.j + 1]

    def test_records_display_string(self):
        matches = l33t_match("p@ssw0rd", L33T_TEST_DICTS, L33T_TEST_TABLE)

        assert matches[0].sub_display == "@ -> a, 0 -> o"

    def test_matches_overlapping_l33t_patterns(self):
        matches = l33t_match("@a(go{G0", L33T_TEST_DICTS, L33T_TEST_TABLE)

        assert [(m.i, m.j, m.token, m.matched_word) for m in matches] == [
            (0, 2, "@a(", "aac"),
            (2, 4, "(go", "cgo"),
            (5, 7, "{G0", "cgo"),
        ]

    def test_does_not_match_single_character_l33ted_words(self):
        dicts = {"words": {"a": 1, "o": 2}}
        assert l33t_match("4 0", dicts, L33T_TEST_TABLE) == []

    def test_does_not_try_subsets_of_an_assignment(self):
        # '4sdf0' would need 4 -> a but 0 kept as-is
        assert l33t_match("4sdf0", L33T_TEST_DICTS, L33T_TEST_TABLE) == []
