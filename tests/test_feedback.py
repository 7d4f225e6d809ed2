"""
Tests for warning and suggestion selection.
"""

import pytest

from keyspace.core.models import (
    BruteforceMatch,
    DateMatch,
    DictionaryMatch,
    RegexMatch,
    RepeatMatch,
    SequenceMatch,
    SpatialMatch,
)
from keyspace.feedback import DEFAULT_SUGGESTIONS, EXTRA_SUGGESTION, get_feedback


def word(token, dictionary_name="passwords", rank=1, **fields):
    return DictionaryMatch(
        i=0,
        j=len(token) - 1,
        token=token,
        matched_word=token.lower(),
        rank=rank,
        dictionary_name=dictionary_name,
        **fields,
    )


def filler(i, j):
    return BruteforceMatch(i=i, j=j, token="x" * (j - i + 1))


# =============================================================================
# Overall Selection
# =============================================================================


class TestGetFeedback:
    """Tests for get_feedback."""

    def test_empty_sequence_gets_default_suggestions(self):
        feedback = get_feedback(0, [])

        assert feedback.warning == ""
        assert feedback.suggestions == DEFAULT_SUGGESTIONS

    def test_default_suggestions_are_copies(self):
        get_feedback(0, []).suggestions.append("mutated")

        assert get_feedback(0, []).suggestions == DEFAULT_SUGGESTIONS

    @pytest.mark.parametrize("score", [3, 4])
    def test_strong_passwords_get_no_feedback(self, score):
        feedback = get_feedback(score, [word("password", rank=2)])

        assert feedback.warning == ""
        assert feedback.suggestions == []

    def test_extra_suggestion_leads(self):
        feedback = get_feedback(0, [word("password", rank=2)])

        assert feedback.suggestions[0] == EXTRA_SUGGESTION

    def test_feedback_follows_longest_match(self):
        sequence = [
            word("abc", rank=5000),
            SequenceMatch(
                i=3, j=8, token="abcdef", sequence_name="lower", sequence_space=26, ascending=True
            ),
        ]
        feedback = get_feedback(1, sequence)

        assert feedback.warning == "Sequences like abc or 6543 are easy to guess"
        assert feedback.suggestions == [EXTRA_SUGGESTION, "Avoid sequences"]

    def test_first_longest_match_wins_ties(self):
        sequence = [
            DateMatch(i=0, j=3, token="1991", year=1991, month=1, day=9),
            SequenceMatch(
                i=4, j=7, token="abcd", sequence_name="lower", sequence_space=26, ascending=True
            ),
        ]

        assert get_feedback(0, sequence).warning == "Dates are often easy to guess"

    def test_unexplained_match_gets_only_extra_suggestion(self):
        feedback = get_feedback(0, [filler(0, 5)])

        assert feedback.warning == ""
        assert feedback.suggestions == [EXTRA_SUGGESTION]


# =============================================================================
# Per-Pattern Feedback
# =============================================================================


class TestPatternFeedback:
    """Tests for the warning attached to each pattern."""

    @pytest.mark.parametrize(
        "turns,warning",
        [
            (1, "Straight rows of keys are easy to guess"),
            (3, "Short keyboard patterns are easy to guess"),
        ],
    )
    def test_spatial(self, turns, warning):
        match = SpatialMatch(i=0, j=5, token="qwerty", graph="qwerty", turns=turns, shifted_count=0)
        feedback = get_feedback(0, [match])

        assert feedback.warning == warning
        assert "Use a longer keyboard pattern with more turns" in feedback.suggestions

    @pytest.mark.parametrize(
        "base_token,warning",
        [
            ("a", 'Repeats like "aaa" are easy to guess'),
            ("abc", 'Repeats like "abcabcabc" are only slightly harder to guess than "abc"'),
        ],
    )
    def test_repeat(self, base_token, warning):
        token = base_token * 3
        match = RepeatMatch(
            i=0,
            j=len(token) - 1,
            token=token,
            base_token=base_token,
            base_guesses=10,
            repeat_count=3,
        )

        assert get_feedback(0, [match]).warning == warning

    def test_recent_year(self):
        match = RegexMatch(i=0, j=3, token="2015", regex_name="recent_year")
        feedback = get_feedback(0, [match])

        assert feedback.warning == "Recent years are easy to guess"
        assert feedback.suggestions == [
            EXTRA_SUGGESTION,
            "Avoid recent years",
            "Avoid years that are associated with you",
        ]

    def test_date(self):
        match = DateMatch(i=0, j=7, token="1/1/1991", separator="/", year=1991, month=1, day=1)
        feedback = get_feedback(0, [match])

        assert feedback.warning == "Dates are often easy to guess"
        assert "Avoid dates and years that are associated with you" in feedback.suggestions


# =============================================================================
# Dictionary Feedback
# =============================================================================


class TestDictionaryFeedback:
    """Tests for dictionary warnings and suggestions."""

    @pytest.mark.parametrize(
        "rank,warning",
        [
            (2, "This is a top-10 common password"),
            (50, "This is a top-100 common password"),
            (5000, "This is a very common password"),
        ],
    )
    def test_sole_common_password(self, rank, warning):
        assert get_feedback(0, [word("password", rank=rank)]).warning == warning

    def test_disguised_common_password(self):
        match = word("p4ssword", rank=2, l33t=True, sub={"4": "a"}, guesses_log10=2.5)
        sequence = [match, filler(8, 9)]

        assert get_feedback(0, sequence).warning == "This is similar to a commonly used password"

    def test_rare_disguised_password_gets_no_warning(self):
        match = word("p4ssword", rank=2, l33t=True, sub={"4": "a"}, guesses_log10=6.0)

        assert get_feedback(0, [match, filler(8, 9)]).warning == ""

    def test_wikipedia_word(self):
        sole = get_feedback(0, [word("maelstrom", "english_wikipedia")])
        part = get_feedback(0, [word("maelstrom", "english_wikipedia"), filler(9, 10)])

        assert sole.warning == "A word by itself is easy to guess"
        assert part.warning == ""

    @pytest.mark.parametrize("dictionary_name", ["surnames", "male_names", "female_names"])
    def test_names(self, dictionary_name):
        sole = get_feedback(0, [word("smithers", dictionary_name)])
        part = get_feedback(0, [word("smithers", dictionary_name), filler(8, 9)])

        assert sole.warning == "Names and surnames by themselves are easy to guess"
        assert part.warning == "Common names and surnames are easy to guess"

    def test_user_inputs_get_no_warning(self):
        assert get_feedback(0, [word("alice", "user_inputs")]).warning == ""

    def test_capitalization_suggestions(self):
        start = get_feedback(0, [word("Password", rank=2)])
        upper = get_feedback(0, [word("PASSWORD", rank=2)])

        assert "Capitalization doesn't help very much" in start.suggestions
        assert "All-uppercase is almost as easy to guess as all-lowercase" in upper.suggestions

    def test_reversed_suggestion_needs_four_characters(self):
        long_word = get_feedback(0, [word("drowssap", rank=2, reversed=True)])
        short_word = get_feedback(0, [word("eht", rank=2, reversed=True)])

        assert "Reversed words aren't much harder to guess" in long_word.suggestions
        assert "Reversed words aren't much harder to guess" not in short_word.suggestions

    def test_l33t_suggestion(self):
        feedback = get_feedback(0, [word("p4ssword", l33t=True, sub={"4": "a"})])

        assert (
            "Predictable substitutions like '@' instead of 'a' don't help very much"
            in feedback.suggestions
        )
