"""
Verbal Feedback
================

Turns a score and its winning match sequence into one warning and a
short list of suggestions. Feedback is tied to the longest match in the
sequence, since that is the part of the password an attacker's model
explains best.
"""

from __future__ import annotations

from typing import Optional, Sequence

from keyspace.core.models import (
    AnyMatch,
    DateMatch,
    DictionaryMatch,
    Feedback,
    RegexMatch,
    RepeatMatch,
    SequenceMatch,
    SpatialMatch,
)
from keyspace.scoring.guesses import ALL_UPPER, START_UPPER

DEFAULT_SUGGESTIONS = [
    "Use a few words, avoid common phrases",
    "No need for symbols, digits, or uppercase letters",
]
EXTRA_SUGGESTION = "Add another word or two. Uncommon words are better."

NAME_DICTIONARIES = frozenset({"surnames", "male_names", "female_names"})


def get_feedback(score: int, sequence: Sequence[AnyMatch]) -> Feedback:
    """Build feedback for a scored match sequence.

    Args:
        score: Strength score in ``[0, 4]``.
        sequence: Winning match sequence from the search.

    Returns:
        Default advice for an empty sequence, nothing for a score above
        2, otherwise advice for the longest match headed by a generic
        "add another word" suggestion.
    """
    if not sequence:
        return Feedback(warning="", suggestions=list(DEFAULT_SUGGESTIONS))

    if score > 2:
        return Feedback(warning="", suggestions=[])

    longest_match = sequence[0]
    for match in sequence[1:]:
        if len(match.token) > len(longest_match.token):
            longest_match = match

    feedback = get_match_feedback(longest_match, len(sequence) == 1)
    if feedback is None:
        return Feedback(warning="", suggestions=[EXTRA_SUGGESTION])
    feedback.suggestions.insert(0, EXTRA_SUGGESTION)
    return feedback


def get_match_feedback(match: AnyMatch, is_sole_match: bool) -> Optional[Feedback]:
    """Feedback specific to one match, or ``None`` when there is none."""
    if isinstance(match, DictionaryMatch):
        return get_dictionary_match_feedback(match, is_sole_match)

    if isinstance(match, SpatialMatch):
        warning = (
            "Straight rows of keys are easy to guess"
            if match.turns == 1
            else "Short keyboard patterns are easy to guess"
        )
        return Feedback(
            warning=warning,
            suggestions=["Use a longer keyboard pattern with more turns"],
        )

    if isinstance(match, RepeatMatch):
        warning = (
            'Repeats like "aaa" are easy to guess'
            if len(match.base_token) == 1
            else 'Repeats like "abcabcabc" are only slightly harder to guess than "abc"'
        )
        return Feedback(warning=warning, suggestions=["Avoid repeated words and characters"])

    if isinstance(match, SequenceMatch):
        return Feedback(
            warning="Sequences like abc or 6543 are easy to guess",
            suggestions=["Avoid sequences"],
        )

    if isinstance(match, RegexMatch):
        if match.regex_name == "recent_year":
            return Feedback(
                warning="Recent years are easy to guess",
                suggestions=["Avoid recent years", "Avoid years that are associated with you"],
            )
        return None

    if isinstance(match, DateMatch):
        return Feedback(
            warning="Dates are often easy to guess",
            suggestions=["Avoid dates and years that are associated with you"],
        )

    return None


def _dictionary_warning(match: DictionaryMatch, is_sole_match: bool) -> str:
    if match.dictionary_name == "passwords":
        if is_sole_match and not match.l33t and not match.reversed:
            if match.rank <= 10:
                return "This is a top-10 common password"
            if match.rank <= 100:
                return "This is a top-100 common password"
            return "This is a very common password"
        if match.guesses_log10 is not None and match.guesses_log10 <= 4:
            return "This is similar to a commonly used password"
        return ""
    if match.dictionary_name == "english_wikipedia":
        return "A word by itself is easy to guess" if is_sole_match else ""
    if match.dictionary_name in NAME_DICTIONARIES:
        if is_sole_match:
            return "Names and surnames by themselves are easy to guess"
        return "Common names and surnames are easy to guess"
    return ""


def get_dictionary_match_feedback(match: DictionaryMatch, is_sole_match: bool) -> Feedback:
    """Warning by dictionary and rank, suggestions by how the word was disguised."""
    suggestions: list[str] = []
    word = match.token
    if START_UPPER.fullmatch(word):
        suggestions.append("Capitalization doesn't help very much")
    elif ALL_UPPER.fullmatch(word) and word.lower() != word:
        suggestions.append("All-uppercase is almost as easy to guess as all-lowercase")

    if match.reversed and len(match.token) >= 4:
        suggestions.append("Reversed words aren't much harder to guess")
    if match.l33t:
        suggestions.append(
            "Predictable substitutions like '@' instead of 'a' don't help very much"
        )

    return Feedback(warning=_dictionary_warning(match, is_sole_match), suggestions=suggestions)
