"""
Guess Estimation
=================

One estimator per match pattern. Each answers the question: how many
guesses would an attacker who knows this pattern need to hit this exact
token?

    dictionary  rank x capitalisation x substitution x reversal
    spatial     walks of length <= L with <= t turns, x shift variations
    repeat      base guesses x repeat count
    sequence    starting-point base x direction x length
    regex       character-class base ** length, or year distance
    date        year distance x 365 (x 4 with a separator)
    bruteforce  10 ** length

Estimates are computed once per match and cached on the match itself, so
the optimal-sequence search can consult them repeatedly.

References:
    - Wheeler, D. L. (2016). zxcvbn: Low-Budget Password Strength
      Estimation. USENIX Security, Section 4.
    - Bonneau, J. (2012). The Science of Guessing. IEEE S&P.
"""

from __future__ import annotations

import re
from datetime import datetime

from keyspace.core.models import (
    AnyMatch,
    BaseMatch,
    BruteforceMatch,
    DateMatch,
    DictionaryMatch,
    RegexMatch,
    RepeatMatch,
    SequenceMatch,
    SpatialMatch,
)
from keyspace.data.adjacency import (
    KEYBOARD_AVERAGE_DEGREE,
    KEYBOARD_GRAPHS,
    KEYBOARD_STARTING_POSITIONS,
    KEYPAD_AVERAGE_DEGREE,
    KEYPAD_STARTING_POSITIONS,
)
from shared.math_utils import MAX_GUESSES, bounded_product, log10, nCk, safe_pow, saturate


# ===================================================================== #
#  Constants
# ===================================================================== #

BRUTEFORCE_CARDINALITY = 10
MIN_SUBMATCH_GUESSES_SINGLE_CHAR = 10
MIN_SUBMATCH_GUESSES_MULTI_CHAR = 50

MIN_YEAR_SPACE = 20
REFERENCE_YEAR: int = datetime.now().year

CHAR_CLASS_BASES: dict[str, int] = {
    "alpha_lower": 26,
    "alpha_upper": 26,
    "alpha": 52,
    "alphanumeric": 62,
    "digits": 10,
    "symbols": 33,
}

START_UPPER = re.compile(r"[A-Z][^A-Z]+")
END_UPPER = re.compile(r"[^A-Z]+[A-Z]")
ALL_UPPER = re.compile(r"[^a-z]+")
ALL_LOWER = re.compile(r"[^A-Z]+")

_SEQUENCE_OBVIOUS_STARTS = frozenset("aAzZ019")


# ===================================================================== #
#  Dispatcher
# ===================================================================== #


def estimate_guesses(
    match: AnyMatch,
    password: str,
    reference_year: int = REFERENCE_YEAR,
) -> float:
    """Estimate (and cache) the guesses needed for *match*.

    A match that covers only part of the password is credited with at
    least 10 guesses (single character) or 50 (longer); a lone token in
    the middle of a password is never free.

    Args:
        match: Any match variant. ``guesses`` is written once.
        password: The full password the match was found in.
        reference_year: Year that date and year distances are measured from.

    Returns:
        The (cached) guess estimate, finite and ``>= 1``.
    """
    if match.guesses is not None:
        return match.guesses

    min_guesses = 1
    if len(match.token) < len(password):
        min_guesses = (
            MIN_SUBMATCH_GUESSES_SINGLE_CHAR
            if len(match.token) == 1
            else MIN_SUBMATCH_GUESSES_MULTI_CHAR
        )

    if isinstance(match, BruteforceMatch):
        guesses = bruteforce_guesses(match)
    elif isinstance(match, DictionaryMatch):
        guesses = dictionary_guesses(match)
    elif isinstance(match, SpatialMatch):
        guesses = spatial_guesses(match)
    elif isinstance(match, RepeatMatch):
        guesses = repeat_guesses(match)
    elif isinstance(match, SequenceMatch):
        guesses = sequence_guesses(match)
    elif isinstance(match, RegexMatch):
        guesses = regex_guesses(match, reference_year)
    elif isinstance(match, DateMatch):
        guesses = date_guesses(match, reference_year)
    else:
        raise TypeError(f"Unsupported match type: {type(match).__name__}")

    match.guesses = saturate(max(float(guesses), float(min_guesses)))
    match.guesses_log10 = log10(match.guesses)
    return match.guesses


# ===================================================================== #
#  Per-Pattern Estimators
# ===================================================================== #


def bruteforce_guesses(match: BruteforceMatch) -> float:
    """``10 ** len(token)``, one above the sub-match minimum.

    The extra guess lets any recognised pattern over the same span beat
    bruteforce in the search.
    """
    guesses = safe_pow(BRUTEFORCE_CARDINALITY, len(match.token))
    min_guesses = (
        MIN_SUBMATCH_GUESSES_SINGLE_CHAR + 1
        if len(match.token) == 1
        else MIN_SUBMATCH_GUESSES_MULTI_CHAR + 1
    )
    return max(guesses, float(min_guesses))


def repeat_guesses(match: RepeatMatch) -> float:
    return bounded_product(match.base_guesses, match.repeat_count)


def sequence_guesses(match: SequenceMatch) -> float:
    first_chr = match.token[0]
    if first_chr in _SEQUENCE_OBVIOUS_STARTS:
        base_guesses = 4
    elif "0" <= first_chr <= "9":
        base_guesses = 10
    else:
        # upper and lower sequences share the conservative base
        base_guesses = 26
    if not match.ascending:
        base_guesses *= 2
    return float(base_guesses * len(match.token))


def regex_guesses(match: RegexMatch, reference_year: int = REFERENCE_YEAR) -> float:
    """Guesses for a named-pattern match.

    Character-class patterns cost ``base ** len(token)``; ``recent_year``
    costs the distance from *reference_year*, floored at
    :data:`MIN_YEAR_SPACE`.

    Raises:
        ValueError: For a regex name with no guess model.
    """
    if match.regex_name in CHAR_CLASS_BASES:
        return safe_pow(CHAR_CLASS_BASES[match.regex_name], len(match.token))
    if match.regex_name == "recent_year":
        year_space = abs(int(match.token) - reference_year)
        return float(max(year_space, MIN_YEAR_SPACE))
    raise ValueError(f"No guess model for regex {match.regex_name!r}")


def date_guesses(match: DateMatch, reference_year: int = REFERENCE_YEAR) -> float:
    """Year distance times days per year, x4 for separator choice."""
    year_space = max(abs(match.year - reference_year), MIN_YEAR_SPACE)
    guesses = year_space * 365
    if match.separator:
        guesses *= 4
    return float(guesses)


def spatial_guesses(match: SpatialMatch) -> float:
    """Count keyboard walks no longer and no twistier than this one.

    Sums ``C(L-1, t-1) * s * d**t`` over every length ``L`` from 2 to the
    token length and every turn count up to ``turns``, where ``s`` is the
    number of starting keys and ``d`` the average key degree. Shifted
    characters multiply the count the same way l33t substitutions do.
    """
    if match.graph in KEYBOARD_GRAPHS:
        starts = KEYBOARD_STARTING_POSITIONS
        degree = KEYBOARD_AVERAGE_DEGREE
    else:
        starts = KEYPAD_STARTING_POSITIONS
        degree = KEYPAD_AVERAGE_DEGREE

    guesses = 0.0
    length = len(match.token)
    turns = match.turns
    for i in range(2, length + 1):
        possible_turns = min(turns, i - 1)
        for j in range(1, possible_turns + 1):
            guesses += bounded_product(nCk(i - 1, j - 1), starts, safe_pow(degree, j))
    guesses = saturate(guesses)

    if match.shifted_count:
        shifted = match.shifted_count
        unshifted = length - shifted
        if shifted == 0 or unshifted == 0:
            guesses = bounded_product(guesses, 2)
        else:
            shifted_variations = sum(
                nCk(shifted + unshifted, k) for k in range(1, min(shifted, unshifted) + 1)
            )
            guesses = bounded_product(guesses, shifted_variations)
    return guesses


def dictionary_guesses(match: DictionaryMatch) -> float:
    """Rank scaled by capitalisation, substitution and reversal.

    Fills ``base_guesses``, ``uppercase_variations`` and
    ``l33t_variations`` on the match for display.
    """
    match.base_guesses = match.rank
    match.uppercase_variations = uppercase_variations(match)
    match.l33t_variations = l33t_variations(match)
    reversed_variations = 2 if match.reversed else 1
    return bounded_product(
        match.base_guesses,
        match.uppercase_variations,
        match.l33t_variations,
        reversed_variations,
    )


# ===================================================================== #
#  Variation Factors
# ===================================================================== #


def uppercase_variations(match: BaseMatch) -> int:
    """Number of capitalisation schemes an attacker must try.

    ``password`` -> 1; ``Password``, ``passworD`` and ``PASSWORD`` -> 2;
    anything else -> ways to pick up to ``min(U, L)`` letters to flip.
    """
    word = match.token
    if ALL_LOWER.fullmatch(word) or word.lower() == word:
        return 1
    for regex in (START_UPPER, END_UPPER, ALL_UPPER):
        if regex.fullmatch(word):
            return 2
    upper = sum(1 for char in word if "A" <= char <= "Z")
    lower = sum(1 for char in word if "a" <= char <= "z")
    return sum(nCk(upper + lower, k) for k in range(1, min(upper, lower) + 1))


def l33t_variations(match: DictionaryMatch) -> int:
    """Number of substitution schemes an attacker must try.

    For each substitution used, with ``S`` substituted and ``U`` plain
    occurrences in the lowercased token: a fully substituted or fully
    plain token doubles the space, otherwise every mix of up to
    ``min(U, S)`` substitutions is counted.
    """
    if not match.l33t:
        return 1
    variations = 1
    chars = match.token.lower()
    for subbed, unsubbed in match.sub.items():
        subbed_count = chars.count(subbed)
        unsubbed_count = chars.count(unsubbed)
        if subbed_count == 0 or unsubbed_count == 0:
            variations *= 2
        else:
            p = min(unsubbed_count, subbed_count)
            variations *= sum(
                nCk(unsubbed_count + subbed_count, k) for k in range(1, p + 1)
            )
    return variations


__all__ = [
    "BRUTEFORCE_CARDINALITY",
    "MAX_GUESSES",
    "MIN_SUBMATCH_GUESSES_MULTI_CHAR",
    "MIN_SUBMATCH_GUESSES_SINGLE_CHAR",
    "MIN_YEAR_SPACE",
    "REFERENCE_YEAR",
    "bruteforce_guesses",
    "date_guesses",
    "dictionary_guesses",
    "estimate_guesses",
    "l33t_variations",
    "regex_guesses",
    "repeat_guesses",
    "sequence_guesses",
    "spatial_guesses",
    "uppercase_variations",
]
