"""
Keyspace Core Data Models
==========================

Pydantic models for the Keyspace guessability engine. A password is
explained by a list of *matches*, each claiming that a substring
``password[i:j+1]`` instantiates a recognisable pattern. Matches form a
tagged union discriminated on ``pattern``:

    dictionary, spatial, repeat, sequence, regex, date, bruteforce

Matchers create matches; only the guess estimator writes to them
afterwards, filling ``guesses`` / ``guesses_log10`` (and, for dictionary
matches, the variation factors it derived them from).

All models are serialisable to JSON for the CLI output layer.

References:
    - Wheeler, D. L. (2016). zxcvbn: Low-Budget Password Strength
      Estimation. USENIX Security.
"""

from __future__ import annotations

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field


# ===================================================================== #
#  Match Variants
# ===================================================================== #


class BaseMatch(BaseModel):
    """Fields shared by every match variant.

    Attributes:
        i: Start index in the password (inclusive).
        j: End index in the password (inclusive).
        token: The exact substring ``password[i:j+1]``.
        guesses: Estimated guesses, set once by the estimator.
        guesses_log10: ``log10(guesses)``, set alongside ``guesses``.
    """

    i: int
    j: int
    token: str
    guesses: Optional[float] = None
    guesses_log10: Optional[float] = None


class DictionaryMatch(BaseMatch):
    """A (possibly reversed or l33t-substituted) dictionary word.

    Attributes:
        matched_word: Lowercase dictionary entry that matched.
        rank: 1-based popularity rank within ``dictionary_name``.
        dictionary_name: Name of the ranked dictionary.
        reversed: Token was found by matching the reversed password.
        l33t: Token was found only after l33t substitution.
        sub: L33t character -> plain character, restricted to the
            substitutions actually present in the token.
        sub_display: Human-readable rendering of ``sub``.
        base_guesses: Rank used as the base guess count.
        uppercase_variations: Capitalisation multiplier.
        l33t_variations: Substitution multiplier.
    """

    pattern: Literal["dictionary"] = "dictionary"
    matched_word: str
    rank: int
    dictionary_name: str
    reversed: bool = False
    l33t: bool = False
    sub: dict[str, str] = Field(default_factory=dict)
    sub_display: str = ""
    base_guesses: Optional[int] = None
    uppercase_variations: Optional[int] = None
    l33t_variations: Optional[int] = None


class SpatialMatch(BaseMatch):
    """A walk across adjacent keys of a keyboard graph.

    Attributes:
        graph: Name of the adjacency graph (qwerty, dvorak, keypad, ...).
        turns: Number of direction changes, the first step included.
        shifted_count: Number of characters typed with shift held.
    """

    pattern: Literal["spatial"] = "spatial"
    graph: str
    turns: int
    shifted_count: int


class RepeatMatch(BaseMatch):
    """A run made of a shorter unit repeated several times.

    Attributes:
        base_token: The repeated unit.
        base_guesses: Guesses for ``base_token`` from a nested search.
        base_matches: Winning sequence of the nested search.
        repeat_count: ``len(token) / len(base_token)``.
    """

    pattern: Literal["repeat"] = "repeat"
    base_token: str
    base_guesses: float
    base_matches: list[AnyMatch] = Field(default_factory=list)
    repeat_count: int


class SequenceMatch(BaseMatch):
    """A run of characters with a constant code-point step.

    Attributes:
        sequence_name: ``lower``, ``upper``, ``digits`` or ``unicode``.
        sequence_space: Size of the alphabet the run was drawn from.
        ascending: Whether the step is positive.
    """

    pattern: Literal["sequence"] = "sequence"
    sequence_name: str
    sequence_space: int
    ascending: bool


class RegexMatch(BaseMatch):
    """A token matching one of the named lexical patterns."""

    pattern: Literal["regex"] = "regex"
    regex_name: str


class DateMatch(BaseMatch):
    """A day/month/year triple, with or without separators.

    Attributes:
        separator: The separator character, ``""`` when none.
        year: Four-digit year.
        month: Month in ``[1, 12]``.
        day: Day in ``[1, 31]`` (no calendar validation).
    """

    pattern: Literal["date"] = "date"
    separator: str = ""
    year: int
    month: int
    day: int


class BruteforceMatch(BaseMatch):
    """Filler covering a span no recognised pattern explains."""

    pattern: Literal["bruteforce"] = "bruteforce"


AnyMatch = Annotated[
    Union[
        DictionaryMatch,
        SpatialMatch,
        RepeatMatch,
        SequenceMatch,
        RegexMatch,
        DateMatch,
        BruteforceMatch,
    ],
    Field(discriminator="pattern"),
]

RepeatMatch.model_rebuild()


# ===================================================================== #
#  Search and Estimate Results
# ===================================================================== #


class MatchSequence(BaseModel):
    """Outcome of the optimal-sequence search.

    Attributes:
        password: The password that was searched.
        guesses: Guesses needed for the whole password.
        guesses_log10: ``log10(guesses)``.
        sequence: Ordered, gap-free, non-overlapping winning matches.
        score: 0 here; filled from ``guesses`` by the time estimator.
    """

    password: str
    guesses: float
    guesses_log10: float
    sequence: list[AnyMatch] = Field(default_factory=list)
    score: int = 0


class AttackTimes(BaseModel):
    """Crack times for each attacker scenario plus the 0-4 score.

    Attributes:
        crack_times_seconds: Scenario name -> seconds.
        crack_times_display: Scenario name -> human-readable duration.
        score: Strength score in ``[0, 4]``.
    """

    crack_times_seconds: dict[str, float] = Field(default_factory=dict)
    crack_times_display: dict[str, str] = Field(default_factory=dict)
    score: int = Field(default=0, ge=0, le=4)


class Feedback(BaseModel):
    """Verbal feedback for a password.

    Attributes:
        warning: Main weakness, ``""`` when there is nothing to flag.
        suggestions: Ordered improvement suggestions.
    """

    warning: str = ""
    suggestions: list[str] = Field(default_factory=list)


class PasswordEstimate(MatchSequence):
    """Complete estimation result returned by the engine.

    Attributes:
        crack_times_seconds: Scenario name -> seconds.
        crack_times_display: Scenario name -> human-readable duration.
        feedback: Warning and suggestions.
        calc_time: Wall-clock time spent estimating, in milliseconds.
    """

    crack_times_seconds: dict[str, float] = Field(default_factory=dict)
    crack_times_display: dict[str, str] = Field(default_factory=dict)
    feedback: Feedback = Field(default_factory=Feedback)
    calc_time: float = 0.0
