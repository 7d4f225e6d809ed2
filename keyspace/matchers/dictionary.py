"""
Dictionary Matchers
====================

Finds dictionary words inside a password, three ways:

1. :func:`dictionary_match` -- every substring, case-insensitively,
   looked up in every ranked dictionary.
2. :func:`reverse_dictionary_match` -- the same against the reversed
   password (``drowssap``), mapped back to forward indices.
3. :func:`l33t_match` -- the same after undoing common character
   substitutions (``p4ssw0rd``).

References:
    - Wheeler, D. L. (2016). zxcvbn: Low-Budget Password Strength
      Estimation. USENIX Security, Section 3.
    - Weir, M. et al. (2009). Password Cracking Using Probabilistic
      Context-Free Grammars. IEEE S&P.
"""

from __future__ import annotations

from typing import Optional

from keyspace.core.models import DictionaryMatch
from keyspace.data.frequency import RankedDictionary
from keyspace.matchers.context import get_default_context, sort_matches


def translate(string: str, chr_map: dict[str, str]) -> str:
    """Replace every character found in *chr_map*, keep the rest."""
    return "".join(chr_map.get(char, char) for char in string)


# ===================================================================== #
#  Plain and Reversed Dictionary Matching
# ===================================================================== #


def dictionary_match(
    password: str,
    ranked_dictionaries: Optional[dict[str, RankedDictionary]] = None,
) -> list[DictionaryMatch]:
    """Match every substring of *password* against every dictionary.

    Lookups are on the lowercased substring; the token keeps the
    password's original case.

    Args:
        password: Password to scan.
        ranked_dictionaries: Dictionaries to use; defaults to the
            process-wide context's dictionaries.

    Returns:
        Dictionary matches sorted by ``(i, j)``.
    """
    if ranked_dictionaries is None:
        ranked_dictionaries = get_default_context().ranked_dictionaries

    matches: list[DictionaryMatch] = []
    length = len(password)
    password_lower = password.lower()
    for dictionary_name, ranked_dict in ranked_dictionaries.items():
        for i in range(length):
            for j in range(i, length):
                word = password_lower[i : j + 1]
                if word in ranked_dict:
                    matches.append(DictionaryMatch(
                        i=i,
                        j=j,
                        token=password[i : j + 1],
                        matched_word=word,
                        rank=ranked_dict[word],
                        dictionary_name=dictionary_name,
                        reversed=False,
                        l33t=False,
                    ))
    return sort_matches(matches)


def reverse_dictionary_match(
    password: str,
    ranked_dictionaries: Optional[dict[str, RankedDictionary]] = None,
) -> list[DictionaryMatch]:
    """Match dictionary words spelled backwards.

    Runs :func:`dictionary_match` on the reversed password, then maps
    each span back (``i' = n-1-j``, ``j' = n-1-i``) and restores the
    token to its forward orientation.
    """
    length = len(password)
    reversed_password = password[::-1]
    matches = [
        match.model_copy(update={
            "i": length - 1 - match.j,
            "j": length - 1 - match.i,
            "token": match.token[::-1],
            "reversed": True,
        })
        for match in dictionary_match(reversed_password, ranked_dictionaries)
    ]
    return sort_matches(matches)


# ===================================================================== #
#  L33t Substitution Matching
# ===================================================================== #


def relevant_l33t_subtable(password: str, table: dict[str, list[str]]) -> dict[str, list[str]]:
    """Prune *table* to substitutes that actually occur in *password*."""
    password_chars = set(password)
    subtable: dict[str, list[str]] = {}
    for letter, subs in table.items():
        relevant_subs = [sub for sub in subs if sub in password_chars]
        if relevant_subs:
            subtable[letter] = relevant_subs
    return subtable


def _dedup(subs: list[list[tuple[str, str]]]) -> list[list[tuple[str, str]]]:
    deduped: list[list[tuple[str, str]]] = []
    members: set[str] = set()
    for sub in subs:
        label = "-".join(f"{l33t_chr},{letter}" for l33t_chr, letter in sorted(sub))
        if label not in members:
            members.add(label)
            deduped.append(sub)
    return deduped


def enumerate_l33t_subs(table: dict[str, list[str]]) -> list[dict[str, str]]:
    """Enumerate consistent substitution assignments for *table*.

    Letters are visited in table order. Each assignment maps a l33t
    character to exactly one letter: when a l33t character is already
    taken (``1`` as ``i``) and a later letter also claims it (``1`` as
    ``l``), both the existing assignment and a copy with the claim
    swapped are kept. Subsets of a discovered assignment are not tried
    on their own.

    Args:
        table: Output of :func:`relevant_l33t_subtable`.

    Returns:
        Assignments as ``{l33t_chr: letter}``; ``[{}]`` for an empty table.
    """
    subs: list[list[tuple[str, str]]] = [[]]
    for letter, l33t_chrs in table.items():
        next_subs: list[list[tuple[str, str]]] = []
        for l33t_chr in l33t_chrs:
            for sub in subs:
                dup_index = next(
                    (idx for idx, (sub_chr, _) in enumerate(sub) if sub_chr == l33t_chr),
                    -1,
                )
                if dup_index == -1:
                    next_subs.append(sub + [(l33t_chr, letter)])
                else:
                    alternative = sub[:dup_index] + sub[dup_index + 1 :] + [(l33t_chr, letter)]
                    next_subs.append(sub)
                    next_subs.append(alternative)
        subs = _dedup(next_subs)
    return [dict(sub) for sub in subs]


def l33t_match(
    password: str,
    ranked_dictionaries: Optional[dict[str, RankedDictionary]] = None,
    l33t_table: Optional[dict[str, list[str]]] = None,
) -> list[DictionaryMatch]:
    """Match dictionary words hidden behind l33t substitutions.

    Only matches where at least one substitution really happened are
    kept, each recording the subset of its assignment exercised inside
    the token. Single-character tokens are dropped: ``4`` as ``a`` or
    ``1`` as ``i`` would otherwise flood the results with low-rank words.
    """
    if ranked_dictionaries is None:
        ranked_dictionaries = get_default_context().ranked_dictionaries
    if l33t_table is None:
        l33t_table = get_default_context().l33t_table

    matches: list[DictionaryMatch] = []
    for sub in enumerate_l33t_subs(relevant_l33t_subtable(password, l33t_table)):
        if not sub:
            break  # no relevant substitutions in this password
        subbed_password = translate(password, sub)
        for match in dictionary_match(subbed_password, ranked_dictionaries):
            token = password[match.i : match.j + 1]
            if token.lower() == match.matched_word:
                continue
            match_sub = {
                subbed_chr: letter
                for subbed_chr, letter in sub.items()
                if subbed_chr in token
            }
            match.l33t = True
            match.token = token
            match.sub = match_sub
            match.sub_display = ", ".join(f"{k} -> {v}" for k, v in match_sub.items())
            matches.append(match)

    return sort_matches([match for match in matches if len(match.token) > 1])
