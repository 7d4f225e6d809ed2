"""
Sequence Matcher
=================

Finds runs whose consecutive code points differ by a constant step of
at most :data:`MAX_DELTA` (``abcdef``, ``9753``, ``ZYX``). Working on code
points rather than a fixed alphabet also catches runs in other scripts,
such as Greek or Cyrillic letters.

For ``abcdb975zy`` the deltas are ``1 1 1 -2 -41 -2 -2 69 -1`` and the
runs found are ``abcd``, ``975`` and ``zy``.
"""

from __future__ import annotations

import re

from keyspace.core.models import SequenceMatch

MAX_DELTA = 5

_SEQUENCE_CLASSES: list[tuple[re.Pattern[str], str, int]] = [
    (re.compile(r"[a-z]+"), "lower", 26),
    (re.compile(r"[A-Z]+"), "upper", 26),
    (re.compile(r"[0-9]+"), "digits", 10),
]


def _classify(token: str) -> tuple[str, int]:
    for pattern, name, space in _SEQUENCE_CLASSES:
        if pattern.fullmatch(token):
            return name, space
    # roman alphabet size as a conservative default
    return "unicode", 26


def sequence_match(password: str) -> list[SequenceMatch]:
    """Find constant-step runs in *password*.

    A run is reported when it spans three or more characters, or two
    characters one code point apart, and its step is non-zero.

    Returns:
        Sequence matches in left-to-right order.
    """
    if len(password) == 1:
        return []

    result: list[SequenceMatch] = []

    def update(i: int, j: int, delta: int) -> None:
        if j - i > 1 or abs(delta) == 1:
            if 0 < abs(delta) <= MAX_DELTA:
                token = password[i : j + 1]
                sequence_name, sequence_space = _classify(token)
                result.append(SequenceMatch(
                    i=i,
                    j=j,
                    token=token,
                    sequence_name=sequence_name,
                    sequence_space=sequence_space,
                    ascending=delta > 0,
                ))

    i = 0
    last_delta = None
    for k in range(1, len(password)):
        delta = ord(password[k]) - ord(password[k - 1])
        if last_delta is None:
            last_delta = delta
        if delta == last_delta:
            continue
        j = k - 1
        update(i, j, last_delta)
        i = j
        last_delta = delta
    update(i, len(password) - 1, last_delta or 0)
    return result
