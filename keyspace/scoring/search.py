"""
Optimal Match Sequence Search
==============================

Given the overlapping candidate matches for a password, selects the
non-overlapping, gap-free sequence that minimises

    g = l! * prod(m.guesses for m in sequence) + D ** (l - 1)

where ``l`` is the sequence length and ``D`` =
:data:`MIN_GUESSES_BEFORE_GROWING_SEQUENCE`.

* the product counts the combinations an attacker tries for this
  pattern shape;
* ``l!`` counts the orderings of ``l`` patterns;
* ``D ** (l - 1)`` approximates the shorter sequences an attacker would
  exhaust first.

Uncovered spans are filled with bruteforce matches. The dynamic program
runs in ``O(l_max * (n + m))`` for ``n`` characters and ``m`` matches;
``l_max`` rarely exceeds 5 in practice.

References:
    - Wheeler, D. L. (2016). zxcvbn: Low-Budget Password Strength
      Estimation. USENIX Security, Section 5.
"""

from __future__ import annotations

from typing import Optional, Sequence

from keyspace.core.models import AnyMatch, BruteforceMatch, MatchSequence
from keyspace.scoring.guesses import REFERENCE_YEAR, estimate_guesses
from shared.math_utils import bounded_product, factorial, log10, safe_pow, saturate

MIN_GUESSES_BEFORE_GROWING_SEQUENCE = 10000


class _Optimal:
    """Per-prefix state of the dynamic program.

    For every end index ``k`` and sequence length ``l``:

    * ``m[k][l]`` -- last match of the best length-``l`` sequence covering
      ``password[:k+1]``;
    * ``pi[k][l]`` -- product of guesses along that sequence;
    * ``g[k][l]`` -- the minimisation metric for that sequence.

    A length is absent when a shorter sequence over the same prefix is at
    least as good.
    """

    __slots__ = ("m", "pi", "g")

    def __init__(self, n: int) -> None:
        self.m: list[dict[int, AnyMatch]] = [{} for _ in range(n)]
        self.pi: list[dict[int, float]] = [{} for _ in range(n)]
        self.g: list[dict[int, float]] = [{} for _ in range(n)]


def most_guessable_match_sequence(
    password: str,
    matches: Sequence[AnyMatch],
    exclude_additive: bool = False,
    reference_year: int = REFERENCE_YEAR,
) -> MatchSequence:
    """Find the minimum-guess decomposition of *password*.

    Args:
        password: The password being scored.
        matches: Candidate matches, possibly overlapping; guesses are
            estimated (and cached on each match) as needed.
        exclude_additive: Drop the ``D ** (l - 1)`` term. Used by tests
            to check the product and factorial terms in isolation.
        reference_year: Forwarded to the guess estimator.

    Returns:
        A :class:`MatchSequence` whose ``sequence`` partitions the
        password exactly. An empty password yields 1 guess and an empty
        sequence.
    """
    n = len(password)
    optimal = _Optimal(n)

    # partition matches by ending index, each bucket sorted by i
    matches_by_j: list[list[AnyMatch]] = [[] for _ in range(n)]
    for match in matches:
        matches_by_j[match.j].append(match)
    for bucket in matches_by_j:
        bucket.sort(key=lambda m: m.i)

    def make_bruteforce_match(i: int, j: int) -> BruteforceMatch:
        return BruteforceMatch(i=i, j=j, token=password[i : j + 1])

    def update(match: AnyMatch, length: int) -> None:
        k = match.j
        pi = estimate_guesses(match, password, reference_year)
        if length > 1:
            pi = bounded_product(pi, optimal.pi[match.i - 1][length - 1])
        g = bounded_product(factorial(length), pi)
        if not exclude_additive:
            g = saturate(g + safe_pow(MIN_GUESSES_BEFORE_GROWING_SEQUENCE, length - 1))

        # a competitor with l or fewer matches that fares at least as well wins
        for competing_l, competing_g in optimal.g[k].items():
            if competing_l > length:
                continue
            if competing_g <= g:
                return

        optimal.g[k][length] = g
        optimal.m[k][length] = match
        optimal.pi[k][length] = pi

    def bruteforce_update(k: int) -> None:
        update(make_bruteforce_match(0, k), 1)
        for i in range(1, k + 1):
            match = make_bruteforce_match(i, k)
            for length in sorted(optimal.m[i - 1]):
                # two adjacent bruteforce matches are never optimal
                if isinstance(optimal.m[i - 1][length], BruteforceMatch):
                    continue
                update(match, length + 1)

    def unwind() -> list[AnyMatch]:
        sequence: list[AnyMatch] = []
        k = n - 1
        best_l = -1
        best_g: Optional[float] = None
        for candidate_l in sorted(optimal.g[k]):
            candidate_g = optimal.g[k][candidate_l]
            if best_g is None or candidate_g < best_g:
                best_l = candidate_l
                best_g = candidate_g

        length = best_l
        while k >= 0:
            match = optimal.m[k][length]
            sequence.insert(0, match)
            k = match.i - 1
            length -= 1
        return sequence

    for k in range(n):
        for match in matches_by_j[k]:
            if match.i > 0:
                for length in sorted(optimal.m[match.i - 1]):
                    update(match, length + 1)
            else:
                update(match, 1)
        bruteforce_update(k)

    if n == 0:
        return MatchSequence(password=password, guesses=1.0, guesses_log10=0.0, sequence=[])

    optimal_sequence = unwind()
    guesses = saturate(optimal.g[n - 1][len(optimal_sequence)])
    return MatchSequence(
        password=password,
        guesses=guesses,
        guesses_log10=log10(guesses),
        sequence=optimal_sequence,
        score=0,
    )
