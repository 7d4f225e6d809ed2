"""
Keyspace Mathematical Utilities
================================

Small combinatorics and logarithm helpers used by the guess estimators
and the optimal-sequence search.

Guess counts are carried as floats. Anything that would overflow to
infinity is clamped to :data:`MAX_GUESSES` so that guess values stay
totally ordered and comparable inside the dynamic program.

References:
    [1] Dominus, M. J. (2007). How to calculate binomial coefficients.
        https://blog.plover.com/math/choose.html
    [2] Knuth, D. E. (1997). The Art of Computer Programming, Vol. 1:
        Fundamental Algorithms (3rd ed.), Section 1.2.6.
"""

from __future__ import annotations

import math
import sys


# ---------------------------------------------------------------------------
#  Saturation bound for guess counts
# ---------------------------------------------------------------------------
MAX_GUESSES: float = sys.float_info.max


def nCk(n: int, k: int) -> int:
    """Binomial coefficient C(n, k).

    Returns 0 when *k* exceeds *n*, matching the combinatorial
    definition rather than raising.

    Args:
        n: Size of the set.
        k: Size of the chosen subset.

    Returns:
        Number of k-element subsets of an n-element set.
    """
    if k > n:
        return 0
    if k == 0:
        return 1
    return math.comb(n, k)


def factorial(n: int) -> int:
    """n! for small non-negative *n*; values below 2 give 1."""
    if n < 2:
        return 1
    return math.factorial(n)


def log10(n: float) -> float:
    """Base-10 logarithm."""
    return math.log10(n)


def log2(n: float) -> float:
    """Base-2 logarithm."""
    return math.log2(n)


def saturate(value: float) -> float:
    """Clamp *value* to the finite range ``[0, MAX_GUESSES]``.

    ``inf`` and ``nan`` are both mapped to :data:`MAX_GUESSES`.
    """
    if math.isnan(value) or value > MAX_GUESSES:
        return MAX_GUESSES
    return float(value)


def safe_pow(base: float, exponent: int) -> float:
    """``base ** exponent`` as a float, saturated instead of overflowing.

    Float exponentiation raises :class:`OverflowError` rather than
    returning infinity, so the overflow is caught here once for every
    caller.
    """
    try:
        return saturate(float(base) ** exponent)
    except OverflowError:
        return MAX_GUESSES


def bounded_product(*factors: float) -> float:
    """Multiply *factors* and saturate the result.

    Integer factors may be arbitrarily large (binomial sums for long
    tokens) and fail to convert to float at all; that case saturates
    the same way an infinite product does.
    """
    result = 1.0
    for factor in factors:
        try:
            result *= float(factor)
        except OverflowError:
            return MAX_GUESSES
    return saturate(result)
