"""
Date Matcher
=============

Recognises dates written as three integers, with either no separator
(``13091991``, ``1391``) or two identical separators (``13.9.91``,
``1991-09-13``).

A date is any day/month/year triple where:

* the year has two or four digits and sits first or last;
* the month lies in ``[1, 12]`` and the day in ``[1, 31]``;
* zero padding is optional (``01-01-91`` and ``1-1-91``).

No calendar validation is done: February 31st is a date.

Every substring is tried against an anchored pattern, then the integers
are mapped onto day/month/year. Matches contained in another date match
are dropped at the end to reduce noise.

References:
    - Wheeler, D. L. (2016). zxcvbn: Low-Budget Password Strength
      Estimation. USENIX Security, Section 3.
    - Veras, R. et al. (2014). On the Semantic Patterns of Passwords and
      their Security Impact. NDSS.
"""

from __future__ import annotations

import re
from typing import NamedTuple, Optional, Sequence

from keyspace.core.models import DateMatch
from keyspace.matchers.context import get_default_context, sort_matches

DATE_MIN_YEAR = 1000
DATE_MAX_YEAR = 2050

# token length -> (k, l) cut points: token[:k], token[k:l], token[l:]
DATE_SPLITS: dict[int, list[tuple[int, int]]] = {
    4: [(1, 2), (2, 3)],                  # 1 1 91 | 91 1 1
    5: [(1, 3), (2, 3)],                  # 1 11 91 | 11 1 91
    6: [(1, 2), (2, 4), (4, 5)],          # 1 1 1991 | 11 11 91 | 1991 1 1
    7: [(1, 3), (2, 3), (4, 5), (4, 6)],  # 1 11 1991 | 11 1 1991 | 1991 1 11 | 1991 11 1
    8: [(2, 4), (4, 6)],                  # 11 11 1991 | 1991 11 11
}

MAYBE_DATE_NO_SEPARATOR = re.compile(r"[0-9]{4,8}")
MAYBE_DATE_WITH_SEPARATOR = re.compile(r"([0-9]{1,4})([\s/\\_.-])([0-9]{1,2})\2([0-9]{1,4})")


class DayMonth(NamedTuple):
    day: int
    month: int


class DayMonthYear(NamedTuple):
    day: int
    month: int
    year: int


# ===================================================================== #
#  Integer Mapping
# ===================================================================== #


def map_ints_to_dm(ints: Sequence[int]) -> Optional[DayMonth]:
    """Read two integers as day/month, trying both orders."""
    for d, m in (tuple(ints), tuple(reversed(ints))):
        if 1 <= d <= 31 and 1 <= m <= 12:
            return DayMonth(day=d, month=m)
    return None


def two_to_four_digit_year(year: int) -> int:
    """``87 -> 1987``, ``15 -> 2015``; years above 99 pass through."""
    if year > 99:
        return year
    if year > 50:
        return year + 1900
    return year + 2000


def map_ints_to_dmy(ints: Sequence[int]) -> Optional[DayMonthYear]:
    """Interpret a three-integer tuple as a date, or reject it.

    A tuple is rejected when:

    * the middle value is above 31 or not positive (years never sit in
      the middle);
    * any value lies in ``(99, 1000)`` or above :data:`DATE_MAX_YEAR`;
    * two values exceed 31, all three exceed 12, or two are not positive.

    Four-digit years are tried first, last position then first. A
    four-digit year whose remaining pair is not a valid day/month
    rejects the tuple outright. Failing that, the same positions are
    tried as two-digit years.

    Args:
        ints: Exactly three integers in written order.

    Returns:
        The day, month and four-digit year, or ``None``.
    """
    if ints[1] > 31 or ints[1] <= 0:
        return None
    over_12 = 0
    over_31 = 0
    under_1 = 0
    for value in ints:
        if 99 < value < DATE_MIN_YEAR or value > DATE_MAX_YEAR:
            return None
        if value > 31:
            over_31 += 1
        if value > 12:
            over_12 += 1
        if value <= 0:
            under_1 += 1
    if over_31 >= 2 or over_12 == 3 or under_1 >= 2:
        return None

    possible_year_splits = [
        (ints[2], ints[0:2]),  # day/month then year
        (ints[0], ints[1:3]),  # year then day/month
    ]
    for year, rest in possible_year_splits:
        if DATE_MIN_YEAR <= year <= DATE_MAX_YEAR:
            dm = map_ints_to_dm(rest)
            if dm is None:
                return None
            return DayMonthYear(day=dm.day, month=dm.month, year=year)

    for year, rest in possible_year_splits:
        dm = map_ints_to_dm(rest)
        if dm is not None:
            return DayMonthYear(day=dm.day, month=dm.month, year=two_to_four_digit_year(year))
    return None


# ===================================================================== #
#  Matcher
# ===================================================================== #


def date_match(password: str, reference_year: Optional[int] = None) -> list[DateMatch]:
    """Find date substrings of *password*.

    For separator-free substrings every split in :data:`DATE_SPLITS` is
    tried and the candidate whose year lies closest to *reference_year*
    wins (``111504`` reads as 11-15-2004 rather than 1-1-1504; the first
    candidate wins ties).

    Args:
        password: Password to scan.
        reference_year: Year used to rank candidates; defaults to the
            process-wide context's.

    Returns:
        Date matches not contained in any other date match, sorted.
    """
    if reference_year is None:
        reference_year = get_default_context().reference_year

    matches: list[DateMatch] = []
    length = len(password)

    # 4 ('1191') to 8 ('11111991') characters without separators
    for i in range(length - 3):
        for j in range(i + 3, i + 8):
            if j >= length:
                break
            token = password[i : j + 1]
            if not MAYBE_DATE_NO_SEPARATOR.fullmatch(token):
                continue
            candidates: list[DayMonthYear] = []
            for k, l in DATE_SPLITS[len(token)]:
                dmy = map_ints_to_dmy((int(token[:k]), int(token[k:l]), int(token[l:])))
                if dmy is not None:
                    candidates.append(dmy)
            if not candidates:
                continue
            best = min(candidates, key=lambda c: abs(c.year - reference_year))
            matches.append(DateMatch(
                i=i,
                j=j,
                token=token,
                separator="",
                year=best.year,
                month=best.month,
                day=best.day,
            ))

    # 6 ('1/1/91') to 10 ('11/11/1991') characters with separators
    for i in range(length):
        for j in range(i + 5, i + 10):
            if j >= length:
                break
            token = password[i : j + 1]
            rx_match = MAYBE_DATE_WITH_SEPARATOR.fullmatch(token)
            if rx_match is None:
                continue
            dmy = map_ints_to_dmy((
                int(rx_match.group(1)),
                int(rx_match.group(3)),
                int(rx_match.group(4)),
            ))
            if dmy is None:
                continue
            matches.append(DateMatch(
                i=i,
                j=j,
                token=token,
                separator=rx_match.group(2),
                year=dmy.year,
                month=dmy.month,
                day=dmy.day,
            ))

    # '2015_06_04' also yields 15_06_04, 5_06_04 and even 2015; keep the widest
    def is_submatch(match: DateMatch) -> bool:
        return any(
            other is not match and other.i <= match.i and other.j >= match.j
            for other in matches
        )

    return sort_matches([match for match in matches if not is_submatch(match)])
