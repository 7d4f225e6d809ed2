"""
Crack Time Estimates
=====================

Converts a guess count into attack durations for four attacker
scenarios, human-readable renderings of those durations, and the 0-4
strength score.

Scenarios (guesses per second):

    online_throttling_100_per_hour          100 / 3600
    online_no_throttling_10_per_second      10
    offline_slow_hashing_1e4_per_second     1e4   (bcrypt, scrypt, PBKDF2)
    offline_fast_hashing_1e10_per_second    1e10  (unsalted fast hash, GPUs)

References:
    - Wheeler, D. L. (2016). zxcvbn: Low-Budget Password Strength
      Estimation. USENIX Security, Section 6.
    - NIST SP 800-63B (2017). Digital Identity Guidelines, Section 5.2.2
      (rate limiting).
"""

from __future__ import annotations

import math

from keyspace.core.models import AttackTimes

GUESSES_PER_SECOND: dict[str, float] = {
    "online_throttling_100_per_hour": 100 / 3600,
    "online_no_throttling_10_per_second": 10,
    "offline_slow_hashing_1e4_per_second": 1e4,
    "offline_fast_hashing_1e10_per_second": 1e10,
}

# (upper guess bound, score); the delta keeps values that sit right at
# a boundary after floating point arithmetic in the lower bucket
SCORE_DELTA = 5
SCORE_THRESHOLDS: list[tuple[float, int]] = [
    (1e3 + SCORE_DELTA, 0),   # too guessable
    (1e6 + SCORE_DELTA, 1),   # very guessable: throttled online only
    (1e8 + SCORE_DELTA, 2),   # somewhat guessable: unthrottled online
    (1e10 + SCORE_DELTA, 3),  # safely unguessable: offline slow hash
]

MINUTE = 60
HOUR = MINUTE * 60
DAY = HOUR * 24
MONTH = DAY * 31
YEAR = MONTH * 12
CENTURY = YEAR * 100


def estimate_attack_times(guesses: float) -> AttackTimes:
    """Crack seconds and display strings per scenario, plus the score."""
    crack_times_seconds = {
        scenario: guesses / rate for scenario, rate in GUESSES_PER_SECOND.items()
    }
    crack_times_display = {
        scenario: display_time(seconds) for scenario, seconds in crack_times_seconds.items()
    }
    return AttackTimes(
        crack_times_seconds=crack_times_seconds,
        crack_times_display=crack_times_display,
        score=guesses_to_score(guesses),
    )


def guesses_to_score(guesses: float) -> int:
    """Map a guess count onto the 0 (weakest) to 4 (strongest) scale."""
    for bound, score in SCORE_THRESHOLDS:
        if guesses < bound:
            return score
    return 4


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def display_time(seconds: float) -> str:
    """Render *seconds* as ``"3 hours"``, ``"1 month"``, ``"centuries"``.

    A month counts as 31 days and a year as 12 such months.
    """
    if seconds < 1:
        return "less than a second"
    if seconds >= CENTURY:
        return "centuries"

    for unit_seconds, unit_name, limit in (
        (1, "second", MINUTE),
        (MINUTE, "minute", HOUR),
        (HOUR, "hour", DAY),
        (DAY, "day", MONTH),
        (MONTH, "month", YEAR),
        (YEAR, "year", CENTURY),
    ):
        if seconds < limit:
            base = _round_half_up(seconds / unit_seconds)
            return f"{base} {unit_name}" if base == 1 else f"{base} {unit_name}s"
    return "centuries"
