"""
Keyspace Estimation Engine
===========================

:class:`KeyspaceEngine` is the facade over the matchers, the
optimal-sequence search, the crack-time model and the feedback rules.
One call to :meth:`KeyspaceEngine.estimate` runs the whole pipeline::

    password -> omnimatch -> search -> score + crack times -> feedback

Dictionaries and keyboard graphs are loaded once per engine. Each
request derives its own matching context carrying that request's
``user_inputs``, so one engine can serve concurrent callers without
their inputs leaking into each other's results.

References:
    - Wheeler, D. L. (2016). zxcvbn: Low-Budget Password Strength
      Estimation. USENIX Security.
    - NIST SP 800-63B (2017). Digital Identity Guidelines, Section 5.1.1.2.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from keyspace.core.models import PasswordEstimate
from keyspace.feedback import get_feedback
from keyspace.matchers.context import MatchingContext
from keyspace.matchers.omnimatch import omnimatch
from keyspace.scoring.search import most_guessable_match_sequence
from keyspace.time_estimates import estimate_attack_times
from shared.config import KeyspaceConfig
from shared.logger import KeyspaceLogger

_USER_INPUT_TYPES = (str, int, float, bool)


def sanitize_user_inputs(user_inputs: Optional[Iterable[Any]]) -> list[str]:
    """Stringify and lowercase scalar inputs; drop everything else.

    >>> sanitize_user_inputs(["Alice", 1987, None, ["x"]])
    ['alice', '1987']
    """
    if not user_inputs:
        return []
    return [str(item).lower() for item in user_inputs if isinstance(item, _USER_INPUT_TYPES)]


class KeyspaceEngine:
    """Estimates password guessability.

    Usage::

        engine = KeyspaceEngine()
        estimate = engine.estimate("Tr0ub4dour&3", user_inputs=["alice"])
        estimate.score, estimate.crack_times_display

    Attributes:
        config: Keyspace configuration.
        context: Matching context shared by every request, without
            ``user_inputs``.
        logger: Engine logger.
    """

    def __init__(
        self,
        config: Optional[KeyspaceConfig] = None,
        logger: Optional[KeyspaceLogger] = None,
    ) -> None:
        self.config = config or KeyspaceConfig()
        settings = self.config.global_settings
        self.logger = logger or KeyspaceLogger(
            "engine",
            log_level=settings.log_level,
            log_file=settings.log_file or None,
            json_logs=settings.log_json,
        )

        estimator = self.config.estimator
        self.context = MatchingContext.load(
            frequency_lists=estimator.frequency_lists or None,
            dictionaries=estimator.dictionaries,
            keyboard_layouts=estimator.keyboard_layouts,
            reference_year=estimator.reference_year,
        )
        self.logger.debug(
            "Loaded matching data",
            dictionaries=sorted(self.context.ranked_dictionaries),
            graphs=sorted(self.context.graphs),
            reference_year=self.context.reference_year,
        )

    def estimate(self, password: str, user_inputs: Optional[Iterable[Any]] = None) -> PasswordEstimate:
        """Run the full estimation pipeline on *password*.

        Args:
            password: Password to estimate.
            user_inputs: Words tied to the user (name, e-mail, birth
                year); scalars are stringified and lowercased, anything
                else is ignored.

        Returns:
            The winning match sequence with its guesses, score, crack
            times, feedback and calculation time in milliseconds.

        Raises:
            TypeError: If *password* is not a string.
        """
        if not isinstance(password, str):
            raise TypeError(f"password must be str, not {type(password).__name__}")

        with self.logger.operation("estimate"), self.logger.timed("estimate") as timer:
            context = self.context.with_user_inputs(sanitize_user_inputs(user_inputs))
            matches = omnimatch(password, context)
            result = most_guessable_match_sequence(
                password,
                matches,
                reference_year=context.reference_year,
            )
            attack_times = estimate_attack_times(result.guesses)
            feedback = get_feedback(attack_times.score, result.sequence)
            self.logger.debug(
                "Estimated password",
                length=len(password),
                match_count=len(matches),
                sequence_length=len(result.sequence),
                score=attack_times.score,
            )

        return PasswordEstimate(
            password=result.password,
            guesses=result.guesses,
            guesses_log10=result.guesses_log10,
            sequence=result.sequence,
            score=attack_times.score,
            crack_times_seconds=attack_times.crack_times_seconds,
            crack_times_display=attack_times.crack_times_display,
            feedback=feedback,
            calc_time=timer.elapsed_ms,
        )
