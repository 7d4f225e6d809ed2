"""
Keyspace Console Output
========================

Rich rendering of a :class:`~keyspace.core.models.PasswordEstimate`:
a score meter, the winning match sequence, crack times per attack
scenario and the feedback text.

The password itself is never printed; tokens of the match sequence are
shown because they are what the user needs to change.

References:
    - Rich Library Documentation. https://rich.readthedocs.io/
"""

from __future__ import annotations

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from keyspace.core.models import AnyMatch, PasswordEstimate
from shared.console import KeyspaceConsole

_SCORE_LABELS: dict[int, str] = {
    0: "too guessable",
    1: "very guessable",
    2: "somewhat guessable",
    3: "safely unguessable",
    4: "very unguessable",
}

_SCENARIO_LABELS: dict[str, str] = {
    "online_throttling_100_per_hour": "Online, throttled (100/hour)",
    "online_no_throttling_10_per_second": "Online, unthrottled (10/s)",
    "offline_slow_hashing_1e4_per_second": "Offline, slow hash (1e4/s)",
    "offline_fast_hashing_1e10_per_second": "Offline, fast hash (1e10/s)",
}


def describe_match(match: AnyMatch) -> str:
    """One-line description of the pattern details of *match*."""
    if match.pattern == "dictionary":
        details = f"{match.dictionary_name} #{match.rank} '{match.matched_word}'"
        if match.reversed:
            details += ", reversed"
        if match.l33t:
            details += f", l33t ({match.sub_display})"
        return details
    if match.pattern == "spatial":
        return f"{match.graph}, {match.turns} turn(s), {match.shifted_count} shifted"
    if match.pattern == "repeat":
        return f"'{match.base_token}' x{match.repeat_count}"
    if match.pattern == "sequence":
        direction = "ascending" if match.ascending else "descending"
        return f"{match.sequence_name}, {direction}"
    if match.pattern == "regex":
        return match.regex_name
    if match.pattern == "date":
        separator = f", separator '{match.separator}'" if match.separator else ""
        return f"{match.year:04d}-{match.month:02d}-{match.day:02d}{separator}"
    return ""


class KeyspaceConsoleOutput:
    """Renders estimation results to a :class:`KeyspaceConsole`."""

    def __init__(self, console: KeyspaceConsole) -> None:
        self.console = console
        self._rich = console.rich

    def display_estimate(self, estimate: PasswordEstimate) -> None:
        """Print the full report for *estimate*."""
        self.display_meter(estimate)
        self.display_sequence(estimate)
        self.display_crack_times(estimate)
        self.display_feedback(estimate)

    def display_meter(self, estimate: PasswordEstimate) -> None:
        """Five-segment score meter with guesses and timing."""
        style = f"ks.score.{estimate.score}"
        meter = Text()
        meter.append("Score: ", style="bold")
        meter.append(f"{estimate.score}/4  ")
        meter.append("[", style="dim")
        for segment in range(5):
            if segment <= estimate.score:
                meter.append("█████", style=style)
            else:
                meter.append("░░░░░", style="dim")
        meter.append("]  ", style="dim")
        meter.append(_SCORE_LABELS[estimate.score].upper(), style=style)
        meter.append(
            f"\nGuesses: {estimate.guesses:.3g} (log10 {estimate.guesses_log10:.2f})"
            f"   Length: {len(estimate.password)}"
            f"   Computed in {estimate.calc_time:.1f} ms",
            style="ks.dim",
        )
        self._rich.print(Panel(meter, title="Guessability", border_style="cyan"))

    def display_sequence(self, estimate: PasswordEstimate) -> None:
        if not estimate.sequence:
            return
        tbl = Table(
            title="Match Sequence",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
        )
        tbl.add_column("Span", justify="right")
        tbl.add_column("Token", style="bold")
        tbl.add_column("Pattern")
        tbl.add_column("Details")
        tbl.add_column("Guesses", justify="right")
        for match in estimate.sequence:
            tbl.add_row(
                f"{match.i}-{match.j}",
                Text(match.token),
                match.pattern,
                Text(describe_match(match)),
                f"{match.guesses:.3g}" if match.guesses is not None else "-",
            )
        self._rich.print(tbl)

    def display_crack_times(self, estimate: PasswordEstimate) -> None:
        rows = [
            (
                _SCENARIO_LABELS.get(scenario, scenario),
                f"{estimate.crack_times_seconds[scenario]:.3g} s",
                display,
            )
            for scenario, display in estimate.crack_times_display.items()
        ]
        self.console.table(
            "Crack Time Estimates",
            ["Attack Scenario", "Seconds", "Estimated Time"],
            rows,
            styles=["bold", "", ""],
        )

    def display_feedback(self, estimate: PasswordEstimate) -> None:
        feedback = estimate.feedback
        if not feedback.warning and not feedback.suggestions:
            self.console.success("No obvious weaknesses found")
            return
        if feedback.warning:
            self.console.warning(feedback.warning)
        for suggestion in feedback.suggestions:
            self.console.info(suggestion)
