"""
Keyspace Console
=================

Thin wrapper around :class:`rich.console.Console` giving every Keyspace
surface the same theme: section rules, status lines and tables.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from typing import Any, Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

_KEYSPACE_THEME = Theme(
    {
        "ks.title": "bold bright_cyan",
        "ks.section": "bold bright_magenta",
        "ks.success": "bold green",
        "ks.warning": "bold yellow",
        "ks.error": "bold red",
        "ks.info": "bold bright_blue",
        "ks.dim": "dim white",
        "ks.score.0": "bold white on red",
        "ks.score.1": "bold red",
        "ks.score.2": "bold yellow",
        "ks.score.3": "bold green",
        "ks.score.4": "bold bright_green",
    }
)


class KeyspaceConsole:
    """Themed console used by the CLI and the result renderer.

    Usage::

        con = KeyspaceConsole()
        con.section("Match Sequence")
        con.warning("This is a top-10 common password")
    """

    def __init__(self, *, quiet: bool = False, record: bool = False, width: int | None = None) -> None:
        """Create the console.

        Args:
            quiet: Suppress all output.
            record: Keep output for :meth:`export_text`.
            width: Fixed width; ``None`` detects the terminal.
        """
        self._console = Console(
            theme=_KEYSPACE_THEME,
            quiet=quiet,
            record=record,
            highlight=False,
            width=width,
        )

    @property
    def rich(self) -> Console:
        """The underlying Rich console."""
        return self._console

    def title(self, text: str) -> None:
        self._console.print(f"[ks.title]{text}[/ks.title]")

    def section(self, title: str) -> None:
        """Print a horizontal rule labelled *title*."""
        self._console.rule(f"  {title}  ", style="ks.section", characters="─")

    # ------------------------------------------------------------------ #
    #  Status lines
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        self._console.print(f"[ks.success][✔][/ks.success] {escape(message)}")

    def warning(self, message: str) -> None:
        self._console.print(f"[ks.warning][⚠][/ks.warning] {escape(message)}")

    def error(self, message: str) -> None:
        self._console.print(f"[ks.error][✘] ERROR:[/ks.error] {escape(message)}")

    def info(self, message: str) -> None:
        self._console.print(f"[ks.info][ℹ][/ks.info] {escape(message)}")

    # ------------------------------------------------------------------ #
    #  Tables
    # ------------------------------------------------------------------ #

    def table(
        self,
        title: str,
        columns: Sequence[str],
        rows: Sequence[Sequence[Any]],
        *,
        caption: str | None = None,
        styles: Sequence[str] | None = None,
    ) -> None:
        """Render *rows* under *columns*; every cell is stringified.

        Args:
            title: Table title.
            columns: Header labels.
            rows: Row tuples.
            caption: Optional footer.
            styles: Optional per-column Rich styles.
        """
        tbl = Table(
            title=title,
            caption=caption,
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            padding=(0, 1),
        )
        for idx, column in enumerate(columns):
            style = styles[idx] if styles and idx < len(styles) else ""
            tbl.add_column(column, style=style)
        for row in rows:
            tbl.add_row(*(str(cell) for cell in row))
        self._console.print(tbl)

    def print(self, *args: Any, **kwargs: Any) -> None:
        """Proxy to :meth:`rich.console.Console.print`."""
        self._console.print(*args, **kwargs)

    def export_text(self) -> str:
        """Recorded output as plain text (requires ``record=True``)."""
        return self._console.export_text()
