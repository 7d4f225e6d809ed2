"""
Keyspace Structured Logger
===========================

Provides :class:`KeyspaceLogger`, a small facade over :mod:`logging`
that writes Rich-formatted records to stderr and, optionally, plain or
JSON-lines records to a rotating file.

Every record carries the emitting *component* (``engine``, ``cli``) and,
inside :meth:`KeyspaceLogger.operation`, the current *operation* name.
Keyword arguments passed to the log methods travel with the record as
structured context.

Passwords are never handed to the logger; callers log lengths and
counts only.

References:
    - Python logging HOWTO. https://docs.python.org/3/howto/logging.html
    - Rich library. https://github.com/Textualize/rich
"""

from __future__ import annotations

import json
import logging
import time
from contextlib import contextmanager
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Iterator

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

LOGGER_ROOT = "keyspace"

_LOG_THEME = Theme(
    {
        "log.level.debug": "dim cyan",
        "log.level.info": "bold green",
        "log.level.warning": "bold yellow",
        "log.level.error": "bold red",
        "log.level.critical": "bold white on red",
    }
)

_TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_STANDARD_KWARGS = frozenset({"exc_info", "stack_info", "stacklevel"})


# ===================================================================== #
#  Formatters and Handlers
# ===================================================================== #


class _JSONLinesFormatter(logging.Formatter):
    """One JSON object per record.

    Keys: ``timestamp``, ``level``, ``logger``, ``message``, then
    ``component``, ``operation`` and ``context`` when set, and
    ``exc_info`` for records logged with a traceback.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for attr in ("component", "operation", "context"):
            value = getattr(record, attr, None)
            if value:
                entry[attr] = value
        if record.exc_info and record.exc_info[1] is not None:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def _console_handler(level: int) -> RichHandler:
    handler = RichHandler(
        console=Console(theme=_LOG_THEME, stderr=True),
        show_path=False,
        show_time=True,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setLevel(level)
    return handler


def _file_handler(
    log_file: str | Path,
    level: int,
    json_logs: bool,
    max_bytes: int,
    backup_count: int,
) -> RotatingFileHandler:
    path = Path(log_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        filename=str(path),
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    handler.setLevel(level)
    if json_logs:
        handler.setFormatter(_JSONLinesFormatter())
    else:
        handler.setFormatter(logging.Formatter(fmt=_TEXT_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z"))
    return handler


# ===================================================================== #
#  KeyspaceLogger
# ===================================================================== #


class KeyspaceLogger:
    """Component-scoped logger for Keyspace.

    Usage::

        log = KeyspaceLogger("engine", log_level="DEBUG")
        with log.operation("estimate"):
            log.debug("Matched candidates", match_count=42)
        with log.timed("search") as timer:
            run_search()
        timer.elapsed_ms

    Args:
        component: Name appended to ``keyspace.`` to form the stdlib
            logger name.
        log_level: Minimum severity name.
        log_file: Rotating log file; ``None`` disables file output.
        json_logs: Write JSON lines instead of plain text to the file.
        max_bytes: File size that triggers rotation.
        backup_count: Rotated files to keep.
        console_output: Attach a Rich handler writing to stderr.
    """

    def __init__(
        self,
        component: str,
        *,
        log_level: str = "WARNING",
        log_file: str | Path | None = None,
        json_logs: bool = False,
        max_bytes: int = 5_242_880,
        backup_count: int = 3,
        console_output: bool = True,
    ) -> None:
        self._component = component
        self._operation: str | None = None

        level = getattr(logging, log_level.upper(), logging.WARNING)
        self._logger = logging.getLogger(f"{LOGGER_ROOT}.{component}")
        self._logger.setLevel(level)
        self._logger.propagate = False
        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)
            handler.close()

        if console_output:
            self._logger.addHandler(_console_handler(level))
        if log_file:
            self._logger.addHandler(
                _file_handler(log_file, level, json_logs, max_bytes, backup_count)
            )

    # ------------------------------------------------------------------ #
    #  Scopes
    # ------------------------------------------------------------------ #

    @contextmanager
    def operation(self, name: str) -> Iterator[KeyspaceLogger]:
        """Tag every record emitted inside the block with ``operation=name``."""
        previous = self._operation
        self._operation = name
        try:
            yield self
        finally:
            self._operation = previous

    class _Timer:
        """Measures a block and logs its duration at DEBUG."""

        def __init__(self, owner: KeyspaceLogger, label: str) -> None:
            self._owner = owner
            self._label = label
            self._start = 0.0
            self._end: float | None = None

        def __enter__(self) -> KeyspaceLogger._Timer:
            self._start = time.perf_counter()
            return self

        def __exit__(self, *exc: Any) -> None:
            self._end = time.perf_counter()
            self._owner.debug("%s took %.3f ms", self._label, self.elapsed_ms)

        @property
        def elapsed_ms(self) -> float:
            """Milliseconds spent in the block (so far, while still inside)."""
            end = self._end if self._end is not None else time.perf_counter()
            return (end - self._start) * 1000.0

    def timed(self, label: str) -> _Timer:
        """Context manager timing a block; see :attr:`_Timer.elapsed_ms`."""
        return self._Timer(self, label)

    # ------------------------------------------------------------------ #
    #  Log methods
    # ------------------------------------------------------------------ #

    def _log(self, level: int, msg: str, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        if not self._logger.isEnabledFor(level):
            return
        passthrough = {key: kwargs.pop(key) for key in list(kwargs) if key in _STANDARD_KWARGS}
        extra = {
            "component": self._component,
            "operation": self._operation,
            "context": kwargs or None,
        }
        self._logger.log(level, msg, *args, extra=extra, **passthrough)

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.DEBUG, msg, args, kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.INFO, msg, args, kwargs)

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.WARNING, msg, args, kwargs)

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log(logging.ERROR, msg, args, kwargs)

    def exception(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """ERROR with the active exception's traceback attached."""
        kwargs.setdefault("exc_info", True)
        self._log(logging.ERROR, msg, args, kwargs)

    @property
    def component(self) -> str:
        return self._component

    @property
    def underlying(self) -> logging.Logger:
        """The wrapped stdlib :class:`logging.Logger`."""
        return self._logger
