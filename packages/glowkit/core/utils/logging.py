"""Logging setup for glowkit.

Modules log through ``logging.getLogger(__name__)``; this module only
decides where records go and how they look:

- plain text with a configurable format string, or one JSON object per line
- stdout or a file
- per-call context (node id, query hash) via ``get_logger(name, **context)``
"""

from __future__ import annotations

import functools
import json
import logging
import sys
import time
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Attributes every LogRecord carries; anything else arrived via ``extra``
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", logging.NOTSET, "", 0, "", None, None))) | {
    "message",
    "asctime",
    "taskName",
}


def _error_fields(formatter: logging.Formatter, record: logging.LogRecord) -> dict[str, Any]:
    exc_type, exc_value, _ = record.exc_info or (None, None, None)
    return {
        "error_type": exc_type.__name__ if exc_type else None,
        "error_message": str(exc_value) if exc_value is not None else None,
        "stack_trace": record.exc_text or formatter.formatException(record.exc_info),  # type: ignore[arg-type]
    }


class StructuredJSONFormatter(logging.Formatter):
    """One JSON object per record.

    Top-level keys are ``level``, ``message`` and ``timestamp`` (UTC,
    ISO 8601). Source location, thread and any ``extra`` fields go under
    ``context``; exception details are added there when present.
    """

    def format(self, record: logging.LogRecord) -> str:
        context: dict[str, Any] = {
            "logger_name": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "thread_name": record.threadName,
        }
        if record.exc_info:
            context.update(_error_fields(self, record))
        context.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        )
        entry = {
            "level": record.levelname,
            "message": record.getMessage(),
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "context": context,
        }
        return json.dumps(entry, default=str)


def _handler(filename: str | None) -> logging.Handler:
    if filename:
        return logging.FileHandler(filename)
    return logging.StreamHandler(sys.stdout)


def configure_logging(
    level: str = "INFO",
    format_string: str | None = None,
    filename: str | None = None,
    structured: bool = False,
) -> None:
    """Replace the root handlers; safe to call again to reconfigure.

    Args:
        level: Level name, case-insensitive.
        format_string: Text format; ignored when ``structured`` is set.
        filename: Log file path; stdout when None.
        structured: Emit JSON lines instead of text.

    Example:
        >>> configure_logging(level="debug", structured=True, filename="glowkit.jsonl")
    """
    handler = _handler(filename)
    if structured:
        handler.setFormatter(StructuredJSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    logging.basicConfig(level=level.upper(), handlers=[handler], force=True)


def get_logger(name: str, **context: Any) -> logging.Logger | logging.LoggerAdapter:
    """Module logger, wrapped in a LoggerAdapter when context is given.

    Example:
        >>> log = get_logger(__name__, node_id="xmas_candycane")
        >>> log.debug("Generated patterns")  # record carries node_id
    """
    log = logging.getLogger(name)
    return logging.LoggerAdapter(log, context) if context else log


def log_performance(func: F) -> F:
    """Log each call's wall time at DEBUG on the function's module logger."""
    log = logging.getLogger(func.__module__)

    @functools.wraps(func)
    def timed(*args: Any, **kwargs: Any) -> Any:
        started = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            log.debug(f"{func.__name__!r} took {time.perf_counter() - started:.4f}s")

    return timed  # type: ignore[return-value]
