"""Structured JSON logger for mdnotion.

Records are emitted as single-line JSON objects::

    {"ts": "2026-01-01T12:00:00.123456+00:00", "level": "DEBUG",
     "logger": "mdnotion.segmenter",
     "message": "Unterminated code fence opened on line 3; ...",
     "op": "segment", "fence": "code", "line": 3}

Structured fields travel through ``extra={"extra_fields": {...}}``.

The converter modules log under ``mdnotion.*``.  Their loggers default to
``WARNING`` so a plain conversion is silent; pass ``level="DEBUG"`` to
:func:`get_logger` before converting to see the per-conversion summary.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any


class StructuredFormatter(logging.Formatter):
    """Format log records as single-line JSON objects.

    Guaranteed keys: ``ts`` (ISO-8601 UTC), ``level``, ``logger`` and
    ``message``.  Caller-supplied ``extra_fields`` are merged into the top
    level; ``exception`` and ``stack_info`` appear when the record has them.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        extra_fields: dict[str, Any] | None = getattr(record, "extra_fields", None)
        if extra_fields:
            entry.update(extra_fields)

        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        if record.stack_info:
            entry["stack_info"] = self.formatStack(record.stack_info)

        return json.dumps(entry, default=str)


# One handler per logger name, so repeated get_logger() calls from
# different modules never stack handlers.
_configured_loggers: set[str] = set()


def get_logger(
    name: str = "mdnotion",
    *,
    level: int | str | None = None,
    stream: Any | None = None,
) -> logging.Logger:
    """Get or create a structured JSON logger.

    Parameters
    ----------
    name:
        Logger name, usually ``"mdnotion.<module>"``.
    level:
        Log level as an ``int`` or case-insensitive name.  On first use the
        logger is set to ``WARNING`` unless *level* is given; on later calls
        a given *level* is applied to the existing logger.
    stream:
        Output stream for the handler installed on first use.  Defaults to
        ``sys.stderr``.

    Returns
    -------
    logging.Logger
        The same instance for the same *name*, with exactly one
        :class:`StructuredFormatter` handler.
    """
    logger = logging.getLogger(name)

    if name not in _configured_loggers:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)
        logger.setLevel(logging.WARNING)
        logger.propagate = False
        _configured_loggers.add(name)

    if level is not None:
        logger.setLevel(level.upper() if isinstance(level, str) else level)

    return logger
