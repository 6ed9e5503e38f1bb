"""Structured JSON logger for mdadf.

Every record becomes one line of JSON::

    {"ts": "2026-10-18T12:00:00.123456+00:00", "level": "DEBUG",
     "logger": "mdadf.converter", "message": "converted",
     "path": "markdown", "input_chars": 42, "blocks": 3}

Structured fields travel in ``extra={"extra_fields": {...}}``::

    from mdadf.observability import get_logger

    log = get_logger("mdadf.converter")
    log.debug("converted", extra={"extra_fields": {"blocks": 3}})
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
    ``message``.  ``extra_fields`` are merged into the top level, and
    ``exception`` / ``stack_info`` appear when the record has them.
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

        return json.dumps(entry, default=str, ensure_ascii=False)


# One handler per logger name, so repeated ``get_logger`` calls from
# several modules never stack handlers.
_configured_loggers: set[str] = set()


def get_logger(
    name: str = "mdadf",
    *,
    level: int | str = logging.DEBUG,
    stream: Any | None = None,
) -> logging.Logger:
    """Get or create a structured JSON logger.

    Parameters
    ----------
    name:
        Logger name.  Children such as ``"mdadf.converter"`` get their
        own handler the first time they are requested.
    level:
        Level as an ``int`` or a case-insensitive name.  Only applied the
        first time *name* is configured.  Defaults to ``DEBUG`` so the
        logger is not the bottleneck; callers filter their own records.
    stream:
        Handler output stream, ``sys.stderr`` by default.  Only used the
        first time *name* is configured.

    Returns
    -------
    logging.Logger
        The logger, with exactly one :class:`StructuredFormatter` handler
        and propagation turned off.
    """
    logger = logging.getLogger(name)

    if name not in _configured_loggers:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)
        logger.propagate = False
        logger.setLevel(
            logging.getLevelName(level.upper()) if isinstance(level, str) else level
        )
        _configured_loggers.add(name)

    return logger
