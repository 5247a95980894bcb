"""Logging for the blogroll project: request-scoped fields and formatters.

Log calls name an event and pass its data as ``extra={...}``, e.g.
``logger.debug("blogroll_links_rendered", extra={"link_count": 3})``.
RequestContextMiddleware opens a :func:`request_log_context`;
RequestContextFilter copies its fields onto every record.
"""

from __future__ import annotations

import contextlib
import contextvars
import json
import logging
from collections.abc import Iterator
from datetime import UTC, datetime
from typing import Any

# Attributes every LogRecord carries; anything else came in via ``extra=``
RESERVED_LOG_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}

_request_fields: contextvars.ContextVar[dict[str, Any]] = contextvars.ContextVar(
    "blogroll_request_fields"
)


@contextlib.contextmanager
def request_log_context(**fields: Any) -> Iterator[None]:
    """Attach ``fields`` to every record logged inside the block.

    ``None`` and empty-string values are skipped.
    """
    token = _request_fields.set({k: v for k, v in fields.items() if v is not None and v != ""})
    try:
        yield
    finally:
        _request_fields.reset(token)


class RequestContextFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in _request_fields.get({}).items():
            setattr(record, key, value)
        return True


class EventFormatter(logging.Formatter):
    """Base formatter; ``event_fields`` are the record's ``extra=`` values."""

    @staticmethod
    def event_fields(record: logging.LogRecord) -> dict[str, Any]:
        return {
            key: value
            for key, value in vars(record).items()
            if key not in RESERVED_LOG_ATTRS and not key.startswith("_")
        }


class JsonFormatter(EventFormatter):
    """One JSON object per line; event fields become top-level keys."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "event": record.getMessage(),
        }
        for key, value in self.event_fields(record).items():
            payload[key] = value if _is_json_value(value) else str(value)
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload)


class DevFormatter(EventFormatter):
    """``HH:MM:SS LEVEL logger event key=value ...`` for the runserver console."""

    def format(self, record: logging.LogRecord) -> str:
        parts = [
            self.formatTime(record, "%H:%M:%S"),
            f"{record.levelname:<8}",
            record.name,
            record.getMessage(),
        ]
        parts.extend(f"{key}={value!r}" for key, value in self.event_fields(record).items())
        line = " ".join(parts)
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def _is_json_value(value: Any) -> bool:
    try:
        json.dumps(value)
    except (TypeError, ValueError):
        return False
    return True
