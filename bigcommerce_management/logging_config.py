"""Structured logging configuration (JSON and text formatters).

The library only emits records through module loggers. Applications call
:func:`setup_logging` once to get output that carries the BigCommerce
``x-request-id`` of the response being handled and the remaining rate-limit
budget when the pipeline reports it.
"""

from __future__ import annotations

import json
import logging
import sys
import traceback
from datetime import datetime, timezone

from bigcommerce_management.config import Settings
from bigcommerce_management.services.request_context import get_request_id

PACKAGE_LOGGER = "bigcommerce_management"

# Attributes present on every LogRecord; anything else is an extra.
_STANDARD_RECORD_ATTRS: frozenset[str] = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", (), None)).keys()
    | {"message", "asctime", "taskName"}
)


def _timestamp(record: logging.LogRecord) -> datetime:
    return datetime.fromtimestamp(record.created, tz=timezone.utc)


def _format_exception(record: logging.LogRecord) -> str | None:
    if record.exc_info and record.exc_info[0] is not None:
        return "".join(traceback.format_exception(*record.exc_info))
    return None


class JSONFormatter(logging.Formatter):
    """Single-line JSON log output for log aggregators."""

    def format(self, record: logging.LogRecord) -> str:
        record.message = record.getMessage()
        entry: dict = {
            "timestamp": _timestamp(record).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.message,
        }

        request_id = get_request_id()
        if request_id:
            entry["request_id"] = request_id

        # Extras passed by the pipeline, e.g. requests_left
        for key, value in record.__dict__.items():
            if key not in _STANDARD_RECORD_ATTRS and not key.startswith("_"):
                entry[key] = value

        exception = _format_exception(record)
        if exception:
            entry["exception"] = exception

        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable lines: ``ts LEVEL [request-id] logger - message``."""

    def format(self, record: logging.LogRecord) -> str:
        record.message = record.getMessage()
        ts = _timestamp(record).strftime("%Y-%m-%d %H:%M:%S")

        request_id = get_request_id()
        rid_prefix = f"[{request_id[:12]}] " if request_id else ""

        line = f"{ts} {record.levelname:<8} {rid_prefix}{record.name} - {record.message}"

        requests_left = getattr(record, "requests_left", None)
        if requests_left is not None:
            line += f" (requests left: {requests_left})"

        exception = _format_exception(record)
        if exception:
            line += "\n" + exception

        return line


def setup_logging(log_level: str = "INFO", log_format: str = "text") -> None:
    """Attach one stderr handler to the package logger. Safe to call again."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JSONFormatter() if log_format.lower() == "json" else TextFormatter())
    logger.addHandler(handler)


def setup_logging_from(settings: Settings) -> None:
    setup_logging(settings.log_level, settings.log_format)
