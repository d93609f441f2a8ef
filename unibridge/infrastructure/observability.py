"""Structured Logging: JSON and text formatters for the bridge's request/operation logs.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Context fields (operation, error_code, path, status_code) surfaced when present,
      in both formats
    - A record carrying status_code also carries status_class ("2xx", "4xx", "5xx")
    - setup_logging installs exactly one bridge handler, however often it is called

Design Decisions:
    - Formatters on stdlib logging: no extra dependency for a handful of fields
    - setup_logging called once on startup via lifespan
"""

import logging
import json
from datetime import datetime, timezone

_CONTEXT_FIELDS = ("operation", "error_code", "path", "status_code")
_HANDLER_NAME = "unibridge"


def _context(record: logging.LogRecord) -> dict:
    fields = {}
    for key in _CONTEXT_FIELDS:
        val = record.__dict__.get(key)
        if val is not None:
            fields[key] = val
    status = fields.get("status_code")
    if isinstance(status, int):
        fields["status_class"] = f"{status // 100}xx"
    return fields


class JSONFormatter(logging.Formatter):
    """One JSON object per line, for log shippers."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_context(record),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable line with context fields appended as key=value."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s - %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = _context(record)
        if not fields:
            return line
        tail = " ".join(f"{k}={v}" for k, v in fields.items())
        # traceback after the context fields
        head, sep, trace = line.partition("\n")
        return f"{head} [{tail}]{sep}{trace}"


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure the root logger for the bridge."""
    for existing in list(logging.root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logging.root.removeHandler(existing)
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
