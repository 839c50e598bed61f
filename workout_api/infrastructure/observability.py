"""Structured Logging — JSON formatter and setup for production observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Request fields (workout_id, method, path, status_code, error_code) and the
      store operation are surfaced when a record carries them
    - JSON format in production, human-readable in development

Design Decisions:
    - Plain logging.Formatter subclass, no logging library
    - setup_logging called once on startup via lifespan
"""

import logging
import json
from datetime import datetime, timezone

REQUEST_FIELDS = ("workout_id", "method", "path", "status_code", "error_code")
STORE_FIELDS = ("operation",)


class JSONFormatter(logging.Formatter):
    """Format logs as one JSON object per line."""

    def __init__(self, fields: tuple[str, ...] = REQUEST_FIELDS + STORE_FIELDS):
        super().__init__()
        self.fields = fields

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update({
            key: record.__dict__[key]
            for key in self.fields
            if record.__dict__.get(key) is not None
        })
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Install one stream handler on the root logger."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s [%(name)s] %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
