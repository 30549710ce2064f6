"""Structured Logging — JSON and key=value text formatters for schedule API logs.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Schedule extras (schedule_id, operation, error_code, path) surfaced in both
      formats when present, omitted when absent
    - setup_logging is idempotent: repeated calls swap our handler, never duplicate it
"""

import json
import logging
from datetime import datetime, timezone

HANDLER_NAME = "schedule_api"
SCHEDULE_EXTRAS = ("schedule_id", "operation", "error_code", "path")


def _schedule_extras(record: logging.LogRecord) -> dict:
    return {
        key: record.__dict__[key]
        for key in SCHEDULE_EXTRAS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per line, for production log collectors."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_schedule_extras(record),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    """Human-readable line with schedule extras appended as key=value pairs."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extras = _schedule_extras(record)
        if not extras:
            return line
        head, sep, trace = line.partition("\n")
        pairs = " ".join(f"{k}={v}" for k, v in extras.items())
        return f"{head} [{pairs}]{sep}{trace}"


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Install the schedule API handler on the root logger."""
    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())
    for existing in list(logging.root.handlers):
        if existing.get_name() == HANDLER_NAME:
            logging.root.removeHandler(existing)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
