"""Structured Logging — JSON/text formatters and one-shot setup.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (board_id, task_id, error_code, path, method) surfaced when present
    - setup_logging replaces its own handler on repeat calls (no duplicate lines
      when the lifespan runs more than once in a process)

Design Decisions:
    - Hand-written formatters on stdlib logging: no extra dependency
    - Text format keeps the extras as key=value pairs so ids stay greppable
"""

import logging
import json
from datetime import datetime, timezone

EXTRA_FIELDS = ("board_id", "task_id", "error_code", "path", "method")
_HANDLER_NAME = "taskboard"


def record_extras(record: logging.LogRecord) -> dict:
    """The EXTRA_FIELDS set on a record, in declaration order."""
    extras = {}
    for key in EXTRA_FIELDS:
        val = record.__dict__.get(key)
        if val is not None:
            extras[key] = val
    return extras


class JSONFormatter(logging.Formatter):
    """One JSON object per line for production log shippers."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **record_extras(record),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    """Human-readable lines for local development."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extras = record_extras(record)
        if extras:
            line += " [" + " ".join(f"{k}={v}" for k, v in extras.items()) + "]"
        return line


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Install the task-board handler on the root logger."""
    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
