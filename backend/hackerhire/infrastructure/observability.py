"""Structured Logging — JSON formatter and setup for production observability.

Invariants:
    - Every record carries timestamp, level, logger name and message
    - Marketplace ids (user_id, project_id, application_id) and request fields
      (error_code, path) are surfaced only when a call site passes them in `extra`
    - setup_logging() is idempotent: calling it again replaces, never stacks, its handler

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - Called from the lifespan, so tests that never start the app keep pytest's
      own log capture untouched
"""

import json
import logging
from datetime import datetime, timezone

_EXTRA_FIELDS = (
    "user_id", "project_id", "application_id", "error_code", "path", "storage",
)
_HANDLER_NAME = "hackerhire"
_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


class JSONFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update({
            key: record.__dict__[key]
            for key in _EXTRA_FIELDS
            if record.__dict__.get(key) is not None
        })
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Install the app's root handler; fmt is "json" or anything else for plain text."""
    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        JSONFormatter() if fmt == "json" else logging.Formatter(_TEXT_FORMAT),
    )
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    # SQL echo is noise at INFO; the session manager logs failures itself
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
