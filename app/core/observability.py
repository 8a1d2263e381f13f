"""Logging for the spot rental API.

Request handlers log with ``extra={...}`` carrying the ids they touched
(user, spot, review) and the error handlers add the path and status code.
In json mode each record becomes one line keyed by those names; in text
mode the ids are appended as ``key=value`` pairs.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Iterable

CONTEXT_FIELDS = ("user_id", "spot_id", "review_id", "path", "status_code")

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def record_context(record: logging.LogRecord, fields: Iterable[str] = CONTEXT_FIELDS) -> dict:
    """The context ids attached to a record, skipping the ones not set."""
    return {
        name: getattr(record, name)
        for name in fields
        if getattr(record, name, None) is not None
    }


class JSONFormatter(logging.Formatter):
    def __init__(self, fields: Iterable[str] = CONTEXT_FIELDS):
        super().__init__()
        self.fields = tuple(fields)

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **record_context(record, self.fields),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        # ids are ints, but a path or enum value may sneak in
        return json.dumps(entry, ensure_ascii=False, default=str)


class ContextTextFormatter(logging.Formatter):
    def __init__(self, fields: Iterable[str] = CONTEXT_FIELDS):
        super().__init__(TEXT_FORMAT)
        self.fields = tuple(fields)

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = record_context(record, self.fields)
        if not context:
            return line
        pairs = " ".join(f"{key}={value}" for key, value in context.items())
        return f"{line} [{pairs}]"


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Replace the root handlers with a single stream handler; called from the app lifespan."""
    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter() if fmt == "json" else ContextTextFormatter())
    logging.root.handlers = [handler]
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
