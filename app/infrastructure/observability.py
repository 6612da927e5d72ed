"""Structured Logging — JSON formatter, request context and setup for production observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (request_id, method, path, error_code, book_id) surfaced when present
    - Records emitted while a request is in flight carry its request_id, method and path
    - Explicit extra= values win over the bound request context
    - JSON format in production, human-readable in development

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - ContextVar for request context: async-safe, each request task sees its own copy
    - Context attached by a handler filter, so call sites never pass request fields by hand
    - setup_logging called once on startup via lifespan
"""

import logging
import json
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Iterator

_EXTRA_KEYS = ("request_id", "method", "path", "error_code", "book_id")

_request_context: ContextVar[dict] = ContextVar("request_context", default={})


@contextmanager
def bind_request_context(**fields) -> Iterator[None]:
    """Attach fields to every log record emitted inside the block."""
    token = _request_context.set({**_request_context.get(), **fields})
    try:
        yield
    finally:
        _request_context.reset(token)


class RequestContextFilter(logging.Filter):
    """Copy the bound request context onto records that lack those fields."""

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in _request_context.get().items():
            if record.__dict__.get(key) is None:
                setattr(record, key, value)
        return True


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application."""
    handler = logging.StreamHandler()
    handler.addFilter(RequestContextFilter())
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s — %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
