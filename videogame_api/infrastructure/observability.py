"""Structured Logging — JSON formatter, setup/teardown and HTTP request logging.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (correlation_id, elapsed_ms, status_code, ...) surfaced when present
    - JSON format in production, human-readable in development
    - setup_logging returns the handler it installed; teardown_logging removes exactly it

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - Logging lifecycle tied to the app lifespan (start/stop), not import time
"""

import json
import logging
import time
from datetime import datetime, timezone

from starlette.types import ASGIApp, Message, Receive, Scope, Send

_EXTRA_FIELDS = (
    "correlation_id", "request_name", "elapsed_ms", "error_kind",
    "status_code", "method", "path",
)


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure root logging for the application. Returns the installed handler."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s — %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler


def teardown_logging(handler: logging.Handler) -> None:
    """Flush and detach the handler installed by setup_logging."""
    handler.flush()
    logging.root.removeHandler(handler)
    handler.close()


class RequestLoggingMiddleware:
    """One INFO line per HTTP request: method, path, status, duration (pure ASGI)."""

    def __init__(self, app: ASGIApp, logger: logging.Logger | None = None):
        self.app = app
        self._logger = logger or logging.getLogger("videogame_api.http")

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        started = time.perf_counter()
        status_code = 500

        async def send_wrapper(message: Message) -> None:
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        finally:
            elapsed = round((time.perf_counter() - started) * 1000, 4)
            method, path = scope["method"], scope["path"]
            self._logger.info(
                f"HTTP {method} {path} responded {status_code} in {elapsed}ms",
                extra={
                    "method": method,
                    "path": path,
                    "status_code": status_code,
                    "elapsed_ms": elapsed,
                },
            )
