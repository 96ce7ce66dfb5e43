"""Structured Logging — JSON formatter, setup/teardown and request logging."""

import json
import logging

from httpx import ASGITransport, AsyncClient
from fastapi import FastAPI

from videogame_api.infrastructure.observability import (
    JSONFormatter, RequestLoggingMiddleware, setup_logging, teardown_logging,
)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "videogame_api.pipeline", logging.INFO, __file__, 1,
        "Handled CreateGameCommand", None, None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_surfaces_pipeline_fields():
    line = JSONFormatter().format(_record(correlation_id="ab12cd34", elapsed_ms=3))
    log = json.loads(line)
    assert log["message"] == "Handled CreateGameCommand"
    assert log["level"] == "INFO"
    assert log["correlation_id"] == "ab12cd34"
    assert log["elapsed_ms"] == 3
    assert "status_code" not in log


def test_setup_and_teardown_manage_exactly_one_handler():
    before = list(logging.root.handlers)
    level = logging.root.level
    handler = setup_logging("DEBUG", "text")
    try:
        assert handler in logging.root.handlers
        assert not isinstance(handler.formatter, JSONFormatter)
    finally:
        teardown_logging(handler)
        logging.root.setLevel(level)
    assert logging.root.handlers == before


async def test_request_logging_middleware_logs_status_and_duration(caplog):
    app = FastAPI()
    app.add_middleware(RequestLoggingMiddleware)

    @app.get("/ping")
    async def ping():
        return {"ok": True}

    with caplog.at_level(logging.INFO, logger="videogame_api.http"):
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test",
        ) as c:
            await c.get("/ping")

    record = next(r for r in caplog.records if r.name == "videogame_api.http")
    assert record.getMessage().startswith("HTTP GET /ping responded 200 in ")
    assert record.status_code == 200
    assert record.method == "GET"
