"""Error Translator — failure kind -> status, payload shape and log severity.

Tests cover:
    - Every FailureKind mapped (400/409/499/403/500)
    - Development vs production detail for conflict and unclassified failures
    - Cancellation renders an empty body and logs at INFO
    - Log line carries the pipeline correlation token of a tagged failure
    - Exactly one payload through a real FastAPI app, including the catch-all
"""

import logging

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import IntegrityError

from videogame_api.api.error_handlers import (
    STATUS_CLIENT_CLOSED_REQUEST, problem_details, register_error_handlers,
    translate_failure,
)
from videogame_api.core.errors import (
    AccessDeniedError, ConflictError, ErrorContext, OperationCancelledError,
    ValidationFailedError,
)

PAYLOAD_KEYS = {"type", "title", "status", "detail", "instance"}


def test_validation_maps_to_400_with_errors_extension():
    exc = ValidationFailedError({"Title": ["'Title' must not be empty."]})
    status, payload = translate_failure(exc, "/api/games", development=False)
    assert status == 400
    assert PAYLOAD_KEYS <= set(payload)
    assert payload["detail"] == "One or more validation errors occurred."
    assert payload["extensions"] == {"errors": {"Title": ["'Title' must not be empty."]}}


@pytest.mark.parametrize("development,expected", [
    (True, "UNIQUE constraint failed: video_games.id"),
    (False, "A database conflict occurred. Please try again."),
])
def test_conflict_detail_depends_on_environment(development, expected):
    exc = ConflictError("UNIQUE constraint failed: video_games.id")
    status, payload = translate_failure(exc, "/api/games", development)
    assert status == 409
    assert payload["title"] == "Database conflict"
    assert payload["detail"] == expected
    assert "extensions" not in payload


def test_raw_integrity_error_maps_to_conflict():
    exc = IntegrityError("INSERT", {}, Exception("NOT NULL constraint failed"))
    status, _ = translate_failure(exc, "/api/games", development=False)
    assert status == 409


def test_failure_log_carries_correlation_token(caplog):
    exc = ConflictError("dup", ErrorContext("ab12cd34", "CreateGameCommand"))
    with caplog.at_level(logging.INFO, logger="videogame_api.api.error_handlers"):
        translate_failure(exc, "/api/games", development=False)

    [record] = caplog.records
    assert record.correlation_id == "ab12cd34"
    assert record.request_name == "CreateGameCommand"


def test_untagged_failure_log_has_no_correlation_token(caplog):
    with caplog.at_level(logging.INFO, logger="videogame_api.api.error_handlers"):
        translate_failure(ConflictError("dup"), "/api/games", development=False)

    [record] = caplog.records
    assert not hasattr(record, "correlation_id")


def test_cancellation_maps_to_499_with_empty_body(caplog):
    with caplog.at_level(logging.INFO, logger="videogame_api.api.error_handlers"):
        status, payload = translate_failure(
            OperationCancelledError(), "/api/games", development=True,
        )
    assert status == STATUS_CLIENT_CLOSED_REQUEST == 499
    assert payload is None
    assert [r.levelno for r in caplog.records] == [logging.INFO]


@pytest.mark.parametrize("exc", [AccessDeniedError(), PermissionError("no")])
def test_access_denied_maps_to_403(exc):
    status, payload = translate_failure(exc, "/api/games/1", development=True)
    assert status == 403
    assert payload["title"] == "Forbidden"
    assert payload["detail"] == "You do not have permission to access this resource."


def test_unclassified_in_production_is_opaque(caplog):
    with caplog.at_level(logging.ERROR, logger="videogame_api.api.error_handlers"):
        status, payload = translate_failure(
            RuntimeError("secret table name"), "/api/games", development=False,
        )
    assert status == 500
    assert payload["detail"] == "An unexpected error occurred. Please try again later."
    assert "secret" not in str(payload)
    assert "extensions" not in payload
    assert caplog.records[-1].levelno == logging.ERROR


def test_unclassified_in_development_includes_trace_and_inner_failure():
    try:
        try:
            raise KeyError("inner")
        except KeyError as inner:
            raise RuntimeError("outer") from inner
    except RuntimeError as e:
        exc = e

    status, payload = translate_failure(exc, "/api/games", development=True)
    assert status == 500
    assert payload["detail"].startswith("outer\n\nStack Trace:\n")
    assert "Traceback" in payload["detail"]
    assert payload["extensions"]["exceptionType"] == "RuntimeError"
    assert payload["extensions"]["innerException"] == "'inner'"


def test_problem_details_omits_empty_extensions():
    payload = problem_details(404, "Not Found", "gone", "/x")
    assert payload == {
        "type": "https://httpstatuses.com/404",
        "title": "Not Found",
        "status": 404,
        "detail": "gone",
        "instance": "/x",
    }


def _failing_app(development: bool) -> FastAPI:
    app = FastAPI()
    register_error_handlers(app, development=development)

    @app.get("/conflict")
    async def conflict():
        raise ConflictError("duplicate key")

    @app.get("/cancelled")
    async def cancelled():
        raise OperationCancelledError()

    @app.get("/forbidden")
    async def forbidden():
        raise PermissionError("read-only")

    @app.get("/boom")
    async def boom():
        raise ZeroDivisionError("division by zero")

    return app


async def _get(app: FastAPI, path: str):
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        return await c.get(path)


async def test_app_renders_conflict_and_forbidden():
    app = _failing_app(development=False)
    res = await _get(app, "/conflict")
    assert res.status_code == 409
    assert res.json()["instance"] == "/conflict"

    res = await _get(app, "/forbidden")
    assert res.status_code == 403


async def test_app_renders_cancellation_as_empty_499():
    res = await _get(_failing_app(development=False), "/cancelled")
    assert res.status_code == 499
    assert res.content == b""


@pytest.mark.parametrize("development", [True, False])
async def test_app_catch_all_renders_single_500_payload(development):
    res = await _get(_failing_app(development), "/boom")
    assert res.status_code == 500
    body = res.json()
    assert body["status"] == 500
    assert ("division by zero" in body["detail"]) is development
