"""Error Translator — the single boundary that turns failures into problem-details responses.

Invariants:
    - Exactly one payload (or, for cancellation, one empty body) per failing request
    - Every FailureKind has exactly one row in _POLICY (checked at import time)
    - Logged once here, at the severity in _POLICY, carrying the pipeline token when present
    - Internal detail (message, traceback, inner exception) only in development
    - NotFound never reaches this module: endpoints render 404 themselves

Design Decisions:
    - Kind -> policy table over isinstance branching: adding a kind without a row fails
      on import, not in production
    - One interceptor registered for every exception family, all routed through
      translate_failure (ADR: uniform error shape)
    - 499 (client closed request) mirrors the nginx convention for abandoned calls
"""

import logging
import traceback
from dataclasses import dataclass

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from sqlalchemy.exc import IntegrityError

from videogame_api.core.errors import FailureKind, VideoGameApiError, classify

logger = logging.getLogger(__name__)

STATUS_CLIENT_CLOSED_REQUEST = 499


@dataclass(frozen=True)
class FailurePolicy:
    status: int
    title: str
    log_level: int
    public_detail: str


_POLICY: dict[FailureKind, FailurePolicy] = {
    FailureKind.VALIDATION: FailurePolicy(
        400, "Validation failed", logging.WARNING,
        "One or more validation errors occurred.",
    ),
    FailureKind.CONFLICT: FailurePolicy(
        409, "Database conflict", logging.ERROR,
        "A database conflict occurred. Please try again.",
    ),
    FailureKind.CANCELLED: FailurePolicy(
        STATUS_CLIENT_CLOSED_REQUEST, "Client closed request", logging.INFO,
        "",
    ),
    FailureKind.ACCESS_DENIED: FailurePolicy(
        403, "Forbidden", logging.WARNING,
        "You do not have permission to access this resource.",
    ),
    FailureKind.UNCLASSIFIED: FailurePolicy(
        500, "Internal Server Error", logging.ERROR,
        "An unexpected error occurred. Please try again later.",
    ),
}

_missing = set(FailureKind) - set(_POLICY)
if _missing:
    raise RuntimeError(f"No failure policy for: {sorted(k.value for k in _missing)}")


def problem_details(
    status: int, title: str, detail: str, instance: str,
    extensions: dict | None = None,
) -> dict:
    """Common error payload for every 4xx/5xx response."""
    payload = {
        "type": f"https://httpstatuses.com/{status}",
        "title": title,
        "status": status,
        "detail": detail,
        "instance": instance,
    }
    if extensions:
        payload["extensions"] = extensions
    return payload


def translate_failure(
    exc: BaseException, instance: str, development: bool,
) -> tuple[int, dict | None]:
    """Map any failure to (status, payload). payload is None for an empty body."""
    kind = _classify(exc)
    policy = _POLICY[kind]
    _log_failure(kind, policy, exc, instance)

    if kind is FailureKind.CANCELLED:
        return policy.status, None

    detail = policy.public_detail
    extensions: dict | None = None
    if kind is FailureKind.VALIDATION:
        extensions = {"errors": _validation_errors(exc)}
    elif kind is FailureKind.CONFLICT and development:
        detail = str(exc)
    elif kind is FailureKind.UNCLASSIFIED and development:
        trace = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        detail = f"{exc}\n\nStack Trace:\n{trace}"
        inner = exc.__cause__ or exc.__context__
        extensions = {
            "exceptionType": type(exc).__name__,
            "innerException": str(inner) if inner else None,
        }
    return policy.status, problem_details(
        policy.status, policy.title, detail, instance, extensions,
    )


def register_error_handlers(app: FastAPI, development: bool = False) -> None:
    """Register the translator for every exception family on the FastAPI app."""

    async def failure_handler(request: Request, exc: Exception):
        status, payload = translate_failure(exc, request.url.path, development)
        if payload is None:
            return Response(status_code=status)
        return JSONResponse(status_code=status, content=payload)

    for exc_class in (
        VideoGameApiError, RequestValidationError,
        PermissionError, IntegrityError, Exception,
    ):
        app.add_exception_handler(exc_class, failure_handler)


def _classify(exc: BaseException) -> FailureKind:
    if isinstance(exc, RequestValidationError):
        return FailureKind.VALIDATION
    return classify(exc)


def _validation_errors(exc: BaseException) -> dict[str, list[str]]:
    """field -> messages from either the validator or FastAPI body parsing."""
    if isinstance(exc, RequestValidationError):
        errors: dict[str, list[str]] = {}
        for e in exc.errors():
            loc = [str(part) for part in e["loc"] if part != "body"]
            field = ".".join(loc) or "body"
            errors.setdefault(field, []).append(e["msg"])
        return errors
    return getattr(exc, "errors", {})


def _log_failure(
    kind: FailureKind, policy: FailurePolicy, exc: BaseException, instance: str,
) -> None:
    extra = {"error_kind": kind.value, "path": instance}
    if isinstance(exc, VideoGameApiError) and exc.context.correlation_id:
        extra["correlation_id"] = exc.context.correlation_id
        extra["request_name"] = exc.context.request_name
    if kind is FailureKind.VALIDATION:
        count = sum(len(m) for m in _validation_errors(exc).values())
        message = f"Validation failed for {instance}: {count} errors"
    elif kind is FailureKind.CANCELLED:
        message = f"Request was cancelled by client for {instance}"
    elif kind is FailureKind.ACCESS_DENIED:
        message = f"Unauthorized access attempt for {instance}"
    elif kind is FailureKind.CONFLICT:
        message = f"Database update failed for {instance}: {exc}"
    else:
        message = f"Unhandled exception occurred for {instance}: {exc}"
    logger.log(
        policy.log_level, message, extra=extra,
        exc_info=exc if policy.log_level >= logging.ERROR else None,
    )
