"""Error Hierarchy — closed failure taxonomy for everything escaping the pipeline.

Invariants:
    - Every failure resolves to exactly one FailureKind (closed set, no fallback branch)
    - NotFound is NOT an error: handlers return core.result.NOT_FOUND instead
    - Foreign exceptions (PermissionError, IntegrityError) classified here, never re-wrapped

Design Decisions:
    - Single hierarchy with VideoGameApiError base: one global translator catches all
      (ADR: uniform error shape)
    - kind carried on the instance: translator looks it up in a table instead of
      branching on isinstance chains
    - context carries the dispatch correlation token so the translator's log line
      can be joined with the pipeline's
"""

from dataclasses import dataclass
from enum import Enum

from sqlalchemy.exc import IntegrityError


class FailureKind(str, Enum):
    """Every failure kind the translator knows how to render."""
    VALIDATION = "validation"
    CONFLICT = "conflict"
    CANCELLED = "cancelled"
    ACCESS_DENIED = "access_denied"
    UNCLASSIFIED = "unclassified"


@dataclass
class ErrorContext:
    """Pipeline dispatch a failure escaped from. Filled by LoggingStage."""
    correlation_id: str | None = None
    request_name: str | None = None


class VideoGameApiError(Exception):
    """Base exception for all video game API failures."""

    def __init__(
        self,
        message: str,
        kind: FailureKind,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.context = context or ErrorContext()


# ─── Client Errors ──────────────────────────────────────────────

class ValidationFailedError(VideoGameApiError):
    """Command rejected by the validator. errors maps field -> messages."""
    def __init__(
        self, errors: dict[str, list[str]], context: ErrorContext | None = None,
    ):
        super().__init__(
            "One or more validation errors occurred.",
            FailureKind.VALIDATION, context,
        )
        self.errors = errors


class AccessDeniedError(VideoGameApiError):
    """Caller is not allowed to perform the operation."""
    def __init__(self, message: str = "Access denied", context: ErrorContext | None = None):
        super().__init__(message, FailureKind.ACCESS_DENIED, context)


class OperationCancelledError(VideoGameApiError):
    """Caller abandoned the request before the commit completed."""
    def __init__(
        self, message: str = "Operation cancelled by caller",
        context: ErrorContext | None = None,
    ):
        super().__init__(message, FailureKind.CANCELLED, context)


# ─── Persistence Errors ─────────────────────────────────────────

class ConflictError(VideoGameApiError):
    """Store rejected the write (constraint violation)."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(message, FailureKind.CONFLICT, context)


def classify(exc: BaseException) -> FailureKind:
    """Resolve any exception to its FailureKind."""
    if isinstance(exc, VideoGameApiError):
        return exc.kind
    if isinstance(exc, PermissionError):
        return FailureKind.ACCESS_DENIED
    if isinstance(exc, IntegrityError):
        return FailureKind.CONFLICT
    return FailureKind.UNCLASSIFIED
