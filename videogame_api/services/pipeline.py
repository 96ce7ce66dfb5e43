"""Request Pipeline — ordered stage chain every command flows through.

Invariants:
    - Stage order fixed at construction: chain built once, reused for every dispatch
    - Validation always precedes the handler; a violation means the handler never runs
    - Completion/error log lines always follow the stage they describe
    - One correlation token per dispatch, stable across all of its log lines
    - Failures re-raised unchanged: no stage swallows or re-wraps an exception
    - Project errors leave the pipeline tagged with the dispatch token (ErrorContext)
    - Completion line carries a bounded response summary: a count for collections
    - Pipeline holds no mutable state beyond per-call locals

Design Decisions:
    - Explicit stage list over runtime-registered interceptors: composition order is
      visible in one place (ADR: ExMA no convention-over-config)
    - Logger injected at construction instead of module-level getLogger: lifecycle owned
      by main.py, tests pass their own
    - Cancellation logged at INFO: the caller left, nothing failed
"""

import asyncio
import logging
import time
from datetime import date
from functools import partial
from typing import Any, Awaitable, Callable, Mapping, Protocol, Sequence
from uuid import uuid4

from videogame_api.core.errors import (
    OperationCancelledError, ValidationFailedError, VideoGameApiError,
)
from videogame_api.core.validation import ValidationResult
from videogame_api.infrastructure.store import VideoGameStore

Handler = Callable[[Any, VideoGameStore], Awaitable[Any]]
Next = Callable[[Any, VideoGameStore], Awaitable[Any]]
Validator = Callable[[Any, date], ValidationResult]


class Stage(Protocol):
    """A cross-cutting step. Must call call_next exactly once or raise."""

    async def __call__(
        self, command: Any, store: VideoGameStore, call_next: Next,
    ) -> Any: ...


class LoggingStage:
    """Start/completion/error logging with a short correlation token and timing."""

    def __init__(self, logger: logging.Logger):
        self._logger = logger

    async def __call__(
        self, command: Any, store: VideoGameStore, call_next: Next,
    ) -> Any:
        name = type(command).__name__
        token = uuid4().hex[:8]
        extra = {"correlation_id": token, "request_name": name}
        started = time.perf_counter()
        self._logger.info(f"Handling {name} [{token}] {command!r}", extra=extra)

        try:
            response = await call_next(command, store)
        except ValidationFailedError as e:
            _tag(e, token, name)
            elapsed = _elapsed_ms(started)
            self._logger.warning(
                f"Rejected {name} [{token}] after {elapsed}ms: {e.errors}",
                extra={**extra, "elapsed_ms": elapsed},
            )
            raise
        except (OperationCancelledError, asyncio.CancelledError) as e:
            _tag(e, token, name)
            elapsed = _elapsed_ms(started)
            self._logger.info(
                f"Cancelled {name} [{token}] after {elapsed}ms",
                extra={**extra, "elapsed_ms": elapsed},
            )
            raise
        except Exception as e:
            _tag(e, token, name)
            elapsed = _elapsed_ms(started)
            self._logger.error(
                f"Error handling {name} [{token}] after {elapsed}ms",
                extra={**extra, "elapsed_ms": elapsed},
                exc_info=True,
            )
            raise

        elapsed = _elapsed_ms(started)
        self._logger.info(
            f"Handled {name} [{token}] in {elapsed}ms: {summarize(response)}",
            extra={**extra, "elapsed_ms": elapsed},
        )
        return response


class ValidationStage:
    """Runs the command's validation; raises ValidationFailedError on any violation."""

    def __init__(
        self,
        validate: Validator,
        today: Callable[[], date] = date.today,
    ):
        self._validate = validate
        self._today = today

    async def __call__(
        self, command: Any, store: VideoGameStore, call_next: Next,
    ) -> Any:
        result = self._validate(command, self._today())
        if not result.is_valid:
            raise ValidationFailedError(result.grouped())
        return await call_next(command, store)


class Pipeline:
    """Single entry point for every command. Stages run outermost-first."""

    def __init__(
        self, stages: Sequence[Stage], handlers: Mapping[type, Handler],
    ):
        self._stages = tuple(stages)
        self._handlers = dict(handlers)
        self._chain = self._compose()

    def _compose(self) -> Next:
        chain: Next = self._handle
        for stage in reversed(self._stages):
            chain = partial(stage, call_next=chain)
        return chain

    async def _handle(self, command: Any, store: VideoGameStore) -> Any:
        handler = self._handlers.get(type(command))
        if handler is None:
            raise TypeError(
                f"No handler registered for {type(command).__name__}",
            )
        return await handler(command, store)

    async def dispatch(self, command: Any, store: VideoGameStore) -> Any:
        """Run command through every stage and its handler."""
        return await self._chain(command, store)


def _elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)


def summarize(response: Any) -> str:
    """Bounded description of a handler result for the completion log line."""
    if isinstance(response, (list, tuple)):
        return f"{len(response)} items"
    return repr(response)


def _tag(exc: BaseException, token: str, name: str) -> None:
    if isinstance(exc, VideoGameApiError):
        exc.context.correlation_id = token
        exc.context.request_name = name
