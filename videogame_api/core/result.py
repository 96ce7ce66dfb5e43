"""Lookup Result — explicit Found | NotFound variants for handlers.

Invariants:
    - Absence is a value, never an exception
    - NOT_FOUND is a singleton; compare with `is`
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Found(Generic[T]):
    value: T


@dataclass(frozen=True)
class NotFound:
    """Resource absent from the store."""


NOT_FOUND = NotFound()

LookupResult = Found[T] | NotFound
