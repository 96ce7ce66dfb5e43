"""Field Validation — pure rule functions and the ValidationResult value object.

Invariants:
    - Validators are PURE: no IO, no state; only input is the command and today's date
    - Every field evaluated, no short-circuit on first violation
    - Validators never raise; an empty result means the command is safe to handle
    - Release year upper bound is the current calendar year at validation time

Design Decisions:
    - Rules as small composable functions returning violations (ADR: ExMA pure core)
    - Field names are the public contract (Title, Genre, ReleaseYear) — clients key on them
"""

from dataclasses import dataclass
from datetime import date


TITLE_MAX_LENGTH: int = 100
GENRE_MAX_LENGTH: int = 50
MIN_RELEASE_YEAR: int = 1950
DEFAULT_RELEASE_YEAR: int = MIN_RELEASE_YEAR


@dataclass(frozen=True)
class Violation:
    field: str
    message: str


@dataclass(frozen=True)
class ValidationResult:
    """Ordered violations for one command. Empty = valid."""
    violations: tuple[Violation, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.violations

    def grouped(self) -> dict[str, list[str]]:
        """field -> messages, both in first-seen order."""
        errors: dict[str, list[str]] = {}
        for v in self.violations:
            errors.setdefault(v.field, []).append(v.message)
        return errors


def current_year(today: date | None = None) -> int:
    return (today or date.today()).year


def _display_name(field: str) -> str:
    """ReleaseYear -> Release Year."""
    return "".join(
        f" {c}" if c.isupper() and i else c for i, c in enumerate(field)
    )


def check_text(field: str, value: str | None, max_length: int) -> list[Violation]:
    """Required, non-blank text of at most max_length characters."""
    name = _display_name(field)
    if value is None or not value.strip():
        return [Violation(field, f"'{name}' must not be empty.")]
    if len(value) > max_length:
        return [Violation(
            field,
            f"The length of '{name}' must be {max_length} characters or fewer. "
            f"You entered {len(value)} characters.",
        )]
    return []


def check_year(field: str, value: int | None, today: date) -> list[Violation]:
    """Inclusive MIN_RELEASE_YEAR..current year."""
    name = _display_name(field)
    if value is None:
        return [Violation(field, f"'{name}' must not be empty.")]
    upper = current_year(today)
    if not MIN_RELEASE_YEAR <= value <= upper:
        return [Violation(
            field,
            f"'{name}' must be between {MIN_RELEASE_YEAR} and {upper}. "
            f"You entered {value}.",
        )]
    return []


def validate_game_fields(
    title: str | None, genre: str | None, release_year: int | None,
    today: date | None = None,
) -> ValidationResult:
    """Rules shared by every command that writes a full game record."""
    today = today or date.today()
    return ValidationResult(tuple(
        check_text("Title", title, TITLE_MAX_LENGTH)
        + check_text("Genre", genre, GENRE_MAX_LENGTH)
        + check_year("ReleaseYear", release_year, today)
    ))
