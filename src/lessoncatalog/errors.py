"""Error types raised while validating and building the catalog."""

from __future__ import annotations


class CatalogError(ValueError):
    """Base class for all lesson catalog errors."""


class ValidationError(CatalogError):
    """One field of one raw record failed the lesson schema.

    The validator returns instances rather than raising them; they are only
    raised in bulk through :class:`InvalidRecordsError`.
    """

    def __init__(self, field: str, reason: str, record_id: str | None = None) -> None:
        self.field = field
        self.reason = reason
        self.record_id = record_id
        super().__init__(str(self))

    def __str__(self) -> str:
        where = f"Lesson '{self.record_id}'" if self.record_id else "Lesson"
        return f"{where}: field '{self.field}' {self.reason}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationError):
            return NotImplemented
        return (self.field, self.reason, self.record_id) == (other.field, other.reason, other.record_id)

    def __hash__(self) -> int:
        return hash((self.field, self.reason, self.record_id))


class BuildError(CatalogError):
    """Catalog-wide constraint violation; the build is rejected."""


class DuplicateIdError(BuildError):
    """Two lessons share an id."""

    def __init__(self, lesson_id: str) -> None:
        self.lesson_id = lesson_id
        super().__init__(f"Duplicate lesson id: {lesson_id}")


class DuplicateOrderError(BuildError):
    """Two lessons in the same chapter share an order value."""

    def __init__(self, chapter: int, order: int, first_id: str, second_id: str) -> None:
        self.chapter = chapter
        self.order = order
        self.lesson_ids = (first_id, second_id)
        super().__init__(
            f"Duplicate order {order} in chapter {chapter}: '{first_id}' and '{second_id}'"
        )


class DuplicateSlugError(BuildError):
    """Two lesson ids strip to the same URL slug."""

    def __init__(self, slug: str, first_id: str, second_id: str) -> None:
        self.slug = slug
        self.lesson_ids = (first_id, second_id)
        super().__init__(f"Duplicate lesson slug '{slug}': '{first_id}' and '{second_id}'")


class InvalidRecordsError(BuildError):
    """One or more raw records failed validation."""

    def __init__(self, errors: list[ValidationError] | tuple[ValidationError, ...]) -> None:
        self.errors = tuple(errors)
        lines = [f"{len(self.errors)} invalid lesson record(s):"]
        lines.extend(f"  - {error}" for error in self.errors)
        super().__init__("\n".join(lines))


class ContentLoadError(CatalogError):
    """A lesson source file could not be read or parsed."""
