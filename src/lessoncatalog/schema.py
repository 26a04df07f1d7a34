"""Lesson document schema and record validation."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from .errors import ValidationError
from .models import DIFFICULTIES, Lesson

logger = logging.getLogger(__name__)

MIN_CHAPTER = 1
MAX_CHAPTER = 5

Check = Callable[[Any], str | None]


@dataclass(frozen=True)
class FieldSpec:
    """Schema entry: one field name with its requirement and checker.

    ``check`` returns a reason string when the value is unacceptable and
    ``None`` otherwise.
    """

    name: str
    check: Check
    required: bool = True
    default: Any = None


def _type_name(value: Any) -> str:
    return type(value).__name__


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _string(value: Any) -> str | None:
    if not isinstance(value, str):
        return f"must be a string, got {_type_name(value)}"
    return None


def _non_empty_string(value: Any) -> str | None:
    reason = _string(value)
    if reason is not None:
        return reason
    if not value.strip():
        return "must not be empty"
    return None


def _int_between(low: int, high: int) -> Check:
    def check(value: Any) -> str | None:
        if not _is_int(value):
            return f"must be an integer, got {_type_name(value)}"
        if not low <= value <= high:
            return f"must be between {low} and {high}, got {value}"
        return None

    return check


def _positive_int(value: Any) -> str | None:
    if not _is_int(value):
        return f"must be an integer, got {_type_name(value)}"
    if value < 1:
        return f"must be a positive integer, got {value}"
    return None


def _one_of(choices: Iterable[str]) -> Check:
    allowed = tuple(choices)

    def check(value: Any) -> str | None:
        if value not in allowed:
            return f"must be one of: {', '.join(allowed)} (got {value!r})"
        return None

    return check


def _string_list(value: Any) -> str | None:
    if not isinstance(value, (list, tuple)):
        return f"must be a list of strings, got {_type_name(value)}"
    for index, item in enumerate(value):
        if not isinstance(item, str):
            return f"item {index} must be a string, got {_type_name(item)}"
    return None


LESSON_SCHEMA: tuple[FieldSpec, ...] = (
    FieldSpec("id", _non_empty_string),
    FieldSpec("title", _non_empty_string),
    FieldSpec("description", _non_empty_string),
    FieldSpec("chapter", _int_between(MIN_CHAPTER, MAX_CHAPTER)),
    FieldSpec("order", _positive_int),
    FieldSpec("difficulty", _one_of(DIFFICULTIES)),
    FieldSpec("objectives", _string_list),
    FieldSpec("duration", _string),
    FieldSpec("tags", _string_list, required=False, default=()),
    FieldSpec("body", _string, required=False, default=""),
)

_SEQUENCE_FIELDS = frozenset({"objectives", "tags"})


def validate_record(raw: Any) -> Lesson | ValidationError:
    """Validate one raw record, returning a lesson or the first field error."""
    if not isinstance(raw, Mapping):
        return ValidationError("<record>", f"must be a mapping, got {_type_name(raw)}")

    raw_id = raw.get("id")
    record_id = raw_id if isinstance(raw_id, str) and raw_id else None

    values: dict[str, Any] = {}
    for spec in LESSON_SCHEMA:
        value = raw.get(spec.name)
        if value is None:
            if spec.required:
                return ValidationError(spec.name, "is required", record_id)
            value = spec.default
        else:
            reason = spec.check(value)
            if reason is not None:
                return ValidationError(spec.name, reason, record_id)
        if spec.name in _SEQUENCE_FIELDS:
            value = tuple(value)
        values[spec.name] = value

    return Lesson(**values)


def validate_records(records: Iterable[Any]) -> tuple[list[Lesson], list[ValidationError]]:
    """Validate a batch of records, collecting every failure."""
    lessons: list[Lesson] = []
    errors: list[ValidationError] = []
    for raw in records:
        result = validate_record(raw)
        if isinstance(result, ValidationError):
            logger.debug("Rejected record: %s", result)
            errors.append(result)
        else:
            lessons.append(result)
    return lessons, errors
