"""Sorted, read-only index over validated lesson documents."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any

from .errors import DuplicateIdError, DuplicateOrderError, DuplicateSlugError, InvalidRecordsError
from .models import Lesson
from .schema import validate_records

logger = logging.getLogger(__name__)

DOCUMENT_SUFFIXES: tuple[str, ...] = (".mdx", ".md", ".json")

_SUFFIX_PATTERN = re.compile(r"\.(?:mdx|md|json)$")


def lesson_slug(lesson: Lesson | str) -> str:
    """Return the URL slug for a lesson: its id without the document suffix."""
    lesson_id = lesson if isinstance(lesson, str) else lesson.id
    return _SUFFIX_PATTERN.sub("", lesson_id)


class CatalogIndex:
    """Immutable catalog of lessons ordered by ``(chapter, order)``.

    Instances are only produced by :meth:`build` or :meth:`from_records`;
    every derived view is computed up front so queries never mutate state.
    """

    def __init__(self, lessons: tuple[Lesson, ...]) -> None:
        """Store an already sorted and checked lesson tuple."""
        self._lessons = lessons
        self._by_id = {lesson.id: lesson for lesson in lessons}
        self._positions = {lesson.id: index for index, lesson in enumerate(lessons)}
        grouped: dict[int, list[Lesson]] = {}
        for lesson in lessons:
            grouped.setdefault(lesson.chapter, []).append(lesson)
        self._by_chapter = MappingProxyType({chapter: tuple(items) for chapter, items in grouped.items()})

    @classmethod
    def build(cls, lessons: Iterable[Lesson]) -> CatalogIndex:
        """Build a catalog, rejecting duplicate ids or slugs and order ties within a chapter."""
        items = list(lessons)
        seen: set[str] = set()
        slugs: dict[str, str] = {}
        for lesson in items:
            if lesson.id in seen:
                raise DuplicateIdError(lesson.id)
            seen.add(lesson.id)
            slug = lesson_slug(lesson)
            if slug in slugs:
                raise DuplicateSlugError(slug, slugs[slug], lesson.id)
            slugs[slug] = lesson.id

        ordered = sorted(items, key=lambda item: item.sort_key)
        for previous, current in zip(ordered, ordered[1:]):
            if previous.sort_key == current.sort_key:
                raise DuplicateOrderError(current.chapter, current.order, previous.id, current.id)

        logger.debug("Built catalog with %d lessons", len(ordered))
        return cls(tuple(ordered))

    @classmethod
    def from_records(cls, records: Iterable[Any]) -> CatalogIndex:
        """Validate raw records and build a catalog, all or nothing."""
        lessons, errors = validate_records(records)
        if errors:
            raise InvalidRecordsError(errors)
        return cls.build(lessons)

    def all(self) -> tuple[Lesson, ...]:
        """Return every lesson in catalog order."""
        return self._lessons

    def by_chapter(self) -> Mapping[int, tuple[Lesson, ...]]:
        """Return lessons grouped by chapter; chapters without lessons are absent."""
        return self._by_chapter

    def count_in_chapter(self, chapter: int) -> int:
        """Return the number of lessons in a chapter, 0 when it has none."""
        if isinstance(chapter, bool):
            return 0
        return len(self._by_chapter.get(chapter, ()))

    def find_by_id(self, lesson_id: str) -> Lesson | None:
        """Get lesson by id."""
        return self._by_id.get(lesson_id)

    def position(self, lesson_id: str) -> int | None:
        """Return the zero-based catalog position of a lesson."""
        return self._positions.get(lesson_id)

    def __len__(self) -> int:
        return len(self._lessons)

    def __iter__(self) -> Iterator[Lesson]:
        return iter(self._lessons)

    def __contains__(self, lesson_id: object) -> bool:
        return lesson_id in self._by_id

    def __repr__(self) -> str:
        return f"CatalogIndex(lessons={len(self._lessons)}, chapters={sorted(self._by_chapter)})"
