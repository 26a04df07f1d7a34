"""Application service owning the published catalog and consumer queries."""

from __future__ import annotations

import hashlib
import json
import logging
import threading
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from .catalog import CatalogIndex, lesson_slug
from .chapters import ChapterRegistry
from .config import CatalogConfig
from .content_loader import load_records, load_records_from_dir
from .models import ChapterDescriptor, Lesson, Navigation
from .navigation import resolve
from .paths import lesson_path, url

logger = logging.getLogger(__name__)

RecordLoader = Callable[[], Iterable[Mapping[str, Any]]]


@dataclass(frozen=True)
class ChapterSummary:
    """Chapter descriptor with the lessons currently filed under it."""

    chapter: ChapterDescriptor
    lessons: tuple[Lesson, ...]

    @property
    def lesson_count(self) -> int:
        """Number of lessons in the chapter."""
        return len(self.lessons)


def _canonical(value: Any) -> Any:
    """Convert nested mappings to str-keyed dicts so they can be key-sorted."""
    if isinstance(value, Mapping):
        return {f"{type(key).__name__}:{key}": _canonical(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_canonical(item) for item in value]
    return value


def fingerprint(records: Iterable[Mapping[str, Any]]) -> str:
    """Return a stable SHA-256 digest of a raw record set."""
    payload = json.dumps(_canonical(list(records)), sort_keys=True, default=str, ensure_ascii=False)
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


class CatalogService:
    """Coordinates loading, rebuilding, and querying the lesson catalog."""

    def __init__(
        self,
        config: CatalogConfig | None = None,
        registry: ChapterRegistry | None = None,
        loader: RecordLoader | None = None,
    ) -> None:
        """Initialize service; the catalog is built lazily on first use."""
        self.config = config or CatalogConfig()
        self.registry = registry or ChapterRegistry.default()
        self._loader = loader or self._default_loader
        self._lock = threading.Lock()
        self._catalog: CatalogIndex | None = None
        self._fingerprint: str | None = None

    def _default_loader(self) -> list[dict[str, Any]]:
        if self.config.content_dir is None:
            return load_records()
        return load_records_from_dir(self.config.content_dir)

    def refresh(self) -> bool:
        """Reload records and rebuild the catalog when they changed.

        Returns True when a new catalog was published. A failed build raises
        and leaves the previously published catalog in place.
        """
        with self._lock:
            _, published = self._rebuild()
        return published

    def _rebuild(self) -> tuple[CatalogIndex, bool]:
        """Load, fingerprint, and publish; caller must hold the lock."""
        records = [dict(record) for record in self._loader()]
        digest = fingerprint(records)
        if self._catalog is not None and digest == self._fingerprint:
            logger.debug("Lesson records unchanged (%s); keeping catalog", digest[:12])
            return self._catalog, False
        catalog = CatalogIndex.from_records(records)
        self._catalog = catalog
        self._fingerprint = digest
        logger.info("Published catalog with %d lessons (%s)", len(catalog), digest[:12])
        return catalog, True

    @property
    def catalog(self) -> CatalogIndex:
        """Return the published catalog, building it on first access."""
        catalog = self._catalog
        if catalog is None:
            with self._lock:
                catalog = self._catalog
                if catalog is None:
                    catalog, _ = self._rebuild()
        return catalog

    @property
    def fingerprint(self) -> str | None:
        """Digest of the record set behind the published catalog."""
        return self._fingerprint

    def lessons(self) -> tuple[Lesson, ...]:
        """Return all lessons in catalog order."""
        return self.catalog.all()

    def get_lesson(self, lesson_id: str) -> Lesson | None:
        """Get lesson by id or slug."""
        catalog = self.catalog
        lesson = catalog.find_by_id(lesson_id)
        if lesson is None:
            lesson = next((item for item in catalog if lesson_slug(item) == lesson_id), None)
        if lesson is None:
            logger.debug("Lesson not found: %s", lesson_id)
        return lesson

    def navigation(self, lesson_id: str) -> Navigation | None:
        """Return previous/next links for a lesson id or slug."""
        lesson = self.get_lesson(lesson_id)
        if lesson is None:
            return None
        return resolve(self.catalog, lesson.id)

    def describe_chapter(self, number: int) -> ChapterDescriptor | None:
        """Get chapter descriptor by number."""
        return self.registry.describe(number)

    def chapter_overview(self) -> list[ChapterSummary]:
        """Return every registered chapter with its lessons, including empty ones."""
        grouped = self.catalog.by_chapter()
        unregistered = sorted(set(grouped) - set(self.registry.numbers()))
        if unregistered:
            logger.warning("Lessons filed under unregistered chapters: %s", unregistered)
        return [
            ChapterSummary(chapter=descriptor, lessons=grouped.get(descriptor.number, ()))
            for descriptor in self.registry
        ]

    def lesson_url(self, lesson: Lesson | str) -> str:
        """Return the base-prefixed page URL for a lesson."""
        return url(self.config.base_url, lesson_path(lesson_slug(lesson)))
