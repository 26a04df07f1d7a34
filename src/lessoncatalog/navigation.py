"""Previous/next navigation over the global lesson order."""

from __future__ import annotations

from .catalog import CatalogIndex, lesson_slug
from .models import Lesson, Navigation, NavRef


def _nav_ref(lesson: Lesson) -> NavRef:
    return NavRef(slug=lesson_slug(lesson), title=lesson.title)


def resolve(catalog: CatalogIndex, current_id: str) -> Navigation | None:
    """Find the lessons before and after ``current_id``.

    Navigation follows the catalog order across chapter boundaries, so the
    last lesson of one chapter links to the first lesson of the next. Returns
    ``None`` when the id is not in the catalog.
    """
    index = catalog.position(current_id)
    if index is None:
        return None

    lessons = catalog.all()
    prev = _nav_ref(lessons[index - 1]) if index > 0 else None
    following = _nav_ref(lessons[index + 1]) if index < len(lessons) - 1 else None
    return Navigation(prev=prev, next=following)
