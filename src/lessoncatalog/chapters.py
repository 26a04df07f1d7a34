"""Static chapter metadata, independent of which lessons exist."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from .models import ChapterDescriptor

DEFAULT_CHAPTERS: dict[int, dict[str, str]] = {
    1: {
        "title": "Foundations",
        "description": "Understand what Astro is, how it differs from React, and learn the core project structure.",
    },
    2: {
        "title": "Styling",
        "description": "Master Astro's scoped styles, CSS architecture, and Tailwind CSS integration.",
    },
    3: {
        "title": "Content & Data",
        "description": "Work with content collections, type-safe schemas, and MDX for rich interactive content.",
    },
    4: {
        "title": "Islands Architecture",
        "description": "Learn partial hydration, integrate React components, and control when JavaScript loads.",
    },
    5: {
        "title": "Advanced Features",
        "description": "Add view transitions, build API endpoints, and prepare for production deployment.",
    },
}


class ChapterRegistry:
    """Read-only lookup of chapter descriptors by number."""

    def __init__(self, descriptors: Mapping[int, ChapterDescriptor]) -> None:
        """Initialize registry from descriptors keyed by chapter number."""
        ordered = {number: descriptors[number] for number in sorted(descriptors)}
        self._descriptors = MappingProxyType(ordered)

    @classmethod
    def from_mapping(cls, raw: Mapping[int, Mapping[str, Any]]) -> ChapterRegistry:
        """Build a registry from plain ``{number: {title, description}}`` data."""
        descriptors: dict[int, ChapterDescriptor] = {}
        for number, entry in raw.items():
            if isinstance(number, bool) or not isinstance(number, int) or number < 1:
                raise ValueError(f"Chapter number must be a positive integer, got {number!r}.")
            title = str(entry.get("title", "")).strip()
            if not title:
                raise ValueError(f"Chapter {number} has no title.")
            descriptors[number] = ChapterDescriptor(
                number=number,
                title=title,
                description=str(entry.get("description", "")).strip(),
            )
        return cls(descriptors)

    @classmethod
    def default(cls) -> ChapterRegistry:
        """Return the registry for the five course chapters."""
        return cls.from_mapping(DEFAULT_CHAPTERS)

    def describe(self, number: int) -> ChapterDescriptor | None:
        """Get chapter descriptor, or None outside the configured range."""
        if isinstance(number, bool):
            return None
        return self._descriptors.get(number)

    def numbers(self) -> tuple[int, ...]:
        """Return configured chapter numbers in ascending order."""
        return tuple(self._descriptors)

    def __iter__(self) -> Iterator[ChapterDescriptor]:
        return iter(self._descriptors.values())

    def __len__(self) -> int:
        return len(self._descriptors)
