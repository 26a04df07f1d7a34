"""Core domain models for the lesson catalog."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

Difficulty = Literal["beginner", "intermediate", "advanced"]

DIFFICULTIES: tuple[str, ...] = ("beginner", "intermediate", "advanced")


@dataclass(frozen=True)
class Lesson:
    """One validated lesson document."""

    id: str
    title: str
    description: str
    chapter: int
    order: int
    difficulty: Difficulty
    objectives: tuple[str, ...]
    duration: str
    tags: tuple[str, ...] = ()
    body: str = ""

    @property
    def sort_key(self) -> tuple[int, int]:
        """Composite key defining the catalog order."""
        return (self.chapter, self.order)


@dataclass(frozen=True)
class ChapterDescriptor:
    """Display metadata for one chapter."""

    number: int
    title: str
    description: str


@dataclass(frozen=True)
class NavRef:
    """Link target for an adjacent lesson."""

    slug: str
    title: str


@dataclass(frozen=True)
class Navigation:
    """Previous/next links around one lesson."""

    prev: NavRef | None
    next: NavRef | None
