from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

RecordFactory = Callable[..., dict[str, Any]]


def _record(lesson_id: str = "1-intro/1-welcome.mdx", **overrides: Any) -> dict[str, Any]:
    """Build a valid raw lesson record, overriding selected fields."""
    record: dict[str, Any] = {
        "id": lesson_id,
        "title": "Welcome",
        "description": "First lesson",
        "chapter": 1,
        "order": 1,
        "difficulty": "beginner",
        "objectives": ["Get started"],
        "duration": "10 min",
        "tags": ["intro"],
    }
    record.update(overrides)
    return record


@pytest.fixture
def make_record() -> RecordFactory:
    """Factory for valid raw lesson records."""
    return _record


def write_lesson(root: Path, relative: str, front_matter: str, body: str = "Body text.") -> Path:
    """Write one markdown lesson file with front matter under ``root``."""
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f"---\n{front_matter.strip()}\n---\n\n{body}\n", encoding="utf-8")
    return path


def lesson_front_matter(title: str, chapter: int, order: int, difficulty: str = "beginner") -> str:
    """Return YAML front matter for a valid lesson."""
    return (
        f'title: "{title}"\n'
        f'description: "About {title}"\n'
        f"chapter: {chapter}\n"
        f"order: {order}\n"
        f"difficulty: {difficulty}\n"
        "objectives:\n"
        '  - "Learn it"\n'
        'duration: "10 min"\n'
    )


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    """Lesson directory with three lessons across two chapters, written out of order."""
    root = tmp_path / "lessons"
    write_lesson(root, "2-styling/1-scoped.mdx", lesson_front_matter("Scoped", 2, 1))
    write_lesson(root, "1-foundations/2-structure.mdx", lesson_front_matter("Structure", 1, 2))
    write_lesson(root, "1-foundations/1-welcome.mdx", lesson_front_matter("Welcome", 1, 1))
    return root


@pytest.fixture
def lesson_writer() -> Callable[..., Path]:
    """Expose ``write_lesson`` to tests that build their own directories."""
    return write_lesson


@pytest.fixture
def front_matter() -> Callable[..., str]:
    """Expose ``lesson_front_matter`` to tests."""
    return lesson_front_matter
