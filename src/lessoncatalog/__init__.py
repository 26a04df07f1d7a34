"""lessoncatalog package: validated, ordered lesson catalog with navigation."""

from __future__ import annotations

import re
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from .catalog import CatalogIndex, lesson_slug
from .chapters import ChapterRegistry
from .errors import (
    BuildError,
    CatalogError,
    ContentLoadError,
    DuplicateIdError,
    DuplicateOrderError,
    DuplicateSlugError,
    InvalidRecordsError,
    ValidationError,
)
from .models import ChapterDescriptor, Lesson, Navigation, NavRef
from .navigation import resolve
from .schema import validate_record

__all__ = [
    "__version__",
    "BuildError",
    "CatalogError",
    "CatalogIndex",
    "ChapterDescriptor",
    "ChapterRegistry",
    "ContentLoadError",
    "DuplicateIdError",
    "DuplicateOrderError",
    "DuplicateSlugError",
    "InvalidRecordsError",
    "Lesson",
    "NavRef",
    "Navigation",
    "ValidationError",
    "lesson_slug",
    "resolve",
    "validate_record",
]


def _version_from_pyproject() -> str | None:
    """Best-effort version lookup from a source checkout's pyproject.toml."""
    for base in Path(__file__).resolve().parents:
        pyproject = base / "pyproject.toml"
        if not pyproject.exists():
            continue
        in_project = False
        for line in pyproject.read_text(encoding="utf-8").splitlines():
            stripped = line.strip()
            if stripped.startswith("[") and stripped.endswith("]"):
                in_project = stripped == "[project]"
            elif in_project:
                match = re.match(r'^version\s*=\s*"([^"]+)"\s*$', stripped)
                if match:
                    return match.group(1)
    return None


__version__ = _version_from_pyproject()
if __version__ is None:
    try:
        __version__ = version("lessoncatalog")
    except PackageNotFoundError:
        __version__ = "0+unknown"
