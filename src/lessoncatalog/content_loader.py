"""Load raw lesson records from lesson files on disk or bundled resources."""

from __future__ import annotations

import json
import logging
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Any

import yaml

from .catalog import DOCUMENT_SUFFIXES, CatalogIndex
from .errors import ContentLoadError

logger = logging.getLogger(__name__)

CONTENT_PACKAGE = "lessoncatalog"
CONTENT_DIR = "content"
LESSONS_DIR = "lessons"
FRONT_MATTER_DELIMITER = "---"


def _split_front_matter(text: str, lesson_id: str) -> tuple[dict[str, Any], str]:
    """Split a markdown document into its YAML front matter and body."""
    lines = text.splitlines()
    if not lines or lines[0].strip() != FRONT_MATTER_DELIMITER:
        raise ContentLoadError(f"Lesson '{lesson_id}' has no front matter block.")

    for index in range(1, len(lines)):
        if lines[index].strip() == FRONT_MATTER_DELIMITER:
            front = "\n".join(lines[1:index])
            body = "\n".join(lines[index + 1 :]).strip("\n")
            break
    else:
        raise ContentLoadError(f"Lesson '{lesson_id}' front matter is not closed.")

    try:
        data = yaml.safe_load(front)
    except yaml.YAMLError as exc:
        raise ContentLoadError(f"Lesson '{lesson_id}' has invalid front matter: {exc}") from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ContentLoadError(f"Lesson '{lesson_id}' front matter must be a mapping.")
    return data, body


def _record_from_text(lesson_id: str, text: str) -> dict[str, Any]:
    """Build one raw record from a lesson file's text."""
    if lesson_id.endswith(".json"):
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ContentLoadError(f"Lesson '{lesson_id}' is not valid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise ContentLoadError(f"Lesson '{lesson_id}' root must be a JSON object.")
        record = dict(data)
    else:
        front, body = _split_front_matter(text, lesson_id)
        record = dict(front)
        record["body"] = body

    if "id" in record and record["id"] != lesson_id:
        logger.warning("Ignoring id %r declared inside %s", record["id"], lesson_id)
    # The file path is the lesson's identity.
    record["id"] = lesson_id
    return record


def _is_lesson_file(name: str) -> bool:
    return name.endswith(DOCUMENT_SUFFIXES)


def load_records_from_dir(path: Path) -> list[dict[str, Any]]:
    """Load raw lesson records from every lesson file under a directory."""
    if not path.is_dir():
        raise ContentLoadError(f"Lesson directory not found: {path}")

    records: list[dict[str, Any]] = []
    files = sorted(item for item in path.rglob("*") if item.is_file() and _is_lesson_file(item.name))
    for file_path in files:
        lesson_id = file_path.relative_to(path).as_posix()
        try:
            text = file_path.read_text(encoding="utf-8-sig")
        except OSError as exc:
            raise ContentLoadError(f"Could not read lesson file {file_path}: {exc}") from exc
        records.append(_record_from_text(lesson_id, text))
        logger.debug("Loaded lesson file: %s", lesson_id)
    logger.info("Loaded %d lesson records from %s", len(records), path)
    return records


def _walk(entry: Traversable, prefix: str) -> list[tuple[str, Traversable]]:
    """Collect ``(relative id, resource)`` pairs for lesson files below ``entry``."""
    found: list[tuple[str, Traversable]] = []
    for child in entry.iterdir():
        child_id = f"{prefix}{child.name}"
        if child.is_dir():
            found.extend(_walk(child, f"{child_id}/"))
        elif _is_lesson_file(child.name):
            found.append((child_id, child))
    return found


def load_records() -> list[dict[str, Any]]:
    """Load bundled lesson records."""
    root = resources.files(CONTENT_PACKAGE) / CONTENT_DIR / LESSONS_DIR
    records: list[dict[str, Any]] = []
    for lesson_id, entry in sorted(_walk(root, ""), key=lambda pair: pair[0]):
        records.append(_record_from_text(lesson_id, entry.read_text(encoding="utf-8-sig")))
    logger.info("Loaded %d bundled lesson records", len(records))
    return records


def load_catalog(content_dir: Path | None = None) -> CatalogIndex:
    """Load lesson records and build a catalog from them."""
    records = load_records() if content_dir is None else load_records_from_dir(content_dir)
    return CatalogIndex.from_records(records)
