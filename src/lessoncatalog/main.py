"""CLI entrypoint for checking and browsing lesson content."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable
from pathlib import Path

from .catalog import lesson_slug
from .config import CatalogConfig
from .errors import CatalogError, InvalidRecordsError
from .models import NavRef
from .service import CatalogService

PrintFn = Callable[[str], None]

COMMANDS = ("check", "list", "chapters", "show", "nav")
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lessoncatalog", description="Lesson catalog checker and browser")
    parser.add_argument("--content", type=Path, default=None, help="lesson directory (default: bundled lessons)")
    parser.add_argument("--base-url", default="/", help="site base path used for lesson links")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("command", nargs="?", default="check", choices=COMMANDS)
    parser.add_argument("lesson_id", nargs="?", default=None, help="lesson id or slug for show/nav")
    return parser


def _service(args: argparse.Namespace) -> CatalogService:
    """Create catalog service from CLI arguments."""
    return CatalogService(CatalogConfig(content_dir=args.content, base_url=args.base_url))


def run(argv: list[str] | None = None, print_fn: PrintFn = print) -> int:
    """Run the CLI application."""
    parser = _parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format=LOG_FORMAT)

    if args.command in {"show", "nav"} and not args.lesson_id:
        parser.error(f"the {args.command} command requires a lesson id")

    service = _service(args)
    try:
        if args.command == "check":
            return _check(service, print_fn)
        if args.command == "list":
            return _list(service, print_fn)
        if args.command == "chapters":
            return _chapters(service, print_fn)
        if args.command == "show":
            return _show(service, args.lesson_id, print_fn)
        return _nav(service, args.lesson_id, print_fn)
    except InvalidRecordsError as exc:
        print_fn(f"Invalid lesson content ({len(exc.errors)} error(s)):")
        for error in exc.errors:
            print_fn(f"- {error}")
        return 1
    except CatalogError as exc:
        print_fn(f"Invalid lesson content: {exc}")
        return 1


def _check(service: CatalogService, print_fn: PrintFn) -> int:
    """Build the catalog and report a summary."""
    catalog = service.catalog
    chapters = len(catalog.by_chapter())
    print_fn(f"OK: {len(catalog)} lessons in {chapters} chapters")
    return 0


def _list(service: CatalogService, print_fn: PrintFn) -> int:
    """Print every lesson in catalog order."""
    lessons = service.lessons()
    if not lessons:
        print_fn("No lessons found.")
        return 0
    slug_width = max(len(lesson_slug(lesson)) for lesson in lessons)
    for lesson in lessons:
        position = f"{lesson.chapter}.{lesson.order}"
        print_fn(
            f"{position:<5} {lesson_slug(lesson):<{slug_width}} {lesson.title} "
            f"[{lesson.difficulty}, {lesson.duration}]"
        )
    return 0


def _chapters(service: CatalogService, print_fn: PrintFn) -> int:
    """Print registered chapters with lesson counts."""
    for summary in service.chapter_overview():
        noun = "lesson" if summary.lesson_count == 1 else "lessons"
        print_fn(f"{summary.chapter.number}) {summary.chapter.title} ({summary.lesson_count} {noun})")
        if summary.chapter.description:
            print_fn(f"   {summary.chapter.description}")
    return 0


def _show(service: CatalogService, lesson_id: str, print_fn: PrintFn) -> int:
    """Print one lesson's metadata and its neighbours."""
    lesson = service.get_lesson(lesson_id)
    if lesson is None:
        print_fn(f"Lesson not found: {lesson_id}")
        return 1

    chapter = service.describe_chapter(lesson.chapter)
    chapter_title = chapter.title if chapter is not None else "?"
    print_fn(f"\n=== {lesson.title} ===")
    print_fn(lesson.description)
    print_fn(f"Chapter {lesson.chapter}: {chapter_title} (lesson {lesson.order})")
    print_fn(f"Difficulty: {lesson.difficulty}")
    print_fn(f"Duration: {lesson.duration}")
    print_fn(f"URL: {service.lesson_url(lesson)}")
    if lesson.objectives:
        print_fn("Objectives:")
        for objective in lesson.objectives:
            print_fn(f"- {objective}")
    if lesson.tags:
        print_fn(f"Tags: {', '.join(lesson.tags)}")
    return _nav(service, lesson.id, print_fn)


def _nav(service: CatalogService, lesson_id: str, print_fn: PrintFn) -> int:
    """Print previous/next links for a lesson."""
    navigation = service.navigation(lesson_id)
    if navigation is None:
        print_fn(f"Lesson not found: {lesson_id}")
        return 1
    print_fn(f"Previous: {_describe_ref(service, navigation.prev)}")
    print_fn(f"Next: {_describe_ref(service, navigation.next)}")
    return 0


def _describe_ref(service: CatalogService, ref: NavRef | None) -> str:
    if ref is None:
        return "none"
    return f"{ref.title} ({service.lesson_url(ref.slug)})"


def main_entry() -> None:
    """Console script entrypoint."""
    raise SystemExit(run())


if __name__ == "__main__":  # pragma: no cover
    main_entry()
