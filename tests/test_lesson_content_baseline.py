from lessoncatalog.catalog import lesson_slug
from lessoncatalog.chapters import ChapterRegistry
from lessoncatalog.content_loader import load_catalog

EXPECTED_TITLES_BY_CHAPTER: dict[int, list[str]] = {
    1: ["Welcome to Astro", "Project Structure", "Astro Components"],
    2: ["Scoped Styles", "Tailwind CSS"],
    3: ["Content Collections", "Querying & Rendering Content", "MDX"],
    4: ["Partial Hydration", "React Integration"],
    5: ["View Transitions", "API Endpoints & SSR", "Deploying Your Site"],
}


def test_bundled_lessons_match_curriculum() -> None:
    grouped = load_catalog().by_chapter()
    actual = {chapter: [lesson.title for lesson in lessons] for chapter, lessons in grouped.items()}
    assert actual == EXPECTED_TITLES_BY_CHAPTER


def test_bundled_orders_are_contiguous_per_chapter() -> None:
    for chapter, lessons in load_catalog().by_chapter().items():
        assert [lesson.order for lesson in lessons] == list(range(1, len(lessons) + 1)), chapter


def test_bundled_slugs_live_in_chapter_folders() -> None:
    registry = ChapterRegistry.default()
    for lesson in load_catalog().all():
        folder, name = lesson_slug(lesson).split("/")
        assert folder.startswith(f"{lesson.chapter}-"), lesson.id
        assert name.startswith(f"{lesson.order}-"), lesson.id
        assert registry.describe(lesson.chapter) is not None


def test_bundled_lessons_have_objectives_and_body() -> None:
    for lesson in load_catalog().all():
        assert lesson.objectives, lesson.id
        assert lesson.tags, lesson.id
        assert lesson.body.startswith("# "), lesson.id
