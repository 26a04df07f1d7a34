from typing import Any

from lessoncatalog.errors import ValidationError
from lessoncatalog.models import Lesson
from lessoncatalog.schema import LESSON_SCHEMA, validate_record, validate_records


def test_valid_record_becomes_lesson(make_record) -> None:
    lesson = validate_record(make_record())
    assert isinstance(lesson, Lesson)
    assert lesson.id == "1-intro/1-welcome.mdx"
    assert lesson.chapter == 1
    assert lesson.objectives == ("Get started",)
    assert lesson.tags == ("intro",)
    assert lesson.body == ""


def test_tags_default_to_empty(make_record) -> None:
    record = make_record()
    del record["tags"]
    lesson = validate_record(record)
    assert isinstance(lesson, Lesson)
    assert lesson.tags == ()


def test_empty_objectives_allowed(make_record) -> None:
    lesson = validate_record(make_record(objectives=[]))
    assert isinstance(lesson, Lesson)
    assert lesson.objectives == ()


def test_chapter_out_of_range_rejected(make_record) -> None:
    result = validate_record(make_record(chapter=7))
    assert isinstance(result, ValidationError)
    assert result.field == "chapter"
    assert "between 1 and 5" in result.reason
    assert result.record_id == "1-intro/1-welcome.mdx"


def test_chapter_zero_rejected(make_record) -> None:
    result = validate_record(make_record(chapter=0))
    assert isinstance(result, ValidationError)
    assert result.field == "chapter"


def test_missing_required_field(make_record) -> None:
    record = make_record()
    del record["title"]
    result = validate_record(record)
    assert isinstance(result, ValidationError)
    assert result.field == "title"
    assert result.reason == "is required"


def test_missing_id_has_no_record_id(make_record) -> None:
    record = make_record()
    del record["id"]
    result = validate_record(record)
    assert isinstance(result, ValidationError)
    assert result.field == "id"
    assert result.record_id is None
    assert str(result) == "Lesson: field 'id' is required"


def test_wrong_types_rejected(make_record) -> None:
    cases: list[tuple[str, Any]] = [
        ("title", 3),
        ("description", ["x"]),
        ("chapter", "1"),
        ("chapter", 1.0),
        ("chapter", True),
        ("order", "2"),
        ("objectives", "learn"),
        ("objectives", ["ok", 2]),
        ("duration", 15),
        ("tags", "intro"),
    ]
    for field, value in cases:
        result = validate_record(make_record(**{field: value}))
        assert isinstance(result, ValidationError), (field, value)
        assert result.field == field


def test_order_must_be_positive(make_record) -> None:
    for value in (0, -3):
        result = validate_record(make_record(order=value))
        assert isinstance(result, ValidationError)
        assert result.field == "order"
        assert "positive" in result.reason


def test_difficulty_must_be_enumerated(make_record) -> None:
    result = validate_record(make_record(difficulty="expert"))
    assert isinstance(result, ValidationError)
    assert result.field == "difficulty"
    assert "beginner, intermediate, advanced" in result.reason


def test_blank_title_rejected(make_record) -> None:
    result = validate_record(make_record(title="   "))
    assert isinstance(result, ValidationError)
    assert result.field == "title"
    assert result.reason == "must not be empty"


def test_non_mapping_record_rejected() -> None:
    result = validate_record(["not", "a", "record"])
    assert isinstance(result, ValidationError)
    assert result.field == "<record>"
    assert "list" in result.reason


def test_unknown_fields_are_ignored(make_record) -> None:
    lesson = validate_record(make_record(draft=True, author="someone"))
    assert isinstance(lesson, Lesson)


def test_validate_record_does_not_mutate_input(make_record) -> None:
    record = make_record()
    snapshot = dict(record)
    validate_record(record)
    assert record == snapshot


def test_validate_records_collects_every_error(make_record) -> None:
    records = [
        make_record("a.mdx"),
        make_record("b.mdx", chapter=9),
        make_record("c.mdx", difficulty="hard"),
    ]
    lessons, errors = validate_records(records)
    assert [lesson.id for lesson in lessons] == ["a.mdx"]
    assert [(error.record_id, error.field) for error in errors] == [("b.mdx", "chapter"), ("c.mdx", "difficulty")]


def test_schema_lists_every_lesson_field() -> None:
    assert [spec.name for spec in LESSON_SCHEMA] == list(Lesson.__dataclass_fields__)
    optional = {spec.name for spec in LESSON_SCHEMA if not spec.required}
    assert optional == {"tags", "body"}
