# tests/test_grade.py

import pytest

from models.grade import Grade, GradeRecord


def test_grade_parse():
    grade = Grade.parse("Midterm Exam:72.5")

    assert grade.assignment_name == "Midterm Exam"
    assert grade.score == 72.5
    assert str(grade) == "Midterm Exam: 72.5"


@pytest.mark.parametrize(
    "raw",
    [
        "Midterm",
        ":50",
        "Midterm:abc",
        "Midterm:101",
        "Midterm:-1",
        "Midterm:nan",
        "Midterm:8_0",
        "Midterm:+80",
        "Midterm:1e2",
        "Midterm:80.",
    ],
)
def test_invalid_grades(raw):
    with pytest.raises(ValueError):
        Grade.parse(raw)


def test_update_grade_replaces_same_assignment():
    record = GradeRecord([Grade("Quiz 1", 80), Grade("Quiz 2", 60)])

    updated = record.update_grade(Grade("Quiz 1", 95))

    assert updated.get("Quiz 1") == Grade("Quiz 1", 95)
    assert updated.get("Quiz 2") == Grade("Quiz 2", 60)
    assert len(updated) == 2


def test_update_grade_does_not_mutate_original():
    record = GradeRecord([Grade("Quiz 1", 80)])

    record.update_grade(Grade("Quiz 1", 95))

    assert record.get("Quiz 1").score == 80


def test_update_missing_grade_raises():
    record = GradeRecord([Grade("Quiz 1", 80)])

    with pytest.raises(KeyError):
        record.update_grade(Grade("Final", 50))


def test_add_grade_upserts():
    record = GradeRecord().add_grade(Grade("Quiz 1", 80))

    assert record.get("Quiz 1") == Grade("Quiz 1", 80)
    assert str(record) == "Quiz 1: 80"


def test_grade_records_compare_by_value():
    assert GradeRecord([Grade("Quiz 1", 80)]) == GradeRecord([Grade("Quiz 1", 80.0)])
    assert str(GradeRecord()) == "None"
